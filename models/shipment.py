from dataclasses import dataclass

from models.compartment import Compartment


@dataclass(frozen=True)
class ShipmentInputs:
    total_weight_kg: float = 0.0
    piece_count: int = 0
    reserved_weight_kg: float = 0.0   # AVI, always carried in CP5
    # Keep in step with config.defaults.DEFAULT_CORRECTION_TARGET (config imports models)
    correction_target: Compartment = Compartment.CP3
    correction_pieces: int = 0        # LMC pieces requested for removal
