from dataclasses import dataclass, field
from typing import Dict, List

from models.compartment import Compartment
from models.shipment import ShipmentInputs

PieceAllocation = Dict[Compartment, int]
WeightMap = Dict[Compartment, float]
ExceedsMap = Dict[Compartment, bool]
CapacityTable = Dict[Compartment, float]


@dataclass
class DistributionTotals:
    pieces: int
    per_piece_kg: float
    adjusted_kg: float      # CP1-CP4, excludes CP5 and the AVI
    shown_kg: float         # adjusted + CP5 (AVI included)
    distributed_kg: float   # CP2-CP4


@dataclass
class OverflowMove:
    source: Compartment
    destination: Compartment
    pieces: int
    weight_kg: float


@dataclass
class DistributionResult:
    piece_alloc: PieceAllocation
    weights: WeightMap
    per_piece_kg: float
    reserved_kg: float
    totals: DistributionTotals
    exceeds: ExceedsMap
    overflow_moves: List[OverflowMove] = field(default_factory=list)
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def any_exceeds(self) -> bool:
        return any(self.exceeds.values())


@dataclass
class RemovalReport:
    target: Compartment
    requested_pieces: int
    max_removable: int      # pieces held at the target before removal
    removed_pieces: int
    removed_kg: float


@dataclass
class CorrectionResult:
    piece_alloc: PieceAllocation
    weights: WeightMap
    totals: DistributionTotals
    exceeds: ExceedsMap
    removal: RemovalReport

    @property
    def any_exceeds(self) -> bool:
        return any(self.exceeds.values())


@dataclass
class DistributionRun:
    """Base allocation plus the LMC applied on top of it."""
    inputs: ShipmentInputs
    base: DistributionResult
    corrected: CorrectionResult
    capacities: CapacityTable   # limits both stages were checked against
