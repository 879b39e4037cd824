"""End-to-end recomputation: base allocation, overflow, then LMC."""

from typing import Optional

from models.shipment import ShipmentInputs
from models.distribution import CapacityTable, DistributionRun
from engine.base_allocator import allocate_base
from engine.correction import apply_correction
from engine.weights import resolve_capacities


def run_distribution(
    inputs: ShipmentInputs,
    capacities: Optional[CapacityTable] = None,
) -> DistributionRun:
    """Recompute everything from scratch for one set of inputs."""
    caps = resolve_capacities(capacities)
    base = allocate_base(
        inputs.total_weight_kg,
        inputs.piece_count,
        inputs.reserved_weight_kg,
        caps,
    )
    corrected = apply_correction(
        base.piece_alloc,
        base.per_piece_kg,
        base.reserved_kg,
        inputs.correction_target,
        inputs.correction_pieces,
        caps,
    )
    return DistributionRun(inputs=inputs, base=base, corrected=corrected, capacities=caps)
