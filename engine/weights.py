"""Weight derivation shared by every stage of the distribution pipeline."""

from typing import Optional

from models.compartment import COMPARTMENT_ORDER
from models.distribution import (
    CapacityTable, DistributionTotals, ExceedsMap, PieceAllocation, WeightMap,
)
from config.defaults import (
    CAPACITY_KG, RESERVED_COMPARTMENT,
    ADJUSTED_COMPARTMENTS, DISTRIBUTED_COMPARTMENTS,
)


def resolve_capacities(capacities: Optional[CapacityTable] = None) -> CapacityTable:
    """Merge (possibly partial) capacity overrides over the default table."""
    overrides = capacities or {}
    return {cp: overrides.get(cp, CAPACITY_KG[cp]) for cp in COMPARTMENT_ORDER}


def compute_per_piece_weight(adjusted_kg: float, piece_count: int) -> float:
    if piece_count <= 0:
        return 0.0
    return adjusted_kg / piece_count


def compute_weights(piece_alloc: PieceAllocation, per_piece_kg: float, reserved_kg: float) -> WeightMap:
    """pieces x per-piece weight per compartment; the AVI is added to CP5."""
    weights = {cp: piece_alloc.get(cp, 0) * per_piece_kg for cp in COMPARTMENT_ORDER}
    weights[RESERVED_COMPARTMENT] += reserved_kg
    return weights


def compute_exceeds(weights: WeightMap, capacities: Optional[CapacityTable] = None) -> ExceedsMap:
    caps = resolve_capacities(capacities)
    return {cp: weights[cp] > caps[cp] for cp in COMPARTMENT_ORDER}


def compute_totals(piece_alloc: PieceAllocation, weights: WeightMap, per_piece_kg: float) -> DistributionTotals:
    adjusted_kg = sum(weights[cp] for cp in ADJUSTED_COMPARTMENTS)
    return DistributionTotals(
        pieces=sum(piece_alloc.get(cp, 0) for cp in COMPARTMENT_ORDER),
        per_piece_kg=per_piece_kg,
        adjusted_kg=adjusted_kg,
        shown_kg=adjusted_kg + weights[RESERVED_COMPARTMENT],
        distributed_kg=sum(weights[cp] for cp in DISTRIBUTED_COMPARTMENTS),
    )
