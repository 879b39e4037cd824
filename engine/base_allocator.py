"""Base percentage split of a shipment across compartments."""

import math
from typing import Optional, Tuple

from models.compartment import COMPARTMENT_ORDER
from models.distribution import CapacityTable, DistributionResult, PieceAllocation
from engine.weights import (
    compute_exceeds, compute_per_piece_weight, compute_totals, compute_weights,
    resolve_capacities,
)
from engine.overflow import redistribute_overflow
from engine.explainer import explain_distribution
from config.defaults import BASE_SPLIT_PCT, REMAINDER_COMPARTMENT


def split_pieces(piece_count: int) -> Tuple[PieceAllocation, int]:
    """Split pieces 30/40/30 over CP2/CP3/CP4.

    Each share is floored; the pieces lost to flooring go to CP3 so the
    allocation always sums to ``piece_count``. CP1 and CP5 start empty.
    Returns the allocation and the remainder that was absorbed.
    """
    alloc = {cp: 0 for cp in COMPARTMENT_ORDER}
    for cp, pct in BASE_SPLIT_PCT.items():
        alloc[cp] = piece_count * pct // 100
    remainder = piece_count - sum(alloc.values())
    alloc[REMAINDER_COMPARTMENT] += remainder
    return alloc, remainder


def allocate_base(
    total_weight_kg: float,
    piece_count: int,
    reserved_weight_kg: float,
    capacities: Optional[CapacityTable] = None,
) -> DistributionResult:
    """Full base pipeline: split, per-piece weight, overflow, totals and flags."""
    caps = resolve_capacities(capacities)

    # Step 1: Adjusted total and clamped piece count
    adjusted_kg = max(0.0, total_weight_kg - reserved_weight_kg)
    pcs = max(0, math.floor(piece_count))

    # Step 2: Uniform per-piece weight
    per_piece_kg = compute_per_piece_weight(adjusted_kg, pcs)

    # Step 3: Percentage split with remainder to CP3
    split_alloc, remainder = split_pieces(pcs)
    weights = compute_weights(split_alloc, per_piece_kg, reserved_weight_kg)

    # Step 4: Overflow redistribution
    piece_alloc, weights, moves = redistribute_overflow(
        split_alloc, weights, per_piece_kg, reserved_weight_kg, caps,
    )

    exceeds = compute_exceeds(weights, caps)

    explanation = explain_distribution(
        total_weight_kg=total_weight_kg,
        reserved_kg=reserved_weight_kg,
        adjusted_kg=adjusted_kg,
        piece_count=pcs,
        per_piece_kg=per_piece_kg,
        split_alloc=split_alloc,
        remainder=remainder,
        moves=moves,
        final_alloc=piece_alloc,
        exceeds=exceeds,
    )

    return DistributionResult(
        piece_alloc=piece_alloc,
        weights=weights,
        per_piece_kg=per_piece_kg,
        reserved_kg=reserved_weight_kg,
        totals=compute_totals(piece_alloc, weights, per_piece_kg),
        exceeds=exceeds,
        overflow_moves=moves,
        explanation_steps=explanation,
    )
