"""Generates human-readable explanations for cargo distributions."""

import math
from typing import List

from models.compartment import COMPARTMENT_ORDER
from models.distribution import (
    CapacityTable, ExceedsMap, OverflowMove, PieceAllocation, RemovalReport, WeightMap,
)
from config.defaults import BASE_SPLIT_PCT, REMAINDER_COMPARTMENT, RESERVED_COMPARTMENT


def round_kg(n: float) -> int:
    """Whole kg, halves rounded up."""
    return math.floor(n + 0.5)


def fmt_kg(n: float) -> str:
    return f"{round_kg(n):,} kg"


def fmt_num(n: float) -> str:
    return f"{n:,}"


def explain_distribution(
    total_weight_kg: float,
    reserved_kg: float,
    adjusted_kg: float,
    piece_count: int,
    per_piece_kg: float,
    split_alloc: PieceAllocation,
    remainder: int,
    moves: List[OverflowMove],
    final_alloc: PieceAllocation,
    exceeds: ExceedsMap,
) -> List[str]:
    """Produce step-by-step explanation for a base distribution."""
    steps = []

    steps.append(
        f"Step 1 - Adjusted total: {fmt_kg(total_weight_kg)} total - {fmt_kg(reserved_kg)} AVI "
        f"= {fmt_kg(adjusted_kg)}"
    )

    if piece_count == 0:
        steps.append("Step 2 - Per piece: no pieces => per-piece weight 0, nothing to distribute")
        return steps

    steps.append(
        f"Step 2 - Per piece: {fmt_kg(adjusted_kg)} / {fmt_num(piece_count)} pcs "
        f"= {per_piece_kg:,.2f} kg"
    )

    split = ", ".join(
        f"{cp.value} {pct}% = {fmt_num(split_alloc[cp] - (remainder if cp == REMAINDER_COMPARTMENT else 0))} pcs"
        for cp, pct in BASE_SPLIT_PCT.items()
    )
    steps.append(f"Step 3 - Base split: {split}")

    if remainder:
        steps.append(
            f"Step 4 - Remainder: {fmt_num(remainder)} leftover pcs added to {REMAINDER_COMPARTMENT.value}"
        )
    else:
        steps.append("Step 4 - Remainder: none")

    if moves:
        for move in moves:
            steps.append(
                f"Step 5 - Overflow: {fmt_num(move.pieces)} pcs ({fmt_kg(move.weight_kg)}) "
                f"{move.source.value} -> {move.destination.value}"
            )
    else:
        steps.append("Step 5 - Overflow: all compartments within limits, no pieces moved")

    final = ", ".join(f"{cp.value} {fmt_num(final_alloc[cp])}" for cp in COMPARTMENT_ORDER)
    steps.append(f"Step 6 - Final pieces: {final}")

    over = [cp.value for cp in COMPARTMENT_ORDER if exceeds[cp]]
    if over:
        steps.append(f"Note: no spillover room left, still over limit: {', '.join(over)}")

    return steps


def explain_correction(report: RemovalReport) -> str:
    if report.requested_pieces == 0:
        return f"LMC: no pieces requested from {report.target.value}"
    text = (
        f"LMC: removed {fmt_num(report.removed_pieces)} of {fmt_num(report.max_removable)} pcs "
        f"from {report.target.value} ({fmt_kg(report.removed_kg)})"
    )
    if report.removed_pieces < report.requested_pieces:
        text += f", capped from {fmt_num(report.requested_pieces)} requested"
    if report.target == RESERVED_COMPARTMENT:
        text += "; AVI remains in place"
    return text


def limit_warnings(weights: WeightMap, exceeds: ExceedsMap, capacities: CapacityTable) -> List[str]:
    """One line per over-limit compartment, in compartment order."""
    return [
        f"{cp.value} exceeds by {fmt_kg(weights[cp] - capacities[cp])}"
        for cp in COMPARTMENT_ORDER
        if exceeds[cp]
    ]
