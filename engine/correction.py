"""Load correction (LMC): manual removal of pieces from one compartment."""

import logging
from typing import Optional

from models.compartment import Compartment
from models.distribution import CapacityTable, CorrectionResult, PieceAllocation, RemovalReport
from engine.weights import compute_exceeds, compute_totals, compute_weights


logger = logging.getLogger(__name__)


def apply_correction(
    piece_alloc: PieceAllocation,
    per_piece_kg: float,
    reserved_kg: float,
    target: Compartment,
    requested_pieces: int,
    capacities: Optional[CapacityTable] = None,
) -> CorrectionResult:
    """Remove up to ``requested_pieces`` from ``target`` without redistributing.

    Removed pieces leave the shipment; no other compartment changes. Removing
    from CP5 only touches its pieces, the AVI weight always stays.
    """
    alloc = dict(piece_alloc)
    requested = max(0, int(requested_pieces))

    max_removable = alloc.get(target, 0)
    removed = min(requested, max_removable)
    if removed > 0:
        alloc[target] -= removed
    if removed < requested:
        logger.info(
            "LMC request of %d pcs from %s capped at %d", requested, target.value, removed,
        )

    weights = compute_weights(alloc, per_piece_kg, reserved_kg)

    return CorrectionResult(
        piece_alloc=alloc,
        weights=weights,
        totals=compute_totals(alloc, weights, per_piece_kg),
        exceeds=compute_exceeds(weights, capacities),
        removal=RemovalReport(
            target=target,
            requested_pieces=requested,
            max_removable=max_removable,
            removed_pieces=removed,
            removed_kg=removed * per_piece_kg,
        ),
    )
