"""Capacity-driven overflow: move pieces out of over-limit compartments."""

import logging
import math
from typing import List, Optional, Tuple

from models.compartment import Compartment
from models.distribution import CapacityTable, OverflowMove, PieceAllocation, WeightMap
from engine.weights import compute_weights, resolve_capacities
from config.defaults import OVERFLOW_SOURCES, OVERFLOW_DESTINATIONS

logger = logging.getLogger(__name__)


def _spare_pieces(
    weights: WeightMap,
    capacities: CapacityTable,
    compartment: Compartment,
    per_piece_kg: float,
) -> int:
    """Whole pieces that still fit in a compartment."""
    remaining_kg = max(0.0, capacities[compartment] - weights[compartment])
    return math.floor(remaining_kg / per_piece_kg)


def redistribute_overflow(
    piece_alloc: PieceAllocation,
    weights: WeightMap,
    per_piece_kg: float,
    reserved_kg: float,
    capacities: Optional[CapacityTable] = None,
) -> Tuple[PieceAllocation, WeightMap, List[OverflowMove]]:
    """Drain CP2, CP3, CP4 (in that order) into CP5, then CP1.

    A source keeps moving pieces until it is back under its limit, runs out
    of pieces, or neither destination has room for a single piece. Earlier
    sources get first claim on destination room. The total piece count never
    changes. Returns the new allocation, its weights and the moves made.
    """
    caps = resolve_capacities(capacities)
    alloc = dict(piece_alloc)
    weights = dict(weights)
    moves: List[OverflowMove] = []

    if per_piece_kg <= 0:
        return alloc, weights, moves

    for source in OVERFLOW_SOURCES:
        weights = compute_weights(alloc, per_piece_kg, reserved_kg)
        over_kg = max(0.0, weights[source] - caps[source])

        while over_kg > 0 and alloc[source] > 0:
            need = min(alloc[source], math.ceil(over_kg / per_piece_kg))
            spare = {}

            for destination in OVERFLOW_DESTINATIONS:
                spare[destination] = _spare_pieces(weights, caps, destination, per_piece_kg)
                moved = min(need, spare[destination])
                if moved > 0:
                    alloc[source] -= moved
                    alloc[destination] += moved
                    weights = compute_weights(alloc, per_piece_kg, reserved_kg)
                    over_kg = max(0.0, weights[source] - caps[source])
                    need -= moved
                    moves.append(OverflowMove(source, destination, moved, moved * per_piece_kg))
                    logger.debug("Overflow: %d pcs %s -> %s", moved, source.value, destination.value)
                if need <= 0:
                    break

            if need <= 0:
                break
            # Both destinations full: nothing more can move for this source
            if all(count == 0 for count in spare.values()):
                break

        if over_kg > 0:
            logger.info(
                "%s still over capacity by %.1f kg after overflow", source.value, over_kg,
            )

    weights = compute_weights(alloc, per_piece_kg, reserved_kg)
    return alloc, weights, moves
