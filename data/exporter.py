"""Tabular views of a distribution for display and CSV download."""

import pandas as pd

from models.compartment import COMPARTMENT_ORDER
from models.distribution import (
    CapacityTable, CorrectionResult, DistributionResult, ExceedsMap, PieceAllocation, WeightMap,
)
from engine.explainer import round_kg

DISTRIBUTION_COLUMNS = ["CP", "Weight (kg)", "Pieces", "Max (kg)", "Status"]


def distribution_frame(
    piece_alloc: PieceAllocation,
    weights: WeightMap,
    exceeds: ExceedsMap,
    capacities: CapacityTable,
) -> pd.DataFrame:
    """One row per compartment, in loading order."""
    rows = []
    for cp in COMPARTMENT_ORDER:
        rows.append({
            "CP": cp.value,
            "Weight (kg)": round_kg(weights[cp]),
            "Pieces": piece_alloc[cp],
            "Max (kg)": capacities[cp],
            "Status": "Over" if exceeds[cp] else "OK",
        })
    return pd.DataFrame(rows, columns=DISTRIBUTION_COLUMNS)


def comparison_frame(base: DistributionResult, corrected: CorrectionResult) -> pd.DataFrame:
    """Before/after LMC pieces and weights per compartment."""
    rows = []
    for cp in COMPARTMENT_ORDER:
        rows.append({
            "CP": cp.value,
            "Pieces Before": base.piece_alloc[cp],
            "Pieces After": corrected.piece_alloc[cp],
            "Piece Change": corrected.piece_alloc[cp] - base.piece_alloc[cp],
            "Weight Before (kg)": round_kg(base.weights[cp]),
            "Weight After (kg)": round_kg(corrected.weights[cp]),
        })
    return pd.DataFrame(rows)


def frame_to_csv(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")
