"""Normalization of raw form text into clamped shipment inputs."""

import math
from dataclasses import dataclass, field
from typing import List, Mapping, Tuple

from models.compartment import Compartment
from models.shipment import ShipmentInputs
from config.defaults import DEFAULT_CORRECTION_TARGET


@dataclass
class ValidationResult:
    warnings: List[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


FIELD_LABELS = {
    "total_weight_kg": "TOTAL (kg)",
    "piece_count": "Pieces",
    "reserved_weight_kg": "AVI (kg)",
    "correction_pieces": "Remove pcs",
}


def _parse(raw) -> float:
    """Parse to a finite float, or NaN when the text is not a number."""
    try:
        n = float(str(raw).strip())
    except (ValueError, TypeError):
        return math.nan
    return n if math.isfinite(n) else math.nan


def to_number(raw) -> float:
    """Blank, unparsable, negative or infinite text collapses to 0."""
    if raw is None or str(raw).strip() == "":
        return 0.0
    n = _parse(raw)
    if math.isnan(n) or n <= 0:
        return 0.0
    return n


def to_int(raw) -> int:
    return math.floor(to_number(raw))


def normalize_number_string(raw) -> str:
    """Canonical text for a weight box once the user leaves it."""
    n = to_number(raw)
    return str(int(n)) if n.is_integer() else str(n)


def normalize_int_string(raw) -> str:
    return str(to_int(raw))


def _target_text(raw) -> str:
    """Compartment name as typed; enum members give their value."""
    return str(getattr(raw, "value", raw)).strip().upper()


def parse_compartment(raw) -> Compartment:
    if isinstance(raw, Compartment):
        return raw
    try:
        return Compartment(_target_text(raw))
    except ValueError:
        return DEFAULT_CORRECTION_TARGET


def _collapsed(raw) -> bool:
    """True when non-blank text was replaced by 0."""
    if raw is None or str(raw).strip() == "" or to_number(raw) != 0:
        return False
    n = _parse(raw)
    return math.isnan(n) or n != 0


def sanitize_inputs(raw: Mapping[str, object]) -> Tuple[ShipmentInputs, ValidationResult]:
    """Build clamped ShipmentInputs from raw form values.

    Never rejects: anything malformed becomes 0 (or the default LMC target)
    and is reported as a warning.
    """
    result = ValidationResult()

    total = to_number(raw.get("total_weight_kg"))
    pieces = to_int(raw.get("piece_count"))
    reserved = to_number(raw.get("reserved_weight_kg"))
    correction_pieces = to_int(raw.get("correction_pieces"))

    for key in FIELD_LABELS:
        if _collapsed(raw.get(key)):
            result.warnings.append(f"{FIELD_LABELS[key]}: '{raw.get(key)}' is not a non-negative number, using 0.")

    raw_target = raw.get("correction_target")
    target = parse_compartment(raw_target)
    if raw_target is not None and _target_text(raw_target) != target.value:
        result.warnings.append(
            f"LMC compartment '{raw_target}' is unknown, using {DEFAULT_CORRECTION_TARGET.value}."
        )

    if reserved > total:
        result.warnings.append("AVI (kg) exceeds TOTAL (kg): adjusted total is 0.")

    inputs = ShipmentInputs(
        total_weight_kg=total,
        piece_count=pieces,
        reserved_weight_kg=reserved,
        correction_target=target,
        correction_pieces=correction_pieces,
    )
    return inputs, result
