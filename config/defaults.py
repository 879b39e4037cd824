"""Default configuration constants for the Cargo Distributor."""

import os

from models.compartment import Compartment

# Maximum allowed weight per compartment (kg)
CAPACITY_KG = {
    Compartment.CP1: 2202,
    Compartment.CP2: 3468,
    Compartment.CP3: 3587,
    Compartment.CP4: 2083,
    Compartment.CP5: 800,
}

# Base split of the piece count (whole percent, floored per compartment)
BASE_SPLIT_PCT = {
    Compartment.CP2: 30,
    Compartment.CP3: 40,
    Compartment.CP4: 30,
}

# Leftover pieces from flooring land here
REMAINDER_COMPARTMENT = Compartment.CP3

# Fixed AVI item always sits in this compartment
RESERVED_COMPARTMENT = Compartment.CP5

# Overflow routing: sources are drained in order, destinations tried in order
OVERFLOW_SOURCES = [Compartment.CP2, Compartment.CP3, Compartment.CP4]
OVERFLOW_DESTINATIONS = [Compartment.CP5, Compartment.CP1]

# Adjusted total covers these compartments (excludes CP5 and the AVI)
ADJUSTED_COMPARTMENTS = [Compartment.CP1, Compartment.CP2, Compartment.CP3, Compartment.CP4]

# Distributed total covers the percentage-split compartments only
DISTRIBUTED_COMPARTMENTS = [Compartment.CP2, Compartment.CP3, Compartment.CP4]

# LMC defaults
DEFAULT_CORRECTION_TARGET = Compartment.CP3

# Raw input defaults (text as typed into the form)
RAW_INPUT_DEFAULTS = {
    "total_weight_kg": "0",
    "piece_count": "0",
    "reserved_weight_kg": "0",
    "correction_target": DEFAULT_CORRECTION_TARGET.value,
    "correction_pieces": "0",
}

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def resolve_log_level(raw) -> str:
    """Known level name (any case), else the default."""
    level = str(raw or "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.environ.get("CARGO_DISTRIBUTOR_LOG_LEVEL"))
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
