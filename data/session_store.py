"""Typed wrapper around st.session_state for the raw form inputs."""

import streamlit as st
from typing import Dict, Tuple
from models.shipment import ShipmentInputs
from data.sanitize import (
    ValidationResult, sanitize_inputs,
    normalize_int_string, normalize_number_string,
)
from config.defaults import RAW_INPUT_DEFAULTS

INPUT_KEY_PREFIX = "raw_"

NUMBER_FIELDS = ["total_weight_kg", "reserved_weight_kg"]
INT_FIELDS = ["piece_count", "correction_pieces"]


def _key(name: str) -> str:
    return f"{INPUT_KEY_PREFIX}{name}"


def initialize_session_state():
    """Initialize all raw input keys with defaults."""
    for name, default in RAW_INPUT_DEFAULTS.items():
        if _key(name) not in st.session_state:
            st.session_state[_key(name)] = default


# --- Getters ---

def input_key(name: str) -> str:
    """Widget key under which a raw input is stored."""
    return _key(name)


def get_raw_inputs() -> Dict[str, str]:
    return {
        name: st.session_state.get(_key(name), default)
        for name, default in RAW_INPUT_DEFAULTS.items()
    }


def get_shipment_inputs() -> Tuple[ShipmentInputs, ValidationResult]:
    return sanitize_inputs(get_raw_inputs())


# --- Setters ---

def set_raw_input(name: str, value: str):
    st.session_state[_key(name)] = value


def normalize_input(name: str):
    """on_change callback: rewrite a box's text to its canonical number."""
    raw = st.session_state.get(_key(name), RAW_INPUT_DEFAULTS[name])
    if name in NUMBER_FIELDS:
        set_raw_input(name, normalize_number_string(raw))
    elif name in INT_FIELDS:
        set_raw_input(name, normalize_int_string(raw))


def reset_inputs():
    for name, default in RAW_INPUT_DEFAULTS.items():
        set_raw_input(name, default)
