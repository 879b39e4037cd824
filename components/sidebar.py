"""Global sidebar controls for shipment and LMC inputs."""

import streamlit as st
from dataclasses import dataclass
from models.compartment import COMPARTMENT_ORDER
from models.shipment import ShipmentInputs
from data.sanitize import ValidationResult
from data.session_store import (
    get_shipment_inputs, input_key, normalize_input, reset_inputs,
)
from engine.explainer import fmt_kg


@dataclass
class SidebarState:
    inputs: ShipmentInputs
    validation: ValidationResult


def _number_box(label: str, name: str):
    st.text_input(
        label,
        key=input_key(name),
        on_change=normalize_input,
        args=(name,),
        placeholder="0",
    )


def render_sidebar() -> SidebarState:
    """Render the input controls and return the sanitized inputs."""
    with st.sidebar:
        st.title("Cargo Distributor")
        st.caption("30% · 40% · 30% — CP3 remainder — Overflow → CP5 then CP1 — AVI in CP5")
        st.divider()

        st.subheader("Shipment")
        _number_box("TOTAL (kg)", "total_weight_kg")
        _number_box("Pieces", "piece_count")
        _number_box("AVI (kg)", "reserved_weight_kg")

        st.divider()

        st.subheader("LMC")
        st.selectbox(
            "CP",
            options=[cp.value for cp in COMPARTMENT_ORDER],
            key=input_key("correction_target"),
        )
        _number_box("Remove pcs", "correction_pieces")
        st.caption("Removing from CP5 affects overflow pieces only — AVI remains in CP5.")

        st.divider()
        st.button("Reset inputs", on_click=reset_inputs)

        inputs, validation = get_shipment_inputs()
        for warning in validation.warnings:
            st.warning(warning)

        st.caption(f"AVI: {fmt_kg(inputs.reserved_weight_kg)}")

    return SidebarState(inputs=inputs, validation=validation)
