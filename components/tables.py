"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional


def render_distribution_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    status_column: str = "Status",
):
    """Render the per-compartment table with Over/OK highlighting."""
    def color_status(val):
        if val == "Over":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val == "OK":
            return "color: #155724; font-weight: bold"
        return ""

    if title:
        st.subheader(title)
    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column]).format(
            {"Weight (kg)": "{:,}", "Max (kg)": "{:,}", "Pieces": "{:,}"},
        )
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_comparison_table(df: pd.DataFrame, change_column: str = "Piece Change"):
    """Render a comparison table with positive/negative highlighting."""
    def color_change(val):
        try:
            v = float(val)
            if v > 0:
                return "color: #155724; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if change_column in df.columns:
        styled = df.style.map(color_change, subset=[change_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
