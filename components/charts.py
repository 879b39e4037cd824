"""Plotly chart builders for the Cargo Distributor."""

import plotly.graph_objects as go
import pandas as pd


def weight_vs_capacity_bar(
    distribution_df: pd.DataFrame,
    title: str = "Weight vs Max by Compartment",
) -> go.Figure:
    """Bar chart of compartment weights against their limits."""
    colors = [
        "#E8734A" if status == "Over" else "#4A90D9"
        for status in distribution_df["Status"]
    ]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        name="Weight",
        x=distribution_df["CP"],
        y=distribution_df["Weight (kg)"],
        marker_color=colors,
        text=distribution_df["Pieces"].map(lambda p: f"{p:,} pcs"),
        textposition="auto",
    ))
    fig.add_trace(go.Scatter(
        name="Max",
        x=distribution_df["CP"],
        y=distribution_df["Max (kg)"],
        mode="markers",
        marker=dict(symbol="line-ew-open", size=40, line=dict(width=3, color="#555555")),
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Compartment",
        yaxis_title="kg",
        height=380,
        legend_title_text="",
    )
    return fig


def piece_split_donut(distribution_df: pd.DataFrame, title: str = "Pieces by Compartment") -> go.Figure:
    """Donut chart of the piece split."""
    df = distribution_df[distribution_df["Pieces"] > 0]
    total = int(distribution_df["Pieces"].sum())
    fig = go.Figure(data=[go.Pie(
        labels=df["CP"],
        values=df["Pieces"],
        hole=0.6,
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=380,
        showlegend=True,
        annotations=[dict(text=f"{total:,} pcs", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
