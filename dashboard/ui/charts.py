from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go


def create_character_frequency_chart(
    counts_df: pd.DataFrame,
    title: str = "Character Frequency",
) -> go.Figure:
    """Create a bar chart of character counts in ranked order."""
    if counts_df.empty or not {"character", "count"}.issubset(counts_df.columns):
        return go.Figure()

    # Spaces would render as an empty tick label.
    labels = counts_df["character"].astype(str).replace({" ": "␣"})
    fig = go.Figure(
        data=go.Bar(
            x=labels,
            y=counts_df["count"],
            marker=dict(color="#6366f1"),
            text=counts_df["count"],
            textposition="outside",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Character",
        yaxis_title="Occurrences",
        template="plotly_white",
        title_font_size=18,
        title_font_color="#1f2937",
        title_font_weight=600,
        margin=dict(t=60, l=60, r=20, b=40),
    )
    fig.update_xaxes(type="category", categoryorder="array", categoryarray=list(labels))
    fig.update_yaxes(rangemode="tozero", dtick=1)
    return fig
