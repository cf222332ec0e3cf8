# services/chart_service.py

from __future__ import annotations

from typing import Optional, Sequence

import altair as alt
import pandas as pd

from helpers_format import fmt_idr
from helpers_schema import StoreRecord
from services.dashboard_service import CHART_HIGHLIGHT, TIER_TOP, leaderboard_frame

TOP_COLOR = "#2563eb"
REST_COLOR = "#94a3b8"


def sales_chart_frame(ranked: Sequence[StoreRecord], highlight: int = CHART_HIGHLIGHT) -> pd.DataFrame:
    df = leaderboard_frame(ranked, highlight)
    if df.empty:
        return df
    # duplicate store names would otherwise collapse into one bar
    dup = df["name"].duplicated(keep=False)
    df["label"] = df["name"].where(~dup, df["name"] + " (" + df["id"] + ")")
    df["sales_label"] = df["daily_sales"].map(fmt_idr)
    return df


def build_sales_chart(
    ranked: Sequence[StoreRecord],
    highlight: int = CHART_HIGHLIGHT,
    height: int = 300,
) -> Optional[alt.Chart]:
    """Top-N bar chart; first `highlight` bars in blue, the rest grey. None when there is nothing to draw."""
    df = sales_chart_frame(ranked, highlight)
    if df.empty:
        return None

    return (
        alt.Chart(df)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X(
                "label:N",
                sort=df["label"].tolist(),
                title=None,
                axis=alt.Axis(labelAngle=-45, labelLimit=160),
            ),
            y=alt.Y(
                "daily_sales:Q",
                title=None,
                axis=alt.Axis(labelExpr="'Rp' + format(datum.value / 1000000, '.0f') + 'jt'"),
            ),
            color=alt.condition(
                alt.datum.tier == TIER_TOP,
                alt.value(TOP_COLOR),
                alt.value(REST_COLOR),
            ),
            tooltip=[
                alt.Tooltip("rank:Q", title="#"),
                alt.Tooltip("name:N", title="Toko"),
                alt.Tooltip("manager:N", title="Manager"),
                alt.Tooltip("sales_label:N", title="Sales"),
            ],
        )
        .properties(height=height)
    )
