# services/map_service.py

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from helpers_format import fmt_idr
from helpers_schema import StoreRecord
from services.category_service import MARKER_COLORS, MarkerTier, classify_marker

MEDAN_CENTER = (3.5952, 98.6722)
DEFAULT_ZOOM = 11


def map_frame(records: Sequence[StoreRecord]) -> pd.DataFrame:
    """One row per mappable record; records without both lat and lng are skipped."""
    cols = ["id", "name", "manager", "lat", "lng", "daily_sales", "category", "tier", "sales_label"]
    rows: List[dict] = []
    for r in records:
        if not r.is_mappable:
            continue
        rows.append({
            "id": r.id,
            "name": r.name or "-",
            "manager": r.manager or "-",
            "lat": r.lat,
            "lng": r.lng,
            "daily_sales": r.sales_or_zero,
            "category": r.category or "-",
            "tier": classify_marker(r.category).value,
            "sales_label": fmt_idr(r.sales_or_zero),
        })
    return pd.DataFrame(rows, columns=cols)


def build_store_map(
    records: Sequence[StoreRecord],
    center: tuple[float, float] = MEDAN_CENTER,
    zoom: int = DEFAULT_ZOOM,
    height: int = 400,
) -> Optional[go.Figure]:
    df = map_frame(records)
    if df.empty:
        return None

    fig = go.Figure()
    # one trace per tier so the legend doubles as the map legend
    for tier in MarkerTier:
        sub = df[df["tier"] == tier.value]
        if sub.empty:
            continue
        fig.add_trace(go.Scattermap(
            lat=sub["lat"],
            lon=sub["lng"],
            mode="markers",
            name=tier.value,
            marker=dict(size=13, color=MARKER_COLORS[tier]),
            customdata=sub[["name", "manager", "sales_label", "category"]].to_numpy(),
            hovertemplate=(
                "<b>%{customdata[0]}</b><br>%{customdata[1]}"
                "<br>%{customdata[2]}<br>%{customdata[3]}<extra></extra>"
            ),
        ))

    fig.update_layout(
        map=dict(style="open-street-map", center=dict(lat=center[0], lon=center[1]), zoom=zoom),
        height=height,
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(title="Legenda", orientation="v", x=0.99, xanchor="right", y=0.99, bgcolor="rgba(255,255,255,0.85)"),
    )
    return fig
