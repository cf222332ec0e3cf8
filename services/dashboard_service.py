# services/dashboard_service.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from helpers_schema import StoreRecord

LEADERBOARD_SIZE = 10
CHART_HIGHLIGHT = 3

TIER_TOP = "top"
TIER_REST = "rest"


@dataclass(frozen=True)
class SalesSummary:
    total_sales: float
    outlet_count: int


@dataclass(frozen=True)
class DashboardView:
    filtered: Tuple[StoreRecord, ...]
    summary: SalesSummary
    leaderboard: Tuple[StoreRecord, ...]

    @property
    def top_performer(self) -> Optional[StoreRecord]:
        return self.leaderboard[0] if self.leaderboard else None

    @property
    def mappable(self) -> Tuple[StoreRecord, ...]:
        return tuple(r for r in self.filtered if r.is_mappable)


def _matches(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.casefold()


def filter_stores(records: Sequence[StoreRecord], query: str) -> Tuple[StoreRecord, ...]:
    """Name or manager contains the query (case-insensitive); order is kept."""
    needle = (query or "").casefold()
    if not needle:
        return tuple(records)
    return tuple(r for r in records if _matches(r.name, needle) or _matches(r.manager, needle))


def aggregate_sales(records: Sequence[StoreRecord]) -> SalesSummary:
    total = 0.0
    for r in records:
        total += r.sales_or_zero
    return SalesSummary(total_sales=total, outlet_count=len(records))


def rank_stores(records: Sequence[StoreRecord], top_n: int = LEADERBOARD_SIZE) -> Tuple[StoreRecord, ...]:
    """
    Descending by daily sales (missing = 0), truncated to top_n.
    Stable sort, ties broken by pre-sort order: sorted(reverse=True) keeps
    equal keys in their original order.
    """
    ranked = sorted(records, key=lambda r: r.sales_or_zero, reverse=True)
    return tuple(ranked[: max(0, top_n)])


def chart_tiers(ranked: Sequence[StoreRecord], highlight: int = CHART_HIGHLIGHT) -> List[str]:
    return [TIER_TOP if i < highlight else TIER_REST for i in range(len(ranked))]


def build_dashboard_view(
    records: Sequence[StoreRecord],
    query: str,
    top_n: int = LEADERBOARD_SIZE,
) -> DashboardView:
    filtered = filter_stores(records, query)
    return DashboardView(
        filtered=filtered,
        summary=aggregate_sales(filtered),
        leaderboard=rank_stores(filtered, top_n=top_n),
    )


# -----------------------------------------------------------
# Frames for rendering sinks (table / chart)
# -----------------------------------------------------------

def leaderboard_frame(ranked: Sequence[StoreRecord], highlight: int = CHART_HIGHLIGHT) -> pd.DataFrame:
    cols = ["rank", "id", "name", "manager", "daily_sales", "category", "tier"]
    if not ranked:
        return pd.DataFrame(columns=cols)
    rows = []
    for i, (rec, tier) in enumerate(zip(ranked, chart_tiers(ranked, highlight)), start=1):
        rows.append({
            "rank": i,
            "id": rec.id,
            "name": rec.name or "-",
            "manager": rec.manager or "-",
            "daily_sales": rec.sales_or_zero,
            "category": rec.category,
            "tier": tier,
        })
    return pd.DataFrame(rows, columns=cols)
