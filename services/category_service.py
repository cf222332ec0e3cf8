# services/category_service.py
#
# Category labels are free text assigned upstream ("Sultan (High Performer)",
# "Standar", "Perlu Perhatian", ...). A label can contain more than one keyword,
# so each classifier is an ordered rule list: first matching keyword wins.

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class MarkerTier(str, Enum):
    SULTAN = "Sultan"
    STANDAR = "Standar"
    WARNING = "Warning"


# Map markers: Sultan > Perlu > default Standar
MARKER_RULES: Tuple[Tuple[str, MarkerTier], ...] = (
    ("Sultan", MarkerTier.SULTAN),
    ("Perlu", MarkerTier.WARNING),
)
MARKER_DEFAULT = MarkerTier.STANDAR

# Table badge + detail icon: Sultan > Standar > default Warning
BADGE_RULES: Tuple[Tuple[str, MarkerTier], ...] = (
    ("Sultan", MarkerTier.SULTAN),
    ("Standar", MarkerTier.STANDAR),
)
BADGE_DEFAULT = MarkerTier.WARNING

MARKER_COLORS: Dict[MarkerTier, str] = {
    MarkerTier.SULTAN: "#9c27b0",   # violet
    MarkerTier.STANDAR: "#2979ff",  # blue
    MarkerTier.WARNING: "#ff0000",  # red
}

BADGE_STYLES: Dict[MarkerTier, Dict[str, str]] = {
    MarkerTier.SULTAN: {"bg": "#faf5ff", "fg": "#7e22ce", "border": "#e9d5ff", "icon": "👑"},
    MarkerTier.STANDAR: {"bg": "#eff6ff", "fg": "#1d4ed8", "border": "#bfdbfe", "icon": "⭐"},
    MarkerTier.WARNING: {"bg": "#fff7ed", "fg": "#c2410c", "border": "#fed7aa", "icon": "⚠️"},
}


def classify(
    category: Optional[str],
    rules: Tuple[Tuple[str, MarkerTier], ...],
    default: MarkerTier,
) -> MarkerTier:
    if not category:
        return default
    for keyword, tier in rules:
        if keyword in category:
            return tier
    return default


def classify_marker(category: Optional[str]) -> MarkerTier:
    # no category -> Standar (not Warning)
    return classify(category, MARKER_RULES, MARKER_DEFAULT)


def classify_badge(category: Optional[str]) -> MarkerTier:
    """Only meaningful when a category is present; callers show '-' otherwise."""
    return classify(category, BADGE_RULES, BADGE_DEFAULT)
