# helpers_schema.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


# ---------- Absence policies ----------
# What a missing value means for each field, declared once.
ZERO = "zero"                # substitute 0 (aggregation / ranking)
PLACEHOLDER = "placeholder"  # show "-" / "N/A" in the detail view
EXCLUDE = "exclude"          # drop the record from the derived view (map)
KEEP = "keep"                # no derived view uses it
REQUIRED = "required"        # loader error

FIELD_POLICIES: Dict[str, str] = {
    "id": REQUIRED,
    "name": PLACEHOLDER,
    "manager": PLACEHOLDER,
    "daily_sales": ZERO,
    "growth": KEEP,
    "category": PLACEHOLDER,
    "apc": PLACEHOLDER,
    "mtd_sales": PLACEHOLDER,
    "stock": PLACEHOLDER,
    "lat": EXCLUDE,
    "lng": EXCLUDE,
}

NUMERIC_FIELDS = ("daily_sales", "growth", "apc", "mtd_sales", "stock", "lat", "lng")
TEXT_FIELDS = ("name", "manager", "category")


@dataclass(frozen=True)
class StoreRecord:
    id: str
    name: Optional[str] = None
    manager: Optional[str] = None
    daily_sales: Optional[float] = None
    growth: Optional[float] = None
    category: Optional[str] = None
    apc: Optional[float] = None
    mtd_sales: Optional[float] = None
    stock: Optional[float] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def sales_or_zero(self) -> float:
        return self.daily_sales if self.daily_sales is not None else 0.0

    @property
    def is_mappable(self) -> bool:
        return self.lat is not None and self.lng is not None

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "manager": self.manager,
            "daily_sales": self.daily_sales,
            "growth": self.growth,
            "category": self.category,
            "apc": self.apc,
            "mtd_sales": self.mtd_sales,
            "stock": self.stock,
            "lat": self.lat,
            "lng": self.lng,
        }
