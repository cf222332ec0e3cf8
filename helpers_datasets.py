# helpers_datasets.py
from __future__ import annotations

import json
import logging
import math
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from helpers_schema import FIELD_POLICIES, NUMERIC_FIELDS, REQUIRED, TEXT_FIELDS, StoreRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = tuple(k for k, policy in FIELD_POLICIES.items() if policy == REQUIRED)


class DatasetError(ValueError):
    """Dataset file is readable but does not follow the StoreRecord schema."""


class DatasetMode(str, Enum):
    REGULAR = "REGULAR"
    FRANCHISE = "FRANCHISE"


def _coerce_float(x, *, field: str, store_id: str) -> Optional[float]:
    if x is None:
        return None
    if isinstance(x, bool):
        logger.warning("Store %s: %s=%r is not numeric, treated as missing", store_id, field, x)
        return None
    try:
        val = float(x)
    except (TypeError, ValueError):
        logger.warning("Store %s: %s=%r is not numeric, treated as missing", store_id, field, x)
        return None
    if math.isnan(val):
        return None
    if not isinstance(x, (int, float)):
        logger.warning("Store %s: %s=%r coerced to %s", store_id, field, x, val)
    return val


def _coerce_text(x, *, field: str, store_id: str) -> Optional[str]:
    if x is None:
        return None
    if isinstance(x, str):
        return x
    logger.warning("Store %s: %s=%r is not text, converted", store_id, field, x)
    return str(x)


def parse_store_record(raw: Dict[str, Any]) -> StoreRecord:
    """Turn one JSON object into a StoreRecord (unknown keys are ignored)."""
    if not isinstance(raw, dict):
        raise DatasetError(f"Entri toko harus berupa objek, bukan {type(raw).__name__}")

    for k in REQUIRED_FIELDS:
        if raw.get(k) is None or str(raw.get(k)).strip() == "":
            raise DatasetError(f"Entri toko tanpa '{k}': {raw!r}")
    store_id = str(raw["id"])

    values: Dict[str, Any] = {"id": store_id}
    for k in TEXT_FIELDS:
        values[k] = _coerce_text(raw.get(k), field=k, store_id=store_id)
    for k in NUMERIC_FIELDS:
        values[k] = _coerce_float(raw.get(k), field=k, store_id=store_id)

    if values["daily_sales"] is not None and values["daily_sales"] < 0:
        raise DatasetError(f"Store {store_id}: daily_sales tidak boleh negatif ({values['daily_sales']})")

    return StoreRecord(**values)


def parse_store_records(entries: Iterable[Any]) -> Tuple[StoreRecord, ...]:
    records: List[StoreRecord] = []
    seen: set[str] = set()
    for raw in entries:
        rec = parse_store_record(raw)
        if rec.id in seen:
            raise DatasetError(f"ID toko duplikat: {rec.id}")
        seen.add(rec.id)
        records.append(rec)
    return tuple(records)


def load_store_dataset(json_path: str | Path) -> Tuple[StoreRecord, ...]:
    """
    Loads a store snapshot with structure:
    [
      {"id": "TK01", "name": "Alfamidi Setia Budi", "manager": "Budi",
       "daily_sales": 5000000, "category": "Sultan (High Performer)",
       "apc": 45000, "mtd_sales": 95000000, "stock": 210000000,
       "lat": 3.57, "lng": 98.63},
      ...
    ]
    """
    path = Path(json_path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset tidak ditemukan di path: {path.resolve()}")

    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise DatasetError(f"{path.name} harus berisi list toko.")

    records = parse_store_records(data)
    logger.info("Loaded %d stores from %s", len(records), path)
    return records


def select_dataset(
    mode: DatasetMode | str,
    regular: Sequence[StoreRecord],
    franchise: Sequence[StoreRecord],
) -> Tuple[StoreRecord, ...]:
    if DatasetMode(mode) is DatasetMode.FRANCHISE:
        return tuple(franchise)
    return tuple(regular)
