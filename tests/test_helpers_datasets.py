import json
import logging

import pytest

from helpers_config import ROOT
from helpers_datasets import (
    DatasetError,
    DatasetMode,
    load_store_dataset,
    parse_store_record,
    parse_store_records,
    select_dataset,
)


def _write(tmp_path, data, name="stores.json"):
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_load_minimal_and_full_records(tmp_path):
    p = _write(tmp_path, [
        {"id": "T1", "name": "Toko A", "manager": "Budi", "daily_sales": 5000000,
         "category": "Sultan", "apc": 45000, "mtd_sales": 1e8, "stock": 2e8, "lat": 3.5, "lng": 98.6},
        {"id": 2, "name": "Toko B", "manager": "Siti"},
    ])
    recs = load_store_dataset(p)
    assert [r.id for r in recs] == ["T1", "2"]
    assert recs[0].daily_sales == 5_000_000
    assert recs[0].is_mappable
    assert recs[1].daily_sales is None
    assert recs[1].sales_or_zero == 0
    assert not recs[1].is_mappable


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_store_dataset(tmp_path / "nope.json")


def test_top_level_must_be_list(tmp_path):
    with pytest.raises(DatasetError):
        load_store_dataset(_write(tmp_path, {"id": "x"}))


@pytest.mark.parametrize("entries", [
    [["not", "an", "object"]],
    [{"name": "no id"}],
    [{"id": "A"}, {"id": "A"}],
    [{"id": "A", "daily_sales": -1}],
])
def test_schema_violations(entries):
    with pytest.raises(DatasetError):
        parse_store_records(entries)


def test_dataset_error_is_value_error():
    assert issubclass(DatasetError, ValueError)


def test_bad_numbers_become_missing_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="helpers_datasets"):
        rec = parse_store_record({"id": "A", "daily_sales": "abc", "apc": True, "stock": "1500"})
    assert rec.daily_sales is None
    assert rec.apc is None
    assert rec.stock == 1500.0
    assert "daily_sales" in caplog.text


def test_select_dataset():
    reg = (parse_store_record({"id": "R"}),)
    fr = (parse_store_record({"id": "F"}),)
    assert select_dataset(DatasetMode.REGULAR, reg, fr) == reg
    assert select_dataset(DatasetMode.FRANCHISE, reg, fr) == fr
    assert select_dataset("FRANCHISE", reg, fr) == fr


def test_shipped_datasets_load():
    regular = load_store_dataset(ROOT / "data" / "dashboard_data.json")
    franchise = load_store_dataset(ROOT / "data" / "franchise_data.json")
    assert regular and franchise
    assert any(r.daily_sales is None for r in regular)
    assert any(r.lat is not None and r.lng is None for r in regular)
