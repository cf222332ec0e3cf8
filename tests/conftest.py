import pytest

from helpers_schema import StoreRecord


def make_store(id, name=None, manager=None, daily_sales=None, **kw):
    return StoreRecord(id=id, name=name, manager=manager, daily_sales=daily_sales, **kw)


@pytest.fixture
def toko_ab():
    return (
        make_store("A", "Toko A", "Budi", 5_000_000),
        make_store("B", "Toko B", "Siti", 8_000_000),
    )


@pytest.fixture
def many_stores():
    # 13 stores, two ties (S03/S07 and S05/S11), one without sales
    sales = [4, 9, 7, 1, 6, 12, 7, 3, 10, 2, 6, None, 11]
    return tuple(
        make_store(f"S{i:02d}", f"Store {i}", f"Mgr {i % 3}", None if s is None else s * 1_000_000)
        for i, s in enumerate(sales, start=1)
    )
