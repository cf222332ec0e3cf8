from conftest import make_store

from services.dashboard_service import (
    SalesSummary,
    TIER_REST,
    TIER_TOP,
    aggregate_sales,
    build_dashboard_view,
    chart_tiers,
    filter_stores,
    leaderboard_frame,
    rank_stores,
)


def _ids(records):
    return [r.id for r in records]


# ---------- filter ----------

def test_empty_query_returns_everything_in_order(many_stores):
    assert filter_stores(many_stores, "") == many_stores


def test_filter_is_order_preserving_subsequence(many_stores):
    out = filter_stores(many_stores, "mgr 1")
    positions = [many_stores.index(r) for r in out]
    assert positions == sorted(positions)
    assert out and all(r.manager == "Mgr 1" for r in out)


def test_filter_matches_name_or_manager_case_insensitive(toko_ab):
    assert _ids(filter_stores(toko_ab, "budi")) == ["A"]
    assert _ids(filter_stores(toko_ab, "TOKO B")) == ["B"]
    assert _ids(filter_stores(toko_ab, "toko")) == ["A", "B"]
    assert filter_stores(toko_ab, "zzz") == ()


def test_filter_missing_fields_do_not_match_and_do_not_fail():
    recs = (make_store("X"), make_store("Y", name="Yogya"), make_store("Z", manager="yanti"))
    assert _ids(filter_stores(recs, "y")) == ["Y", "Z"]
    assert _ids(filter_stores(recs, "")) == ["X", "Y", "Z"]


def test_filter_is_idempotent(many_stores):
    once = filter_stores(many_stores, "store 1")
    assert filter_stores(once, "store 1") == once


# ---------- aggregate ----------

def test_aggregate_empty():
    assert aggregate_sales(()) == SalesSummary(total_sales=0, outlet_count=0)


def test_aggregate_missing_sales_counts_as_zero():
    recs = (make_store("A", daily_sales=1_500_000), make_store("B"), make_store("C", daily_sales=500_000))
    s = aggregate_sales(recs)
    assert s.total_sales == 2_000_000
    assert s.outlet_count == 3


def test_outlet_count_equals_filtered_length(many_stores):
    for q in ["", "store", "mgr 2", "nothing"]:
        filtered = filter_stores(many_stores, q)
        assert aggregate_sales(filtered).outlet_count == len(filtered)


# ---------- rank ----------

def test_rank_sorted_non_increasing_and_truncated(many_stores):
    ranked = rank_stores(many_stores)
    sales = [r.sales_or_zero for r in ranked]
    assert sales == sorted(sales, reverse=True)
    assert len(ranked) == min(10, len(many_stores))


def test_rank_short_list_is_not_padded(toko_ab):
    assert len(rank_stores(toko_ab)) == 2
    assert rank_stores(()) == ()


def test_rank_ties_keep_pre_sort_order(many_stores):
    ranked = _ids(rank_stores(many_stores))
    assert ranked == ["S06", "S13", "S09", "S02", "S03", "S07", "S05", "S11", "S01", "S08"]


def test_rank_missing_sales_sorts_last():
    recs = (make_store("none"), make_store("low", daily_sales=1), make_store("high", daily_sales=9))
    assert _ids(rank_stores(recs)) == ["high", "low", "none"]


def test_rank_is_idempotent_on_its_output(many_stores):
    ranked = rank_stores(many_stores)
    assert rank_stores(ranked) == ranked


def test_chart_tiers_highlight_first_three(many_stores):
    tiers = chart_tiers(rank_stores(many_stores))
    assert tiers[:3] == [TIER_TOP] * 3
    assert set(tiers[3:]) == {TIER_REST}
    assert chart_tiers(()) == []


# ---------- scenarios ----------

def test_scenario_empty_query(toko_ab):
    view = build_dashboard_view(toko_ab, "")
    assert view.summary.total_sales == 13_000_000
    assert view.summary.outlet_count == 2
    assert _ids(view.leaderboard) == ["B", "A"]
    assert view.top_performer.name == "Toko B"


def test_scenario_query_budi(toko_ab):
    view = build_dashboard_view(toko_ab, "budi")
    assert _ids(view.filtered) == ["A"]
    assert view.summary.total_sales == 5_000_000
    assert _ids(view.leaderboard) == ["A"]


def test_scenario_no_match_is_well_defined(toko_ab):
    view = build_dashboard_view(toko_ab, "tidak ada")
    assert view.summary == SalesSummary(0, 0)
    assert view.leaderboard == ()
    assert view.top_performer is None
    assert view.mappable == ()


def test_mappable_needs_both_coordinates():
    recs = (
        make_store("both", "Both", "M", 3, lat=3.5, lng=98.6),
        make_store("lat-only", "Lat only", "M", 5, lat=3.5),
    )
    view = build_dashboard_view(recs, "")
    assert _ids(view.mappable) == ["both"]
    assert _ids(view.leaderboard) == ["lat-only", "both"]


def test_leaderboard_frame_rows(toko_ab):
    df = leaderboard_frame(rank_stores(toko_ab))
    assert df["rank"].tolist() == [1, 2]
    assert df["name"].tolist() == ["Toko B", "Toko A"]
    assert leaderboard_frame(()).empty
