import sys
import logging
from html import escape
from pathlib import Path

import pandas as pd
import streamlit as st

# Ensure root importable (helpers_*.py in root)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from helpers_config import load_config, setup_logging
from helpers_datasets import DatasetMode, load_store_dataset, select_dataset
from helpers_format import fmt_idr, fmt_int
from services.app_state import AppState, DismissSelection, SelectStore, SetQuery, SwitchDataset, reduce
from services.chart_service import build_sales_chart
from services.dashboard_service import build_dashboard_view
from services.map_service import build_store_map
from stylesheet import inject_css
from ui import badge_css, brand_colors, empty_panel, kpi_card, store_detail

st.set_page_config(page_title="Dashboard Alfamidi AI", page_icon="🚀", layout="wide")
inject_css()

CFG = load_config()
setup_logging(CFG.log_level)
logger = logging.getLogger("store_monitoring")

MODE_LABELS = {
    DatasetMode.REGULAR: "🏢 Regular Stores",
    DatasetMode.FRANCHISE: "🤝 Franchise",
}
LABEL_TO_MODE = {v: k for k, v in MODE_LABELS.items()}


# ---------- Data ----------
@st.cache_data(ttl=CFG.data_cache_ttl, show_spinner="Memuat data toko...")
def load_datasets(regular_path: str, franchise_path: str):
    return load_store_dataset(regular_path), load_store_dataset(franchise_path)

try:
    REGULAR, FRANCHISE = load_datasets(str(CFG.regular_data_path), str(CFG.franchise_data_path))
except Exception as e:
    logger.exception("Dataset load failed")
    st.error("Gagal memuat dataset toko. Details:")
    st.exception(e)
    st.stop()


# ---------- Session state ----------
if "app_state" not in st.session_state:
    st.session_state.app_state = AppState()
if "lb_nonce" not in st.session_state:
    st.session_state.lb_nonce = 0

def dispatch(action):
    prev = st.session_state.app_state
    nxt = reduce(prev, action)
    if nxt != prev:
        logger.debug("%s: %s -> %s", type(action).__name__, prev, nxt)
    st.session_state.app_state = nxt

def close_detail():
    dispatch(DismissSelection())
    # fresh table widget, otherwise the old row selection would re-open the detail
    st.session_state.lb_nonce += 1


# ---------- Header ----------
h1, h2 = st.columns([3, 2])
with h1:
    st.markdown(
        '<div class="dash-title">Dashboard Alfamidi <span>AI</span> 🚀</div>'
        '<div class="dash-sub">Integrated Intelligent Monitoring System</div>',
        unsafe_allow_html=True,
    )
with h2:
    query = st.text_input("Cari", placeholder="Cari Toko atau Manager...",
                          label_visibility="collapsed", key="search_query")
dispatch(SetQuery(query))

mode_label = st.radio("Dataset", list(MODE_LABELS.values()), horizontal=True,
                      label_visibility="collapsed", key="dataset_mode")
dispatch(SwitchDataset(LABEL_TO_MODE[mode_label]))

state: AppState = st.session_state.app_state
records = select_dataset(state.mode, REGULAR, FRANCHISE)
view = build_dashboard_view(records, state.query, top_n=CFG.leaderboard_size)
colors = brand_colors(state.mode)
is_regular = state.mode is DatasetMode.REGULAR


# ---------- KPI cards ----------
c1, c2, c3 = st.columns(3)
with c1:
    kpi_card(f"Total Sales ({state.mode.value})", fmt_idr(view.summary.total_sales), tone=colors["tone"])
with c2:
    kpi_card("Total Outlet", f'{fmt_int(view.summary.outlet_count)} <span class="hint">Unit</span>')
with c3:
    top = view.top_performer
    kpi_card("Top Performer", escape(top.name or "-") if top else "-",
             subtitle=fmt_idr(top.sales_or_zero if top else 0), tone="green")


# ---------- Chart & map ----------
left, right = st.columns(2)
with left:
    st.markdown('<div class="panel-title">📊 Top 10 Sales Performance</div>', unsafe_allow_html=True)
    chart = build_sales_chart(view.leaderboard, highlight=CFG.chart_highlight)
    if chart is not None:
        st.altair_chart(chart, width="stretch")
    else:
        empty_panel("No Data")

if is_regular:
    with right:
        st.markdown('<div class="panel-title">📍 Peta Sebaran <span class="pill">Geospatial AI</span></div>',
                    unsafe_allow_html=True)
        fig = build_store_map(view.filtered, center=(CFG.map_center_lat, CFG.map_center_lng), zoom=CFG.map_zoom)
        if fig is not None:
            st.plotly_chart(fig, width="stretch")
        else:
            empty_panel("No Data for Map", height=400)


# ---------- Leaderboard ----------
st.markdown("---")
st.subheader(f"🏆 Leaderboard: {state.mode.value}")
st.markdown('<div class="hint">*Klik baris untuk melihat detail performa & stok</div>', unsafe_allow_html=True)

table = pd.DataFrame({
    "#": list(range(1, len(view.leaderboard) + 1)),
    "Nama Toko": [r.name or "-" for r in view.leaderboard],
    "Manager": [r.manager or "-" for r in view.leaderboard],
    "Sales Harian": [fmt_idr(r.sales_or_zero) for r in view.leaderboard],
})
if is_regular:
    table["AI Category"] = [r.category or "-" for r in view.leaderboard]

if table.empty:
    st.info("Tidak ada toko yang cocok dengan pencarian.")
else:
    data = table.style.map(badge_css, subset=["AI Category"]) if is_regular else table
    event = st.dataframe(
        data,
        hide_index=True,
        width="stretch",
        on_select="rerun",
        selection_mode="single-row",
        key=f"lb_{state.mode.value}_{state.query}_{st.session_state.lb_nonce}",
    )
    selection = getattr(event, "selection", None)
    rows = list(getattr(selection, "rows", []) or [])
    if rows and rows[0] < len(view.leaderboard):
        picked = view.leaderboard[rows[0]]
        if state.selected != picked:
            dispatch(SelectStore(picked))
            state = st.session_state.app_state


# ---------- Detail ----------
if state.has_selection:
    with st.container(border=True):
        store_detail(state.selected)
        st.button("Tutup Detail", on_click=close_detail, key="close_detail")

with st.expander("🔧 Debug"):
    st.write("State:", {"query": state.query, "mode": state.mode.value,
                        "selected": state.selected.id if state.selected else None})
    st.write("Filtered:", len(view.filtered), "mappable:", len(view.mappable))
