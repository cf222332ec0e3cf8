from html import escape
from typing import Optional

import streamlit as st

from helpers_datasets import DatasetMode
from helpers_format import fmt_idr, fmt_optional_idr, fmt_text
from helpers_schema import StoreRecord
from services.category_service import BADGE_STYLES, classify_badge


def brand_colors(mode=DatasetMode.REGULAR):
    return {"tone": "blue" if DatasetMode(mode) is DatasetMode.REGULAR else "purple"}


def kpi_card(label: str, value_html: str, subtitle: str = "", tone: str = ""):
    st.markdown(f"""
    <div class="kpi-card">
      <div class="kpi-label">{label}</div>
      <div class="kpi-value {tone}">{value_html}</div>
      <div class="kpi-help">{subtitle}</div>
    </div>
    """, unsafe_allow_html=True)


def badge_css(category: Optional[str]) -> str:
    """Cell style for the AI Category column ('-' stays unstyled)."""
    if not category or category == "-":
        return ""
    s = BADGE_STYLES[classify_badge(category)]
    return f"background-color: {s['bg']}; color: {s['fg']}; border: 1px solid {s['border']}; font-weight: 600"


def empty_panel(text: str, height: int = 300):
    st.markdown(f'<div class="empty" style="height:{height}px">{text}</div>', unsafe_allow_html=True)


def store_detail(rec: StoreRecord):
    """Detail card for one store; optional metrics fall back to '-' / 'N/A'."""
    st.markdown(f"""
    <div class="detail-head">
      <h3>{escape(fmt_text(rec.name))}</h3>
      <div class="mono">ID: {escape(rec.id)} | AM: {escape(fmt_text(rec.manager))}</div>
    </div>
    """, unsafe_allow_html=True)

    if rec.category:
        icon = BADGE_STYLES[classify_badge(rec.category)]["icon"]
        st.markdown(f"""
        <div class="ai-box">
          <div class="icon">{icon}</div>
          <div>
            <div style="font-weight:700">AI Performance Analysis</div>
            <div class="hint">Cluster: <b style="color:#2563eb">{escape(rec.category)}</b></div>
          </div>
        </div>
        """, unsafe_allow_html=True)

    c1, c2 = st.columns(2)
    with c1:
        st.markdown(f'<div class="metric-box"><div class="kpi-label">Sales Hari Ini</div>'
                    f'<div class="kpi-value">{fmt_idr(rec.sales_or_zero)}</div></div>', unsafe_allow_html=True)
        st.markdown(f'<div class="metric-box"><div class="kpi-label">Basket Size (APC)</div>'
                    f'<div class="kpi-value">{fmt_optional_idr(rec.apc)}</div></div>', unsafe_allow_html=True)
    with c2:
        st.markdown(f'<div class="metric-box mtd"><div class="kpi-label">Sales Bulan Ini (MTD)</div>'
                    f'<div class="kpi-value blue">{fmt_optional_idr(rec.mtd_sales, "N/A")}</div></div>',
                    unsafe_allow_html=True)
        st.markdown(f'<div class="metric-box"><div class="kpi-label">Stock Value</div>'
                    f'<div class="kpi-value">{fmt_optional_idr(rec.stock)}</div></div>', unsafe_allow_html=True)
