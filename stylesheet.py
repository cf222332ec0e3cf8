# stylesheet.py
import streamlit as st


def get_css(
    *,
    BLUE: str = "#2563eb",
    PURPLE: str = "#9333ea",
    DARK: str = "#111827",
    GRAY: str = "#6b7280",
    LIGHT: str = "#f9fafb",
    LINE: str = "#e5e7eb",
) -> str:
    """
    Returns the full CSS string (no <style> tags). Keep this file as the single source of truth.
    """

    return f"""
/* ---------------- Layout ---------------- */
.block-container {{
  padding-top: 2rem;
  padding-bottom: 2rem;
  max-width: 80rem;
}}

/* ---------------- Header ---------------- */
.dash-title {{
  font-size: 1.9rem;
  font-weight: 800;
  letter-spacing: -0.02em;
  color: {DARK};
}}
.dash-title span {{
  color: {BLUE};
}}
.dash-sub {{
  color: {GRAY};
  font-size: 0.9rem;
  margin-top: 0.15rem;
}}

/* ---------------- KPI Cards ---------------- */
.kpi-card {{
  border: 1px solid {LINE};
  border-radius: 16px;
  background: white;
  padding: 1.1rem 1.25rem;
  margin-bottom: 0.5rem;
}}
.kpi-label {{
  color: {GRAY};
  font-size: 0.72rem;
  font-weight: 600;
  text-transform: uppercase;
  letter-spacing: 0.05em;
}}
.kpi-value {{
  color: {DARK};
  font-size: 1.8rem;
  font-weight: 800;
  margin-top: 0.35rem;
  white-space: nowrap;
  overflow: hidden;
  text-overflow: ellipsis;
}}
.kpi-value.blue {{ color: {BLUE}; }}
.kpi-value.purple {{ color: {PURPLE}; }}
.kpi-value.green {{ color: #16a34a; font-size: 1.25rem; }}
.kpi-help {{
  color: {GRAY};
  font-size: 0.78rem;
  margin-top: 0.2rem;
}}

/* ---------------- Panels ---------------- */
.panel-title {{
  font-weight: 800;
  font-size: 1.05rem;
  color: {DARK};
}}
.pill {{
  display: inline-block;
  padding: 0.1rem 0.5rem;
  border-radius: 6px;
  font-size: 0.65rem;
  background: #eff6ff;
  color: #1d4ed8;
  border: 1px solid #dbeafe;
}}
.empty {{
  height: 300px;
  display: flex;
  align-items: center;
  justify-content: center;
  color: #9ca3af;
  border: 1px dashed {LINE};
  border-radius: 14px;
  background: {LIGHT};
}}
.hint {{
  color: #9ca3af;
  font-size: 0.78rem;
}}

/* ---------------- Detail card ---------------- */
.detail-head {{
  background: linear-gradient(90deg, #2563eb, #1d4ed8);
  color: white;
  border-radius: 14px 14px 0 0;
  padding: 1.1rem 1.4rem;
}}
.detail-head h3 {{
  margin: 0;
  color: white;
}}
.detail-head .mono {{
  font-family: monospace;
  opacity: 0.9;
  font-size: 0.85rem;
}}
.ai-box {{
  display: flex;
  gap: 1rem;
  align-items: center;
  background: {LIGHT};
  border: 1px solid {LINE};
  border-radius: 14px;
  padding: 0.9rem 1rem;
  margin: 0.9rem 0;
}}
.ai-box .icon {{
  font-size: 2.2rem;
}}
.metric-box {{
  border: 1px solid {LINE};
  border-radius: 14px;
  padding: 0.9rem 1rem;
  margin-bottom: 0.75rem;
}}
.metric-box.mtd {{
  border-color: #dbeafe;
  background: rgba(239,246,255,.4);
}}
"""


def inject_css(**colors) -> None:
    """
    Injects CSS into the Streamlit app. Call once near the top of each page.
    """
    css = get_css(**colors)
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
