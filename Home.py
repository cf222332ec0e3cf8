# Home.py: robust import of stylesheet
import streamlit as st

try:
    from stylesheet import inject_css
except Exception as e:
    st.error("Tidak bisa import `stylesheet`. Details:")
    st.exception(e)   # tampilkan stacktrace asli
    st.stop()

st.set_page_config(page_title="Alfamidi Store Monitor", page_icon="🏪", layout="wide")
inject_css()

st.title("Alfamidi Store Monitor")
st.markdown("Pilih halaman lewat navigasi di sebelah kiri.")
st.markdown("- **Store Monitoring**: KPI, leaderboard, grafik & peta sebaran toko.\n"
            "- **Dataset Smoke Test**: cek cepat isi dataset regular & franchise.")
