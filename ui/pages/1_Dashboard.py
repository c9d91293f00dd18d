from __future__ import annotations

import streamlit as st

from bank_client import controllers
from bank_client.charts import job_success_bar, target_distribution_pie
from bank_client.formatting import format_count, format_rate, format_seconds
from bank_client.render import load_and_render, setup_page
from bank_client.schemas import DashboardData

setup_page("Dashboard", icon="📊")

st.title("📊 Dashboard Analitik Real-Time")
st.markdown("Dapatkan gambaran menyeluruh tentang kinerja pemasaran dan karakteristik nasabah bank Anda.")


def _render(data: DashboardData) -> None:
    kpis = data.kpis
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Nasabah", format_count(kpis.total_customers))
    c2.metric("Tingkat Keberhasilan", format_rate(kpis.overall_success_rate))
    c3.metric("Rata-rata Durasi Panggilan", format_seconds(kpis.avg_call_duration))
    c4.metric("Rata-rata Usia Nasabah", format_count(kpis.avg_customer_age))
    if kpis.simulated:
        st.caption("Durasi dan usia rata-rata masih berupa nilai simulasi (belum tersedia di backend).")

    left, right = st.columns(2)
    with left:
        st.subheader("🎯 Distribusi Target Nasabah (Deposito)")
        st.plotly_chart(target_distribution_pie(data.target_distribution))
    with right:
        st.subheader("💼 Tingkat Keberhasilan Berdasarkan Kategori Pekerjaan")
        st.plotly_chart(job_success_bar(data.job_success_rate))


load_and_render(controllers.dashboard_controller(), _render, loading_text="Memuat data dashboard...")
