from __future__ import annotations

import pandas as pd
import streamlit as st

from bank_client import controllers
from bank_client.charts import age_distribution_bar, balance_duration_scatter
from bank_client.render import load_and_render, setup_page
from bank_client.schemas import InsightsData

setup_page("Insights", icon="🔍")

st.title("🔍 Wawasan Data Nasabah")


def _render(data: InsightsData) -> None:
    st.subheader("👥 Distribusi Usia Berdasarkan Status Langganan")
    st.plotly_chart(age_distribution_bar(data.age_distribution))

    st.subheader("💰 Saldo vs Durasi Panggilan")
    st.plotly_chart(balance_duration_scatter(data.balance_duration_sample))

    with st.expander("Lihat sampel data"):
        df = pd.DataFrame([s.model_dump() for s in data.balance_duration_sample])
        st.dataframe(df, hide_index=True)


load_and_render(controllers.insights_controller(), _render, loading_text="Memuat data insights...")
