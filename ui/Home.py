from __future__ import annotations

import streamlit as st

from bank_client import controllers
from bank_client.charts import prediction_probability_chart
from bank_client.controllers import Idle
from bank_client.form import (
    CATEGORICAL_FIELDS,
    CustomerInputForm,
    field_label,
    option_label,
)
from bank_client.formatting import format_probability, prediction_label
from bank_client.render import render_state, setup_page
from bank_client.schemas import CATEGORICAL_OPTIONS, PredictionResult

setup_page("Prediksi")

st.title("🏦 SecureBank AI")
st.markdown("🤖 Sistem Prediksi Cerdas untuk Pemasaran Deposito Berjangka")

defaults = CustomerInputForm()

st.header("📝 Input Data Nasabah")
with st.form("prediction_form"):
    cols = st.columns(3)
    raw_values = {}
    for i, name in enumerate(CustomerInputForm.field_names()):
        col = cols[i % 3]
        if name in CATEGORICAL_FIELDS:
            options = CATEGORICAL_OPTIONS[name]
            raw_values[name] = col.selectbox(
                field_label(name),
                options,
                index=options.index(getattr(defaults, name)),
                format_func=lambda v, n=name: option_label(n, v),
                key=f"field_{name}",
            )
        else:
            # text_input : un champ vide reste possible (coercé à 0 au submit)
            raw_values[name] = col.text_input(field_label(name), value=str(getattr(defaults, name)), key=f"field_{name}")

    submitted = st.form_submit_button("🚀 Analisis Potensi Nasabah")

if submitted:
    form = CustomerInputForm()
    for name, raw in raw_values.items():
        form.set_field(name, raw)

    with st.spinner("AI Sedang Menganalisis..."):
        st.session_state["prediction_state"] = controllers.run_page(controllers.prediction_controller(form))


def _render_result(result: PredictionResult) -> None:
    st.subheader("Hasil Prediksi:")
    label = prediction_label(result.prediction)
    if result.prediction == "yes":
        st.success(f"Akan Berlangganan Deposito Berjangka: {label}")
    else:
        st.warning(f"Akan Berlangganan Deposito Berjangka: {label}")
    st.metric("Probabilitas 'Ya'", format_probability(result.probability_yes))
    st.plotly_chart(prediction_probability_chart(result))


render_state(st.session_state.get("prediction_state", Idle()), _render_result, loading_text="AI Sedang Menganalisis...")
