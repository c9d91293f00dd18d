from __future__ import annotations

import streamlit as st

from bank_client import controllers
from bank_client.formatting import format_decimal, format_optional_text, format_percent
from bank_client.render import load_and_render, setup_page
from bank_client.schemas import ModelInfo

setup_page("Model Info", icon="ℹ️")

st.title("ℹ️ Informasi & Performa Model")
st.markdown("Dapatkan detail teknis, metrik performa, analisis dampak bisnis, dan metodologi pengembangan model.")

BUSINESS_IMPACT = [
    ("🎯", "Presisi ~50.1%", "Dari nasabah yang diprediksi akan berlangganan, sekitar 50.1% benar-benar akan berlangganan."),
    ("📊", "Recall ~71.6%", "Dari nasabah yang sebenarnya akan berlangganan, sekitar 71.6% berhasil diidentifikasi oleh model."),
]

ROI_PROJECTION = [
    ("💸", "Pengurangan Biaya", "~70% (dari $500K ke $150K)"),
    ("📈", "Peningkatan Efisiensi", "3x akurasi penargetan"),
    ("🎯", "Peningkatan Konversi", "+67% (target 20%+)"),
    ("💰", "Potensi Penghematan Tahunan", "> $350,000"),
]

METHODOLOGY = [
    ("🎯", "1. Pemahaman Bisnis", "Analisis kebutuhan & tujuan bisnis.", "✅ Selesai"),
    ("📊", "2. Pemahaman Data", "EDA & analisis 45,211 catatan.", "✅ Selesai"),
    ("🛠️", "3. Persiapan Data", "Rekayasa fitur & pra-pemrosesan.", "✅ Selesai"),
    ("🤖", "4. Pemodelan", "Pelatihan & evaluasi berbagai algoritma.", "✅ Selesai"),
    ("📈", "5. Evaluasi", "Penilaian performa & validasi.", "✅ Selesai"),
    ("🚀", "6. Implementasi", "Aplikasi web & API prediksi.", "✅ Sedang Berlangsung"),
]


def _performance_rows(info: ModelInfo) -> list[tuple[str, str, str]]:
    return [
        ("🏆", "Model Terbaik", format_optional_text(info.model_name)),
        ("⚙️", "Tipe Model", format_optional_text(info.model_type)),
        ("✅", "Akurasi Uji", format_percent(info.accuracy)),
        ("🎯", "Presisi", format_percent(info.precision)),
        ("📈", "Recall", format_percent(info.recall)),
        ("⚖️", "F1-Score", format_decimal(info.f1_score)),
        ("📊", "AUC-ROC", format_decimal(info.auc_roc)),
        ("🔬", "Lipatan Validasi Silang", format_optional_text(info.cv_folds)),
        ("📊", "Skor Validasi Silang", format_optional_text(info.cv_score)),
    ]


def _render(info: ModelInfo) -> None:
    left, right = st.columns(2)
    with left:
        st.subheader("🤖 Performa Model")
        for icon, label, value in _performance_rows(info):
            st.markdown(f"{icon} **{label}**: {value}")

    with right:
        st.subheader("💼 Analisis Dampak Bisnis")
        st.markdown("**📈 Interpretasi Performa:**")
        for icon, label, text in BUSINESS_IMPACT:
            st.markdown(f"{icon} **{label}**: {text}")
        st.markdown("**💰 Proyeksi ROI:**")
        for icon, label, text in ROI_PROJECTION:
            st.markdown(f"{icon} **{label}**: {text}")

    st.subheader("🧭 Metodologi (CRISP-DM)")
    for icon, step, text, status in METHODOLOGY:
        st.markdown(f"{icon} **{step}**: {text} {status}")


load_and_render(controllers.model_info_controller(), _render, loading_text="Memuat informasi model...")
