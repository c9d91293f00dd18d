from __future__ import annotations

from typing import List

import httpx

from bank_client import api
from bank_client.api import BackendError
from bank_client.form import CustomerInputForm
from bank_client.schemas import (
    SUBSCRIBED,
    AgeDistributionPoint,
    BalanceDurationSample,
    DashboardData,
    DashboardKpis,
    InsightsData,
    JobSuccessPoint,
    ModelInfo,
    PredictionResult,
    TargetDistributionPoint,
)

PREDICT_PATH = "/predict"
TARGET_DISTRIBUTION_PATH = "/api/dashboard/target-distribution"
JOB_SUCCESS_RATE_PATH = "/api/dashboard/job-success-rate"
AGE_DISTRIBUTION_PATH = "/api/insights/age-distribution"
BALANCE_DURATION_PATH = "/api/insights/balance-duration-sample"
MODEL_INFO_PATH = "/api/model-info"

# messages de repli par endpoint (réponse non-2xx sans "detail")
TARGET_DISTRIBUTION_FAILED = "Gagal mengambil distribusi target"
JOB_SUCCESS_RATE_FAILED = "Gagal mengambil tingkat keberhasilan pekerjaan"
AGE_DISTRIBUTION_FAILED = "Gagal mengambil distribusi usia."
BALANCE_DURATION_FAILED = "Gagal mengambil data sampel saldo/durasi."
MODEL_INFO_FAILED = "Gagal mengambil informasi model."

# messages génériques par page (transport / payload illisible)
DASHBOARD_ERROR = "Terjadi kesalahan saat memuat data dashboard."
INSIGHTS_ERROR = "Terjadi kesalahan saat memuat data insights."
MODEL_INFO_ERROR = "Terjadi kesalahan saat memuat informasi model."
PREDICTION_ERROR = "Terjadi kesalahan tidak dikenal."

# KPI sans champ backend pour l'instant : placeholders explicites
PLACEHOLDER_TOTAL_CUSTOMERS = 45211
PLACEHOLDER_SUCCESS_RATE = 11.7
PLACEHOLDER_AVG_CALL_DURATION = 263
PLACEHOLDER_AVG_CUSTOMER_AGE = 41


def _as_list(data, path: str) -> list:
    if not isinstance(data, list):
        raise ValueError(f"{path}: liste JSON attendue, reçu {type(data).__name__}")
    return data


def derive_kpis(target_distribution: List[TargetDistributionPoint]) -> DashboardKpis:
    """Total et taux de succès dérivés de la distribution ; durée/âge moyens restent simulés."""
    total = sum(p.value for p in target_distribution)
    if total <= 0:
        return DashboardKpis(
            total_customers=PLACEHOLDER_TOTAL_CUSTOMERS,
            overall_success_rate=PLACEHOLDER_SUCCESS_RATE,
            avg_call_duration=PLACEHOLDER_AVG_CALL_DURATION,
            avg_customer_age=PLACEHOLDER_AVG_CUSTOMER_AGE,
            simulated=True,
        )

    subscribed = sum(p.value for p in target_distribution if p.label == SUBSCRIBED)
    return DashboardKpis(
        total_customers=int(round(total)),
        overall_success_rate=round(subscribed / total * 100.0, 1),
        avg_call_duration=PLACEHOLDER_AVG_CALL_DURATION,
        avg_customer_age=PLACEHOLDER_AVG_CUSTOMER_AGE,
        simulated=True,
    )


async def load_dashboard(client: httpx.AsyncClient) -> DashboardData:
    target_raw, job_raw = await api.get_many(
        client,
        [
            (TARGET_DISTRIBUTION_PATH, TARGET_DISTRIBUTION_FAILED),
            (JOB_SUCCESS_RATE_PATH, JOB_SUCCESS_RATE_FAILED),
        ],
    )

    target = [TargetDistributionPoint.model_validate(x) for x in _as_list(target_raw, TARGET_DISTRIBUTION_PATH)]
    jobs = [JobSuccessPoint.model_validate(x) for x in _as_list(job_raw, JOB_SUCCESS_RATE_PATH)]

    return DashboardData(target_distribution=target, job_success_rate=jobs, kpis=derive_kpis(target))


async def load_insights(client: httpx.AsyncClient) -> InsightsData:
    age_raw, sample_raw = await api.get_many(
        client,
        [
            (AGE_DISTRIBUTION_PATH, AGE_DISTRIBUTION_FAILED),
            (BALANCE_DURATION_PATH, BALANCE_DURATION_FAILED),
        ],
    )

    return InsightsData(
        age_distribution=[AgeDistributionPoint.model_validate(x) for x in _as_list(age_raw, AGE_DISTRIBUTION_PATH)],
        balance_duration_sample=[
            BalanceDurationSample.model_validate(x) for x in _as_list(sample_raw, BALANCE_DURATION_PATH)
        ],
    )


async def load_model_info(client: httpx.AsyncClient) -> ModelInfo:
    data = await api.get_json(client, MODEL_INFO_PATH, MODEL_INFO_FAILED)
    if not isinstance(data, dict):
        raise ValueError(f"{MODEL_INFO_PATH}: objet JSON attendu, reçu {type(data).__name__}")
    return ModelInfo.model_validate(data)


async def submit_prediction(client: httpx.AsyncClient, form: CustomerInputForm) -> PredictionResult:
    payload = form.to_request().model_dump()
    response = await api.post_json(client, PREDICT_PATH, payload)

    if response.is_success:
        fallback = PREDICTION_ERROR
    else:
        fallback = f"Terjadi kesalahan HTTP! Status: {response.status_code}"
    data = api.read_json(response, fallback, keys=("detail", "error"))

    # 2xx mais erreur métier dans le corps
    if isinstance(data, dict) and data.get("error"):
        raise BackendError(str(data["error"]), status_code=response.status_code)

    return PredictionResult.model_validate(data)
