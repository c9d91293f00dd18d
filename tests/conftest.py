# tests/conftest.py
import sys
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


TARGET_DISTRIBUTION = [
    {"label": "Tidak Berlangganan", "value": 39922},
    {"label": "Berlangganan", "value": 5289},
]

JOB_SUCCESS_RATE = [
    {"job": "student", "success_rate": 28.7},
    {"job": "retired", "success_rate": 22.8},
    {"job": "management", "success_rate": 13.8},
    {"job": "blue-collar", "success_rate": 7.3},
]

AGE_DISTRIBUTION = [
    {"age_group": "<30", "Berlangganan": 1100, "Tidak Berlangganan": 6000},
    {"age_group": "30-45", "Berlangganan": 2400, "Tidak Berlangganan": 22000},
    {"age_group": ">45", "Berlangganan": 1789, "Tidak Berlangganan": 11922},
]

BALANCE_DURATION_SAMPLE = [
    {"balance": 1787, "duration": 79, "y": "no", "y_label": "Tidak Berlangganan"},
    {"balance": 4789, "duration": 220, "y": "yes", "y_label": "Berlangganan"},
    {"balance": "not-a-number", "duration": 120, "y": "no", "y_label": "Tidak Berlangganan"},
]

MODEL_INFO = {
    "model_name": "XGBoost (tuned)",
    "model_type": "XGBClassifier",
    "accuracy": 0.8841,
    "precision": "0.501",
    "recall": 0.716,
    "F1-Score": 0.5895,
    "AUC-ROC": 0.9234,
    "CV Folds": 5,
    "CV Score": "0.921 ± 0.004",
}

PREDICTION = {"prediction": "yes", "probability_yes": 0.716}


def default_payloads() -> dict:
    return {
        "/api/dashboard/target-distribution": TARGET_DISTRIBUTION,
        "/api/dashboard/job-success-rate": JOB_SUCCESS_RATE,
        "/api/insights/age-distribution": AGE_DISTRIBUTION,
        "/api/insights/balance-duration-sample": BALANCE_DURATION_SAMPLE,
        "/api/model-info": MODEL_INFO,
        "/predict": PREDICTION,
    }


def make_backend(payloads=None, failures=None) -> FastAPI:
    """
    Faux backend FastAPI :
    - payloads : path -> corps JSON renvoyé en 200
    - failures : path -> (status, corps JSON)
    """
    data = {**default_payloads(), **(payloads or {})}
    failures = failures or {}

    app = FastAPI()
    app.state.calls = []
    app.state.predict_bodies = []

    def respond(path: str) -> JSONResponse:
        app.state.calls.append(path)
        if path in failures:
            status, body = failures[path]
            return JSONResponse(status_code=status, content=body)
        return JSONResponse(content=data[path])

    @app.get("/api/dashboard/target-distribution")
    def target_distribution():
        return respond("/api/dashboard/target-distribution")

    @app.get("/api/dashboard/job-success-rate")
    def job_success_rate():
        return respond("/api/dashboard/job-success-rate")

    @app.get("/api/insights/age-distribution")
    def age_distribution():
        return respond("/api/insights/age-distribution")

    @app.get("/api/insights/balance-duration-sample")
    def balance_duration_sample():
        return respond("/api/insights/balance-duration-sample")

    @app.get("/api/model-info")
    def model_info():
        return respond("/api/model-info")

    @app.post("/predict")
    async def predict(request: Request):
        app.state.predict_bodies.append(await request.json())
        return respond("/predict")

    return app


def asgi_client_factory(app: FastAPI):
    return lambda: httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest.fixture()
def backend_factory():
    """Retourne make(payloads=None, failures=None) -> (app, client_factory)."""

    def make(payloads=None, failures=None):
        app = make_backend(payloads=payloads, failures=failures)
        return app, asgi_client_factory(app)

    return make


@pytest.fixture()
def unreachable_client_factory():
    """Client dont chaque requête échoue au niveau transport."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver")


@pytest.fixture()
def raw_client_factory():
    """make(routes) : routes = path -> (status, bytes). Permet de renvoyer du JSON non standard (NaN)."""

    def make(routes):
        def handler(request: httpx.Request) -> httpx.Response:
            status, content = routes[request.url.path]
            return httpx.Response(status, content=content, headers={"content-type": "application/json"})

        return lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver")

    return make


@pytest.fixture()
def backend_env(monkeypatch):
    monkeypatch.setenv("BACKEND_API_URL", "http://backend.test:8000/")
    monkeypatch.setenv("BACKEND_TIMEOUT_S", "5")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
