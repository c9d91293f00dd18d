from __future__ import annotations

from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bank_client.normalize import parse_optional_int, parse_optional_number, parse_optional_text

Job = Literal[
    "admin.", "blue-collar", "entrepreneur", "housemaid", "management", "retired",
    "self-employed", "services", "student", "technician", "unemployed", "unknown",
]
Marital = Literal["married", "single", "divorced"]
Education = Literal["primary", "secondary", "tertiary", "unknown"]
YesNo = Literal["no", "yes"]
Contact = Literal["cellular", "telephone", "unknown"]
Poutcome = Literal["failure", "other", "success", "unknown"]
Month = Literal["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]

# options des listes déroulantes du formulaire (ordre d'affichage)
CATEGORICAL_OPTIONS = {
    "job": list(get_args(Job)),
    "marital": list(get_args(Marital)),
    "education": list(get_args(Education)),
    "default": list(get_args(YesNo)),
    "housing": list(get_args(YesNo)),
    "loan": list(get_args(YesNo)),
    "contact": list(get_args(Contact)),
    "poutcome": list(get_args(Poutcome)),
    "month": list(get_args(Month)),
}

SUBSCRIBED = "Berlangganan"
NOT_SUBSCRIBED = "Tidak Berlangganan"


class PredictRequest(BaseModel):
    age: int
    job: Job
    marital: Marital
    education: Education
    balance: int
    default: YesNo
    housing: YesNo
    loan: YesNo
    contact: Contact
    duration: int
    campaign: int
    pdays: int
    previous: int
    poutcome: Poutcome
    month: Month


class PredictionResult(BaseModel):
    prediction: Literal["yes", "no"]
    probability_yes: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)
    error: Optional[str] = None


class TargetDistributionPoint(BaseModel):
    label: str
    value: float = 0.0

    @field_validator("value", mode="before")
    @classmethod
    def clean_value(cls, v):
        return parse_optional_number(v, default=0.0)


class JobSuccessPoint(BaseModel):
    job: str
    success_rate: float = Field(0.0, description="Pourcentage (0-100)")

    @field_validator("success_rate", mode="before")
    @classmethod
    def clean_rate(cls, v):
        return parse_optional_number(v, default=0.0)


class AgeDistributionPoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    age_group: str
    subscribed: float = Field(0.0, alias=SUBSCRIBED)
    not_subscribed: float = Field(0.0, alias=NOT_SUBSCRIBED)

    @field_validator("subscribed", "not_subscribed", mode="before")
    @classmethod
    def clean_counts(cls, v):
        return parse_optional_number(v, default=0.0)


class BalanceDurationSample(BaseModel):
    balance: float = 0.0
    duration: float = 0.0
    y: Literal["yes", "no"]
    y_label: str = ""

    @field_validator("balance", "duration", mode="before")
    @classmethod
    def clean_numbers(cls, v):
        return parse_optional_number(v, default=0.0)


class ModelInfo(BaseModel):
    """Métadonnées du modèle : tout champ absent ou invalide vaut None (affiché "N/A")."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_name: Optional[str] = None
    model_type: Optional[str] = None
    accuracy: Optional[float] = None
    precision: Optional[float] = None
    recall: Optional[float] = None
    f1_score: Optional[float] = Field(None, alias="F1-Score")
    auc_roc: Optional[float] = Field(None, alias="AUC-ROC")
    cv_folds: Optional[int] = Field(None, alias="CV Folds")
    cv_score: Optional[str] = Field(None, alias="CV Score")

    @field_validator("accuracy", "precision", "recall", "f1_score", "auc_roc", mode="before")
    @classmethod
    def clean_metric(cls, v):
        return parse_optional_number(v)

    @field_validator("cv_folds", mode="before")
    @classmethod
    def clean_folds(cls, v):
        return parse_optional_int(v)

    @field_validator("model_name", "model_type", "cv_score", mode="before")
    @classmethod
    def clean_text(cls, v):
        return parse_optional_text(v)


class DashboardKpis(BaseModel):
    total_customers: int
    overall_success_rate: float = Field(..., description="Pourcentage (0-100)")
    avg_call_duration: float = Field(..., description="Secondes")
    avg_customer_age: float
    simulated: bool = Field(False, description="True si au moins une valeur est un placeholder")


class DashboardData(BaseModel):
    target_distribution: List[TargetDistributionPoint]
    job_success_rate: List[JobSuccessPoint]
    kpis: DashboardKpis


class InsightsData(BaseModel):
    age_distribution: List[AgeDistributionPoint]
    balance_duration_sample: List[BalanceDurationSample]
