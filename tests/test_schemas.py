import pytest
from pydantic import ValidationError

from bank_client.schemas import (
    AgeDistributionPoint,
    BalanceDurationSample,
    JobSuccessPoint,
    ModelInfo,
    PredictionResult,
    TargetDistributionPoint,
)


def test_balance_duration_nan_becomes_zero():
    s = BalanceDurationSample.model_validate({"balance": float("nan"), "duration": 120, "y": "no", "y_label": "Tidak"})
    assert s.balance == 0.0
    assert s.duration == 120.0


def test_balance_duration_missing_fields_become_zero():
    s = BalanceDurationSample.model_validate({"y": "yes"})
    assert (s.balance, s.duration) == (0.0, 0.0)


def test_model_info_invalid_metric_is_unknown():
    info = ModelInfo.model_validate({"model_name": "XGB", "accuracy": "not-a-number"})
    assert info.accuracy is None
    assert info.model_name == "XGB"
    assert info.model_type is None


def test_model_info_aliases_and_coercion():
    info = ModelInfo.model_validate(
        {
            "model_name": "XGB",
            "model_type": "XGBClassifier",
            "precision": "0.501",
            "F1-Score": 0.59,
            "AUC-ROC": "nan",
            "CV Folds": "5",
            "CV Score": "",
        }
    )
    assert info.precision == pytest.approx(0.501)
    assert info.f1_score == pytest.approx(0.59)
    assert info.auc_roc is None
    assert info.cv_folds == 5
    assert info.cv_score is None


def test_age_distribution_aliases():
    p = AgeDistributionPoint.model_validate({"age_group": "<30", "Berlangganan": 10, "Tidak Berlangganan": None})
    assert p.subscribed == 10.0
    assert p.not_subscribed == 0.0


def test_target_and_job_points_are_cleaned():
    assert TargetDistributionPoint.model_validate({"label": "x", "value": "abc"}).value == 0.0
    assert JobSuccessPoint.model_validate({"job": "student", "success_rate": "28.7"}).success_rate == 28.7


def test_prediction_result_rejects_out_of_range_probability():
    with pytest.raises(ValidationError):
        PredictionResult.model_validate({"prediction": "yes", "probability_yes": 1.5})
    with pytest.raises(ValidationError):
        PredictionResult.model_validate({"prediction": "maybe", "probability_yes": 0.5})


def test_model_info_text_with_numeric_prefix_is_unknown():
    info = ModelInfo.model_validate({"accuracy": "0.88 (test)", "CV Folds": "5 folds"})
    assert info.accuracy is None
    assert info.cv_folds is None
