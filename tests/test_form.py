import pytest
from pydantic import ValidationError

from bank_client.form import CustomerInputForm, field_label, option_label


def test_defaults():
    form = CustomerInputForm()
    payload = form.to_payload()
    assert len(payload) == 15
    assert payload["age"] == 30
    assert payload["balance"] == 1787
    assert payload["pdays"] == -1
    assert payload["job"] == "admin."
    assert payload["month"] == "jan"


def test_blank_balance_is_submitted_as_zero():
    form = CustomerInputForm()
    form.set_field("balance", "")
    assert form.balance == ""
    assert form.to_payload()["balance"] == 0
    assert form.to_request().balance == 0


def test_numeric_input_parsing():
    form = CustomerInputForm()
    form.set_field("age", "45")
    form.set_field("duration", "12abc")
    form.set_field("campaign", "abc")
    assert form.age == 45
    assert form.duration == 12
    assert form.campaign == ""


def test_categorical_is_stored_and_validated():
    form = CustomerInputForm()
    form.set_field("job", "student")
    assert form.to_request().job == "student"

    form.set_field("job", "astronaut")
    with pytest.raises(ValidationError):
        form.to_request()


def test_unknown_field():
    with pytest.raises(KeyError):
        CustomerInputForm().set_field("salary", "1000")


def test_labels():
    assert field_label("balance") == "Saldo Rekening (€)"
    assert field_label("new_field") == "New Field"
    assert option_label("job", "admin.") == "Administrasi"
    assert option_label("month", "dec") == "Desember"
