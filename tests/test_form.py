from __future__ import annotations

import itertools

import pytest

from bias_auditor.errors import MissingCredential, NetworkError, ValidationError
from bias_auditor.form import AuditForm, FormStatus, default_dataset_choice
from bias_auditor.models import CUSTOM_DATASET, DEFAULT_ATTRIBUTES, AnalysisResult


def _defaults(form: AuditForm, key: str = "") -> None:
    assert form.dataset_choice == default_dataset_choice()
    assert form.custom_dataset == ""
    assert form.attributes == set(DEFAULT_ATTRIBUTES)
    assert form.api_key == key
    assert form.status is FormStatus.IDLE
    assert form.result is None
    assert form.error is None


def test_new_form_starts_at_defaults() -> None:
    _defaults(AuditForm())
    _defaults(AuditForm(default_api_key="sk-env"), key="sk-env")


@pytest.mark.parametrize(
    "key,attrs,custom,custom_text",
    list(itertools.product(["", "sk-x"], [set(), {"Age"}], [False, True], ["", "  ", "A scoring model"])),
)
def test_submit_enabled_iff_all_guards_pass(key: str, attrs: set[str], custom: bool, custom_text: str) -> None:
    form = AuditForm(api_key=key, attributes=set(attrs), custom_dataset=custom_text)
    if custom:
        form.dataset_choice = CUSTOM_DATASET
    description_ok = bool(custom_text.strip()) if custom else True
    assert form.can_submit == (bool(key) and bool(attrs) and description_ok)


def test_resolved_description_uses_custom_text_only_when_chosen() -> None:
    form = AuditForm(custom_dataset="  My model ")
    assert form.resolved_description == default_dataset_choice()
    form.dataset_choice = CUSTOM_DATASET
    assert form.resolved_description == "My model"


def test_validate_messages() -> None:
    form = AuditForm()
    with pytest.raises(MissingCredential):
        form.validate()
    form.api_key = "sk-x"
    form.attributes.clear()
    with pytest.raises(ValidationError, match="at least one protected attribute"):
        form.validate()
    form.toggle_attribute("Race")
    form.dataset_choice = CUSTOM_DATASET
    with pytest.raises(ValidationError, match="custom dataset"):
        form.validate()


def test_successful_submit_shows_result(audit_result: AnalysisResult) -> None:
    calls = []

    def gateway(description, attributes, api_key):
        calls.append((description, attributes, api_key))
        return audit_result

    form = AuditForm(api_key=" sk-x ", attributes={"Race", "Gender"})
    assert form.submit(gateway) is FormStatus.SHOWING
    assert form.result is audit_result
    assert form.error is None
    assert calls == [(default_dataset_choice(), ["Gender", "Race"], "sk-x")]


def test_gateway_failure_keeps_configuration_editable() -> None:
    def gateway(description, attributes, api_key):
        raise NetworkError()

    form = AuditForm(api_key="sk-x", custom_dataset="kept")
    assert form.submit(gateway) is FormStatus.FAILED
    assert form.result is None
    assert "network error" in form.error
    assert form.custom_dataset == "kept"
    assert form.can_submit


def test_unexpected_gateway_error_still_fails_cleanly() -> None:
    def gateway(description, attributes, api_key):
        raise TypeError("unexpected")

    form = AuditForm(api_key="sk-x")
    assert form.submit(gateway) is FormStatus.FAILED
    assert form.status is not FormStatus.SUBMITTING
    assert form.result is None
    assert "unexpected" in form.error
    assert form.can_submit


def test_guard_failure_never_calls_gateway() -> None:
    def gateway(description, attributes, api_key):
        raise AssertionError("gateway must not be called")

    form = AuditForm()
    assert form.submit(gateway) is FormStatus.FAILED
    assert form.error == "Please provide your API key."


def test_submit_ignored_while_outstanding(audit_result: AnalysisResult) -> None:
    form = AuditForm(api_key="sk-x")
    form.status = FormStatus.SUBMITTING
    assert not form.can_submit
    assert form.submit(lambda *a: audit_result) is FormStatus.SUBMITTING
    assert form.result is None


def test_toggle_attribute() -> None:
    form = AuditForm()
    form.toggle_attribute("Age")
    form.toggle_attribute("Gender")
    assert form.attributes == {"Race", "Age"}
    assert form.selected_attributes() == ["Race", "Age"]


@pytest.mark.parametrize("status", list(FormStatus))
def test_reset_restores_defaults_from_any_state(status: FormStatus, audit_result: AnalysisResult) -> None:
    form = AuditForm(default_api_key="sk-env")
    form.dataset_choice = CUSTOM_DATASET
    form.custom_dataset = "something"
    form.attributes = {"Religion"}
    form.api_key = "sk-typed"
    form.status = status
    form.result = audit_result
    form.error = "boom"

    form.reset()
    _defaults(form, key="sk-env")
