from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import httpx
import openai
import pytest

from bias_auditor.audit import build_prompt, generate_bias_audit
from bias_auditor.errors import AuthError, MalformedResponse, MissingCredential, NetworkError, UpstreamError

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class FakeClient:
    """Stands in for openai.OpenAI; records every create() call."""

    def __init__(self, content: str | None = None, error: Exception | None = None, refusal: str | None = None):
        self.calls: list[dict[str, Any]] = []
        self._content = content
        self._error = error
        self._refusal = refusal
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        message = SimpleNamespace(content=self._content, refusal=self._refusal)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _run(client: FakeClient, api_key: str | None = "sk-test"):
    return generate_bias_audit(
        "Loan Application Model",
        ["Gender", "Race"],
        api_key,
        client=client,
        model="test-model",
    )


def test_success_makes_exactly_one_schema_constrained_call(audit_payload: dict[str, Any]) -> None:
    client = FakeClient(content=json.dumps(audit_payload))
    result = _run(client)

    assert result.summary.startswith("The loan approval model")
    assert len(client.calls) == 1
    call = client.calls[0]
    assert call["model"] == "test-model"
    fmt = call["response_format"]
    assert fmt["type"] == "json_schema"
    assert fmt["json_schema"]["strict"] is True
    user = call["messages"][-1]["content"]
    assert "Loan Application Model" in user
    assert "Gender, Race" in user


def test_missing_credential_makes_no_call() -> None:
    client = FakeClient(content="{}")
    with pytest.raises(MissingCredential):
        _run(client, api_key="  ")
    assert client.calls == []


def test_auth_failure_maps_to_auth_error() -> None:
    err = openai.AuthenticationError(
        "Incorrect API key provided", response=httpx.Response(401, request=REQUEST), body=None
    )
    with pytest.raises(AuthError) as ei:
        _run(FakeClient(error=err))
    assert ei.value.__cause__ is err


def test_permission_denied_maps_to_auth_error() -> None:
    err = openai.PermissionDeniedError(
        "Project does not have access", response=httpx.Response(403, request=REQUEST), body=None
    )
    with pytest.raises(AuthError):
        _run(FakeClient(error=err))


def test_bad_request_naming_the_key_maps_to_auth_error() -> None:
    err = openai.BadRequestError("API key not valid", response=httpx.Response(400, request=REQUEST), body=None)
    with pytest.raises(AuthError):
        _run(FakeClient(error=err))


def test_key_mention_in_other_failures_stays_upstream() -> None:
    err = openai.RateLimitError(
        "Rate limit reached for this API key", response=httpx.Response(429, request=REQUEST), body=None
    )
    with pytest.raises(UpstreamError) as ei:
        _run(FakeClient(error=err))
    assert "Rate limit" in str(ei.value)


def test_missing_choices_is_malformed() -> None:
    class NoChoices(FakeClient):
        def _create(self, **kwargs: Any) -> Any:
            self.calls.append(kwargs)
            return SimpleNamespace(choices=None)

    with pytest.raises(MalformedResponse):
        _run(NoChoices())


@pytest.mark.parametrize("err", [openai.APIConnectionError(request=REQUEST), openai.APITimeoutError(request=REQUEST)])
def test_transport_failure_maps_to_network_error(err: Exception) -> None:
    client = FakeClient(error=err)
    with pytest.raises(NetworkError):
        _run(client)
    assert len(client.calls) == 1


def test_other_upstream_failure_keeps_message() -> None:
    err = openai.InternalServerError("model overloaded", response=httpx.Response(500, request=REQUEST), body=None)
    with pytest.raises(UpstreamError) as ei:
        _run(FakeClient(error=err))
    assert "model overloaded" in str(ei.value)


def test_unparsable_reply_is_malformed() -> None:
    with pytest.raises(MalformedResponse):
        _run(FakeClient(content="Here is your audit: {"))


def test_refusal_is_malformed() -> None:
    with pytest.raises(MalformedResponse) as ei:
        _run(FakeClient(content=None, refusal="I can't help with that."))
    assert "declined" in str(ei.value)


def test_prompt_states_required_content() -> None:
    prompt = build_prompt("  A hiring model.  ", ["Age"])
    assert "A hiring model." in prompt
    assert "Age" in prompt
    assert "at least 3" in prompt
    assert "exactly 2" in prompt
    assert "400-500 words" in prompt
