from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import openai
from openai import OpenAI

from ..config import load_settings
from ..errors import AuthError, MalformedResponse, MissingCredential, NetworkError, UpstreamError
from ..models import AnalysisResult
from .prompt import SYSTEM_PROMPT, build_prompt
from .schema import RESPONSE_SCHEMA, parse_analysis_result

logger = logging.getLogger(__name__)

SCHEMA_NAME = "bias_audit_report"


def response_format() -> dict[str, Any]:
    return {
        "type": "json_schema",
        "json_schema": {"name": SCHEMA_NAME, "schema": RESPONSE_SCHEMA, "strict": True},
    }


def make_client(api_key: str, base_url: Optional[str] = None) -> OpenAI:
    # No retries: one outbound call per audit.
    return OpenAI(api_key=api_key, base_url=base_url, max_retries=0)


def _map_openai_error(exc: Exception) -> Exception:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthError()
    if isinstance(exc, openai.APIConnectionError):
        # APITimeoutError is a subclass
        return NetworkError()
    message = getattr(exc, "message", None) or str(exc)
    # Some compatible endpoints reject a bad key with a plain 400.
    if isinstance(exc, openai.BadRequestError) and "api key" in message.lower():
        return AuthError()
    return UpstreamError(message)


def generate_bias_audit(
    description: str,
    attributes: Iterable[str],
    api_key: Optional[str],
    *,
    client: Any = None,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> AnalysisResult:
    """Run one bias audit against the language model.

    - Exactly one request, no retry.
    - `client` is anything exposing `chat.completions.create`; built from
      the key when omitted.
    - Raises MissingCredential, AuthError, NetworkError, MalformedResponse or
      UpstreamError.
    """
    attrs = list(attributes)
    key = (api_key or "").strip()
    if not key:
        raise MissingCredential()

    settings = load_settings()
    if client is None:
        client = make_client(key, settings.base_url)
    model = model or settings.model
    temperature = settings.temperature if temperature is None else temperature

    logger.info("Requesting bias audit: model=%s attributes=%d", model, len(attrs))
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(description, attrs)},
            ],
            temperature=temperature,
            response_format=response_format(),
        )
    except openai.OpenAIError as e:
        mapped = _map_openai_error(e)
        logger.warning("Bias audit request failed: %s", type(mapped).__name__)
        raise mapped from e

    try:
        message = resp.choices[0].message
    except (AttributeError, IndexError, TypeError) as e:
        raise MalformedResponse("The model returned no choices.") from e

    refusal = getattr(message, "refusal", None)
    if refusal:
        raise MalformedResponse(f"The model declined to produce a report: {refusal}")

    result = parse_analysis_result(message.content)
    logger.info(
        "Bias audit received: metrics=%d strategies=%d",
        len(result.fairness_metrics),
        len(result.mitigation_strategies),
    )
    return result
