from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.4

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings resolved from the environment.

    api_key: OpenAI credential, may be None until the user pastes one
    base_url: optional OpenAI-compatible endpoint
    model / temperature: completion parameters for the audit request
    """
    api_key: Optional[str]
    base_url: Optional[str]
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    log_level: str = "INFO"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    try:
        temperature = float(env.get("BIAS_AUDITOR_TEMPERATURE", DEFAULT_TEMPERATURE))
    except ValueError:
        temperature = DEFAULT_TEMPERATURE

    return Settings(
        api_key=_clean(env.get("OPENAI_API_KEY")),
        base_url=_clean(env.get("OPENAI_BASE_URL")),
        model=_clean(env.get("BIAS_AUDITOR_MODEL")) or DEFAULT_MODEL,
        temperature=temperature,
        log_level=(_clean(env.get("BIAS_AUDITOR_LOG_LEVEL")) or "INFO").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Idempotent root logging setup for the Streamlit process."""
    resolved = level or load_settings().log_level
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=LOG_FORMAT)
