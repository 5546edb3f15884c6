"""LLM integration helpers for the Streamlit front-end.

API Key Priority:
1. st.secrets["OPENAI_API_KEY"] (Streamlit Cloud secrets manager)
2. os.environ["OPENAI_API_KEY"] (local runs)
3. Whatever the user pastes into the form (overrides the above for the session)
"""
import os
from typing import List, Optional

import streamlit as st

from bias_auditor.audit import generate_bias_audit
from bias_auditor.audit.gateway import make_client
from bias_auditor.models import AnalysisResult

LOADING_MESSAGES = [
    "Initializing bias audit...",
    "Implementing quantitative fairness metrics...",
    "Identifying affected demographic groups...",
    "Analyzing statistical representation of bias patterns...",
    "Applying bias mitigation techniques for comparison...",
    "Connecting findings to real-world implications...",
    "Generating ethics framework and recommendations...",
    "Finalizing your comprehensive report...",
]


def _secret(name: str) -> Optional[str]:
    try:
        if name in st.secrets:
            return st.secrets[name]
    except FileNotFoundError:
        # No secrets.toml configured for this deployment.
        return None
    return None


def get_openai_api_key() -> Optional[str]:
    """Pre-configured key used to pre-fill the form, or None."""
    return _secret("OPENAI_API_KEY") or os.environ.get("OPENAI_API_KEY")


def get_openai_base_url() -> Optional[str]:
    """Get OpenAI base URL if configured."""
    return _secret("OPENAI_BASE_URL") or os.environ.get("OPENAI_BASE_URL")


def run_audit(description: str, attributes: List[str], api_key: str) -> AnalysisResult:
    """Gateway used by the form: one request, honouring a configured base URL."""
    key = (api_key or "").strip()
    base_url = get_openai_base_url()
    client = make_client(key, base_url) if key and base_url else None
    return generate_bias_audit(description, attributes, key, client=client)
