from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import matplotlib
import pytest

matplotlib.use("Agg")

from bias_auditor.models import AnalysisResult

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def audit_payload() -> dict[str, Any]:
    return json.loads((FIXTURES / "loan_audit.json").read_text(encoding="utf-8"))


@pytest.fixture()
def audit_result(audit_payload: dict[str, Any]) -> AnalysisResult:
    return AnalysisResult.model_validate(copy.deepcopy(audit_payload))
