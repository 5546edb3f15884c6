from __future__ import annotations

import csv
import io
import json

from bias_auditor.export import METRICS_HEADER, MITIGATION_HEADER, metrics_to_csv, mitigation_to_csv, to_json
from bias_auditor.models import AnalysisResult


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


def test_json_export_round_trips(audit_result: AnalysisResult) -> None:
    text = to_json(audit_result)
    assert text.startswith("{\n  ")
    assert AnalysisResult.model_validate(json.loads(text)) == audit_result


def test_json_export_keeps_non_ascii(audit_result: AnalysisResult) -> None:
    result = audit_result.model_copy(update={"summary": "Écart de parité"})
    assert "Écart de parité" in to_json(result)


def test_metrics_csv_header_is_exact_and_quoted(audit_result: AnalysisResult) -> None:
    text = metrics_to_csv(audit_result)
    assert text.splitlines()[0] == '"Metric Name","Group","Score"'
    assert text.splitlines()[1] == '"Demographic Parity","Male","0.72"'
    assert tuple(_rows(text)[0]) == METRICS_HEADER


def test_metrics_csv_has_one_row_per_group_score(audit_result: AnalysisResult) -> None:
    # Loan Application Model audited for Gender and Race: 3 metrics x 2 groups.
    rows = _rows(metrics_to_csv(audit_result))
    expected = sum(len(m.scores) for m in audit_result.fairness_metrics)
    assert expected == 6
    assert len(rows) == 1 + expected


def test_mitigation_csv_lists_before_then_after(audit_result: AnalysisResult) -> None:
    text = mitigation_to_csv(audit_result)
    assert text.splitlines()[0] == '"Strategy Name","Metric Name","Status","Group","Score"'
    rows = _rows(text)
    assert tuple(rows[0]) == MITIGATION_HEADER
    assert len(rows) == 1 + 8
    first = rows[1:5]
    assert [r[2] for r in first] == ["Before", "Before", "After", "After"]
    assert first[0] == ["Re-weighing", "Demographic Parity", "Before", "Male", "0.72"]


def test_csv_quotes_embedded_quotes_and_commas(audit_result: AnalysisResult) -> None:
    metric = audit_result.fairness_metrics[0].model_copy(update={"name": 'Parity, "strict"'})
    result = audit_result.model_copy(update={"fairness_metrics": [metric]})
    text = metrics_to_csv(result)
    assert text.splitlines()[1].startswith('"Parity, ""strict""","Male"')
    assert _rows(text)[1][0] == 'Parity, "strict"'
