from __future__ import annotations

import csv
import io
import json
from typing import Iterable, Sequence

from ..models import AnalysisResult

JSON_FILENAME = "bias_audit_report.json"
METRICS_CSV_FILENAME = "fairness_metrics.csv"
MITIGATION_CSV_FILENAME = "mitigation_strategies.csv"

METRICS_HEADER = ("Metric Name", "Group", "Score")
MITIGATION_HEADER = ("Strategy Name", "Metric Name", "Status", "Group", "Score")


def to_json(result: AnalysisResult) -> str:
    """Whole result, pretty-printed; validating it back yields an equal object."""
    return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"


def _write_csv(header: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buf.getvalue()


def metric_rows(result: AnalysisResult) -> list[tuple[str, str, float]]:
    return [(m.name, s.group, s.score) for m in result.fairness_metrics for s in m.scores]


def mitigation_rows(result: AnalysisResult) -> list[tuple[str, str, str, str, float]]:
    rows: list[tuple[str, str, str, str, float]] = []
    for strategy in result.mitigation_strategies:
        for status, scores in (("Before", strategy.before), ("After", strategy.after)):
            rows.extend((strategy.name, strategy.metric_name, status, s.group, s.score) for s in scores)
    return rows


def metrics_to_csv(result: AnalysisResult) -> str:
    return _write_csv(METRICS_HEADER, metric_rows(result))


def mitigation_to_csv(result: AnalysisResult) -> str:
    return _write_csv(MITIGATION_HEADER, mitigation_rows(result))
