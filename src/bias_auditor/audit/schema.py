from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from ..errors import MalformedResponse
from ..models import AnalysisResult

logger = logging.getLogger(__name__)


def _obj(properties: dict[str, Any], description: str | None = None) -> dict[str, Any]:
    # Strict structured output needs every property required and no extras.
    schema: dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "required": list(properties.keys()),
        "additionalProperties": False,
    }
    if description:
        schema["description"] = description
    return schema


def _array(items: dict[str, Any], description: str | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "array", "items": items}
    if description:
        schema["description"] = description
    return schema


def _string(description: str | None = None) -> dict[str, Any]:
    return {"type": "string", "description": description} if description else {"type": "string"}


def _score(group_hint: bool = False) -> dict[str, Any]:
    if group_hint:
        return _obj(
            {
                "group": _string("The demographic group (e.g., 'Male', 'Female')."),
                "score": {"type": "number", "description": "The metric score for this group (between 0 and 1)."},
            }
        )
    return _obj({"group": _string(), "score": {"type": "number"}})


RESPONSE_SCHEMA: dict[str, Any] = _obj(
    {
        "summary": _string("A high-level executive summary of the bias audit findings."),
        "fairness_metrics": _array(
            _obj(
                {
                    "name": _string("Name of the fairness metric (e.g., 'Equal Opportunity Difference')."),
                    "description": _string("A brief explanation of what the metric measures."),
                    "scores": _array(_score(group_hint=True), "Scores for different demographic groups."),
                }
            ),
            "An array of quantitative fairness metrics.",
        ),
        "mitigation_strategies": _array(
            _obj(
                {
                    "name": _string("Name of the mitigation strategy."),
                    "description": _string("Detailed description of how to implement the strategy."),
                    "metric_name": _string("The primary metric this strategy aims to improve."),
                    "before_after_metrics": _obj(
                        {"before": _array(_score()), "after": _array(_score())},
                        "Simulated metric scores before and after applying the strategy.",
                    ),
                }
            ),
            "Proposed strategies to mitigate the identified biases.",
        ),
        "dataset_recommendations": _array(
            _string(),
            "Specific, actionable recommendations for improving the dataset to reduce bias.",
        ),
        "real_world_implications": _string(
            "A narrative on the potential real-world impact and ethical consequences of the identified biases."
        ),
        "ethics_framework": _obj(
            {
                "title": _string("The title of the ethical framework."),
                "principles": _array(
                    _obj(
                        {
                            "name": _string("Name of the ethical principle."),
                            "description": _string("Description of the principle."),
                        }
                    )
                ),
            },
            "An ethical framework to guide the responsible use of the model.",
        ),
        "ethics_statement": _string("A formal ethics statement regarding the model's development and deployment."),
        "references": _array(_string(), "A list of academic papers or resources relevant to the analysis."),
    }
)

REQUIRED_FIELDS: tuple[str, ...] = tuple(RESPONSE_SCHEMA["required"])


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def validate_result_obj(obj: Any) -> AnalysisResult:
    """Validate a decoded reply and build the typed result.

    Raises MalformedResponse when the reply is not an object, when summary or
    fairness_metrics are missing/empty, or when the typed model rejects it.
    """
    if not isinstance(obj, Mapping):
        raise MalformedResponse("The model response was not a JSON object.")

    for field in ("summary", "fairness_metrics"):
        if _is_blank(obj.get(field)):
            raise MalformedResponse(f"The model response is missing '{field}'. Please run the analysis again.")

    try:
        return AnalysisResult.model_validate(obj)
    except PydanticValidationError as e:
        logger.warning("Model response failed typed validation: %d error(s)", e.error_count())
        raise MalformedResponse(
            f"The model response does not match the report format ({e.error_count()} problem(s))."
        ) from e


def parse_analysis_result(text: str | None) -> AnalysisResult:
    """Parse the raw reply text (expected to hold only JSON)."""
    raw = (text or "").strip()
    if not raw:
        raise MalformedResponse("The model returned an empty response.")
    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"The model returned invalid JSON: {e.msg} (line {e.lineno}).") from e
    return validate_result_obj(obj)
