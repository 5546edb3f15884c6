from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_DATASETS: list[dict[str, str]] = [
    {
        "name": "Loan Application Model",
        "description": "A model that predicts loan approval based on income, credit score, age, and employment history.",
    },
    {
        "name": "Hiring Algorithm Data",
        "description": "A dataset used to train an algorithm for screening job applicants based on resume keywords, education, and past experience.",
    },
    {
        "name": "Criminal Recidivism Prediction",
        "description": "A model that predicts the likelihood of a defendant re-offending, used for sentencing and parole decisions.",
    },
]

PROTECTED_ATTRIBUTES: list[str] = [
    "Gender",
    "Race",
    "Age",
    "Religion",
    "Disability",
    "Sexual Orientation",
]

DEFAULT_ATTRIBUTES: frozenset[str] = frozenset({"Gender", "Race"})

# Dataset choice that switches the form to the free-text description.
CUSTOM_DATASET = "custom"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class FairnessMetricScore(_Record):
    """Score for one demographic group, conventionally in [0, 1]."""

    group: str
    score: float


class FairnessMetric(_Record):
    name: str
    description: str
    scores: list[FairnessMetricScore]

    @field_validator("scores")
    @classmethod
    def _groups_unique(cls, v: list[FairnessMetricScore]) -> list[FairnessMetricScore]:
        seen: set[str] = set()
        for s in v:
            if s.group in seen:
                raise ValueError(f"duplicate group label {s.group!r}")
            seen.add(s.group)
        return v


class BeforeAfterMetrics(_Record):
    """Simulated scores around a mitigation. Lists are aligned by group by convention only."""

    before: list[FairnessMetricScore]
    after: list[FairnessMetricScore]


class MitigationStrategy(_Record):
    name: str
    description: str
    metric_name: str
    before_after_metrics: BeforeAfterMetrics

    @property
    def before(self) -> list[FairnessMetricScore]:
        return self.before_after_metrics.before

    @property
    def after(self) -> list[FairnessMetricScore]:
        return self.before_after_metrics.after


class EthicsPrinciple(_Record):
    name: str
    description: str


class EthicsFramework(_Record):
    title: str
    principles: list[EthicsPrinciple]


class AnalysisResult(_Record):
    """
    A complete bias audit as returned by the model.

    Created in one piece from a single gateway call and never updated
    afterwards; a new audit replaces the whole object.
    """

    summary: str = Field(..., min_length=1)
    fairness_metrics: list[FairnessMetric] = Field(..., min_length=1)
    mitigation_strategies: list[MitigationStrategy]
    dataset_recommendations: list[str]
    real_world_implications: str
    ethics_framework: EthicsFramework
    ethics_statement: str
    references: list[str]
