from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..models import AnalysisResult, FairnessMetricScore

DISPARITY_COLOR = "#ef4444"
IMPROVEMENT_COLOR = "#4ade80"

REPORT_TITLE = "Bias Audit Report"


@dataclass(frozen=True)
class Chart:
    """One horizontal bar chart over the fixed [0, 1] score domain."""

    title: str
    groups: tuple[str, ...]
    scores: tuple[float, ...]
    color: str = DISPARITY_COLOR

    @classmethod
    def from_scores(cls, title: str, scores: Iterable[FairnessMetricScore], color: str = DISPARITY_COLOR) -> "Chart":
        items = list(scores)
        return cls(
            title=title,
            groups=tuple(s.group for s in items),
            scores=tuple(float(s.score) for s in items),
            color=color,
        )


@dataclass(frozen=True)
class Panel:
    """A titled block inside a section: text and/or charts."""

    title: str
    text: str = ""
    caption: str = ""
    charts: tuple[Chart, ...] = ()


@dataclass(frozen=True)
class Section:
    """
    kind is one of:
      text     - body paragraph
      charts   - panels, one chart each (metric grid)
      compare  - panels with a before/after chart pair
      bullets  - items rendered as a list
      entries  - panels with a heading and a description
    """

    key: str
    title: str
    kind: str
    text: str = ""
    items: tuple[str, ...] = ()
    panels: tuple[Panel, ...] = ()
    column: str = "main"


@dataclass(frozen=True)
class ReportView:
    title: str
    subject: str
    attributes: tuple[str, ...]
    sections: tuple[Section, ...] = field(default_factory=tuple)

    @property
    def subtitle(self) -> str:
        return f"Analysis of: {self.subject} for attributes: {', '.join(self.attributes)}."

    def section(self, key: str) -> Optional[Section]:
        for s in self.sections:
            if s.key == key:
                return s
        return None

    def column(self, name: str) -> list[Section]:
        return [s for s in self.sections if s.column == name]

    def charts(self) -> list[Chart]:
        return [c for s in self.sections for p in s.panels for c in p.charts]


def build_report_view(result: AnalysisResult, description: str, attributes: Iterable[str]) -> ReportView:
    """Lay out an audit result as a tree of report sections.

    Pure: the result is only read. Lists keep the order the model produced.
    """
    metric_panels = tuple(
        Panel(title=m.name, caption=m.description, charts=(Chart.from_scores(m.name, m.scores),))
        for m in result.fairness_metrics
    )
    strategy_panels = tuple(
        Panel(
            title=s.name,
            text=s.description,
            caption=f"Effect on {s.metric_name}:",
            charts=(
                Chart.from_scores("Before", s.before, DISPARITY_COLOR),
                Chart.from_scores("After", s.after, IMPROVEMENT_COLOR),
            ),
        )
        for s in result.mitigation_strategies
    )
    principle_panels = tuple(Panel(title=p.name, text=p.description) for p in result.ethics_framework.principles)

    sections = (
        Section("summary", "Executive Summary", "text", text=result.summary),
        Section("metrics", "Quantitative Fairness Metrics", "charts", panels=metric_panels),
        Section("mitigation", "Bias Mitigation Strategies", "compare", panels=strategy_panels),
        Section("ethics_statement", "Ethics Statement", "text", text=result.ethics_statement),
        Section(
            "implications", "Real-World Implications", "text", text=result.real_world_implications, column="side"
        ),
        Section(
            "recommendations",
            "Dataset Recommendations",
            "bullets",
            items=tuple(result.dataset_recommendations),
            column="side",
        ),
        Section("framework", result.ethics_framework.title, "entries", panels=principle_panels, column="side"),
        Section("references", "References", "bullets", items=tuple(result.references), column="side"),
    )
    return ReportView(
        title=REPORT_TITLE,
        subject=description.strip(),
        attributes=tuple(attributes),
        sections=sections,
    )
