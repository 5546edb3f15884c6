"""Report rendering: the section tree and its score charts."""

from .charts import SCORE_DOMAIN, bar_chart, chart_figure
from .layout import (
    DISPARITY_COLOR,
    IMPROVEMENT_COLOR,
    Chart,
    Panel,
    ReportView,
    Section,
    build_report_view,
)

__all__ = [
    "Chart",
    "DISPARITY_COLOR",
    "IMPROVEMENT_COLOR",
    "Panel",
    "ReportView",
    "SCORE_DOMAIN",
    "Section",
    "bar_chart",
    "build_report_view",
    "chart_figure",
]
