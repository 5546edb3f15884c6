"""UI components for the AI Bias Auditor."""
from .header import render_report_header
from .config_form import clear_widget_state, render_config_form
from .dashboard import render_dashboard
from .exports import render_export_bar

__all__ = [
    "clear_widget_state",
    "render_config_form",
    "render_dashboard",
    "render_export_bar",
    "render_report_header",
]
