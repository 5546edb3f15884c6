"""Shared report header component."""
import streamlit as st

from bias_auditor.report import ReportView
from style_utils import report_banner


def render_report_header(view: ReportView, on_reset=None):
    """
    Render the report title block with the reset control.

    Args:
        view: Report view built from the current result
        on_reset: Callback for the "Start New Analysis" button
    """
    col1, col2 = st.columns([5, 1])

    with col1:
        report_banner(view.title, view.subtitle)

    with col2:
        st.button(
            "Start New Analysis",
            on_click=on_reset,
            key="reset_analysis",
            width="stretch",
        )
