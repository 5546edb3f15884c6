"""Export controls. They sit outside the rasterized report body."""
import streamlit as st

from bias_auditor.errors import ExportError
from bias_auditor.export import (
    JSON_FILENAME,
    METRICS_CSV_FILENAME,
    MITIGATION_CSV_FILENAME,
    PDF_FILENAME,
    build_pdf,
    metrics_to_csv,
    mitigation_to_csv,
    to_json,
)
from bias_auditor.models import AnalysisResult
from bias_auditor.report import ReportView


def render_export_bar(result: AnalysisResult, view: ReportView):
    """
    Render download buttons for the current report.

    Args:
        result: The in-memory audit result
        view: The report view, rasterized for the PDF export
    """
    st.markdown("**Export report**")
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.download_button(
            label="Download JSON",
            data=to_json(result),
            file_name=JSON_FILENAME,
            mime="application/json",
            key="export_json",
        )

    with col2:
        st.download_button(
            label="Metrics CSV",
            data=metrics_to_csv(result),
            file_name=METRICS_CSV_FILENAME,
            mime="text/csv",
            key="export_metrics_csv",
        )

    with col3:
        st.download_button(
            label="Mitigation CSV",
            data=mitigation_to_csv(result),
            file_name=MITIGATION_CSV_FILENAME,
            mime="text/csv",
            key="export_mitigation_csv",
        )

    with col4:
        if st.button("Prepare PDF", key="export_pdf_prepare"):
            with st.spinner("Rendering PDF..."):
                try:
                    st.session_state["export_pdf_bytes"] = build_pdf(view)
                except ExportError as e:
                    st.session_state.pop("export_pdf_bytes", None)
                    st.error(e.message)
        pdf = st.session_state.get("export_pdf_bytes")
        if pdf:
            st.download_button(
                label="Download PDF",
                data=pdf,
                file_name=PDF_FILENAME,
                mime="application/pdf",
                key="export_pdf_download",
            )
