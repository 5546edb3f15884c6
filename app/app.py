"""AI Bias Auditor - Streamlit UI"""
import random
import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from bias_auditor.config import configure_logging
from bias_auditor.form import AuditForm, FormStatus
from bias_auditor.report import build_report_view
from llm_utils import LOADING_MESSAGES, get_openai_api_key, run_audit
from ui_components import (
    clear_widget_state,
    render_config_form,
    render_dashboard,
    render_export_bar,
    render_report_header,
)

st.set_page_config(
    page_title="AI Bias Auditor",
    page_icon="⚖️",
    layout="wide"
)

FORM_KEY = "audit_form"


def get_form() -> AuditForm:
    """The one AuditForm held for this browser session."""
    if FORM_KEY not in st.session_state:
        st.session_state[FORM_KEY] = AuditForm(default_api_key=get_openai_api_key() or "")
    return st.session_state[FORM_KEY]


def reset_analysis():
    """Discard the result and restore every form field to its default."""
    get_form().reset()
    clear_widget_state()
    st.session_state.pop("export_pdf_bytes", None)


def render_report(form: AuditForm):
    view = build_report_view(form.result, form.resolved_description, form.selected_attributes())
    render_report_header(view, on_reset=reset_analysis)
    render_export_bar(form.result, view)
    st.markdown("---")
    render_dashboard(view)


def render_configuration(form: AuditForm):
    submitted = render_config_form(form)
    if submitted and form.can_submit:
        with st.spinner(f"Analyzing... {random.choice(LOADING_MESSAGES)}"):
            form.submit(run_audit)
        st.rerun()


def main():
    configure_logging()

    st.title("⚖️ AI Bias Auditor")
    st.caption("Fairness audits for datasets and models, drafted by a language model")

    form = get_form()

    if form.status is FormStatus.SHOWING and form.result is not None:
        render_report(form)
    else:
        render_configuration(form)


if __name__ == "__main__":
    main()
