"""Audit configuration form bound to an AuditForm in session state."""
import streamlit as st

from bias_auditor.form import AuditForm, FormStatus
from bias_auditor.models import CUSTOM_DATASET, DEFAULT_DATASETS, PROTECTED_ATTRIBUTES

DATASET_NAMES = {d["description"]: d["name"] for d in DEFAULT_DATASETS}
DATASET_NAMES[CUSTOM_DATASET] = "Custom Dataset/Model"

# Widget keys owned by the form; cleared on reset so widgets show defaults again.
WIDGET_KEYS = ("cfg_dataset", "cfg_custom", "cfg_api_key") + tuple(f"cfg_attr_{a}" for a in PROTECTED_ATTRIBUTES)


def clear_widget_state():
    for key in WIDGET_KEYS:
        st.session_state.pop(key, None)


def render_config_form(form: AuditForm) -> bool:
    """
    Render the three configuration steps and the run button.

    Args:
        form: Session-held form state; widget values are written back to it

    Returns:
        True when "Run Bias Analysis" was pressed on this rerun.
    """
    st.header("AI Bias Audit Configuration")
    st.caption("Configure your bias analysis by selecting a dataset and the protected attributes you want to examine.")

    st.subheader("1. Select or Describe Your Dataset/Model")
    options = [d["description"] for d in DEFAULT_DATASETS] + [CUSTOM_DATASET]
    form.dataset_choice = st.selectbox(
        "Dataset/Model",
        options,
        index=options.index(form.dataset_choice) if form.dataset_choice in options else 0,
        format_func=lambda x: DATASET_NAMES.get(x, x),
        key="cfg_dataset",
        label_visibility="collapsed",
    )
    if form.is_custom:
        form.custom_dataset = st.text_area(
            "Custom description",
            value=form.custom_dataset,
            placeholder="e.g., A predictive model for loan approvals using applicant's income, credit score, age, and employment history.",
            height=100,
            key="cfg_custom",
        )
    else:
        st.caption(form.dataset_choice)

    st.subheader("2. Choose Protected Attributes for Analysis")
    cols = st.columns(3)
    for i, attr in enumerate(PROTECTED_ATTRIBUTES):
        with cols[i % 3]:
            st.checkbox(
                attr,
                value=attr in form.attributes,
                key=f"cfg_attr_{attr}",
                on_change=form.toggle_attribute,
                args=(attr,),
            )

    st.subheader("3. Provide Your API Key")
    form.api_key = st.text_input(
        "API key",
        value=form.api_key,
        type="password",
        placeholder="Enter your OpenAI API key",
        key="cfg_api_key",
    )
    st.caption("Your key is used only for this session and is not stored. Using secrets or environment variables is recommended for production.")

    if form.status is FormStatus.FAILED and form.error:
        st.error(form.error)

    return st.button(
        "Run Bias Analysis",
        type="primary",
        disabled=not form.can_submit,
        key="run_analysis",
    )
