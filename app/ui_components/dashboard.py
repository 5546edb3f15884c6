"""Report dashboard: renders a ReportView as cards and charts."""
import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from bias_auditor.report import ReportView, Section, chart_figure
from bias_auditor.report.layout import Chart
from style_utils import card_title, format_score, md, status_label

METRICS_PER_ROW = 3


def render_chart(chart: Chart, width: float = 4.0):
    """Draw one score chart and release the figure."""
    fig = chart_figure(chart, width=width)
    st.pyplot(fig)
    plt.close(fig)


def scores_frame(chart: Chart) -> pd.DataFrame:
    return pd.DataFrame({"Group": list(chart.groups), "Score": [format_score(s) for s in chart.scores]})


def render_text_section(section: Section):
    st.markdown(md(section.text))


def render_metric_grid(section: Section):
    panels = list(section.panels)
    for start in range(0, len(panels), METRICS_PER_ROW):
        row = panels[start:start + METRICS_PER_ROW]
        cols = st.columns(METRICS_PER_ROW)
        for col, panel in zip(cols, row):
            with col:
                st.markdown(f"**{md(panel.title)}**")
                st.caption(md(panel.caption))
                for chart in panel.charts:
                    render_chart(chart, width=3.2)
                    with st.expander("Scores"):
                        st.dataframe(scores_frame(chart), hide_index=True, width="stretch")


def render_comparisons(section: Section):
    for panel in section.panels:
        with st.container(border=True):
            st.markdown(f"**{md(panel.title)}**")
            st.markdown(md(panel.text))
            st.markdown(f"*{md(panel.caption)}*")
            cols = st.columns(len(panel.charts) or 1)
            for col, chart in zip(cols, panel.charts):
                with col:
                    status_label(chart.title, chart.color)
                    render_chart(chart)


def render_bullets(section: Section):
    if not section.items:
        st.caption("None provided.")
        return
    st.markdown("\n".join(f"- {md(item)}" for item in section.items))


def render_entries(section: Section):
    for panel in section.panels:
        st.markdown(f"**{md(panel.title)}**")
        st.markdown(md(panel.text))


RENDERERS = {
    "text": render_text_section,
    "charts": render_metric_grid,
    "compare": render_comparisons,
    "bullets": render_bullets,
    "entries": render_entries,
}


def render_section(section: Section):
    with st.container(border=True):
        card_title(section.key, section.title)
        RENDERERS[section.kind](section)


def render_dashboard(view: ReportView):
    """
    Render the report body in the two-column card layout.

    Args:
        view: Report view built from the current result
    """
    main, side = st.columns([2, 1])

    with main:
        for section in view.column("main"):
            render_section(section)

    with side:
        for section in view.column("side"):
            render_section(section)
