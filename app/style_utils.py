"""Style utilities for consistent UI presentation."""
import html

import streamlit as st

COLORS = {
    "primary": "#DC2626",
    "secondary": "#6B7280",
    "success": "#22C55E",
    "warning": "#EAB308",
    "critical": "#EF4444",
    "light": "#F9FAFB",
    "dark": "#111827",
    "border": "#E5E7EB",
}

SECTION_ICONS = {
    "summary": "📝",
    "metrics": "📊",
    "mitigation": "🛠️",
    "ethics_statement": "📜",
    "implications": "⚠️",
    "recommendations": "✅",
    "framework": "⚖️",
    "references": "📚",
}


def esc(text: str) -> str:
    """Escape model-generated text before it goes into raw HTML."""
    return html.escape(text or "").replace("\n", "<br>")


def md(text: str) -> str:
    """Keep `$` literal in st.markdown, which otherwise reads $...$ as LaTeX."""
    return (text or "").replace("$", r"\$")


def card_title(key: str, title: str):
    """Render a card heading with its section icon."""
    icon = SECTION_ICONS.get(key, "•")
    st.markdown(f"#### {icon} {md(title)}")


def report_banner(title: str, subtitle: str):
    """Render the report title block."""
    st.markdown(f"""
<div style="padding: 16px 20px; border: 1px solid {COLORS['border']}; border-radius: 12px; margin-bottom: 8px;">
    <h2 style="margin: 0; color: {COLORS['primary']};">{esc(title)}</h2>
    <p style="margin: 6px 0 0 0; color: {COLORS['secondary']};">{esc(subtitle)}</p>
</div>
    """, unsafe_allow_html=True)


def status_label(text: str, color: str):
    """Render a centered, coloured label above a chart."""
    st.markdown(
        f'<div style="text-align: center; font-weight: 600; font-size: 0.9em; color: {color};">{esc(text)}</div>',
        unsafe_allow_html=True,
    )


def format_score(value: float) -> str:
    """Format a fairness score with two decimals."""
    return f"{value:.2f}"
