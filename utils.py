# utils.py

import re
import html
import streamlit as st


METRIC_CSS = """
<style>
    .custom-metric {
        background: #f8f9fa;
        border: 2px solid #10b981;
        border-radius: 12px;
        padding: 12px;
        text-align: center;
        box-shadow: 0 2px 6px rgba(0,0,0,0.05);
        margin-bottom: 0.5rem;
    }
    .custom-metric .label {
        font-size: 12px;
        color: #64748b;
        text-transform: uppercase;
        letter-spacing: 1px;
    }
    .custom-metric .value {
        font-size: 26px;
        font-weight: 800;
        color: #0f172a;
    }
</style>
"""

STATUS_COLORS = {
    "present": "#10b981",
    "completed": "#10b981",
    "approved": "#10b981",
    "active": "#10b981",
    "submitted": "#10b981",
    "partial": "#f59e0b",
    "leave": "#f59e0b",
    "pending": "#94a3b8",
    "no_homework": "#94a3b8",
    "absent": "#ef4444",
    "rejected": "#ef4444",
    "inactive": "#ef4444",
}


def inject_metric_css():
    """Inject the custom-metric card styling"""
    st.markdown(METRIC_CSS, unsafe_allow_html=True)


def metric_card_html(label, value):
    """HTML for a single metric card"""
    return (
        f"<div class='custom-metric'><div class='label'>{html.escape(str(label))}</div>"
        f"<div class='value'>{html.escape(str(value))}</div></div>"
    )


def render_metric_row(metrics):
    """
    Render metric cards side by side

    Args:
        metrics: List of (label, value) tuples
    """
    inject_metric_css()
    columns = st.columns(len(metrics))
    for col, (label, value) in zip(columns, metrics):
        with col:
            st.markdown(metric_card_html(label, value), unsafe_allow_html=True)


def status_badge_html(status):
    """Small coloured pill for a status value"""
    status = status or "pending"
    color = STATUS_COLORS.get(status, "#94a3b8")
    label = status.replace("_", " ").title()
    return (
        f"<span style='background:{color};color:white;padding:2px 10px;border-radius:999px;"
        f"font-size:11px;font-weight:700;text-transform:uppercase;'>{html.escape(label)}</span>"
    )


def format_role(role):
    """Display name for a role"""
    if not role:
        return "Unknown"
    return role.replace('_', ' ').title()


def clean_input(value, input_type):
    """Clean and validate input data"""
    if not value or str(value).strip() == "":
        return ""

    value = str(value).strip()

    if input_type == "name":
        # Remove extra spaces and title case
        value = ' '.join(value.split())
        return value.title()

    elif input_type == "mobile":
        # Keep digits only
        return re.sub(r'\D', '', value)

    elif input_type == "school_code":
        return value.upper()

    elif input_type == "class":
        # Clean class name
        return value.upper().strip()

    return value

