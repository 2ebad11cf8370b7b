# app_sections/student_dashboard.py

import logging
import streamlit as st
from database import get_ist_date, fetch_parent_homework
from utils import status_badge_html, render_metric_row
from .parent_dashboard import render_child_header, attendance_history

logger = logging.getLogger(__name__)


def my_day(dashboard):
    """Student's own class, attendance and today's homework"""
    render_child_header(dashboard)

    if not dashboard.get("student_id"):
        st.warning("Your login is not linked to a student record. Please contact the school office.")
        return

    if dashboard.get("father_name"):
        st.caption(f"Father: {dashboard['father_name']}")

    items = fetch_parent_homework(
        dashboard["school_code"], dashboard["class_name"], dashboard.get("section"),
        dashboard["student_id"], dashboard["mobile_number"], get_ist_date()
    )
    st.subheader("📒 Today's Homework")
    if not items:
        st.info("No homework posted for today yet.")
        return

    done = len([i for i in items if i["status"] == "completed"])
    render_metric_row([("Homework", len(items)), ("Done", done)])
    for item in items:
        st.markdown(
            f"**{item['period']} · {item.get('subject') or ''}** {status_badge_html(item['status'])}  \n"
            f"{item.get('homework') or 'No homework'}",
            unsafe_allow_html=True
        )


def my_attendance(dashboard):
    attendance_history(dashboard)
