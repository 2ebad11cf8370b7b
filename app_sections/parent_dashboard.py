# app_sections/parent_dashboard.py

import html
import logging
import streamlit as st
import pandas as pd
from database import (
    get_ist_date, fetch_parent_homework, update_parent_homework_status,
    fetch_attendance_history, summarize_attendance_history
)
from auth.session_manager import SessionManager
from utils import status_badge_html, render_metric_row
from .skeletons import render_skeleton_widget

logger = logging.getLogger(__name__)


def render_child_header(dashboard):
    """Student name, class and today's attendance"""
    section = f" - {dashboard['section']}" if dashboard.get("section") else ""
    st.markdown(
        f"""
        <div style='background:white;border:1px solid #e2e8f0;border-radius:2rem;padding:1.25rem;margin-bottom:1rem;'>
            <div style='font-size:11px;font-weight:900;color:#64748b;'>STUDENT</div>
            <div style='font-size:24px;font-weight:800;color:#0f172a;'>{html.escape(dashboard.get('student_name') or 'Not linked')}</div>
            <div style='color:#64748b;margin-bottom:8px;'>Class {html.escape(str(dashboard.get('class_name') or '-'))}{html.escape(section)}</div>
            Today: {status_badge_html(dashboard.get('today_attendance'))}
        </div>
        """,
        unsafe_allow_html=True
    )


def child_switcher(dashboard):
    """Select between siblings linked to the same parent"""
    siblings = dashboard.get("siblings") or []
    if len(siblings) < 2:
        return
    ids = [s["id"] for s in siblings]
    names = {s["id"]: f"{s['name']} ({s.get('class_name') or '-'})" for s in siblings}
    current = dashboard.get("student_id")
    selected = st.selectbox(
        "Child", ids,
        index=ids.index(current) if current in ids else 0,
        format_func=names.get,
        key="sibling_select"
    )
    if selected != current:
        logger.info(f"Parent {dashboard['user_id']} switched to student {selected}")
        if SessionManager.refresh_dashboard(student_id=selected):
            st.rerun()
        st.error("❌ Could not load the selected child")


def homework(dashboard):
    """Today's homework with 'mark done' actions"""
    child_switcher(dashboard)
    render_child_header(dashboard)

    if not dashboard.get("student_id"):
        st.info("No student linked to this account.")
        return

    today = get_ist_date()
    placeholder = st.empty()
    with placeholder.container():
        render_skeleton_widget()
    items = fetch_parent_homework(
        dashboard["school_code"], dashboard["class_name"], dashboard.get("section"),
        dashboard["student_id"], dashboard["mobile_number"], today
    )
    placeholder.empty()

    st.subheader("📒 Today's Homework")
    if not items:
        st.info("No homework posted for today yet.")
        return

    done = len([i for i in items if i["status"] == "completed"])
    render_metric_row([("Homework", len(items)), ("Done", done), ("Pending", len(items) - done)])

    for item in items:
        with st.container(border=True):
            st.markdown(
                f"**{item['period']} · {item.get('subject') or ''}** {status_badge_html(item['status'])}",
                unsafe_allow_html=True
            )
            st.caption(f"👩‍🏫 {item['teacher_name']}")
            st.write(item.get("homework") or "No homework")
            if item["status"] != "completed" and st.button(
                "Mark as done", key=f"hw_done_{item['id']}", use_container_width=True
            ):
                if update_parent_homework_status(
                    dashboard["school_code"], dashboard["class_name"], dashboard.get("section"),
                    dashboard["student_id"], dashboard["mobile_number"],
                    item["period"], item.get("subject"), today
                ):
                    st.rerun()
                st.error("❌ Could not update homework status")


def attendance_history(dashboard):
    """Recent attendance with summary counts"""
    st.subheader("🧾 Attendance History")
    if not dashboard.get("student_id"):
        st.info("No student linked to this account.")
        return

    history = fetch_attendance_history(dashboard["student_id"])
    if not history:
        st.info("No attendance recorded yet.")
        return

    summary = summarize_attendance_history(history)
    render_metric_row([
        ("Present", summary["present"]),
        ("Absent", summary["absent"]),
        ("Leave", summary["leave"]),
        ("Rate", f"{summary['attendance_rate']}%"),
    ])

    df = pd.DataFrame(history)[["date", "status", "marked_by_name"]]
    df["status"] = df["status"].str.title()
    df.columns = ["Date", "Status", "Marked By"]
    st.dataframe(df, hide_index=True, use_container_width=True)
