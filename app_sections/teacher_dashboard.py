# app_sections/teacher_dashboard.py

import html
import time
import logging
import streamlit as st
import pandas as pd
from database import (
    get_ist_date, parse_date, fetch_teacher_history, submit_period_data,
    fetch_school_classes, fetch_class_subjects, fetch_subject_lessons, fetch_lesson_homework,
    fetch_students_for_class, fetch_class_attendance_today, submit_attendance
)
from database.attendance import ATTENDANCE_STATUSES
from auth.session_manager import SessionManager
from utils import status_badge_html, render_metric_row
from .skeletons import render_skeleton_period_grid

logger = logging.getLogger(__name__)


def period_cards_html(periods, total_periods):
    """Two-column grid with one card per period of the day"""
    by_number = {p["period_number"]: p for p in periods}
    cards = []
    for number in range(1, total_periods + 1):
        period = by_number.get(number)
        if period:
            body = (
                f"<div style='font-weight:800;color:#0f172a;'>{html.escape(period.get('subject') or '')}</div>"
                f"<div style='font-size:12px;color:#64748b;'>{html.escape(period.get('class_name') or '')}</div>"
            )
            badge = status_badge_html("submitted")
        else:
            body = "<div style='color:#94a3b8;'>Not submitted</div>"
            badge = status_badge_html("pending")
        cards.append(
            "<div style='background:white;border:1px solid #f1f5f9;border-radius:2rem;padding:1rem;min-height:7rem;'>"
            f"<div style='font-size:11px;font-weight:900;color:#64748b;margin-bottom:6px;'>PERIOD {number}</div>"
            f"{body}<div style='margin-top:8px;'>{badge}</div></div>"
        )
    return (
        "<div style='display:grid;grid-template-columns:repeat(2,1fr);gap:0.75rem;'>"
        + "".join(cards) + "</div>"
    )


def todays_periods(dashboard):
    """Today's period grid"""
    st.subheader(f"📅 Today · {get_ist_date()}")
    placeholder = st.empty()
    with placeholder.container():
        render_skeleton_period_grid()
    periods = fetch_teacher_history(dashboard["school_code"], dashboard["mobile_number"], get_ist_date())
    placeholder.empty()

    total = dashboard.get("total_periods") or 8
    render_metric_row([
        ("Submitted", len(periods)),
        ("Remaining", max(total - len(periods), 0)),
        ("Periods", total),
    ])
    st.markdown(period_cards_html(periods, total), unsafe_allow_html=True)


def _select_by_name(label, rows, name_field, key):
    if not rows:
        return None
    names = [r[name_field] for r in rows]
    choice = st.selectbox(label, names, key=key)
    return next((r for r in rows if r[name_field] == choice), None)


def submit_period(dashboard):
    """Lesson and homework entry for one period"""
    st.subheader("✏️ Submit Period")

    total = dashboard.get("total_periods") or 8
    submitted = {p["period_number"]: p for p in dashboard.get("periods") or []}
    period_number = st.selectbox(
        "Period", list(range(1, total + 1)),
        format_func=lambda n: f"Period {n}" + (" ✅" if n in submitted else ""),
        key="period_number_select"
    )
    existing = submitted.get(period_number, {})

    classes = fetch_school_classes(dashboard["school_db_id"])
    if not classes:
        st.warning("No classes configured yet. Ask the principal to add classes.")
        return

    school_class = _select_by_name("Class", classes, "class_name", "period_class")
    subjects = fetch_class_subjects(school_class["id"])
    subject = _select_by_name("Subject", subjects, "subject_name", "period_subject")
    lessons = fetch_subject_lessons(subject["id"]) if subject else []
    lesson = _select_by_name("Lesson", lessons, "lesson_name", "period_lesson")

    templates = fetch_lesson_homework(lesson["id"]) if lesson else []
    homework_type = "Manual"
    homework = existing.get("homework") or ""
    if templates:
        template_texts = [t["homework_template"] for t in templates]
        use_template = st.toggle("Use homework template", value=True, key="period_use_template")
        if use_template:
            homework = st.selectbox("Homework", template_texts, key="period_homework_template")
            homework_type = "Template"
    if homework_type == "Manual":
        homework = st.text_area("Homework", value=homework, key="period_homework_manual")

    if not subject:
        st.info("Add subjects for this class before submitting periods.")
        return

    action = "update" if existing else "submit"
    if st.button("💾 Update Period" if existing else "📤 Submit Period", type="primary", use_container_width=True):
        ok = submit_period_data(
            dashboard["school_code"],
            dashboard["mobile_number"],
            {
                "period_number": period_number,
                "class_name": school_class["class_name"],
                "subject": subject["subject_name"],
                "lesson": lesson["lesson_name"] if lesson else "",
                "homework": homework,
                "homework_type": homework_type,
            },
            dashboard["user_name"],
            action,
        )
        if ok:
            st.success(f"✅ Period {period_number} saved")
            SessionManager.refresh_dashboard()
            time.sleep(1)
            st.rerun()
        else:
            st.error("❌ Could not save period. Please try again.")


def mark_attendance(dashboard):
    """Class attendance register for today"""
    st.subheader("🧾 Mark Attendance")

    classes = fetch_school_classes(dashboard["school_db_id"])
    if not classes:
        st.warning("No classes configured yet.")
        return

    class_name = st.selectbox("Class", [c["class_name"] for c in classes], key="attendance_class")
    students = fetch_students_for_class(dashboard["school_db_id"], class_name)
    if not students:
        st.info(f"No students in {class_name}.")
        return

    today = get_ist_date()
    already_marked = fetch_class_attendance_today(dashboard["school_db_id"], class_name, today)
    if already_marked:
        st.caption(f"Attendance already marked for {len(already_marked)} students today. Saving will overwrite it.")

    with st.form(f"attendance_form_{class_name}"):
        records = []
        for student in students:
            current = already_marked.get(student["id"], "present")
            status = st.radio(
                student["name"],
                ATTENDANCE_STATUSES,
                index=ATTENDANCE_STATUSES.index(current) if current in ATTENDANCE_STATUSES else 0,
                horizontal=True,
                format_func=str.title,
                key=f"att_{class_name}_{student['id']}"
            )
            records.append({"student_id": student["id"], "status": status})
        save = st.form_submit_button("Save Attendance", type="primary", use_container_width=True)

    if save:
        if submit_attendance(dashboard["school_db_id"], dashboard["user_id"], class_name, records):
            counts = pd.Series([r["status"] for r in records]).value_counts()
            st.success(
                f"✅ Attendance saved: {counts.get('present', 0)} present, "
                f"{counts.get('absent', 0)} absent, {counts.get('leave', 0)} on leave"
            )
        else:
            st.error("❌ Attendance could not be saved. Please try again.")


def period_history(dashboard):
    """Past submissions by date"""
    st.subheader("📚 My Submissions")
    day = st.date_input("Date", value=parse_date(get_ist_date()), key="history_date")
    periods = fetch_teacher_history(dashboard["school_code"], dashboard["mobile_number"], day.isoformat())
    if not periods:
        st.info("No periods submitted on this day.")
        return
    df = pd.DataFrame(periods)[["period_number", "class_name", "subject", "lesson", "homework", "homework_type"]]
    df.columns = ["Period", "Class", "Subject", "Lesson", "Homework", "Type"]
    st.dataframe(df, hide_index=True, use_container_width=True)
