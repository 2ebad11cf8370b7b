# app_sections/principal_dashboard.py

import time
import logging
import streamlit as st
import pandas as pd
from database import (
    get_ist_date, parse_date, fetch_school_summary, fetch_daily_attendance_status, fetch_school_classes,
    compute_attendance_completion, fetch_principal_analytics, fetch_homework_analytics,
    fetch_vehicles, upsert_vehicle, fetch_school_user_list, update_school_periods,
    fetch_class_subjects, fetch_subject_lessons, fetch_lesson_homework,
    add_school_class, add_class_subject, add_subject_lesson, add_lesson_homework,
    delete_lesson_homework
)
from util.paginators import streamlit_paginator
from config import APP_CONFIG
from utils import render_metric_row, status_badge_html
from .skeletons import render_skeleton_school_card, render_skeleton_widget

logger = logging.getLogger(__name__)

VEHICLE_TYPES = ["Bus", "Van", "Car", "Auto"]
MIN_PERIODS = 1
MAX_PERIODS = 12


def school_overview(dashboard):
    """Headline figures and today's attendance completion"""
    placeholder = st.empty()
    with placeholder.container():
        render_skeleton_school_card()
    summary = fetch_school_summary(dashboard["school_db_id"])
    placeholder.empty()

    if not summary:
        st.error("❌ Could not load school details.")
        return

    st.markdown(f"### 🏫 {summary['school_name']}")
    st.caption(f"Code {summary['school_code']} · Principal {summary['principal_name']}")
    render_metric_row([
        ("Teachers", summary["total_teachers"]),
        ("Students", summary["total_students"]),
        ("Drivers", summary["total_drivers"]),
    ])

    today = get_ist_date()
    class_names = [c["class_name"] for c in fetch_school_classes(dashboard["school_db_id"])]
    completion = compute_attendance_completion(
        fetch_daily_attendance_status(dashboard["school_db_id"], today), class_names
    )

    st.markdown(f"#### 🧾 Attendance · {today}")
    st.progress(completion["completion_rate"] / 100,
                text=f"{completion['completed']} of {completion['total']} classes marked ({completion['completion_rate']}%)")
    if completion["pending_classes"]:
        st.caption("Pending: " + ", ".join(completion["pending_classes"]))


def teacher_analytics(dashboard):
    """Per-teacher period submissions for a day"""
    st.subheader("👩‍🏫 Teacher Submissions")
    day = st.date_input("Date", value=parse_date(get_ist_date()), key="teacher_analytics_date")
    placeholder = st.empty()
    with placeholder.container():
        render_skeleton_widget()
    analytics = fetch_principal_analytics(dashboard["school_code"], day.isoformat())
    placeholder.empty()

    if not analytics:
        st.error("❌ Could not load teacher analytics.")
        return

    render_metric_row([
        ("Teachers", analytics["total_teachers"]),
        ("Active", analytics["active_teachers"]),
        ("Inactive", analytics["inactive_teachers"]),
    ])
    st.caption(f"{analytics['total_periods_submitted']} of {analytics['total_periods_expected']} periods submitted")

    if analytics["teacher_list"]:
        df = pd.DataFrame(analytics["teacher_list"])
        df["progress"] = df["periods_submitted"] / df["total_periods"].where(df["total_periods"] > 0, 1)
        st.dataframe(
            df[["name", "mobile", "periods_submitted", "progress"]],
            column_config={
                "name": "Teacher",
                "mobile": "Mobile",
                "periods_submitted": "Submitted",
                "progress": st.column_config.ProgressColumn("Progress", min_value=0, max_value=1),
            },
            hide_index=True,
            use_container_width=True
        )


def homework_analytics(dashboard):
    """Per-student homework completion for a day"""
    st.subheader("📒 Homework Completion")
    day = st.date_input("Date", value=parse_date(get_ist_date()), key="homework_analytics_date")
    analytics = fetch_homework_analytics(dashboard["school_code"], day.isoformat())
    if not analytics:
        st.error("❌ Could not load homework analytics.")
        return

    render_metric_row([
        ("Completed", analytics["fully_completed"]),
        ("Partial", analytics["partial_completed"]),
        ("Pending", analytics["pending"]),
    ])

    students = analytics["student_list"]
    if not students:
        st.info("No students registered yet.")
        return

    status_filter = st.radio(
        "Show", ["all", "completed", "partial", "pending", "no_homework"],
        format_func=lambda s: s.replace("_", " ").title(), horizontal=True, key="homework_status_filter"
    )
    if status_filter != "all":
        students = [s for s in students if s["status"] == status_filter]

    for s in students:
        st.markdown(
            f"**{s['student_name']}** · {s['class_name']} · {s['completed_homeworks']}/{s['total_homeworks']} "
            f"{status_badge_html(s['status'])}  \nParent: {s['parent_name']}",
            unsafe_allow_html=True
        )


def manage_vehicles(dashboard):
    """Vehicle register and driver assignment"""
    st.subheader("🚌 Vehicles")
    vehicles = fetch_vehicles(dashboard["school_db_id"])
    if vehicles:
        df = pd.DataFrame(vehicles)
        columns = [c for c in ["vehicle_number", "vehicle_type", "driver_name", "is_active", "updated_at"] if c in df.columns]
        st.dataframe(df[columns], hide_index=True, use_container_width=True)
    else:
        st.info("No vehicles registered yet.")

    drivers = fetch_school_user_list(dashboard["school_db_id"], "drivers")
    with st.form("vehicle_form", clear_on_submit=True):
        vehicle_number = st.text_input("Vehicle Number")
        vehicle_type = st.selectbox("Type", VEHICLE_TYPES)
        driver = st.selectbox("Driver", drivers, format_func=lambda d: f"{d['name']} ({d['mobile']})") if drivers else None
        is_active = st.checkbox("Active", value=True)
        saved = st.form_submit_button("Save Vehicle", type="primary", use_container_width=True)

    if saved:
        if not vehicle_number.strip():
            st.error("Vehicle number is required")
        elif upsert_vehicle({
            "school_id": dashboard["school_db_id"],
            "vehicle_number": vehicle_number.strip().upper(),
            "vehicle_type": vehicle_type,
            "driver_id": driver["id"] if driver else None,
            "is_active": is_active,
        }):
            st.success("✅ Vehicle saved")
            time.sleep(1)
            st.rerun()
        else:
            st.error("❌ Failed to save vehicle")


def _add_form(key, label, add_fn, parent_id):
    with st.form(key, clear_on_submit=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            value = st.text_input(label)
        with col2:
            added = st.form_submit_button("Add", use_container_width=True)
    if added:
        if not value.strip():
            st.error(f"{label} is required")
        elif add_fn(parent_id, value.strip()):
            st.rerun()
        else:
            st.error(f"❌ Could not add {label.lower()}")


def manage_curriculum(dashboard):
    """Classes, subjects, lessons and homework templates"""
    st.subheader("📚 Curriculum")

    _add_form("add_class_form", "Class Name", add_school_class, dashboard["school_db_id"])
    classes = fetch_school_classes(dashboard["school_db_id"])
    if not classes:
        st.info("Add a class to get started.")
        return
    school_class = st.selectbox("Class", classes, format_func=lambda c: c["class_name"], key="curriculum_class")

    _add_form("add_subject_form", "Subject Name", add_class_subject, school_class["id"])
    subjects = fetch_class_subjects(school_class["id"])
    if not subjects:
        return
    subject = st.selectbox("Subject", subjects, format_func=lambda s: s["subject_name"], key="curriculum_subject")

    _add_form("add_lesson_form", "Lesson Name", add_subject_lesson, subject["id"])
    lessons = fetch_subject_lessons(subject["id"])
    if not lessons:
        return
    lesson = st.selectbox("Lesson", lessons, format_func=lambda l: l["lesson_name"], key="curriculum_lesson")

    _add_form("add_homework_form", "Homework Template", add_lesson_homework, lesson["id"])
    for template in fetch_lesson_homework(lesson["id"]):
        col1, col2 = st.columns([5, 1])
        with col1:
            st.write(template["homework_template"])
        with col2:
            if st.button("🗑️", key=f"delete_homework_{template['id']}"):
                if delete_lesson_homework(template["id"]):
                    st.rerun()
                st.error("❌ Could not delete template")


def user_directory(dashboard):
    """Searchable lists of students, teachers and drivers"""
    st.subheader("👥 Directory")
    category = st.radio(
        "Category", ["students", "teachers", "drivers"],
        format_func=str.title, horizontal=True, key="directory_category"
    )
    users = fetch_school_user_list(dashboard["school_db_id"], category)
    if not users:
        st.info(f"No {category} found.")
        return
    df = pd.DataFrame(users)[["name", "mobile"]]
    df.columns = ["Name", "Mobile"]
    streamlit_paginator(df, f"directory_{category}")


def periods_input_value(dashboard):
    """Stored period count clamped to what the settings form accepts"""
    count = int(dashboard.get("total_periods") or APP_CONFIG["default_total_periods"])
    return min(max(count, MIN_PERIODS), MAX_PERIODS)


def school_settings(dashboard):
    """Periods per day"""
    st.subheader("⚙️ Settings")
    with st.form("periods_form"):
        count = st.number_input("Periods per day", min_value=MIN_PERIODS, max_value=MAX_PERIODS,
                                value=periods_input_value(dashboard), step=1)
        saved = st.form_submit_button("Save", type="primary")
    if saved:
        if update_school_periods(dashboard["school_db_id"], int(count)):
            st.session_state.dashboard["total_periods"] = int(count)
            st.success(f"✅ School day set to {int(count)} periods")
        else:
            st.error("❌ Could not update period count")
