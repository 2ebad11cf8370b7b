# database/dashboard.py

"""Role-based dashboard assembly"""

import logging

from config import APP_CONFIG, CLIENT_ROLES
from .connection import get_client, response_data, BACKEND_ERRORS, error_message
from .periods import format_period
from .students import fetch_parent_children, find_student_for_user
from .utils import get_ist_date, is_subscription_active

logger = logging.getLogger(__name__)


def _status(active):
    return "active" if active else "inactive"


def _today_attendance(student_id, today):
    if not student_id:
        return "pending"
    row = response_data(
        get_client().table("attendance").select("status")
        .eq("student_id", student_id).eq("date", today)
        .maybe_single().execute()
    )
    return (row or {}).get("status") or "pending"


def fetch_dashboard_data(school_code, mobile, role, password=None, student_id=None):
    """
    Authenticate a user and assemble their dashboard

    Staff subscriptions follow the school's end date. Parents and students
    also need their own subscription to be valid.

    Args:
        school_code: School code (case-insensitive)
        mobile: User's mobile number
        role: Role the user is logging in as
        password: Password; omitted when restoring an existing session
        student_id: For parents, the child to show (defaults to the first)

    Returns:
        dict or None: Dashboard payload, None if school or user is not found
    """
    client = get_client()
    today = get_ist_date()
    try:
        school = response_data(
            client.table("schools")
            .select("id, name, school_code, is_active, subscription_end_date, total_periods")
            .ilike("school_code", (school_code or "").strip())
            .maybe_single().execute()
        )
        if not school:
            logger.warning(f"Dashboard requested for unknown school code '{school_code}'")
            return None

        user_query = (
            client.table("users")
            .select("id, name, role, mobile, subscription_end_date")
            .eq("school_id", school["id"])
            .eq("mobile", mobile)
        )
        if password:
            user_query = user_query.eq("password", password)
        user = response_data(user_query.maybe_single().execute())
        if not user:
            logger.warning(f"No matching user {mobile} in school {school.get('school_code')}")
            return None

        school_active = is_subscription_active(
            school.get("subscription_end_date"), today, school.get("is_active")
        )
        user_active = is_subscription_active(user.get("subscription_end_date"), today)

        is_client = role in CLIENT_ROLES
        data = {
            "user_id": user["id"],
            "school_db_id": school["id"],
            "user_name": user.get("name"),
            "user_role": user.get("role"),
            "mobile_number": user.get("mobile"),
            "school_name": school.get("name"),
            "school_code": school.get("school_code"),
            "subscription_status": _status(school_active and user_active) if is_client else _status(school_active),
            "school_subscription_status": _status(school_active),
            "subscription_end_date": user.get("subscription_end_date") if is_client else school.get("subscription_end_date"),
            "total_periods": school.get("total_periods") or APP_CONFIG["default_total_periods"],
        }

        if role == "teacher":
            periods = response_data(
                client.table("daily_periods").select("*")
                .eq("school_id", school["id"]).eq("teacher_user_id", user["id"]).eq("date", today)
                .execute(),
                [],
            )
            data["periods"] = [format_period(p) for p in periods]

        elif role == "parent":
            kids = fetch_parent_children(user["id"])
            if student_id:
                target = next((k for k in kids if k["id"] == student_id), None)
            else:
                target = kids[0] if kids else None
            target = target or {}
            data.update({
                "student_id": target.get("id"),
                "student_name": target.get("name"),
                "class_name": target.get("class_name"),
                "section": target.get("section") or "",
                "today_attendance": _today_attendance(target.get("id"), today),
                "siblings": kids,
            })

        elif role == "student":
            student = find_student_for_user(school["id"], user)
            if student:
                data.update({
                    "student_id": student["id"],
                    "student_name": student.get("name"),
                    "class_name": student.get("class_name"),
                    "section": student.get("section") or "",
                    "father_name": student.get("father_name"),
                    "linked_parent_id": student.get("parent_user_id"),
                    "today_attendance": _today_attendance(student["id"], today),
                })

        logger.info(f"Dashboard assembled for {data['user_name']} ({role}), subscription {data['subscription_status']}")
        return data

    except BACKEND_ERRORS as e:
        logger.error(f"Error assembling dashboard for {mobile} ({role}): {error_message(e)}")
        return None
