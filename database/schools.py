# database/schools.py

"""School summary, settings and user directories"""

import logging

from config import APP_CONFIG
from .connection import get_client, response_data, BACKEND_ERRORS, error_message

logger = logging.getLogger(__name__)

USER_CATEGORIES = {"teachers": "teacher", "drivers": "driver"}


def _count_users(school_id, role):
    response = (
        get_client().table("users")
        .select("*", count="exact", head=True)
        .eq("school_id", school_id)
        .eq("role", role)
        .execute()
    )
    return response.count or 0


def fetch_school_summary(school_id):
    """
    Get the headline figures shown on the principal dashboard

    Args:
        school_id: School id

    Returns:
        dict or None: school_name, school_code, principal_name, total_teachers,
            total_drivers, total_students, total_periods
    """
    client = get_client()
    try:
        school = response_data(
            client.table("schools").select("name, school_code, total_periods")
            .eq("id", school_id).maybe_single().execute()
        )
        if not school:
            return None

        principal = response_data(
            client.table("users").select("name")
            .eq("school_id", school_id).eq("role", "principal")
            .limit(1).maybe_single().execute()
        )
        students_response = (
            client.table("students")
            .select("*", count="exact", head=True)
            .eq("school_id", school_id)
            .execute()
        )

        return {
            "school_name": school.get("name"),
            "school_code": school.get("school_code"),
            "principal_name": (principal or {}).get("name") or "Principal",
            "total_teachers": _count_users(school_id, "teacher"),
            "total_drivers": _count_users(school_id, "driver"),
            "total_students": students_response.count or 0,
            "total_periods": school.get("total_periods") or APP_CONFIG["default_total_periods"],
        }
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching school summary for {school_id}: {error_message(e)}")
        return None


def update_school_periods(school_id, count):
    """
    Change the number of periods in the school day

    Returns:
        bool: True if updated successfully, False otherwise
    """
    try:
        get_client().table("schools").update({"total_periods": count}).eq("id", school_id).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to update period count for school {school_id}: {error_message(e)}")
        return False
    logger.info(f"School {school_id} now has {count} periods per day")
    return True


def fetch_school_user_list(school_id, category):
    """
    Get a directory of students, teachers or drivers

    Args:
        school_id: School id
        category: 'students', 'teachers' or 'drivers'

    Returns:
        list: [{id, name, mobile}] ordered by name
    """
    client = get_client()
    try:
        if category == "students":
            response = (
                client.table("students")
                .select("id, name, users(mobile)")
                .eq("school_id", school_id)
                .order("name")
                .execute()
            )
            return [
                {
                    "id": s["id"],
                    "name": s.get("name"),
                    "mobile": (s.get("users") or {}).get("mobile") or "No Contact",
                }
                for s in response_data(response, [])
            ]

        role = USER_CATEGORIES.get(category, "driver")
        response = (
            client.table("users")
            .select("id, name, mobile")
            .eq("school_id", school_id)
            .eq("role", role)
            .order("name")
            .execute()
        )
        return response_data(response, [])
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching {category} for school {school_id}: {error_message(e)}")
        return []
