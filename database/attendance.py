# database/attendance.py

"""Attendance marking, daily completion and history"""

import json
import logging

import httpx
from postgrest.exceptions import APIError

from config import APP_CONFIG
from .connection import get_client, response_data, BACKEND_ERRORS, error_message
from .utils import get_ist_date

logger = logging.getLogger(__name__)

ATTENDANCE_STATUSES = ("present", "absent", "leave")


def _unique(values):
    """Distinct truthy values, first occurrence order"""
    return list(dict.fromkeys(v for v in values if v))


def fetch_daily_attendance_status(school_id, date):
    """
    Get the classes that already have attendance marked for a day

    Tries a single joined query first. If the backend rejects the join
    (missing relationship), falls back to two plain queries.

    Args:
        school_id: School id
        date: Day as YYYY-MM-DD

    Returns:
        list: Distinct class names with at least one attendance row
    """
    client = get_client()
    try:
        response = (
            client.table("attendance")
            .select("students!inner(class_name)")
            .eq("school_id", school_id)
            .eq("date", date)
            .execute()
        )
        rows = response_data(response, [])
        return _unique((row.get("students") or {}).get("class_name") for row in rows)
    except APIError as e:
        logger.warning(f"Attendance status join failed, falling back to 2-step fetch: {json.dumps(e.json(), default=str)}")
    except httpx.HTTPError as e:
        logger.error(f"Error fetching daily attendance status for school {school_id}: {error_message(e)}")
        return []

    try:
        att_response = (
            client.table("attendance")
            .select("student_id")
            .eq("school_id", school_id)
            .eq("date", date)
            .execute()
        )
        att_rows = response_data(att_response, [])
        if not att_rows:
            return []

        student_ids = [row["student_id"] for row in att_rows]
        st_response = (
            client.table("students")
            .select("class_name")
            .in_("id", student_ids)
            .execute()
        )
        return _unique(row.get("class_name") for row in response_data(st_response, []))
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching daily attendance status for school {school_id}: {error_message(e)}")
        return []


def fetch_class_attendance_today(school_id, class_name, date):
    """
    Get already-marked statuses for one class on a day

    Args:
        school_id: School id
        class_name: Class name
        date: Day as YYYY-MM-DD

    Returns:
        dict: student_id -> 'present' | 'absent' | 'leave'
    """
    try:
        response = (
            get_client().table("attendance")
            .select("student_id, status, students!inner(class_name)")
            .eq("school_id", school_id)
            .eq("date", date)
            .eq("students.class_name", class_name)
            .execute()
        )
    except APIError as e:
        logger.warning(f"Fetch class attendance join error for {class_name}: {json.dumps(e.json(), default=str)}")
        return {}
    except httpx.HTTPError as e:
        logger.error(f"Fetch class attendance failed for {class_name}: {error_message(e)}")
        return {}

    return {row["student_id"]: row["status"] for row in response_data(response, [])}


def submit_attendance(school_id, teacher_id, class_name, records):
    """
    Save today's attendance for a class

    One row per student and day; re-submitting overwrites the earlier status.

    Args:
        school_id: School id
        teacher_id: User id of the teacher marking attendance
        class_name: Class name (used for logging only)
        records: List of {'student_id', 'status'} dictionaries

    Returns:
        bool: True if saved successfully, False otherwise
    """
    if not records:
        return False

    date = get_ist_date()
    payload = [
        {
            "school_id": school_id,
            "marked_by_user_id": teacher_id,
            "student_id": r["student_id"],
            "date": date,
            "status": r["status"],
        }
        for r in records
    ]

    logger.info(f"Syncing attendance for {class_name}: {payload}")

    try:
        get_client().table("attendance").upsert(payload, on_conflict="student_id,date").execute()
    except APIError as e:
        logger.error(f"Attendance error code: {e.code}")
        logger.error(f"Attendance error message: {e.message}")
        logger.error(f"Full error: {json.dumps(e.json(), default=str)}")
        if e.code == "PGRST204":
            logger.warning("Schema mismatch: column 'marked_by_user_id' is missing in DB.")
        return False
    except httpx.HTTPError as e:
        logger.error(f"Attendance sync failed for {class_name}: {error_message(e)}")
        return False

    logger.info(f"Attendance saved for {len(payload)} students in {class_name}")
    return True


def fetch_attendance_history(student_id):
    """
    Get the most recent attendance entries for a student

    Args:
        student_id: Student id

    Returns:
        list: [{id, date, status, marked_by_name}] newest first
    """
    try:
        response = (
            get_client().table("attendance")
            .select("*, users!marked_by_user_id(name)")
            .eq("student_id", student_id)
            .order("date", desc=True)
            .limit(APP_CONFIG["attendance_history_limit"])
            .execute()
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching attendance history for student {student_id}: {error_message(e)}")
        return []

    return [
        {
            "id": row.get("id"),
            "date": row.get("date"),
            "status": row.get("status"),
            "marked_by_name": (row.get("users") or {}).get("name"),
        }
        for row in response_data(response, [])
    ]


def summarize_attendance_history(history):
    """Count statuses in an attendance history and compute the present rate"""
    summary = {status: 0 for status in ATTENDANCE_STATUSES}
    for item in history:
        if item.get("status") in summary:
            summary[item["status"]] += 1

    total = len(history)
    summary["total"] = total
    summary["attendance_rate"] = round(summary["present"] * 100 / total, 1) if total else 0.0
    return summary
