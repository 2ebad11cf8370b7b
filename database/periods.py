# database/periods.py

"""Daily period (lesson/homework) records and parent homework tracking"""

import re
import logging

from .connection import get_client, response_data, BACKEND_ERRORS, error_message
from .utils import get_ist_date, get_school_uuid

logger = logging.getLogger(__name__)


def format_period(row):
    """Shape a daily_periods row as a submitted period"""
    return {
        "id": row.get("id"),
        "period_number": row.get("period_number"),
        "status": "submitted",
        "class_name": row.get("class_name"),
        "subject": row.get("subject"),
        "lesson": row.get("lesson"),
        "homework": row.get("homework"),
        "homework_type": row.get("homework_type"),
    }


def _get_teacher_id(school_uuid, mobile):
    response = (
        get_client().table("users")
        .select("id")
        .eq("mobile", mobile)
        .eq("school_id", school_uuid)
        .maybe_single()
        .execute()
    )
    user = response_data(response)
    return user["id"] if user else None


def fetch_teacher_history(school_code, mobile, date):
    """
    Get the periods a teacher submitted on a day

    Args:
        school_code: School code
        mobile: Teacher's mobile number
        date: Day as YYYY-MM-DD

    Returns:
        list: Submitted periods ordered by period number
    """
    school_uuid = get_school_uuid(school_code)
    if not school_uuid:
        return []

    try:
        teacher_id = _get_teacher_id(school_uuid, mobile)
        if not teacher_id:
            return []
        response = (
            get_client().table("daily_periods")
            .select("*")
            .eq("teacher_user_id", teacher_id)
            .eq("date", date)
            .order("period_number")
            .execute()
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching period history for {mobile}: {error_message(e)}")
        return []

    return [format_period(p) for p in response_data(response, [])]


def submit_period_data(school_code, mobile, period, user_name, action):
    """
    Save (or overwrite) today's record for one period

    Args:
        school_code: School code
        mobile: Teacher's mobile number
        period: Dictionary with period_number, class_name, subject, lesson,
            homework and optional homework_type
        user_name: Teacher name (logging only)
        action: 'submit' or 'update' (logging only)

    Returns:
        bool: True if saved successfully, False otherwise
    """
    school_uuid = get_school_uuid(school_code)
    if not school_uuid:
        return False

    try:
        teacher_id = _get_teacher_id(school_uuid, mobile)
        if not teacher_id:
            logger.warning(f"Period {action}: no teacher with mobile {mobile} in {school_code}")
            return False

        get_client().table("daily_periods").upsert({
            "school_id": school_uuid,
            "teacher_user_id": teacher_id,
            "date": get_ist_date(),
            "period_number": period["period_number"],
            "class_name": period.get("class_name"),
            "subject": period.get("subject"),
            "lesson": period.get("lesson"),
            "homework": period.get("homework"),
            "homework_type": period.get("homework_type") or "Manual",
        }, on_conflict="teacher_user_id,date,period_number").execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Period {action} failed for {user_name}: {error_message(e)}")
        return False

    logger.info(f"Period {period['period_number']} {action} by {user_name}")
    return True


def fetch_parent_homework(school_code, class_name, section, student_id, mobile, date):
    """
    Get a class's homework for a day with one student's completion status

    Args:
        school_code: School code
        class_name: Student's class
        section: Student's section (unused by the query)
        student_id: Student id
        mobile: Parent mobile (unused by the query)
        date: Day as YYYY-MM-DD

    Returns:
        list: [{id, period, subject, teacher_name, homework, homework_type, status}]
    """
    school_uuid = get_school_uuid(school_code)
    if not school_uuid:
        return []

    client = get_client()
    try:
        periods = response_data(
            client.table("daily_periods").select("*, users!teacher_user_id(name)")
            .eq("school_id", school_uuid).eq("class_name", class_name).eq("date", date)
            .execute(),
            [],
        )
        submissions = response_data(
            client.table("homework_submissions").select("period_number, status")
            .eq("student_id", student_id).eq("date", date)
            .execute(),
            [],
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching homework for student {student_id}: {error_message(e)}")
        return []

    status_by_period = {}
    for s in submissions:
        status_by_period.setdefault(s.get("period_number"), s.get("status"))

    return [
        {
            "id": p.get("id"),
            "period": f"Period {p.get('period_number')}",
            "subject": p.get("subject"),
            "teacher_name": (p.get("users") or {}).get("name") or "Teacher",
            "homework": p.get("homework"),
            "homework_type": p.get("homework_type"),
            "status": status_by_period.get(p.get("period_number")) or "pending",
        }
        for p in periods
    ]


def parse_period_number(label):
    """
    Extract the period number from a label such as 'Period 3'

    Returns:
        int: The number, or 1 when the label holds no usable number
    """
    digits = re.sub(r"\D", "", str(label or ""))
    return int(digits) if digits and int(digits) else 1


def update_parent_homework_status(school_code, class_name, section, student_id, mobile, period_label, subject, date):
    """
    Mark one period's homework as completed for a student

    Returns:
        bool: True if saved successfully, False otherwise
    """
    period_number = parse_period_number(period_label)
    try:
        get_client().table("homework_submissions").upsert({
            "student_id": student_id,
            "date": date,
            "period_number": period_number,
            "status": "completed",
        }, on_conflict="student_id,date,period_number").execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to mark homework for student {student_id}, period {period_number}: {error_message(e)}")
        return False

    logger.info(f"Homework marked completed: student {student_id}, {subject}, period {period_number}")
    return True
