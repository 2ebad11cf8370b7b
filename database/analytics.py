# database/analytics.py

"""Principal analytics - teacher submissions, homework completion, attendance completion"""

import logging

from config import APP_CONFIG
from .connection import get_client, response_data, BACKEND_ERRORS, error_message
from .utils import get_school_uuid

logger = logging.getLogger(__name__)


def build_teacher_progress(teachers, periods, total_periods):
    """
    Count submitted periods per teacher

    Args:
        teachers: Teacher rows with id, name, mobile
        periods: daily_periods rows with teacher_user_id
        total_periods: Periods expected per teacher

    Returns:
        list: One progress dictionary per teacher
    """
    submitted = {}
    for period in periods:
        teacher_id = period.get("teacher_user_id")
        submitted[teacher_id] = submitted.get(teacher_id, 0) + 1

    return [
        {
            "id": t["id"],
            "name": t.get("name"),
            "mobile": t.get("mobile"),
            "periods_submitted": submitted.get(t["id"], 0),
            "total_periods": total_periods,
        }
        for t in teachers
    ]


def fetch_principal_analytics(school_code, date):
    """
    Summarize how many periods each teacher has submitted on a day

    Args:
        school_code: School code
        date: Day as YYYY-MM-DD

    Returns:
        dict or None: Analytics summary, None if the school is unknown
    """
    school_uuid = get_school_uuid(school_code)
    if not school_uuid:
        return None

    client = get_client()
    try:
        config_response = client.table("schools").select("total_periods").eq("id", school_uuid).single().execute()
        school_config = response_data(config_response, {})
    except BACKEND_ERRORS as e:
        logger.warning(f"Could not read period count for school {school_uuid}: {error_message(e)}")
        school_config = {}
    periods_count = school_config.get("total_periods") or APP_CONFIG["default_total_periods"]

    try:
        teachers = response_data(
            client.table("users").select("id, name, mobile")
            .eq("school_id", school_uuid).eq("role", "teacher").execute(),
            [],
        )
        periods = response_data(
            client.table("daily_periods").select("teacher_user_id")
            .eq("school_id", school_uuid).eq("date", date).execute(),
            [],
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching principal analytics for {school_code}: {error_message(e)}")
        return None

    teacher_list = build_teacher_progress(teachers, periods, periods_count)

    return {
        "total_teachers": len(teachers),
        "active_teachers": len([t for t in teacher_list if t["periods_submitted"] > 0]),
        "inactive_teachers": len([t for t in teacher_list if t["periods_submitted"] == 0]),
        "total_periods_expected": len(teachers) * periods_count,
        "total_periods_submitted": len(periods),
        "teacher_list": teacher_list,
    }


def classify_homework_status(total, done):
    """
    Classify a student's homework for the day

    Returns:
        str: 'no_homework', 'completed', 'partial' or 'pending'
    """
    if total == 0:
        return "no_homework"
    if done >= total:
        return "completed"
    if done > 0:
        return "partial"
    return "pending"


def fetch_homework_analytics(school_code, date):
    """
    Summarize homework completion per student for a day

    A student's homework count is the number of periods taught to their
    class that day; completed is the number of their submissions.

    Args:
        school_code: School code
        date: Day as YYYY-MM-DD

    Returns:
        dict or None: Totals plus student_list, None if the school is unknown
    """
    school_uuid = get_school_uuid(school_code)
    if not school_uuid:
        return None

    client = get_client()
    try:
        students = response_data(
            client.table("students").select("id, name, class_name, users!parent_user_id(name)")
            .eq("school_id", school_uuid).execute(),
            [],
        )
        periods = response_data(
            client.table("daily_periods").select("class_name")
            .eq("school_id", school_uuid).eq("date", date).execute(),
            [],
        )
        submissions = response_data(
            client.table("homework_submissions").select("student_id")
            .eq("date", date).execute(),
            [],
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching homework analytics for {school_code}: {error_message(e)}")
        return None

    periods_per_class = {}
    for p in periods:
        periods_per_class[p.get("class_name")] = periods_per_class.get(p.get("class_name"), 0) + 1

    done_per_student = {}
    for s in submissions:
        done_per_student[s.get("student_id")] = done_per_student.get(s.get("student_id"), 0) + 1

    student_list = []
    for s in students:
        total = periods_per_class.get(s.get("class_name"), 0)
        done = done_per_student.get(s["id"], 0)
        student_list.append({
            "student_id": s["id"],
            "student_name": s.get("name"),
            "class_name": s.get("class_name"),
            "parent_name": (s.get("users") or {}).get("name") or "Unknown",
            "total_homeworks": total,
            "completed_homeworks": done,
            "status": classify_homework_status(total, done),
        })

    return {
        "total_students": len(students),
        "fully_completed": len([s for s in student_list if s["status"] == "completed"]),
        "partial_completed": len([s for s in student_list if s["status"] == "partial"]),
        "pending": len([s for s in student_list if s["status"] == "pending"]),
        "student_list": student_list,
    }


def compute_attendance_completion(completed_classes, all_classes):
    """
    Compare the classes with attendance marked against all school classes

    Args:
        completed_classes: Class names with attendance for the day
        all_classes: Every class name in the school

    Returns:
        dict: completed, total, pending_classes, completion_rate (percent)
    """
    done = set(completed_classes)
    pending = [c for c in all_classes if c not in done]
    total = len(all_classes)
    completed = total - len(pending)
    return {
        "completed": completed,
        "total": total,
        "pending_classes": pending,
        "completion_rate": round(completed * 100 / total, 1) if total else 0.0,
    }
