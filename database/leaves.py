# database/leaves.py

"""Staff and student leave requests"""

import logging

from .connection import get_client, response_data, BACKEND_ERRORS, error_message

logger = logging.getLogger(__name__)


def _insert(table, leave):
    try:
        get_client().table(table).insert(leave).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to create {table} request: {error_message(e)}")
        return False
    logger.info(f"New {table} request created")
    return True


def _update_status(table, leave_id, status, comment):
    try:
        get_client().table(table).update({
            "status": status,
            "principal_comment": comment,
        }).eq("id", leave_id).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to set {table} {leave_id} to '{status}': {error_message(e)}")
        return False
    logger.info(f"{table} {leave_id} set to '{status}'")
    return True


def _fetch_newest_first(table, column, value, select="*"):
    try:
        response = (
            get_client().table(table)
            .select(select)
            .eq(column, value)
            .order("created_at", desc=True)
            .execute()
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching {table} for {column}={value}: {error_message(e)}")
        return []
    return response_data(response, [])


def _flatten_name(rows, relation, field):
    flattened = []
    for row in rows:
        item = {k: v for k, v in row.items() if k != relation}
        item[field] = (row.get(relation) or {}).get("name")
        flattened.append(item)
    return flattened


# ==================== STAFF LEAVES ====================

def apply_for_leave(leave):
    """
    Submit a staff leave request

    Args:
        leave: Row values (school_id, user_id, start_date, end_date, reason, ...)

    Returns:
        bool: True if created successfully, False otherwise
    """
    return _insert("staff_leaves", leave)


def fetch_user_leaves(user_id):
    """Get one staff member's leave requests, newest first"""
    return _fetch_newest_first("staff_leaves", "user_id", user_id)


def fetch_school_leaves(school_id):
    """
    Get all staff leave requests of a school, newest first

    Returns:
        list: Leave rows with an added user_name
    """
    rows = _fetch_newest_first("staff_leaves", "school_id", school_id, "*, users(name)")
    return _flatten_name(rows, "users", "user_name")


def update_leave_status(leave_id, status, comment):
    """Approve or reject a staff leave request"""
    return _update_status("staff_leaves", leave_id, status, comment)


# ==================== STUDENT LEAVES ====================

def apply_student_leave(leave):
    """Submit a leave request on behalf of a student"""
    return _insert("student_leaves", leave)


def fetch_student_leaves_for_parent(parent_id):
    """Get the leave requests a parent has submitted, newest first"""
    return _fetch_newest_first("student_leaves", "parent_id", parent_id)


def fetch_school_student_leaves(school_id):
    """
    Get all student leave requests of a school, newest first

    Returns:
        list: Leave rows with an added student_name
    """
    rows = _fetch_newest_first("student_leaves", "school_id", school_id, "*, students(name)")
    return _flatten_name(rows, "students", "student_name")


def update_student_leave_status(leave_id, status, comment):
    """Approve or reject a student leave request"""
    return _update_status("student_leaves", leave_id, status, comment)
