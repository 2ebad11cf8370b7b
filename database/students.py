# database/students.py

"""Student lookups"""

import logging

from .connection import get_client, response_data, BACKEND_ERRORS, error_message

logger = logging.getLogger(__name__)

STUDENT_PROFILE_COLUMNS = "id, name, class_name, section, father_name, parent_user_id"


def fetch_students_for_class(school_id, class_name):
    """
    Get all students in a class

    Args:
        school_id: School id
        class_name: Class name

    Returns:
        list: Student rows ordered by name
    """
    try:
        response = (
            get_client().table("students")
            .select("*")
            .eq("school_id", school_id)
            .eq("class_name", class_name)
            .order("name")
            .execute()
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching students of {class_name}: {error_message(e)}")
        return []
    return response_data(response, [])


def fetch_parent_children(parent_user_id):
    """
    Get the children linked to a parent account

    Raises:
        BACKEND_ERRORS: Propagated so the dashboard can fail as a whole
    """
    response = (
        get_client().table("students")
        .select("id, name, class_name, section")
        .eq("parent_user_id", parent_user_id)
        .execute()
    )
    return response_data(response, [])


def find_student_for_user(school_id, user):
    """
    Find the student row behind a student login

    Looks for a row linked through student_user_id first, then for a
    student with the same name in the same school.

    Raises:
        BACKEND_ERRORS: Propagated so the dashboard can fail as a whole
    """
    client = get_client()
    student = response_data(
        client.table("students").select(STUDENT_PROFILE_COLUMNS)
        .eq("student_user_id", user["id"])
        .maybe_single().execute()
    )
    if student:
        return student

    logger.info(f"No linked student for user {user['id']}, matching by name")
    return response_data(
        client.table("students").select(STUDENT_PROFILE_COLUMNS)
        .eq("school_id", school_id)
        .eq("name", user.get("name"))
        .maybe_single().execute()
    )
