# database/notices.py

"""School notice board operations"""

import logging

import httpx
from postgrest.exceptions import APIError

from .connection import get_client, response_data, BACKEND_ERRORS, error_message
from .utils import get_school_uuid

logger = logging.getLogger(__name__)

NOTICE_TARGETS = ["all", "teacher", "parent", "driver"]


def notice_target_for_role(role):
    """
    Map a viewer role to the notice target it reads

    Returns:
        str or None: Target name, None if the role sees every notice
    """
    if role in ("principal", "admin"):
        return None
    # Students read the notices addressed to parents
    return "parent" if role == "student" else role


def fetch_notices(school_code, role):
    """
    Get the notices visible to a role, newest first

    Args:
        school_code: School code
        role: Viewer role

    Returns:
        list: Notice rows
    """
    school_uuid = get_school_uuid(school_code)
    if not school_uuid:
        return []

    try:
        query = get_client().table("notices").select("*").eq("school_id", school_uuid)

        target = notice_target_for_role(role)
        if target:
            query = query.or_(f"target.eq.all,target.eq.{target}")

        response = query.order("created_at", desc=True).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Error fetching notices for {school_code}: {error_message(e)}")
        return []

    return response_data(response, [])


def submit_notice(notice):
    """
    Post a notice

    Args:
        notice: Dictionary with school_id (the school *code*), date, title,
            message, category and target

    Returns:
        bool: True if posted successfully, False otherwise
    """
    school_uuid = get_school_uuid(notice.get("school_id"))
    if not school_uuid:
        return False

    try:
        get_client().table("notices").insert({
            "school_id": school_uuid,
            "date": notice.get("date"),
            "title": notice.get("title"),
            "message": notice.get("message"),
            "category": notice.get("category"),
            "target": notice.get("target"),
        }).execute()
    except BACKEND_ERRORS as e:
        logger.error(f"Failed to post notice '{notice.get('title')}': {error_message(e)}")
        return False

    logger.info(f"Notice '{notice.get('title')}' posted for target '{notice.get('target')}'")
    return True


def delete_notice(notice_id):
    """
    Delete a notice

    Args:
        notice_id: Notice id

    Returns:
        tuple: (success, error_message)
    """
    try:
        response = get_client().table("notices").delete().eq("id", notice_id).execute()
    except APIError as e:
        logger.error(f"Failed to delete notice {notice_id}: {e.message}")
        return False, e.message or "Unknown connection error"
    except httpx.HTTPError as e:
        logger.error(f"Failed to delete notice {notice_id}: {error_message(e)}")
        return False, "Unknown connection error"

    if not response_data(response, []):
        logger.warning(f"Delete notice {notice_id}: no matching row")
        return False, "No matching row found."

    logger.info(f"Notice {notice_id} deleted")
    return True, None
