# database/utils.py

"""Shared helpers - IST calendar dates, subscription checks, school lookup"""

import logging
from datetime import datetime, date, timedelta, timezone

from config import APP_CONFIG
from .connection import get_client, response_data, BACKEND_ERRORS, error_message

logger = logging.getLogger(__name__)

IST = timezone(timedelta(minutes=APP_CONFIG["ist_offset_minutes"]))


def get_ist_date(now=None):
    """
    Get the current calendar date in India Standard Time

    Args:
        now: Optional aware datetime to convert (defaults to the current time)

    Returns:
        str: Date formatted as YYYY-MM-DD
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(IST).strftime("%Y-%m-%d")


def parse_date(value):
    """
    Parse a backend date or timestamp string into a date

    Args:
        value: 'YYYY-MM-DD', an ISO timestamp, a date, or None

    Returns:
        date or None: Parsed calendar date, None if missing or malformed
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.warning(f"Unparseable date value: {value!r}")
        return None


def is_subscription_active(end_date, today, is_active=True):
    """
    Check whether a subscription is still valid on a given day

    Args:
        end_date: Subscription end date (string or date)
        today: Reference day ('YYYY-MM-DD' or date)
        is_active: Account level switch, must be truthy

    Returns:
        bool: True if active and end_date is on or after today
    """
    if not is_active:
        return False
    end = parse_date(end_date)
    reference = parse_date(today)
    if end is None or reference is None:
        return False
    return end >= reference


def get_school_uuid(school_code):
    """
    Resolve a school code to the school's row id

    Args:
        school_code: Human-entered school code (case and padding ignored)

    Returns:
        str or None: School id, None if not found or on backend error
    """
    if not school_code:
        return None
    clean_code = school_code.strip().upper()
    try:
        response = (
            get_client().table("schools")
            .select("id")
            .ilike("school_code", clean_code)
            .maybe_single()
            .execute()
        )
    except BACKEND_ERRORS as e:
        logger.error(f"Error resolving school code '{clean_code}': {error_message(e)}")
        return None

    row = response_data(response)
    if not row:
        logger.info(f"No school found for code '{clean_code}'")
        return None
    return row["id"]
