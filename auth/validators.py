# auth/validators.py
"""Authentication validators"""

import re
import logging
from typing import Optional, Dict, Any, Tuple
from database import fetch_dashboard_data
from utils import clean_input
from .config import LOGIN_ROLES
from .session_manager import SessionManager, role_matches

logger = logging.getLogger(__name__)

MOBILE_PATTERN = re.compile(r"^\d{10,15}$")


def validate_user_input(school_code: str, mobile: str, password: str, role: str) -> Tuple[bool, str]:
    """
    Validate user input for login

    Args:
        school_code: School code
        mobile: Mobile number
        password: Password string
        role: Selected role

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not school_code or not school_code.strip():
        return False, "School code is required"

    if not mobile or not mobile.strip():
        return False, "Mobile number is required"

    if not MOBILE_PATTERN.match(clean_input(mobile, "mobile")):
        return False, "Mobile number must contain 10 to 15 digits"

    if not password or not password.strip():
        return False, "Password is required"

    if role not in LOGIN_ROLES:
        return False, "Please select a valid role"

    return True, ""


def validate_credentials(school_code: str, mobile: str, password: str, role: str) -> Optional[Dict[str, Any]]:
    """
    Validate credentials by loading the user's dashboard

    Args:
        school_code: School code
        mobile: Mobile number
        password: Password to validate
        role: Selected role

    Returns:
        Dashboard payload if valid, None otherwise
    """
    dashboard = fetch_dashboard_data(
        clean_input(school_code, "school_code"),
        clean_input(mobile, "mobile"),
        role,
        password=password,
    )
    if not dashboard:
        logger.warning(f"Failed login for mobile {mobile} at school {school_code}")
        return None

    if not role_matches(role, dashboard.get("user_role")):
        logger.warning(f"Role mismatch for mobile {mobile}: signed in as '{role}', account is '{dashboard.get('user_role')}'")
        return None

    logger.info(f"Successful login validation for {dashboard['user_name']} ({role})")
    return dashboard


def validate_session_cookies(cookies) -> bool:
    """
    Validate and restore session from cookies

    Args:
        cookies: Cookie manager instance

    Returns:
        True if session restored successfully, False otherwise
    """
    if cookies.get("authenticated") != "true":
        return False

    return SessionManager.restore_from_cookies(cookies)
