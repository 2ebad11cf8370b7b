# auth/session_manager.py
"""Session management"""

import streamlit as st
import logging
from datetime import datetime
from typing import Optional, Dict, Any

from database import fetch_dashboard_data
from .config import COOKIE_KEYS, SESSION_KEYS, ROLE_ALIASES

logger = logging.getLogger(__name__)


def role_matches(requested: str, actual: Optional[str]) -> bool:
    """Check the stored account role allows signing in as the requested role"""
    if not requested or not actual:
        return False
    return ROLE_ALIASES.get(requested, requested) == ROLE_ALIASES.get(actual, actual)


class SessionManager:
    """Handles user session management"""

    @staticmethod
    def _store_dashboard(dashboard: Dict[str, Any], role: str):
        st.session_state.dashboard = dashboard
        st.session_state.user_id = dashboard["user_id"]
        st.session_state.username = dashboard["user_name"]
        st.session_state.school_code = dashboard["school_code"]
        st.session_state.mobile = dashboard["mobile_number"]
        st.session_state.role = role
        st.session_state.student_id = dashboard.get("student_id")

    @staticmethod
    def create_session(dashboard: Dict[str, Any], role: str, cookies) -> bool:
        """
        Create a new user session from a freshly loaded dashboard

        Args:
            dashboard: Payload from fetch_dashboard_data
            role: Role the user logged in as
            cookies: Cookie manager instance

        Returns:
            True if session created successfully, False otherwise
        """
        try:
            st.session_state.authenticated = True
            SessionManager._store_dashboard(dashboard, role)
            st.session_state.login_time = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            st.session_state.last_activity = datetime.now()
            st.session_state.current_view = "home"

            cookies["authenticated"] = "true"
            cookies["school_code"] = dashboard["school_code"] or ""
            cookies["mobile"] = dashboard["mobile_number"] or ""
            cookies["role"] = role
            cookies["student_id"] = str(dashboard.get("student_id") or "")
            cookies["login_time"] = st.session_state.login_time
            cookies.save()

            logger.info(f"Session created for {dashboard['user_name']} (ID: {dashboard['user_id']}, Role: {role})")
            return True

        except Exception as e:
            logger.error(f"Error creating session for {dashboard.get('user_name', 'unknown')}: {str(e)}")
            return False

    @staticmethod
    def refresh_dashboard(student_id: Optional[str] = None) -> bool:
        """
        Reload the dashboard payload for the current session

        Args:
            student_id: For parents, switch to this child

        Returns:
            True if reloaded, False if the user could no longer be found
        """
        role = st.session_state.get("role")
        dashboard = fetch_dashboard_data(
            st.session_state.get("school_code"),
            st.session_state.get("mobile"),
            role,
            student_id=student_id or st.session_state.get("student_id"),
        )
        if not dashboard:
            logger.warning(f"Dashboard refresh failed for {st.session_state.get('username')}")
            return False

        SessionManager._store_dashboard(dashboard, role)
        cookies = st.session_state.get("cookies")
        if cookies is not None and dashboard.get("student_id"):
            cookies["student_id"] = str(dashboard["student_id"])
            cookies.save()
        return True

    @staticmethod
    def clear_session(cookies) -> bool:
        """
        Clear user session and cookies

        Args:
            cookies: Cookie manager instance

        Returns:
            True if cleared successfully, False otherwise
        """
        try:
            if cookies:
                for key in COOKIE_KEYS:
                    cookies[key] = ""
                cookies.save()

            for key in SESSION_KEYS:
                if key in st.session_state:
                    del st.session_state[key]

            logger.info("Session cleared successfully")
            return True

        except Exception as e:
            logger.error(f"Error clearing session: {str(e)}")
            return False

    @staticmethod
    def is_authenticated() -> bool:
        """Check if user is authenticated"""
        return st.session_state.get("authenticated", False)

    @staticmethod
    def get_dashboard() -> Optional[Dict[str, Any]]:
        """Get the current dashboard payload"""
        if not SessionManager.is_authenticated():
            return None
        return st.session_state.get("dashboard")

    @staticmethod
    def update_activity():
        """Update user's last activity timestamp"""
        if SessionManager.is_authenticated():
            st.session_state.last_activity = datetime.now()

    @staticmethod
    def restore_from_cookies(cookies) -> bool:
        """
        Restore session from cookies by reloading the dashboard

        The password is not kept in cookies; the encrypted school code and
        mobile identify the user.

        Args:
            cookies: Cookie manager instance

        Returns:
            True if session restored, False otherwise
        """
        school_code = cookies.get("school_code")
        mobile = cookies.get("mobile")
        role = cookies.get("role")
        if not (school_code and mobile and role):
            return False

        dashboard = fetch_dashboard_data(school_code, mobile, role, student_id=cookies.get("student_id") or None)
        if not dashboard:
            logger.warning(f"Could not restore session for {mobile} at {school_code}")
            return False
        if not role_matches(role, dashboard.get("user_role")):
            logger.warning(f"Cookie role '{role}' does not match account role '{dashboard.get('user_role')}' for {mobile}")
            return False

        st.session_state.authenticated = True
        SessionManager._store_dashboard(dashboard, role)
        st.session_state.login_time = cookies.get("login_time", "")
        st.session_state.last_activity = datetime.now()
        st.session_state.setdefault("current_view", "home")

        logger.info(f"Session restored for {dashboard['user_name']} (Role: {role})")
        return True
