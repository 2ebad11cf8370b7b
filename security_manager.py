# security_manager.py
import streamlit as st
import logging
import time
from datetime import datetime
from config import SECURITY_CONFIG
from auth.logout import logout
from auth.config import SESSION_TIMEOUT, MESSAGES

logger = logging.getLogger(__name__)

class SecurityManager:
    """Handle security-related operations"""

    @staticmethod
    def check_session_timeout():
        """Log the user out after SESSION_TIMEOUT seconds of inactivity"""
        if not st.session_state.get('authenticated'):
            return True

        if not SECURITY_CONFIG.get('session_timeout_enabled', True):
            return True

        last_activity = st.session_state.get('last_activity')
        if last_activity is not None:
            idle_seconds = (datetime.now() - last_activity).total_seconds()
            if idle_seconds > SESSION_TIMEOUT:
                logger.warning(f"Session timeout for user {st.session_state.get('username')} after {idle_seconds:.0f}s")
                st.warning(MESSAGES["session_expired"])
                time.sleep(2)
                logout()
                return False

        return True

    @staticmethod
    def has_active_subscription(dashboard) -> bool:
        """Whether the dashboard payload allows access to role features"""
        return bool(dashboard) and dashboard.get("subscription_status") == "active"

    @staticmethod
    def force_logout(reason: str = "Security logout"):
        """Force user logout for security reasons"""
        logger.info(f"Force logout: {reason}")
        if 'cookies' in st.session_state:
            cookies = st.session_state.cookies
            cookies['authenticated'] = 'false'
            cookies.save()

        for key in list(st.session_state.keys()):
            if key != 'cookies':
                del st.session_state[key]

        st.error(f"🔒 {reason}. Please log in again.")
        st.rerun()
