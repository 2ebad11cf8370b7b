# auth/logout.py
"""Logout functionality"""

import streamlit as st
import logging
from .config import MESSAGES, SESSION_KEYS
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

def logout():
    """
    Handle user logout process
    """
    cookies = st.session_state.get("cookies")
    username = st.session_state.get("username", "Unknown")

    if SessionManager.clear_session(cookies):
        logger.info(f"User {username} logged out successfully")
        st.session_state.authenticated = False
        st.rerun()

    logger.error(f"Logout error for user {username}")
    st.error(MESSAGES["logout_failed"].format("could not clear session"))

    # Force clear session state as fallback
    _force_clear_session_state()
    st.rerun()

def _force_clear_session_state():
    """Force clear session state as a fallback"""
    for key in SESSION_KEYS:
        if key in st.session_state:
            del st.session_state[key]

    st.session_state.authenticated = False
    logger.info("Session state forcefully cleared")
