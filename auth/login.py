# auth/login.py
"""Login functionality"""

import streamlit as st
import time
import logging
from config import APP_CONFIG
from utils import format_role
from .config import MESSAGES, LOGIN_ROLES
from .validators import validate_credentials, validate_session_cookies, validate_user_input
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

LOGIN_CSS = """
<style>
.login-title {
    text-align: center;
    font-weight: 900;
    color: #064e3b;
}
.login-subtitle {
    text-align: center;
    color: #64748b;
    margin-bottom: 1.5rem;
}
</style>
"""

def render_login_form() -> tuple[str, str, str, str, bool]:
    """Render the login form"""
    st.markdown(LOGIN_CSS, unsafe_allow_html=True)
    st.markdown('<h1 class="login-title">🎓 Login</h1>', unsafe_allow_html=True)
    st.markdown(f'<p class="login-subtitle">{APP_CONFIG["page_title"]}</p>', unsafe_allow_html=True)

    with st.form("login_form", clear_on_submit=False):
        role = st.selectbox("I am a", LOGIN_ROLES, format_func=format_role)
        school_code = st.text_input("School Code", placeholder="e.g. SCH001")
        mobile = st.text_input("Mobile Number", placeholder="Registered mobile number")
        password = st.text_input("Password", type="password", placeholder="Enter your password")
        login_button = st.form_submit_button("Sign in", use_container_width=True)

        return school_code, mobile, password, role, login_button

def handle_login_attempt(school_code: str, mobile: str, password: str, role: str, cookies) -> bool:
    """
    Handle login attempt
    """
    is_valid, error_msg = validate_user_input(school_code, mobile, password, role)
    if not is_valid:
        st.error(f"⚠️ {error_msg}")
        return False

    with st.spinner(MESSAGES["loading_auth"]):
        dashboard = validate_credentials(school_code, mobile, password, role)
    if not dashboard:
        st.error(MESSAGES["invalid_credentials"])
        return False

    if not SessionManager.create_session(dashboard, role, cookies):
        st.error("Failed to create session. Please try again.")
        return False

    st.success(MESSAGES["login_success"])

    # Give the cookie component a moment to persist
    time.sleep(1.0)

    st.rerun()

    return True

def login(cookies):
    """
    Main login function. Returns once the user is authenticated,
    otherwise renders the form and stops the script.
    """
    if st.session_state.get("authenticated"):
        return

    if validate_session_cookies(cookies):
        return

    school_code, mobile, password, role, login_clicked = render_login_form()

    if login_clicked:
        handle_login_attempt(school_code, mobile, password, role, cookies)

    st.stop()
