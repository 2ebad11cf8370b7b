# main.py
import streamlit as st
import logging
import traceback

# Import configuration first
from config import DEBUG

# Setup logging
from logging_setup import setup_logging
setup_logging()
logger = logging.getLogger(__name__)

# Import managers
from app_manager import ApplicationManager
from security_manager import SecurityManager

# Import authentication
from auth.login import login
from auth.logout import logout
from auth.config import MESSAGES
from auth.session_manager import SessionManager

from app_sections.bottom_nav import render_bottom_nav
from app_sections.user_profile import user_profile


def change_view(view: str):
    """Bottom navigation callback"""
    st.session_state.current_view = view


def render_home(app: ApplicationManager, role: str, dashboard: dict):
    """Role sections as tabs"""
    if not SecurityManager.has_active_subscription(dashboard):
        logger.info(f"Blocked home view for {dashboard.get('user_name')}: subscription inactive")
        st.error(MESSAGES["subscription_inactive"])
        st.caption(f"Valid until: {dashboard.get('subscription_end_date') or 'not set'}")
        return

    options = app.get_navigation_options(role)
    if not options:
        st.error("❌ No sections available for your role.")
        return

    tabs = st.tabs(list(options.keys()))
    for tab, (label, section) in zip(tabs, options.items()):
        with tab:
            try:
                section(dashboard)
            except Exception as e:
                logger.error(f"Error in {label}: {str(e)}\n{traceback.format_exc()}")
                st.error(f"❌ Error loading {label}. Please try again or contact support.")


def render_logout_button():
    """Render logout button"""
    with st.sidebar:
        if st.button("Logout", type="primary", use_container_width=True):
            logout()


def render_authenticated_app(app: ApplicationManager):
    """Render the main authenticated application"""
    try:
        if not SecurityManager.check_session_timeout():
            return

        role = st.session_state.get('role')
        dashboard = SessionManager.get_dashboard()
        if not dashboard or not role:
            logger.error(f"Invalid session data: role={role}, dashboard={'set' if dashboard else 'missing'}")
            SecurityManager.force_logout("Invalid session data")
            return

        app.render_header(dashboard)
        app.render_user_info(role, dashboard)
        render_logout_button()

        current_view = st.session_state.get("current_view", "home")
        if current_view == "profile":
            user_profile(dashboard)
        else:
            render_home(app, role, dashboard)

        render_bottom_nav(current_view, change_view)

        SessionManager.update_activity()

    except Exception as e:
        logger.error(f"Error in authenticated app: {str(e)}\n{traceback.format_exc()}")
        st.error("❌ An error occurred. Please refresh the page or contact support.")

        if DEBUG:
            with st.expander("🔧 Error Details"):
                st.code(f"{str(e)}\n\n{traceback.format_exc()}")


def main():
    """Main application entry point"""
    try:
        app = ApplicationManager()

        if not app.initialize_client():
            st.stop()

        cookies = app.initialize_cookies()
        if cookies is None:
            st.stop()

        # Either returns with an authenticated session or renders the login form and stops
        login(cookies)

        if st.session_state.get("authenticated"):
            render_authenticated_app(app)
        else:
            logger.warning("User reached main app without authentication")
            st.stop()

    except Exception as e:
        logger.critical(f"Critical error in main application: {str(e)}\n{traceback.format_exc()}")
        st.error("❌ A critical error occurred. Please refresh the page or contact support.")


if __name__ == "__main__":
    main()
