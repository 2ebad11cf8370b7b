# app_manager.py
import html
import streamlit as st
import logging
from typing import Dict, Callable, Optional
from streamlit_cookies_manager import EncryptedCookieManager

from config import APP_CONFIG, COOKIE_PASSWORD
from database import get_client
from utils import format_role, status_badge_html

logger = logging.getLogger(__name__)

class ApplicationManager:
    """Main application management class"""

    def __init__(self):
        self.setup_page_config()
        self.setup_custom_css()

    def setup_page_config(self):
        """Setup Streamlit page configuration"""
        try:
            st.set_page_config(
                page_title=APP_CONFIG["page_title"],
                page_icon="🎓",
                layout="centered",
                initial_sidebar_state="collapsed",
                menu_items={
                    'Get Help': None,
                    'Report a bug': None,
                    'About': f"{APP_CONFIG['app_name']} v{APP_CONFIG['version']}"
                }
            )
        except st.errors.StreamlitAPIException:
            # Page config already set
            pass

    def setup_custom_css(self):
        """Mobile-first styling"""
        st.markdown("""
        <style>
        footer {visibility: hidden;}

        .stApp {
            background-color: #f8fafc;
        }

        .block-container {
            padding-top: 1rem;
            padding-left: 1rem;
            padding-right: 1rem;
            max-width: 480px !important;
        }

        .main-header {
            background: linear-gradient(135deg, #059669, #047857);
            border-radius: 2rem;
            padding: 1rem 1.25rem;
            margin-bottom: 1rem;
            box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        }

        .main-header h2 {
            color: white;
            font-size: 22px;
            font-weight: 900;
            margin: 0;
            line-height: 1.2;
        }

        .main-header p {
            color: #d1fae5;
            font-size: 12px;
            margin: 0;
            text-transform: uppercase;
            letter-spacing: 0.1em;
        }

        .user-info-card {
            background-color: #f8f9fa;
            border: 1px solid #dee2e6;
            border-radius: 8px;
            padding: 15px;
            margin-bottom: 20px;
        }

        @media (max-width: 767px) {
            .block-container {
                padding-top: 0.5rem !important;
                padding-left: 0.5rem !important;
                padding-right: 0.5rem !important;
            }

            .stTextInput > div > div > input {
                font-size: 16px; /* Prevents zoom on iOS */
            }

            button, .stSelectbox, .stTextInput {
                min-height: 44px;
            }
        }
        </style>
        """, unsafe_allow_html=True)

    def initialize_client(self) -> bool:
        """Make sure the backend client can be created"""
        try:
            get_client()
            return True
        except RuntimeError as e:
            logger.error(f"Backend client initialization failed: {str(e)}")
            st.error("❌ Backend is not configured. Please contact system administrator.")
            return False

    def initialize_cookies(self) -> Optional[EncryptedCookieManager]:
        """Initialize encrypted cookie manager"""
        try:
            cookies = EncryptedCookieManager(
                prefix=APP_CONFIG["cookie_prefix"],
                password=COOKIE_PASSWORD
            )
            if not cookies.ready():
                # Component has not loaded yet; Streamlit reruns once it has
                st.stop()

            st.session_state["cookies"] = cookies
            return cookies

        except Exception as e:
            logger.error(f"Cookie manager initialization failed: {str(e)}")
            st.error("❌ Session management initialization failed. Please refresh the page.")
            return None

    def render_header(self, dashboard: dict):
        """School name and greeting"""
        st.markdown(f"""
        <div class="main-header">
            <p>{html.escape(dashboard.get('school_name') or APP_CONFIG['page_title'])}</p>
            <h2>Hi, {html.escape((dashboard.get('user_name') or '').split(' ')[0] or 'there')} 👋</h2>
        </div>
        """, unsafe_allow_html=True)

    def render_user_info(self, role: str, dashboard: dict):
        """Render user information in sidebar"""
        with st.sidebar:
            st.markdown(f"""
            <div class="user-info-card">
                <h4>👤 User Information</h4>
                <p><strong>Name:</strong> {html.escape((dashboard.get('user_name') or '').title())}</p>
                <p><strong>Role:</strong> {format_role(role)}</p>
                <p><strong>School:</strong> {html.escape(dashboard.get('school_code') or '')}</p>
                <p><strong>Login Time:</strong> {st.session_state.get('login_time', 'Unknown')}</p>
                <p>{status_badge_html(dashboard.get('subscription_status'))}</p>
            </div>
            """, unsafe_allow_html=True)

    def get_navigation_options(self, role: str) -> Dict[str, Callable]:
        """Get home-view sections for a role"""
        from app_sections import (
            principal_dashboard, teacher_dashboard, parent_dashboard,
            student_dashboard, driver_dashboard, notice_board, leave_requests
        )

        if role in ("principal", "admin"):
            return {
                "🏫 Overview": principal_dashboard.school_overview,
                "👩‍🏫 Teachers": principal_dashboard.teacher_analytics,
                "📒 Homework": principal_dashboard.homework_analytics,
                "📢 Notices": notice_board.manage_notices,
                "🗓️ Leave": leave_requests.review_leaves,
                "🚌 Vehicles": principal_dashboard.manage_vehicles,
                "📚 Curriculum": principal_dashboard.manage_curriculum,
                "👥 Directory": principal_dashboard.user_directory,
                "⚙️ Settings": principal_dashboard.school_settings,
            }
        elif role == "teacher":
            return {
                "📅 Today": teacher_dashboard.todays_periods,
                "✏️ Submit": teacher_dashboard.submit_period,
                "🧾 Attendance": teacher_dashboard.mark_attendance,
                "📚 History": teacher_dashboard.period_history,
                "📢 Notices": notice_board.notice_board,
                "🗓️ Leave": leave_requests.staff_leave,
            }
        elif role == "parent":
            return {
                "📒 Homework": parent_dashboard.homework,
                "🧾 Attendance": parent_dashboard.attendance_history,
                "🗓️ Leave": leave_requests.student_leave,
                "📢 Notices": notice_board.notice_board,
            }
        elif role == "student":
            return {
                "📒 My Day": student_dashboard.my_day,
                "🧾 Attendance": student_dashboard.my_attendance,
                "📢 Notices": notice_board.notice_board,
            }
        elif role == "driver":
            return {
                "🚌 Vehicle": driver_dashboard.my_vehicle,
                "🗓️ Leave": leave_requests.staff_leave,
                "📢 Notices": notice_board.notice_board,
            }

        logger.warning(f"No navigation configured for role {role}")
        return {}
