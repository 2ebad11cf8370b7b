# app_sections/user_profile.py

import html
import streamlit as st
import logging
from auth.session_manager import SessionManager
from utils import format_role, status_badge_html
from .skeletons import render_skeleton_profile

logger = logging.getLogger(__name__)

PROFILE_CSS = """
<style>
    .user-profile-card {
        background: linear-gradient(135deg, #2E8B57 0%, #228B22 100%);
        padding: 25px;
        border-radius: 2rem;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
        max-width: 420px !important;
        margin: auto;
    }
    .profile-header {
        text-align: center;
        color: white;
        margin-bottom: 20px;
    }
    .profile-avatar {
        font-size: 60px;
        margin-bottom: 10px;
    }
    .profile-name {
        font-size: 24px;
        font-weight: bold;
        margin-bottom: 5px;
    }
    .profile-role {
        font-size: 14px;
        opacity: 0.9;
        text-transform: uppercase;
        letter-spacing: 1px;
    }
    .profile-details {
        background: rgba(255, 255, 255, 0.1);
        padding: 15px;
        border-radius: 10px;
        margin-top: 15px;
    }
    .profile-detail-item {
        display: flex;
        justify-content: space-between;
        padding: 8px 0;
        border-bottom: 1px solid rgba(255, 255, 255, 0.2);
        color: white;
    }
    .profile-detail-item:last-child {
        border-bottom: none;
    }
    .detail-label {
        font-weight: 600;
        opacity: 0.8;
    }
</style>
"""


def profile_details(dashboard, role, login_time):
    """(label, value) pairs shown on the profile card"""
    details = [
        ("🏫 School", dashboard.get("school_name") or "-"),
        ("🔑 School Code", dashboard.get("school_code") or "-"),
        ("📱 Mobile", dashboard.get("mobile_number") or "-"),
    ]
    if role in ("parent", "student") and dashboard.get("student_name"):
        details.append(("🎒 Student", dashboard["student_name"]))
        details.append(("🏷️ Class", dashboard.get("class_name") or "-"))
    details.append(("📅 Valid Until", dashboard.get("subscription_end_date") or "-"))
    details.append(("🕐 Login Time", login_time or "Unknown"))
    return details


def user_profile(dashboard):
    """Profile card with subscription status"""
    if not dashboard:
        render_skeleton_profile()
        return

    role = st.session_state.get("role")
    st.markdown(PROFILE_CSS, unsafe_allow_html=True)

    rows = "".join(
        f"<div class='profile-detail-item'><span class='detail-label'>{label}:</span>"
        f"<span>{html.escape(str(value))}</span></div>"
        for label, value in profile_details(dashboard, role, st.session_state.get("login_time"))
    )
    st.markdown(f"""
    <div class="user-profile-card">
        <div class="profile-header">
            <div class="profile-avatar">👤</div>
            <div class="profile-name">{html.escape((dashboard.get('user_name') or '').title())}</div>
            <div class="profile-role">{format_role(role)}</div>
        </div>
        <div style="text-align:center;">{status_badge_html(dashboard.get('subscription_status'))}</div>
        <div class="profile-details">{rows}</div>
    </div>
    """, unsafe_allow_html=True)

    if dashboard.get("subscription_status") != "active":
        st.warning("⚠️ Your subscription is inactive. Please contact the school office to renew.")

    st.markdown("  ")
    if st.button("🔄 Refresh", use_container_width=True, type="secondary", key="profile_refresh"):
        SessionManager.refresh_dashboard()
        st.rerun()
