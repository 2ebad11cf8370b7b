# app_sections/notice_board.py

import html
import time
import logging
import streamlit as st
from database import fetch_notices, submit_notice, delete_notice, get_ist_date
from database.notices import NOTICE_TARGETS
from utils import format_role

logger = logging.getLogger(__name__)

NOTICE_CATEGORIES = ["General", "Holiday", "Exam", "Event", "Fee", "Transport"]


def render_notice_card(notice):
    """Render one notice"""
    title = html.escape(notice.get("title") or "Untitled")
    message = html.escape(notice.get("message") or "")
    meta = " · ".join(filter(None, [
        notice.get("date"),
        notice.get("category"),
        f"For {format_role(notice.get('target'))}" if notice.get("target") else None,
    ]))
    st.markdown(
        f"""
        <div style='background:white;border:1px solid #e2e8f0;border-radius:1.25rem;padding:1rem;margin-bottom:0.75rem;'>
            <div style='font-weight:800;color:#0f172a;'>{title}</div>
            <div style='font-size:11px;color:#64748b;margin:2px 0 8px 0;'>{html.escape(meta)}</div>
            <div style='color:#334155;white-space:pre-wrap;'>{message}</div>
        </div>
        """,
        unsafe_allow_html=True
    )


def notice_board(dashboard):
    """Read-only list of notices for the current role"""
    st.subheader("📢 Notices")
    notices = fetch_notices(dashboard["school_code"], st.session_state.get("role"))
    if not notices:
        st.info("No notices yet.")
        return
    for notice in notices:
        render_notice_card(notice)


def manage_notices(dashboard):
    """Principal view: post new notices and delete existing ones"""
    st.subheader("📢 Notices")

    with st.form("new_notice_form", clear_on_submit=True):
        title = st.text_input("Title")
        message = st.text_area("Message")
        col1, col2 = st.columns(2)
        with col1:
            category = st.selectbox("Category", NOTICE_CATEGORIES)
        with col2:
            target = st.selectbox("Audience", NOTICE_TARGETS, format_func=format_role)
        posted = st.form_submit_button("Post Notice", type="primary", use_container_width=True)

    if posted:
        if not title.strip() or not message.strip():
            st.error("Title and message are required")
        elif submit_notice({
            "school_id": dashboard["school_code"],
            "date": get_ist_date(),
            "title": title.strip(),
            "message": message.strip(),
            "category": category,
            "target": target,
        }):
            st.success("✅ Notice posted")
            time.sleep(1)
            st.rerun()
        else:
            st.error("❌ Failed to post notice")

    st.markdown("---")
    notices = fetch_notices(dashboard["school_code"], st.session_state.get("role"))
    if not notices:
        st.info("No notices posted yet.")
        return

    for notice in notices:
        col1, col2 = st.columns([5, 1])
        with col1:
            render_notice_card(notice)
        with col2:
            if st.button("🗑️", key=f"delete_notice_{notice['id']}", help="Delete notice"):
                success, error = delete_notice(notice["id"])
                if success:
                    st.success("Notice deleted")
                    time.sleep(0.5)
                    st.rerun()
                else:
                    st.error(f"❌ {error}")
