# app_sections/leave_requests.py

import time
import logging
import streamlit as st
import pandas as pd
from database import (
    apply_for_leave, fetch_user_leaves, fetch_school_leaves, update_leave_status,
    apply_student_leave, fetch_student_leaves_for_parent, fetch_school_student_leaves,
    update_student_leave_status
)
from utils import status_badge_html

logger = logging.getLogger(__name__)

LEAVE_TYPES = ["Casual", "Sick", "Emergency", "Other"]


def _leave_form(form_key):
    """Common leave request fields; returns (submitted, values)"""
    with st.form(form_key, clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            start_date = st.date_input("From")
        with col2:
            end_date = st.date_input("To")
        leave_type = st.selectbox("Leave Type", LEAVE_TYPES)
        reason = st.text_area("Reason")
        submitted = st.form_submit_button("Apply", type="primary", use_container_width=True)

    values = {
        "start_date": start_date.isoformat() if start_date else None,
        "end_date": end_date.isoformat() if end_date else None,
        "leave_type": leave_type,
        "reason": reason.strip(),
    }
    return submitted, values


def _validate_leave(values):
    if not values["reason"]:
        return "Please give a reason"
    if values["start_date"] and values["end_date"] and values["end_date"] < values["start_date"]:
        return "End date cannot be before start date"
    return None


def _render_leave_list(leaves, name_field=None):
    if not leaves:
        st.info("No leave requests yet.")
        return
    for leave in leaves:
        who = f"**{leave.get(name_field) or 'Unknown'}** · " if name_field else ""
        st.markdown(
            f"{who}{leave.get('start_date')} → {leave.get('end_date')} · {leave.get('leave_type') or ''} "
            f"{status_badge_html(leave.get('status'))}",
            unsafe_allow_html=True
        )
        if leave.get("reason"):
            st.caption(leave["reason"])
        if leave.get("principal_comment"):
            st.caption(f"💬 {leave['principal_comment']}")


def staff_leave(dashboard):
    """Staff (teacher/driver) leave application and history"""
    st.subheader("🗓️ My Leave")
    submitted, values = _leave_form("staff_leave_form")
    if submitted:
        error = _validate_leave(values)
        if error:
            st.error(error)
        elif apply_for_leave({
            **values,
            "school_id": dashboard["school_db_id"],
            "user_id": dashboard["user_id"],
            "status": "pending",
        }):
            st.success("✅ Leave request submitted")
            time.sleep(1)
            st.rerun()
        else:
            st.error("❌ Failed to submit leave request")

    st.markdown("#### History")
    _render_leave_list(fetch_user_leaves(dashboard["user_id"]))


def student_leave(dashboard):
    """Parent applies for leave on behalf of the selected child"""
    st.subheader("🗓️ Leave for " + (dashboard.get("student_name") or "Student"))
    if not dashboard.get("student_id"):
        st.info("No student linked to this account.")
        return

    submitted, values = _leave_form("student_leave_form")
    if submitted:
        error = _validate_leave(values)
        if error:
            st.error(error)
        elif apply_student_leave({
            **values,
            "school_id": dashboard["school_db_id"],
            "student_id": dashboard["student_id"],
            "parent_id": dashboard["user_id"],
            "status": "pending",
        }):
            st.success("✅ Leave request submitted")
            time.sleep(1)
            st.rerun()
        else:
            st.error("❌ Failed to submit leave request")

    st.markdown("#### History")
    _render_leave_list(fetch_student_leaves_for_parent(dashboard["user_id"]))


def _review_leaves(leaves, name_field, update_fn, key_prefix):
    pending = [l for l in leaves if (l.get("status") or "pending") == "pending"]
    if not pending:
        st.info("No pending requests.")
    for leave in pending:
        with st.container(border=True):
            st.markdown(
                f"**{leave.get(name_field) or 'Unknown'}** · {leave.get('start_date')} → {leave.get('end_date')} "
                f"· {leave.get('leave_type') or ''}"
            )
            if leave.get("reason"):
                st.caption(leave["reason"])
            comment = st.text_input("Comment", key=f"{key_prefix}_comment_{leave['id']}")
            col1, col2 = st.columns(2)
            with col1:
                if st.button("✅ Approve", key=f"{key_prefix}_approve_{leave['id']}", use_container_width=True):
                    if update_fn(leave["id"], "approved", comment):
                        st.rerun()
                    st.error("❌ Could not update request")
            with col2:
                if st.button("❌ Reject", key=f"{key_prefix}_reject_{leave['id']}", use_container_width=True):
                    if update_fn(leave["id"], "rejected", comment):
                        st.rerun()
                    st.error("❌ Could not update request")

    reviewed = [l for l in leaves if l.get("status") not in (None, "pending")]
    if reviewed:
        with st.expander(f"Reviewed ({len(reviewed)})"):
            st.dataframe(
                pd.DataFrame(reviewed)[[c for c in [name_field, "start_date", "end_date", "status", "principal_comment"]
                                        if c in reviewed[0]]],
                hide_index=True,
                use_container_width=True
            )


def review_leaves(dashboard):
    """Principal approval queue for staff and student leave"""
    st.subheader("🗓️ Leave Requests")
    tabs = st.tabs(["Staff", "Students"])
    with tabs[0]:
        _review_leaves(fetch_school_leaves(dashboard["school_db_id"]), "user_name",
                       update_leave_status, "staff_leave")
    with tabs[1]:
        _review_leaves(fetch_school_student_leaves(dashboard["school_db_id"]), "student_name",
                       update_student_leave_status, "student_leave")
