# tests/test_auth.py

import pytest
import streamlit as st

from auth.validators import validate_user_input, validate_credentials, validate_session_cookies
from auth.session_manager import SessionManager, role_matches
from auth.config import LOGIN_ROLES
from tests.fakes import FakeCookies, FakeSessionState
from tests.conftest import SCHOOL_ID


@pytest.fixture
def school_tables(school_tables):
    school_tables["users"] = [
        {"id": "u1", "school_id": SCHOOL_ID, "role": "teacher", "name": "Anil",
         "mobile": "9000000001", "password": "secret"},
        {"id": "u2", "school_id": SCHOOL_ID, "role": "parent", "name": "Ravi",
         "mobile": "9000000002", "password": "secret", "subscription_end_date": "2099-01-01"},
        {"id": "u3", "school_id": SCHOOL_ID, "role": "admin", "name": "Office",
         "mobile": "9000000003", "password": "secret"},
        {"id": "u4", "school_id": SCHOOL_ID, "role": "parent", "name": "Late Payer",
         "mobile": "9000000004", "password": "secret", "subscription_end_date": "2000-01-01"},
    ]
    school_tables["students"] = [
        {"id": "s1", "school_id": SCHOOL_ID, "name": "Asha", "class_name": "5A", "section": "A",
         "parent_user_id": "u2"},
    ]
    school_tables["daily_periods"] = []
    return school_tables


@pytest.fixture
def session_state(monkeypatch):
    state = FakeSessionState()
    monkeypatch.setattr(st, "session_state", state)
    return state


class TestValidateUserInput:
    def test_valid(self):
        assert validate_user_input("GVS01", "90000 00001", "secret", "teacher") == (True, "")

    @pytest.mark.parametrize("args, message", [
        (("", "9000000001", "pw", "teacher"), "School code is required"),
        (("GVS01", " ", "pw", "teacher"), "Mobile number is required"),
        (("GVS01", "12345", "pw", "teacher"), "Mobile number must contain 10 to 15 digits"),
        (("GVS01", "9000000001", "", "teacher"), "Password is required"),
        (("GVS01", "9000000001", "pw", "admin"), "Please select a valid role"),
    ])
    def test_invalid(self, args, message):
        assert validate_user_input(*args) == (False, message)

    def test_admin_not_offered_at_login(self):
        assert "admin" not in LOGIN_ROLES
        assert "driver" in LOGIN_ROLES


class TestRoleMatches:
    @pytest.mark.parametrize("requested, actual, expected", [
        ("teacher", "teacher", True),
        ("principal", "admin", True),
        ("principal", "principal", True),
        ("principal", "parent", False),
        ("teacher", "parent", False),
        ("parent", "student", False),
        ("teacher", None, False),
    ])
    def test_roles(self, requested, actual, expected):
        assert role_matches(requested, actual) is expected


class TestValidateCredentials:
    def test_inputs_are_cleaned(self, client):
        dashboard = validate_credentials(" gvs01 ", "90000-00001", "secret", "teacher")
        assert dashboard["user_id"] == "u1"

    def test_bad_password(self, client):
        assert validate_credentials("GVS01", "9000000001", "wrong", "teacher") is None

    def test_parent_cannot_sign_in_as_principal(self, client):
        assert validate_credentials("GVS01", "9000000002", "secret", "principal") is None

    def test_expired_parent_cannot_sign_in_as_staff(self, client):
        assert validate_credentials("GVS01", "9000000004", "secret", "teacher") is None

    def test_admin_signs_in_as_principal(self, client):
        dashboard = validate_credentials("GVS01", "9000000003", "secret", "principal")
        assert dashboard["user_id"] == "u3"
        assert dashboard["user_role"] == "admin"


class TestSessionCookies:
    def test_not_authenticated(self):
        assert validate_session_cookies({"authenticated": "false"}) is False
        assert validate_session_cookies({}) is False

    def test_restores_matching_role(self, client, session_state):
        cookies = FakeCookies(authenticated="true", school_code="GVS01", mobile="9000000002", role="parent")

        assert validate_session_cookies(cookies) is True
        assert session_state.authenticated is True
        assert session_state.role == "parent"
        assert session_state.student_id == "s1"

    def test_tampered_role_is_rejected(self, client, session_state):
        cookies = FakeCookies(authenticated="true", school_code="GVS01", mobile="9000000002", role="principal")

        assert validate_session_cookies(cookies) is False
        assert "authenticated" not in session_state
        assert "dashboard" not in session_state


class TestRefreshDashboard:
    def test_selected_child_is_persisted(self, client, session_state):
        cookies = FakeCookies(student_id="")
        session_state.update(role="parent", school_code="GVS01", mobile="9000000002",
                             username="Ravi", student_id=None, cookies=cookies)

        assert SessionManager.refresh_dashboard() is True
        assert session_state.student_id == "s1"
        assert cookies["student_id"] == "s1"
        assert cookies.saves == 1

    def test_unknown_user(self, client, session_state):
        cookies = FakeCookies()
        session_state.update(role="parent", school_code="GVS01", mobile="9999999999",
                             username="Ghost", cookies=cookies)

        assert SessionManager.refresh_dashboard() is False
        assert cookies.saves == 0
