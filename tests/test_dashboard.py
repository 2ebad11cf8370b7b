# tests/test_dashboard.py

import pytest

from database import fetch_dashboard_data
from tests.fakes import api_error, connection_error
from tests.conftest import SCHOOL_ID, TODAY


@pytest.fixture
def school_tables(school_tables):
    school_tables["users"] = [
        {"id": "u-teacher", "school_id": SCHOOL_ID, "role": "teacher", "name": "Anil Kumar",
         "mobile": "9000000001", "password": "pw", "subscription_end_date": "2000-01-01"},
        {"id": "u-parent", "school_id": SCHOOL_ID, "role": "parent", "name": "Ravi",
         "mobile": "9000000002", "password": "pw", "subscription_end_date": "2099-01-01"},
        {"id": "u-student", "school_id": SCHOOL_ID, "role": "student", "name": "Asha",
         "mobile": "9000000003", "password": "pw", "subscription_end_date": "2099-01-01"},
        {"id": "u-expired", "school_id": SCHOOL_ID, "role": "parent", "name": "Late Payer",
         "mobile": "9000000004", "password": "pw", "subscription_end_date": "2024-06-09"},
    ]
    school_tables["students"] = [
        {"id": "s1", "school_id": SCHOOL_ID, "name": "Asha", "class_name": "5A", "section": "A",
         "father_name": "Ravi", "parent_user_id": "u-parent"},
        {"id": "s2", "school_id": SCHOOL_ID, "name": "Kiran", "class_name": "2B", "section": None,
         "parent_user_id": "u-parent"},
    ]
    school_tables["attendance"] = [
        {"student_id": "s1", "date": TODAY, "status": "present"},
        {"student_id": "s2", "date": "2024-06-09", "status": "absent"},
    ]
    school_tables["daily_periods"] = [
        {"id": 1, "school_id": SCHOOL_ID, "teacher_user_id": "u-teacher", "date": TODAY, "period_number": 2,
         "class_name": "5A", "subject": "Maths"},
        {"id": 2, "school_id": SCHOOL_ID, "teacher_user_id": "u-teacher", "date": "2024-06-09", "period_number": 1},
    ]
    return school_tables


class TestLogin:
    def test_unknown_school(self, client, fixed_today):
        assert fetch_dashboard_data("NOPE", "9000000001", "teacher", "pw") is None

    def test_wrong_password(self, client, fixed_today):
        assert fetch_dashboard_data("GVS01", "9000000001", "teacher", "bad") is None

    def test_school_code_case_insensitive(self, client, fixed_today):
        data = fetch_dashboard_data(" gvs01 ", "9000000001", "teacher", "pw")
        assert data["school_db_id"] == SCHOOL_ID
        assert data["school_code"] == "GVS01"

    def test_session_restore_without_password(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000002", "parent")
        assert data["user_id"] == "u-parent"

    def test_backend_error(self, client, fixed_today):
        client.fail("users", api_error())
        assert fetch_dashboard_data("GVS01", "9000000001", "teacher", "pw") is None

    def test_backend_unreachable(self, client, fixed_today):
        client.fail("schools", connection_error())
        assert fetch_dashboard_data("GVS01", "9000000001", "teacher", "pw") is None

    def test_user_role_is_reported(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000002", "teacher", "pw")
        assert data["user_role"] == "parent"


class TestTeacher:
    def test_todays_periods(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000001", "teacher", "pw")

        assert [p["period_number"] for p in data["periods"]] == [2]
        assert data["periods"][0]["status"] == "submitted"
        assert data["total_periods"] == 6

    def test_staff_follow_school_subscription(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000001", "teacher", "pw")

        assert data["subscription_status"] == "active"
        assert data["subscription_end_date"] == "2099-12-31"

    def test_school_switched_off(self, client, fixed_today):
        client.tables["schools"][0]["is_active"] = False
        data = fetch_dashboard_data("GVS01", "9000000001", "teacher", "pw")
        assert data["subscription_status"] == "inactive"

    def test_default_period_count(self, client, fixed_today):
        client.tables["schools"][0]["total_periods"] = None
        assert fetch_dashboard_data("GVS01", "9000000001", "teacher", "pw")["total_periods"] == 8


class TestParent:
    def test_first_child_by_default(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000002", "parent", "pw")

        assert data["student_id"] == "s1"
        assert data["class_name"] == "5A"
        assert data["section"] == "A"
        assert data["today_attendance"] == "present"
        assert [s["id"] for s in data["siblings"]] == ["s1", "s2"]
        assert data["subscription_end_date"] == "2099-01-01"

    def test_selected_sibling(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000002", "parent", "pw", student_id="s2")

        assert data["student_name"] == "Kiran"
        assert data["section"] == ""
        assert data["today_attendance"] == "pending"

    def test_unknown_sibling_leaves_no_student(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000002", "parent", "pw", student_id="other")
        assert data["student_id"] is None
        assert data["today_attendance"] == "pending"

    def test_own_subscription_expired(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000004", "parent", "pw")

        assert data["subscription_status"] == "inactive"
        assert data["school_subscription_status"] == "active"
        assert data["siblings"] == []


class TestStudent:
    def test_matched_by_name_when_not_linked(self, client, fixed_today):
        data = fetch_dashboard_data("GVS01", "9000000003", "student", "pw")

        assert data["student_id"] == "s1"
        assert data["father_name"] == "Ravi"
        assert data["linked_parent_id"] == "u-parent"
        assert data["today_attendance"] == "present"

    def test_linked_account_wins(self, client, fixed_today):
        client.tables["students"][1]["student_user_id"] = "u-student"
        data = fetch_dashboard_data("GVS01", "9000000003", "student", "pw")
        assert data["student_id"] == "s2"

    def test_no_student_record(self, client, fixed_today):
        client.tables["students"] = []
        data = fetch_dashboard_data("GVS01", "9000000003", "student", "pw")

        assert data["user_id"] == "u-student"
        assert "student_id" not in data
