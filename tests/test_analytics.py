# tests/test_analytics.py

import pytest

from database import (
    build_teacher_progress, fetch_principal_analytics, classify_homework_status,
    fetch_homework_analytics, compute_attendance_completion
)
from tests.fakes import api_error
from tests.conftest import SCHOOL_ID, TODAY


@pytest.fixture
def school_tables(school_tables):
    school_tables["users"] = [
        {"id": "t1", "school_id": SCHOOL_ID, "role": "teacher", "name": "Anil", "mobile": "9000000001"},
        {"id": "t2", "school_id": SCHOOL_ID, "role": "teacher", "name": "Bina", "mobile": "9000000002"},
        {"id": "p1", "school_id": SCHOOL_ID, "role": "parent", "name": "Ravi", "mobile": "9000000003"},
    ]
    school_tables["daily_periods"] = [
        {"school_id": SCHOOL_ID, "teacher_user_id": "t1", "date": TODAY, "period_number": 1, "class_name": "5A"},
        {"school_id": SCHOOL_ID, "teacher_user_id": "t1", "date": TODAY, "period_number": 2, "class_name": "5A"},
        {"school_id": SCHOOL_ID, "teacher_user_id": "t1", "date": "2024-06-09", "period_number": 1, "class_name": "6B"},
    ]
    school_tables["students"] = [
        {"id": "s1", "school_id": SCHOOL_ID, "name": "Asha", "class_name": "5A", "users": {"name": "Ravi"}},
        {"id": "s2", "school_id": SCHOOL_ID, "name": "Bala", "class_name": "5A", "users": None},
        {"id": "s3", "school_id": SCHOOL_ID, "name": "Chitra", "class_name": "6B"},
    ]
    school_tables["homework_submissions"] = [
        {"student_id": "s1", "date": TODAY, "period_number": 1, "status": "completed"},
        {"student_id": "s1", "date": TODAY, "period_number": 2, "status": "completed"},
    ]
    return school_tables


class TestTeacherProgress:
    def test_counts_per_teacher(self):
        progress = build_teacher_progress(
            [{"id": "a", "name": "A", "mobile": "1"}, {"id": "b", "name": "B", "mobile": "2"}],
            [{"teacher_user_id": "a"}, {"teacher_user_id": "a"}, {"teacher_user_id": "x"}],
            8,
        )
        assert [(p["id"], p["periods_submitted"], p["total_periods"]) for p in progress] == [("a", 2, 8), ("b", 0, 8)]

    def test_principal_analytics(self, client):
        analytics = fetch_principal_analytics("GVS01", TODAY)

        assert analytics["total_teachers"] == 2
        assert analytics["active_teachers"] == 1
        assert analytics["inactive_teachers"] == 1
        assert analytics["total_periods_expected"] == 12
        assert analytics["total_periods_submitted"] == 2

    def test_period_count_defaults_when_config_unreadable(self, client):
        client.fail("schools", api_error(), columns="total_periods")
        analytics = fetch_principal_analytics("GVS01", TODAY)
        assert analytics["total_periods_expected"] == 16

    def test_unknown_school(self, client):
        assert fetch_principal_analytics("XXX", TODAY) is None

    def test_error(self, client):
        client.fail("daily_periods", api_error())
        assert fetch_principal_analytics("GVS01", TODAY) is None


class TestHomework:
    @pytest.mark.parametrize("total, done, status", [
        (0, 0, "no_homework"), (3, 3, "completed"), (3, 4, "completed"),
        (3, 1, "partial"), (3, 0, "pending"),
    ])
    def test_classification(self, total, done, status):
        assert classify_homework_status(total, done) == status

    def test_homework_analytics(self, client):
        analytics = fetch_homework_analytics("GVS01", TODAY)
        by_id = {s["student_id"]: s for s in analytics["student_list"]}

        assert analytics["total_students"] == 3
        assert analytics["fully_completed"] == 1
        assert analytics["pending"] == 1
        assert analytics["partial_completed"] == 0
        assert by_id["s1"]["parent_name"] == "Ravi"
        assert by_id["s2"]["parent_name"] == "Unknown"
        assert (by_id["s2"]["total_homeworks"], by_id["s2"]["status"]) == (2, "pending")
        assert by_id["s3"]["status"] == "no_homework"

    def test_unknown_school(self, client):
        assert fetch_homework_analytics("XXX", TODAY) is None

    def test_error(self, client):
        client.fail("homework_submissions", api_error())
        assert fetch_homework_analytics("GVS01", TODAY) is None


class TestAttendanceCompletion:
    def test_partial(self):
        result = compute_attendance_completion(["5A"], ["5A", "6B", "7C"])
        assert result["completed"] == 1
        assert result["total"] == 3
        assert result["pending_classes"] == ["6B", "7C"]
        assert result["completion_rate"] == 33.3

    def test_ignores_classes_not_in_school(self):
        result = compute_attendance_completion(["5A", "GONE"], ["5A"])
        assert (result["completed"], result["completion_rate"]) == (1, 100.0)

    def test_no_classes(self):
        assert compute_attendance_completion([], [])["completion_rate"] == 0.0
