# tests/test_attendance.py

import pytest

from database import (
    fetch_daily_attendance_status, fetch_class_attendance_today, submit_attendance,
    fetch_attendance_history, summarize_attendance_history
)
from tests.fakes import api_error, connection_error
from tests.conftest import SCHOOL_ID, TODAY


@pytest.fixture
def school_tables(school_tables):
    school_tables["students"] = [
        {"id": "s1", "school_id": SCHOOL_ID, "name": "Asha", "class_name": "5A"},
        {"id": "s2", "school_id": SCHOOL_ID, "name": "Bala", "class_name": "5A"},
        {"id": "s3", "school_id": SCHOOL_ID, "name": "Chitra", "class_name": "6B"},
    ]
    school_tables["attendance"] = [
        {"id": 1, "school_id": SCHOOL_ID, "student_id": "s1", "date": TODAY, "status": "present",
         "students": {"class_name": "5A"}},
        {"id": 2, "school_id": SCHOOL_ID, "student_id": "s2", "date": TODAY, "status": "absent",
         "students": {"class_name": "5A"}},
        {"id": 3, "school_id": SCHOOL_ID, "student_id": "s3", "date": "2024-06-09", "status": "present",
         "students": {"class_name": "6B"}},
    ]
    return school_tables


class TestDailyStatus:
    def test_distinct_classes_from_join(self, client):
        assert fetch_daily_attendance_status(SCHOOL_ID, TODAY) == ["5A"]

    def test_no_attendance(self, client):
        assert fetch_daily_attendance_status(SCHOOL_ID, "2024-01-01") == []

    def test_falls_back_when_join_fails(self, client):
        client.fail("attendance", api_error("relationship not found", "PGRST200"),
                    columns="students!inner(class_name)")

        assert fetch_daily_attendance_status(SCHOOL_ID, TODAY) == ["5A"]
        assert client.calls_to("students")

    def test_fallback_skips_student_lookup_when_empty(self, client):
        client.fail("attendance", api_error(), columns="students!inner(class_name)")

        assert fetch_daily_attendance_status(SCHOOL_ID, "2024-01-01") == []
        assert not client.calls_to("students")

    def test_fallback_failure_returns_empty(self, client):
        client.fail("attendance", api_error())
        assert fetch_daily_attendance_status(SCHOOL_ID, TODAY) == []

    def test_unreachable_skips_fallback(self, client):
        client.fail("attendance", connection_error())

        assert fetch_daily_attendance_status(SCHOOL_ID, TODAY) == []
        assert len(client.calls_to("attendance")) == 1


class TestClassAttendance:
    def test_statuses_by_student(self, client):
        assert fetch_class_attendance_today(SCHOOL_ID, "5A", TODAY) == {"s1": "present", "s2": "absent"}

    def test_error_gives_empty_mapping(self, client):
        client.fail("attendance", api_error())
        assert fetch_class_attendance_today(SCHOOL_ID, "5A", TODAY) == {}

    def test_unreachable_gives_empty_mapping(self, client):
        client.fail("attendance", connection_error())
        assert fetch_class_attendance_today(SCHOOL_ID, "5A", TODAY) == {}


class TestSubmitAttendance:
    def test_empty_records(self, client):
        assert submit_attendance(SCHOOL_ID, "t1", "5A", []) is False
        assert client.calls == []

    def test_overwrites_same_student_and_day(self, client, fixed_today):
        ok = submit_attendance(SCHOOL_ID, "t1", "5A", [
            {"student_id": "s1", "status": "leave"},
            {"student_id": "s2", "status": "present"},
        ])

        assert ok is True
        call = client.calls_to("attendance", "upsert")[0]
        assert call.on_conflict == "student_id,date"
        assert {r["marked_by_user_id"] for r in call.payload} == {"t1"}
        today_rows = [r for r in client.tables["attendance"] if r["date"] == TODAY]
        assert len(today_rows) == 2
        assert {r["student_id"]: r["status"] for r in today_rows} == {"s1": "leave", "s2": "present"}

    def test_backend_error(self, client, fixed_today):
        client.fail("attendance", api_error("Could not find column", "PGRST204"), action="upsert")
        assert submit_attendance(SCHOOL_ID, "t1", "5A", [{"student_id": "s1", "status": "present"}]) is False

    def test_backend_unreachable(self, client, fixed_today):
        client.fail("attendance", connection_error(), action="upsert")
        assert submit_attendance(SCHOOL_ID, "t1", "5A", [{"student_id": "s1", "status": "present"}]) is False


class TestHistory:
    def test_newest_first_with_marker_name(self, client):
        client.tables["attendance"][0]["users"] = {"name": "Mrs Rao"}
        client.tables["attendance"].append(
            {"id": 4, "student_id": "s1", "date": "2024-06-01", "status": "leave"}
        )

        history = fetch_attendance_history("s1")

        assert [h["date"] for h in history] == [TODAY, "2024-06-01"]
        assert history[0]["marked_by_name"] == "Mrs Rao"
        assert history[1]["marked_by_name"] is None

    def test_limited_to_configured_window(self, client):
        client.tables["attendance"] = [
            {"id": i, "student_id": "s9", "date": f"2024-{1 + i // 28:02d}-{1 + i % 28:02d}", "status": "present"}
            for i in range(80)
        ]
        assert len(fetch_attendance_history("s9")) == 60

    def test_error(self, client):
        client.fail("attendance", api_error())
        assert fetch_attendance_history("s1") == []

    def test_summary(self):
        summary = summarize_attendance_history([
            {"status": "present"}, {"status": "present"}, {"status": "absent"}, {"status": "leave"},
        ])
        assert summary == {"present": 2, "absent": 1, "leave": 1, "total": 4, "attendance_rate": 50.0}

    def test_summary_of_nothing(self):
        assert summarize_attendance_history([])["attendance_rate"] == 0.0
