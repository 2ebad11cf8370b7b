# tests/test_utils.py

from datetime import date, datetime, timezone

from database import get_ist_date, parse_date, is_subscription_active, get_school_uuid
from tests.fakes import api_error, connection_error
from tests.conftest import SCHOOL_ID
from utils import clean_input, format_role, status_badge_html, metric_card_html


class TestIstDate:
    def test_late_utc_evening_is_next_day_in_india(self):
        assert get_ist_date(datetime(2024, 3, 1, 19, 0, tzinfo=timezone.utc)) == "2024-03-02"

    def test_before_offset_stays_same_day(self):
        assert get_ist_date(datetime(2024, 3, 1, 18, 29, tzinfo=timezone.utc)) == "2024-03-01"

    def test_naive_datetime_is_treated_as_utc(self):
        assert get_ist_date(datetime(2024, 12, 31, 18, 30)) == "2025-01-01"

    def test_default_is_formatted_date(self):
        assert len(get_ist_date()) == 10


class TestParseDate:
    def test_timestamp_string(self):
        assert parse_date("2024-05-01T10:00:00+00:00") == date(2024, 5, 1)

    def test_date_and_datetime(self):
        assert parse_date(date(2024, 5, 1)) == date(2024, 5, 1)
        assert parse_date(datetime(2024, 5, 1, 9, 0)) == date(2024, 5, 1)

    def test_missing_or_malformed(self):
        assert parse_date(None) is None
        assert parse_date("") is None
        assert parse_date("not-a-date") is None


class TestSubscription:
    def test_end_date_today_is_still_active(self):
        assert is_subscription_active("2024-06-10", "2024-06-10")

    def test_expired(self):
        assert not is_subscription_active("2024-06-09", "2024-06-10")

    def test_switched_off(self):
        assert not is_subscription_active("2099-01-01", "2024-06-10", is_active=False)

    def test_missing_end_date(self):
        assert not is_subscription_active(None, "2024-06-10")


class TestSchoolUuid:
    def test_code_is_case_and_space_insensitive(self, client):
        assert get_school_uuid("  gvs01 ") == SCHOOL_ID

    def test_unknown_code(self, client):
        assert get_school_uuid("NOPE") is None

    def test_empty_code(self, client):
        assert get_school_uuid("") is None
        assert client.calls == []

    def test_backend_error(self, client):
        client.fail("schools", api_error("timeout"))
        assert get_school_uuid("GVS01") is None

    def test_backend_unreachable(self, client):
        client.fail("schools", connection_error())
        assert get_school_uuid("GVS01") is None


class TestFormatting:
    def test_clean_input(self):
        assert clean_input(" +91 98765-43210 ", "mobile") == "919876543210"
        assert clean_input(" gvs01 ", "school_code") == "GVS01"
        assert clean_input("  jane   doe ", "name") == "Jane Doe"
        assert clean_input("   ", "name") == ""

    def test_format_role(self):
        assert format_role("principal") == "Principal"
        assert format_role(None) == "Unknown"

    def test_status_badge(self):
        badge = status_badge_html("no_homework")
        assert "No Homework" in badge
        assert "#94a3b8" in badge
        assert "Pending" in status_badge_html(None)

    def test_metric_card_escapes(self):
        assert "&lt;b&gt;" in metric_card_html("<b>", 3)
