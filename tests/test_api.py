"""
Integration tests for FastAPI endpoints.

Tests verify classification, slicing and next start responses.
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402


def _dt(value):
    return datetime.datetime.fromisoformat(value)


class TestPublicRoutes:
    def test_health_endpoint_returns_ok(self, test_client):
        """GET /health should return 200 OK for monitoring."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_header(self, test_client):
        """Every response carries the request id from the logging middleware."""
        response = test_client.get("/health")

        assert response.headers.get("X-Request-ID")


class TestDayKindEndpoint:
    def test_christmas_eve(self, test_client):
        response = test_client.get("/api/day-kind/2020-12-24")

        assert response.status_code == 200
        assert response.json() == {"date": "2020-12-24", "kind": "holiday", "holiday": "Julafton"}

    def test_plain_weekday(self, test_client):
        data = test_client.get("/api/day-kind/2020-09-17").json()

        assert data["kind"] == "weekday"
        assert data["holiday"] is None

    def test_invalid_date(self, test_client):
        assert test_client.get("/api/day-kind/2020-02-30").status_code == 422


class TestSlicesEndpoint:
    def test_friday_to_monday(self, test_client, at):
        response = test_client.get(
            "/api/day-kinds",
            params={"start": "2020-09-18T00:00", "end": "2020-09-21T13:15"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["timezone"] == "Europe/Stockholm"
        assert [s["kind"] for s in data["slices"]] == ["weekday", "day_before_holiday", "holiday", "weekday"]
        assert _dt(data["slices"][0]["start"]) == at(2020, 9, 18)
        assert _dt(data["slices"][-1]["end"]) == at(2020, 9, 21, 13, 15)

    def test_offset_input_is_converted(self, test_client, at):
        response = test_client.get(
            "/api/day-kinds",
            params={"start": "2020-09-17T22:00:00+00:00", "end": "2020-09-18T22:00:00+00:00"},
        )

        assert response.status_code == 200
        slices = response.json()["slices"]
        assert len(slices) == 1
        assert _dt(slices[0]["start"]) == at(2020, 9, 18)

    def test_other_timezone(self, test_client):
        response = test_client.get(
            "/api/day-kinds",
            params={"start": "2020-09-18", "end": "2020-09-20", "tz": "Europe/Helsinki"},
        )

        assert response.status_code == 200
        assert response.json()["timezone"] == "Europe/Helsinki"

    def test_start_after_end(self, test_client):
        response = test_client.get("/api/day-kinds", params={"start": "2020-09-21", "end": "2020-09-18"})

        assert response.status_code == 400
        assert "after" in response.json()["detail"]

    def test_unknown_timezone(self, test_client):
        response = test_client.get(
            "/api/day-kinds",
            params={"start": "2020-09-18", "end": "2020-09-21", "tz": "Mars/Olympus_Mons"},
        )

        assert response.status_code == 400

    def test_malformed_instant(self, test_client):
        response = test_client.get("/api/day-kinds", params={"start": "yesterday", "end": "2020-09-21"})

        assert response.status_code == 400

    def test_span_limit(self, test_client, monkeypatch):
        monkeypatch.setenv("DAYKIND_MAX_SPAN_DAYS", "7")

        response = test_client.get("/api/day-kinds", params={"start": "2020-09-01", "end": "2020-09-21"})

        assert response.status_code == 400
        assert "7 days" in response.json()["detail"]

    def test_start_after_end_in_repeated_hour(self, test_client):
        """+01:00 is the second pass through 02:xx on the fall-back night."""
        response = test_client.get(
            "/api/day-kinds",
            params={"start": "2020-10-25T02:20+01:00", "end": "2020-10-25T02:40+02:00"},
        )

        assert response.status_code == 400
        assert "after" in response.json()["detail"]

    def test_last_supported_day(self, test_client):
        response = test_client.get("/api/day-kinds", params={"start": "9999-12-31T08:00", "end": "9999-12-31T12:00"})

        assert response.status_code == 400
        assert "9998" in response.json()["detail"]


class TestNextStartEndpoint:
    def test_weekday_from_saturday(self, test_client, at):
        response = test_client.get(
            "/api/day-kinds/next",
            params={"kind": "weekday", "start": "2020-10-24T13:37"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "weekday"
        assert _dt(data["next_start"]) == at(2020, 10, 26)

    def test_inclusive(self, test_client, at):
        response = test_client.get(
            "/api/day-kinds/next",
            params={"kind": "weekday", "start": "2020-10-21T13:37"},
        )

        assert _dt(response.json()["next_start"]) == at(2020, 10, 21, 13, 37)

    def test_defaults_to_now(self, test_client):
        response = test_client.get("/api/day-kinds/next", params={"kind": "holiday"})

        assert response.status_code == 200
        data = response.json()
        assert _dt(data["next_start"]) >= _dt(data["start"])

    def test_unknown_kind(self, test_client):
        response = test_client.get("/api/day-kinds/next", params={"kind": "party", "start": "2020-10-21"})

        assert response.status_code == 400
        assert "day_before_holiday" in response.json()["detail"]

    def test_last_supported_day(self, test_client):
        response = test_client.get("/api/day-kinds/next", params={"kind": "weekday", "start": "9999-12-31T08:00"})

        assert response.status_code == 400


class TestHolidaysEndpoint:
    def test_year_2020(self, test_client):
        response = test_client.get("/api/holidays/2020")

        assert response.status_code == 200
        data = response.json()
        assert data["country"] == "SE"
        assert len(data["holidays"]) == 16
        assert data["holidays"][-1] == {"date": "2020-12-31", "ordinal": 366, "name": "Nyårsafton"}

    def test_year_out_of_range(self, test_client):
        assert test_client.get("/api/holidays/1000").status_code == 400
