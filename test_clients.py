"""Tests for the Toggl client with requests stubbed out."""

from datetime import datetime, timezone

import pytest
import requests

import clients
from clients import ApiError, TogglClient
from models import TimeEntry

CONFIG = {"toggl": {"api_token": "secret", "workspace_id": 42}}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload or {}

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self._payload


class Recorder:
    """Replaces requests.request and returns queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def row(**overrides):
    data = {
        "id": 1764,
        "client": "ACME",
        "project": "ABC",
        "description": "Working on concept",
        "start": "2026-01-26T09:00:00+01:00",
        "dur": 5_400_000,
        "is_billable": True,
        "tags": ["OPS-12", "Jira"],
    }
    data.update(overrides)
    return data


@pytest.fixture
def client():
    return TogglClient(CONFIG)


def install(monkeypatch, *responses) -> Recorder:
    recorder = Recorder(*responses)
    monkeypatch.setattr(clients.requests, "request", recorder)
    return recorder


# ---------------------------------------------------------------------------
# to_entry
# ---------------------------------------------------------------------------

class TestToEntry:

    def test_fields(self, client):
        entry = client.to_entry(row())
        assert entry.id == 1764
        assert entry.client == "ACME"
        assert entry.project == "ABC"
        assert entry.gateway is client
        assert entry.billable is True
        assert entry.duration == pytest.approx(1.5)
        assert entry.ticket == "OPS-12"
        assert entry.logged is True

    def test_start_parsed(self, client):
        entry = client.to_entry(row(start="2026-01-26T08:00:00Z"))
        assert entry.entry_date == datetime(2026, 1, 26, 8, 0, tzinfo=timezone.utc)

    def test_missing_optional_values(self, client):
        entry = client.to_entry(
            {"id": 1, "client": None, "project": None, "description": None, "tags": None}
        )
        assert entry.client == ""
        assert entry.project == ""
        assert entry.entry_date is None
        assert entry.duration == 0.0
        assert entry.tags == []
        assert entry.ticket is None


# ---------------------------------------------------------------------------
# fetch_time_entries
# ---------------------------------------------------------------------------

class TestFetch:

    def test_single_page(self, client, monkeypatch):
        recorder = install(
            monkeypatch, FakeResponse(payload={"total_count": 1, "data": [row()]})
        )
        entries = client.fetch_time_entries("2026-01-26", "2026-02-01")

        assert [e.id for e in entries] == [1764]
        method, url, kwargs = recorder.calls[0]
        assert method == "GET"
        assert url.endswith("/reports/api/v2/details")
        assert kwargs["params"]["workspace_id"] == 42
        assert kwargs["params"]["since"] == "2026-01-26"
        assert kwargs["params"]["until"] == "2026-02-01"
        assert kwargs["auth"] == ("secret", "api_token")

    def test_pagination(self, client, monkeypatch):
        recorder = install(
            monkeypatch,
            FakeResponse(payload={"total_count": 3, "data": [row(id=1), row(id=2)]}),
            FakeResponse(payload={"total_count": 3, "data": [row(id=3)]}),
        )
        entries = client.fetch_time_entries("2026-01-26", "2026-02-01")

        assert [e.id for e in entries] == [1, 2, 3]
        assert [c[2]["params"]["page"] for c in recorder.calls] == [1, 2]

    def test_empty(self, client, monkeypatch):
        install(monkeypatch, FakeResponse(payload={"total_count": 0, "data": []}))
        assert client.fetch_time_entries("2026-01-26", "2026-02-01") == []


# ---------------------------------------------------------------------------
# save_time_entry
# ---------------------------------------------------------------------------

class TestSave:

    def test_put_payload(self, client, monkeypatch):
        recorder = install(monkeypatch, FakeResponse())
        entry = client.to_entry(row(tags=["OPS-12"]))
        entry.add_tag("Jira")

        assert entry.save() is entry

        method, url, kwargs = recorder.calls[0]
        assert method == "PUT"
        assert url.endswith("/api/v9/workspaces/42/time_entries/1764")
        assert kwargs["json"] == {
            "description": "Working on concept",
            "tags": ["OPS-12", "Jira"],
            "billable": True,
            "duration": 5400,
        }

    def test_error_propagates_through_entry(self, client, monkeypatch):
        install(monkeypatch, FakeResponse(status_code=401, reason="Unauthorized"))
        entry = TimeEntry(client, 1, "ACME", "ABC", "x")
        with pytest.raises(ApiError) as exc_info:
            entry.save()
        assert exc_info.value.status_code == 401
        assert "Authentication failed" in str(exc_info.value)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------

class TestErrors:

    @pytest.mark.parametrize(
        "status, fragment",
        [
            (403, "Access denied"),
            (404, "not found"),
            (429, "Too many requests"),
            (503, "Service unavailable"),
            (418, "HTTP 418 - I'm a teapot"),
        ],
    )
    def test_http_status(self, client, monkeypatch, status, fragment):
        install(monkeypatch, FakeResponse(status_code=status, reason="I'm a teapot"))
        with pytest.raises(ApiError) as exc_info:
            client.fetch_time_entries("2026-01-26", "2026-02-01")
        assert fragment in str(exc_info.value)
        assert exc_info.value.status_code == status

    def test_connection_error(self, client, monkeypatch):
        install(monkeypatch, requests.exceptions.ConnectionError())
        with pytest.raises(ApiError, match="Cannot connect"):
            client.fetch_time_entries("2026-01-26", "2026-02-01")

    def test_timeout(self, client, monkeypatch):
        install(monkeypatch, requests.exceptions.Timeout())
        with pytest.raises(ApiError, match="timed out"):
            client.fetch_time_entries("2026-01-26", "2026-02-01")
