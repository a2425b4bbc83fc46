"""API client for Toggl."""

from datetime import datetime

import requests

from models import TimeEntry

API_URL = "https://api.track.toggl.com/api/v9"
REPORTS_URL = "https://api.track.toggl.com/reports/api/v2"
USER_AGENT = "toggl-tags"


class ApiError(Exception):
    """User-friendly API error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def _handle_api_error(response: requests.Response, service: str) -> str:
    """Convert HTTP errors to user-friendly messages."""
    status = response.status_code

    messages = {
        401: f"{service}: Authentication failed. Check your API token!",
        403: f"{service}: Access denied. Check your workspace_id and API token!",
        404: f"{service}: Time entry or workspace not found.",
        429: f"{service}: Too many requests. Wait a moment and try again.",
        500: f"{service}: Server error. The service may be temporarily unavailable.",
        502: f"{service}: Bad gateway. The service may be temporarily unavailable.",
        503: f"{service}: Service unavailable. Try again later.",
    }

    return messages.get(status, f"{service}: HTTP {status} - {response.reason}")


def _parse_start(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TogglClient:
    """Client for the Toggl track and reports APIs."""

    def __init__(self, config: dict):
        self.token = config["toggl"]["api_token"]
        self.workspace_id = config["toggl"]["workspace_id"]

    @property
    def auth(self) -> tuple[str, str]:
        return (self.token, "api_token")

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            r = requests.request(
                method,
                url,
                auth=self.auth,
                headers={"Accept": "application/json"},
                timeout=30,
                **kwargs,
            )
        except requests.exceptions.ConnectionError:
            raise ApiError("Toggl: Cannot connect to api.track.toggl.com. Check your network!")
        except requests.exceptions.Timeout:
            raise ApiError("Toggl: Connection timed out. The server may be slow.")

        if not r.ok:
            raise ApiError(_handle_api_error(r, "Toggl"), r.status_code)
        return r

    def to_entry(self, data: dict) -> TimeEntry:
        """Build a TimeEntry from a reports API row."""
        entry = TimeEntry(
            self,
            data["id"],
            data.get("client") or "",
            data.get("project") or "",
            data.get("description") or "",
        )
        entry.entry_date = _parse_start(data.get("start"))
        entry.billable = bool(data.get("is_billable", False))
        entry.set_duration_time(data.get("dur") or 0)
        entry.process_tags(data.get("tags") or [])
        return entry

    def fetch_time_entries(self, date_from: str, date_to: str) -> list[TimeEntry]:
        """Fetch detailed time entries within a date range (YYYY-MM-DD)."""
        rows: list[dict] = []
        page = 1

        while True:
            r = self._request(
                "GET",
                f"{REPORTS_URL}/details",
                params={
                    "workspace_id": self.workspace_id,
                    "since": date_from,
                    "until": date_to,
                    "user_agent": USER_AGENT,
                    "page": page,
                },
            )
            data = r.json()
            batch = data.get("data", [])
            rows.extend(batch)

            # Handle pagination
            if not batch or len(rows) >= data.get("total_count", 0):
                break
            page += 1

        return [self.to_entry(row) for row in rows]

    def save_time_entry(self, entry: TimeEntry) -> TimeEntry:
        """Update an existing time entry in Toggl."""
        payload = {
            "description": entry.description,
            "tags": list(entry.tags),
            "billable": entry.billable,
            "duration": int(round(entry.get_duration_time())),
        }
        self._request(
            "PUT",
            f"{API_URL}/workspaces/{self.workspace_id}/time_entries/{entry.id}",
            json=payload,
        )
        return entry
