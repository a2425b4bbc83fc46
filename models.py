"""Data models for Toggl time entries."""

from datetime import datetime
from typing import Iterable, Protocol

from patterns import Patterns
from tags import classify, unique_tags


class TimeTrackingGateway(Protocol):
    """Anything that can persist a time entry (see clients.TogglClient)."""

    def save_time_entry(self, entry: "TimeEntry") -> "TimeEntry": ...


class TimeEntry:
    """A single Toggl time entry with metadata derived from its tags.

    Tags carry a Jira ticket key (ABC-123) and the "Jira" marker for
    entries that have already been logged against the ticket.
    """

    def __init__(
        self,
        gateway: TimeTrackingGateway,
        id: int | str,
        client: str,
        project: str,
        description: str,
    ):
        self.gateway = gateway
        self._id = id
        self.client = client
        self.project = project
        self.description = description
        self.entry_date: datetime | None = None
        self.tags: list[str] = []
        self.ticket: str | None = None
        self.task: str | None = None
        self.logged = False
        self.billable = False
        self.duration = 0.0  # hours

    def __repr__(self) -> str:
        return (
            f"TimeEntry(id={self._id!r}, project={self.project!r}, "
            f"ticket={self.ticket!r}, logged={self.logged}, duration={self.duration})"
        )

    @property
    def id(self) -> int | str:
        return self._id

    def set_task(self, task: str) -> None:
        """Set the internal task code: project followed by the numeric part of task.

        Dashes and any other non-numeric characters except "." are dropped,
        so "12-3" on project "ABC" gives "ABC123".
        """
        code = Patterns.TASK_CODE_JUNK.sub("", task)
        self.task = f"{self.project}{code}"

    def add_tag(self, tag: str) -> None:
        """Add a tag and reclassify the whole tag set."""
        self.tags.append(tag)
        self.process_tags()

    def process_tags(self, tags: Iterable[str] | None = None) -> None:
        """Merge tags into the entry and pick up the ticket and logged marker.

        Without tags the current tag set is reprocessed. An existing ticket
        is kept when no tag holds a ticket key, and logged is never reset.
        """
        tags = list(tags or [])
        if not tags:
            tags = list(self.tags)
        result = classify(tags)
        self.tags = unique_tags(self.tags + result.tags)
        if result.ticket is not None:
            self.ticket = result.ticket
        if result.logged:
            self.logged = True

    def set_duration_time(self, dur: float) -> None:
        """Set duration from milliseconds, as reported by the Toggl reports API."""
        self.duration = dur / 60 / 1000 / 60

    def get_duration_time(self) -> float:
        """Duration in seconds, as expected by the Toggl time entry API.

        Not the inverse of set_duration_time, which takes milliseconds.
        """
        return self.duration * 60 * 60

    def save(self) -> "TimeEntry":
        """Persist this entry through the gateway and return its result."""
        return self.gateway.save_time_entry(self)
