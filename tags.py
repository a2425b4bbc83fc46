"""Tag classification for Toggl time entries."""

from dataclasses import dataclass, field

from patterns import Patterns


@dataclass
class TagClassification:
    """Result of scanning a sequence of tags."""

    ticket: str | None = None
    logged: bool = False
    tags: list[str] = field(default_factory=list)


def is_ticket(tag: str) -> bool:
    return Patterns.TICKET_KEY.search(tag) is not None


def is_logged_marker(tag: str) -> bool:
    return tag == Patterns.LOGGED_MARKER


def unique_tags(tags) -> list[str]:
    """De-duplicate tags, keeping the first occurrence of each."""
    return list(dict.fromkeys(tags))


def classify(tags) -> TagClassification:
    """Scan tags for a ticket key and the logged marker.

    A tag holding a ticket key is never checked against the logged marker.
    When several tags hold a ticket key, the last one wins.
    """
    tags = list(tags)
    result = TagClassification(tags=unique_tags(tags))
    for tag in tags:
        if is_ticket(tag):
            result.ticket = tag
            continue
        if is_logged_marker(tag):
            result.logged = True
    return result
