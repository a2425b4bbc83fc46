"""Centralized regex patterns and tag markers for Toggl entries."""

import re


class Patterns:
    """Regex patterns used to classify time entry tags."""

    # Jira ticket key anywhere in a tag: ABC-123
    TICKET_KEY = re.compile(r"[A-Z]+-\d+")

    # Tag marking an entry as already logged in Jira
    LOGGED_MARKER = "Jira"

    # Everything that is not part of a numeric task code
    TASK_CODE_JUNK = re.compile(r"[^\d.]")

    # Week format: YYYYWW (e.g., 202605)
    WEEK_FORMAT = re.compile(r"^\d{6}$")
