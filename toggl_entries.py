"""
List Toggl time entries with their Jira ticket and logged status.

Usage:
    # Show the entries of a week
    python toggl_entries.py 202605

    # Dry-run (default) - shows which entries would be marked as logged
    python toggl_entries.py 202605 --mark-logged

    # Execute - actually tags the entries with "Jira" in Toggl
    python toggl_entries.py 202605 --mark-logged --execute
"""

import argparse

from clients import ApiError, TogglClient
from models import TimeEntry
from patterns import Patterns
from utils import get_current_week, get_week_dates, load_config_safe


def print_entries(entries: list[TimeEntry]) -> None:
    print(f"{'Date':<12}{'Hours':>7}  {'Ticket':<14}{'Logged':<8}Description")
    print("-" * 72)
    total = 0.0
    for entry in entries:
        date = entry.entry_date.strftime("%Y-%m-%d") if entry.entry_date else "?"
        ticket = entry.ticket or "-"
        logged = "yes" if entry.logged else "no"
        print(f"{date:<12}{entry.duration:>7.2f}  {ticket:<14}{logged:<8}{entry.description[:40]}")
        total += entry.duration
    print("-" * 72)
    print(f"{'Total':<12}{total:>7.2f}")


def mark_logged(entries: list[TimeEntry], execute: bool) -> int:
    """Tag ticketed entries that are not logged yet. Returns the number marked."""
    pending = [e for e in entries if e.ticket and not e.logged]
    if not pending:
        print("[*] Nothing to mark, all ticketed entries are logged.")
        return 0

    print(f"[*] {len(pending)} entries to mark as logged")
    for entry in pending:
        if not execute:
            print(f"    [DRY-RUN] Would tag {entry.ticket} ({entry.duration:.2f}h)")
            continue
        entry.add_tag(Patterns.LOGGED_MARKER)
        entry.save()
        print(f"    [+] Tagged {entry.ticket} ({entry.duration:.2f}h)")

    return len(pending)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="List Toggl time entries with their Jira ticket and logged status",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python toggl_entries.py 202605
    python toggl_entries.py 202605 --mark-logged --execute
        """,
    )

    parser.add_argument(
        "week", nargs="?", default=None, help="Week to show (YYYYWW), default: current week"
    )
    parser.add_argument(
        "--mark-logged",
        action="store_true",
        help="Add the Jira tag to ticketed entries that are not logged yet",
    )
    parser.add_argument(
        "--execute", action="store_true", help="Actually execute changes (default: dry-run)"
    )
    parser.add_argument("--config", default="config.json", help="Path to config.json")

    args = parser.parse_args(argv)

    week = args.week or get_current_week()

    # Validate week format
    if not Patterns.WEEK_FORMAT.match(week):
        print(f"Error: Invalid week format '{week}'. Expected YYYYWW (e.g., 202605)")
        return 1

    config = load_config_safe(args.config)
    if config is None:
        return 1

    date_from, date_to = get_week_dates(week)
    print(f"[*] Fetching Toggl entries for {date_from} - {date_to}...")

    client = TogglClient(config)
    try:
        entries = client.fetch_time_entries(date_from, date_to)
        print(f"[*] Found {len(entries)} entries")
        print()
        print_entries(entries)

        if args.mark_logged:
            print()
            mark_logged(entries, args.execute)
    except ApiError as e:
        print(f"[!] {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
