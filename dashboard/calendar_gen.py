"""ICS calendar generation from contest data."""

from __future__ import annotations

from datetime import timedelta

from icalendar import Alarm, Calendar, Event

from dashboard import Contest
from dashboard.formatting import format_duration


def create_contest_calendar(contests: list[Contest]) -> Calendar:
    """Create an ICS calendar of upcoming contests."""
    cal = Calendar()
    cal.add("prodid", "-//Upcoming Coding Contests//clist.by//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", "Upcoming Coding Contests")
    # Refresh interval hint for calendar clients (4 hours)
    cal.add("x-published-ttl", "PT4H")

    for contest in contests:
        cal.add_component(_create_event(contest))

    return cal


def _create_event(contest: Contest) -> Event:
    """Create a calendar event from a contest."""
    event = Event()
    event.add("summary", f"{contest.event} ({contest.host})")
    event.add("dtstart", contest.start)
    if contest.duration > 0:
        event.add("dtend", contest.start + timedelta(seconds=contest.duration))

    description = f"Platform: {contest.host}\nDuration: {format_duration(contest.duration)}"
    if contest.href:
        description += f"\n\nContest page: {contest.href}"
        event.add("url", contest.href)
    event.add("description", description)

    event.add("uid", f"{contest.id}@clist.by")
    event.add("status", "CONFIRMED")

    alarm = Alarm()
    alarm.add("action", "DISPLAY")
    alarm.add("description", f"{contest.event} starts in 30 minutes!")
    alarm.add("trigger", timedelta(minutes=-30))
    event.add_component(alarm)

    return event


def validate_ics(data: bytes) -> bool:
    """Basic validation that ICS data is well-formed."""
    text = data.decode("utf-8", errors="replace")
    return text.startswith("BEGIN:VCALENDAR") and "END:VCALENDAR" in text
