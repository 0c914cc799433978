"""Duration, countdown and start-time formatting for contest cards.

The page script mirrors these rules so the live countdowns match what the
generator prints.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

DURATION_UNAVAILABLE = "Duration unavailable"
STARTED_LABEL = "Started!"
COUNTDOWN_PLACEHOLDER = "Loading..."
START_TIME_PLACEHOLDER = "..."


def format_duration(seconds: int) -> str:
    """Format a contest duration, e.g. 5400 -> '1 hour 30 minutes'."""
    if seconds <= 0:
        return DURATION_UNAVAILABLE

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60

    parts = []
    if hours > 0:
        parts.append(f"{hours} hour{'s' if hours > 1 else ''}")
    if minutes > 0:
        parts.append(f"{minutes} minute{'s' if minutes > 1 else ''}")
    return " ".join(parts) or "Less than a minute"


def seconds_until(start: datetime, now: datetime | None = None) -> int:
    """Whole seconds from now until start, floored at zero."""
    if now is None:
        now = datetime.now(timezone.utc)
    remaining = (start - now).total_seconds()
    return max(0, int(remaining))


def format_countdown(start: datetime, now: datetime | None = None) -> str:
    """Format the time left until start as '2d 3h 4m 5s', or 'Started!'."""
    if now is None:
        now = datetime.now(timezone.utc)
    if (start - now).total_seconds() <= 0:
        return STARTED_LABEL

    remaining = seconds_until(start, now)
    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)

    countdown = ""
    if days > 0:
        countdown += f"{days}d "
    if hours > 0 or days > 0:
        countdown += f"{hours}h "
    countdown += f"{minutes}m {seconds}s"
    return countdown


def format_start_time(start: datetime, tz: tzinfo | None = None) -> str:
    """Long-form local start time, e.g. 'March 5, 2025 at 02:35 PM'.

    Uses the system's local timezone unless ``tz`` is given; the month
    name follows the active locale.
    """
    local = start.astimezone(tz)
    return f"{local:%B} {local.day}, {local:%Y} at {local:%I:%M %p}"
