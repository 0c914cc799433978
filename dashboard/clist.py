"""CLIST API client for upcoming contests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import requests

from dashboard import Contest, FetchResult

API_URL = "https://clist.by/api/v4/contest/"
USER_AGENT = "CodingContestsDashboard/1.0 (static dashboard generator)"
WINDOW_DAYS = 30
MISSING_KEY_ERROR = "API key not configured"


def contest_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the (start, end) window of contests to list."""
    return now, now + timedelta(days=WINDOW_DAYS)


def fetch_contests(
    api_key: str | None,
    now: datetime | None = None,
    timeout: int = 30,
) -> FetchResult:
    """Fetch contests starting within the next 30 days.

    Never raises: a missing key, a failed request or a malformed response
    all come back as a FetchResult with an error and no contests.
    """
    if not api_key:
        print("  ERROR: CLIST API key is missing (set CLIST_API_KEY=username:api_key)")
        return FetchResult(error=MISSING_KEY_ERROR)

    if now is None:
        now = datetime.now(timezone.utc)
    window_start, window_end = contest_window(now)

    params = {
        "start__gte": _iso(window_start),
        "start__lte": _iso(window_end),
        "order_by": "start",
    }
    headers = {
        "Authorization": f"ApiKey {api_key}",
        "Cache-Control": "no-cache",
        "User-Agent": USER_AGENT,
    }

    try:
        response = requests.get(API_URL, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        print(f"  ERROR: Fetch failed: {e}")
        return FetchResult(error=str(e) or e.__class__.__name__)

    if not response.ok:
        error = f"HTTP error! Status: {response.status_code}. The API key might be invalid."
        print(f"  ERROR: {error}")
        return FetchResult(error=error)

    try:
        contests = parse_contests(response.json())
    except ValueError as e:
        error = f"Malformed API response: {e}"
        print(f"  ERROR: {error}")
        return FetchResult(error=error)

    return FetchResult(contests=contests)


def parse_contests(payload: dict) -> list[Contest]:
    """Parse the ``objects`` list of a CLIST contest response.

    Raises ValueError on anything that does not look like a contest list.
    A repeated contest id keeps its first record.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("objects"), list):
        raise ValueError("expected an 'objects' list")

    contests: list[Contest] = []
    seen: set[int] = set()
    for obj in payload["objects"]:
        contest = _parse_contest(obj)
        if contest.id in seen:
            continue
        seen.add(contest.id)
        contests.append(contest)
    return contests


def _parse_contest(obj: dict) -> Contest:
    """Parse a single contest object."""
    if not isinstance(obj, dict):
        raise ValueError(f"contest entry is not an object: {obj!r}")

    try:
        return Contest(
            id=int(obj["id"]),
            event=_require_str(obj, "event"),
            host=_require_str(obj, "host"),
            href=str(obj.get("href") or ""),
            start=parse_start(obj["start"]),
            duration=int(obj.get("duration") or 0),
        )
    except KeyError as e:
        raise ValueError(f"contest entry missing field {e}") from e
    except (TypeError, OverflowError) as e:
        raise ValueError(f"bad contest entry: {e}") from e


def _require_str(obj: dict, name: str) -> str:
    value = obj[name]
    if not isinstance(value, str) or not value:
        raise ValueError(f"contest {name} is not a non-empty string: {value!r}")
    return value


def parse_start(value: str) -> datetime:
    """Parse an ISO-8601 start time into an aware UTC datetime.

    CLIST returns naive timestamps in UTC.
    """
    if not isinstance(value, str):
        raise ValueError(f"start is not a string: {value!r}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
