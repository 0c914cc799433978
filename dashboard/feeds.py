"""JSON feed generation."""

from __future__ import annotations

from datetime import timezone

from dashboard import Contest
from dashboard.formatting import format_duration


def contest_to_dict(contest: Contest) -> dict:
    """Convert a Contest to a JSON-serializable dict."""
    return {
        "id": contest.id,
        "event": contest.event,
        "host": contest.host,
        "href": contest.href,
        "start": contest.start.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "duration": contest.duration,
    }


def generate_json_feed(contests: list[Contest], base_url: str = "") -> dict:
    """Generate a JSON Feed (v1.1) of upcoming contests, soonest first."""
    items = []
    for contest in contests:
        record = contest_to_dict(contest)
        items.append({
            "id": f"clist-{contest.id}",
            "title": contest.event,
            "date_published": record["start"],
            "url": contest.href,
            "tags": [contest.host],
            "content_text": f"{contest.host} — {format_duration(contest.duration)}",
            "_contest": record,
        })

    return {
        "version": "https://jsonfeed.org/version/1.1",
        "title": "Upcoming Coding Contests",
        "home_page_url": base_url or "https://clist.by/",
        "feed_url": f"{base_url}/contests.json" if base_url else "",
        "description": "Competitive programming contests starting in the next 30 days",
        "items": items,
    }
