#!/usr/bin/env python3
"""
Upcoming Coding Contests — Dashboard Generator

Fetches contests starting in the next 30 days from the CLIST API and
writes a static dashboard page plus ICS and JSON feeds to public/.

Usage:
    CLIST_API_KEY=username:api_key python generate_dashboard.py
    python generate_dashboard.py --output site --platform codeforces.com
    python generate_dashboard.py --dry-run    # Print contests without writing
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from dashboard.calendar_gen import create_contest_calendar, validate_ics
from dashboard.clist import fetch_contests
from dashboard.feeds import generate_json_feed
from dashboard.filters import PlatformFilter
from dashboard.formatting import format_countdown, format_duration, format_start_time
from dashboard.html_gen import generate_index_html
from dashboard.notify import notify_errors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the upcoming coding contests dashboard.")
    parser.add_argument("--output", default="public", help="Output directory (default: public)")
    parser.add_argument(
        "--platform",
        action="append",
        default=[],
        help="Pre-select a platform filter on the page (repeatable)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print contests without writing files")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    output_dir = Path(args.output)
    now = datetime.now(timezone.utc)
    generated_utc = now.strftime("%Y-%m-%dT%H:%M:%SZ")
    errors: list[str] = []

    print("Fetching upcoming contests from clist.by...")
    result = fetch_contests(os.environ.get("CLIST_API_KEY"), now=now)

    if result.ok:
        contests = result.contests
        platforms = sorted({c.host for c in contests})
        print(f"  Found {len(contests)} contests on {len(platforms)} platforms")
        for c in contests:
            print(
                f"    {format_start_time(c.start)}  [{c.host}] {c.event}"
                f"  ({format_duration(c.duration)}, in {format_countdown(c.start, now)})"
            )
    else:
        contests = []
        errors.append(f"Failed to fetch contests: {result.error}")

    if args.dry_run:
        print("\n[Dry run — no files written]")
        return 1 if errors else 0

    unknown = PlatformFilter(contests).unknown_platforms(args.platform) if result.ok else set()
    for platform in sorted(unknown):
        print(f"  Warning: no contests on {platform}, not pre-selecting it")

    # The page is always written; a failed fetch shows the error panel
    html = generate_index_html(
        contests, error=result.error, generated_utc=generated_utc, selected=args.platform
    )
    html_path = output_dir / "index.html"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        html_path.write_text(html, encoding="utf-8")
    except OSError as e:
        errors.append(f"Failed to write {html_path}: {e}")
        print(f"  ERROR: {errors[-1]}")
    else:
        print(f"\nSaved {html_path}")

    if result.ok:
        try:
            cal = create_contest_calendar(contests)
            ics_bytes = cal.to_ical()
            if not validate_ics(ics_bytes):
                raise ValueError("Generated ICS failed validation")
            ics_path = output_dir / "contests.ics"
            ics_path.write_bytes(ics_bytes)
            print(f"  Saved {ics_path}")

            feed = generate_json_feed(contests)
            json_path = output_dir / "contests.json"
            json_path.write_text(json.dumps(feed, indent=2, ensure_ascii=False), encoding="utf-8")
            print(f"  Saved {json_path}")
        except (OSError, ValueError) as e:
            errors.append(f"Failed to write feeds: {e}")

    # Summary
    if errors:
        print(f"\nErrors encountered: {len(errors)}")
        for err in errors:
            print(f"  - {err}")
        notify_errors(errors)
        return 1

    print("\nDone — dashboard generated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
