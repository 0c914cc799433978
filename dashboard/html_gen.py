"""HTML dashboard generation with platform filters and live countdowns."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from html import escape

from dashboard import Contest
from dashboard.filters import PlatformFilter
from dashboard.formatting import (
    COUNTDOWN_PLACEHOLDER,
    STARTED_LABEL,
    START_TIME_PLACEHOLDER,
    format_duration,
)
from dashboard.logos import logo_url, placeholder_logo_url

NO_RESULTS_TEXT = "No upcoming contests found for the selected platforms."


def render_filter_bar(contest_filter: PlatformFilter) -> str:
    """Render the platform toggle buttons and the Clear All button."""
    buttons = ""
    for platform in contest_filter.platforms:
        selected = contest_filter.is_selected(platform)
        css = "filter-btn selected" if selected else "filter-btn"
        buttons += (
            f'            <button type="button" class="{css}" data-platform="{escape(platform)}"'
            f' aria-pressed="{"true" if selected else "false"}">{escape(platform)}</button>\n'
        )

    hidden = "" if contest_filter.selected else " hidden"
    buttons += f'            <button type="button" class="clear-btn" id="clear-all"{hidden}>Clear All</button>\n'

    return f"""<div class="filter-box">
        <h3>Filter by Platform:</h3>
        <div class="filter-buttons" id="filter-buttons">
{buttons}        </div>
    </div>"""


def render_card(contest: Contest, hidden: bool = False) -> str:
    """Render a single contest card.

    Countdown and start time are left as placeholders; the page script
    fills them in once the card is shown.
    """
    host = escape(contest.host)
    placeholder = escape(placeholder_logo_url(contest.host))
    hidden_attr = " hidden" if hidden else ""
    start_iso = contest.start.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    return f"""<div class="card" data-contest-id="{contest.id}" data-host="{host}" data-start="{start_iso}"{hidden_attr}>
            <div class="card-body">
                <div class="card-top">
                    <img class="logo" src="{escape(logo_url(contest.host))}" alt="{host} logo"
                         onerror="this.onerror=null;this.src='{placeholder}';">
                    <span class="countdown">{COUNTDOWN_PLACEHOLDER}</span>
                </div>
                <h3>{escape(contest.event)}</h3>
                <p><strong>Starts:</strong> <span class="start-time">{START_TIME_PLACEHOLDER}</span></p>
                <p><strong>Duration:</strong> {escape(format_duration(contest.duration))}</p>
            </div>
            <div class="card-footer">
                <a class="btn-go" href="{escape(contest.href)}" target="_blank" rel="noopener noreferrer">Go to Contest</a>
            </div>
        </div>"""


def render_grid(contest_filter: PlatformFilter) -> str:
    """Render one card per filtered contest, or the no-results placeholder."""
    visible = {c.id for c in contest_filter.filtered}
    cards = ""
    for contest in contest_filter.contests:
        card = render_card(contest, hidden=contest.id not in visible)
        cards += f"        {card}\n"

    empty_hidden = " hidden" if visible else ""
    return f"""<div class="grid" id="contest-grid">
{cards}        <p class="empty" id="no-results"{empty_hidden}>{NO_RESULTS_TEXT}</p>
    </div>"""


def render_error(error: str) -> str:
    return f"""<div class="error-panel" role="alert">
        <p class="error-title">An Error Occurred</p>
        <p>{escape(error)}</p>
    </div>"""


def generate_index_html(
    contests: Iterable[Contest],
    error: str | None = None,
    generated_utc: str | None = None,
    selected: Iterable[str] = (),
) -> str:
    """Generate the dashboard page.

    With an error, the page shows the error panel instead of the filter
    strip and the contest grid.
    """
    if generated_utc is None:
        generated_utc = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    if error:
        main = render_error(error)
        feed_links = ""
    else:
        contest_filter = PlatformFilter(contests)
        # The page script rebuilds its selection from the buttons, so only
        # platforms that have a button can start selected
        wanted = set(selected)
        for platform in sorted(wanted - contest_filter.unknown_platforms(wanted)):
            contest_filter.toggle(platform)
        main = f"{render_filter_bar(contest_filter)}\n\n    {render_grid(contest_filter)}"
        feed_links = (
            '<p class="feed-links"><a href="contests.ics">Calendar (ICS)</a>'
            ' <a href="contests.json">JSON Feed</a></p>'
        )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Upcoming Coding Contests</title>
    <style>
        * {{ box-sizing: border-box; margin: 0; padding: 0; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #f3f4f6;
            color: #1f2937;
            line-height: 1.5;
        }}
        .container {{ max-width: 1280px; margin: 0 auto; padding: 2rem 1rem; }}
        header {{ text-align: center; margin-bottom: 2rem; }}
        header h1 {{ font-size: 2.5rem; font-weight: 800; margin-bottom: 0.5rem; }}
        header p {{ color: #4b5563; font-size: 1.1rem; }}
        a {{ color: #4f46e5; text-decoration: none; }}
        a:hover {{ text-decoration: underline; }}

        /* Filter strip */
        .filter-box {{
            background: #fff;
            padding: 1rem;
            border-radius: 8px;
            box-shadow: 0 1px 3px rgba(0,0,0,0.1);
            margin-bottom: 2rem;
        }}
        .filter-box h3 {{ color: #374151; margin-bottom: 0.75rem; }}
        .filter-buttons {{ display: flex; flex-wrap: wrap; gap: 0.5rem; }}
        .filter-btn, .clear-btn {{
            padding: 0.25rem 0.75rem;
            font-size: 0.875rem;
            font-weight: 600;
            border: none;
            border-radius: 9999px;
            cursor: pointer;
            transition: background 0.2s;
        }}
        .filter-btn {{ background: #e5e7eb; color: #374151; }}
        .filter-btn:hover {{ background: #d1d5db; }}
        .filter-btn.selected {{ background: #4f46e5; color: #fff; }}
        .clear-btn {{ background: #ef4444; color: #fff; }}
        .clear-btn:hover {{ background: #dc2626; }}

        /* Card grid */
        .grid {{
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
            gap: 1.5rem;
        }}
        .card {{
            background: #fff;
            border-radius: 12px;
            box-shadow: 0 4px 6px rgba(0,0,0,0.1);
            overflow: hidden;
            display: flex;
            flex-direction: column;
            transition: box-shadow 0.3s;
        }}
        .card:hover {{ box-shadow: 0 20px 25px rgba(0,0,0,0.15); }}
        .card[hidden], .empty[hidden], .clear-btn[hidden] {{ display: none; }}
        .card-body {{ padding: 1.25rem; flex-grow: 1; }}
        .card-top {{ display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 1rem; }}
        .card h3 {{ font-size: 1.1rem; margin-bottom: 0.5rem; line-height: 1.3; }}
        .card p {{ font-size: 0.875rem; color: #4b5563; }}
        .logo {{ height: 2rem; object-fit: contain; }}
        .countdown {{ font-size: 0.875rem; font-weight: 600; color: #4f46e5; }}
        .card-footer {{ background: #f9fafb; padding: 1rem; }}
        .btn-go {{
            display: block;
            text-align: center;
            background: #4f46e5;
            color: #fff;
            font-weight: 600;
            padding: 0.5rem 1rem;
            border-radius: 8px;
        }}
        .btn-go:hover {{ background: #4338ca; text-decoration: none; }}

        .empty {{ grid-column: 1 / -1; text-align: center; font-size: 1.25rem; font-weight: 600; color: #374151; }}
        .error-panel {{
            text-align: center;
            background: #fee2e2;
            border-left: 4px solid #ef4444;
            color: #b91c1c;
            padding: 1rem;
            border-radius: 8px;
        }}
        .error-title {{ font-weight: 700; }}
        footer {{ text-align: center; margin-top: 3rem; color: #6b7280; font-size: 0.9rem; }}
        .feed-links a {{ margin: 0 0.5rem; }}

        @media (max-width: 600px) {{
            header h1 {{ font-size: 1.75rem; }}
        }}
    </style>
</head>
<body>
<div class="container">
    <header>
        <h1>Upcoming Coding Contests</h1>
        <p>Your one-stop dashboard for competitive programming events.</p>
    </header>

    {main}

    <footer>
        {feed_links}
        <p>Last updated: <span id="last-updated">{generated_utc}</span></p>
        <p>Data sourced from <a href="https://clist.by/" target="_blank" rel="noopener noreferrer">clist.by</a>.</p>
    </footer>
</div>

<script>
    const GENERATED = "{generated_utc}";
    const STARTED = "{STARTED_LABEL}";
    const selected = new Set();
    const timers = new Map();

    function formatCountdown(startIso) {{
        const difference = new Date(startIso).getTime() - Date.now();
        if (difference <= 0) return STARTED;
        const total = Math.floor(difference / 1000);
        const days = Math.floor(total / 86400);
        const hours = Math.floor((total % 86400) / 3600);
        const minutes = Math.floor((total % 3600) / 60);
        const seconds = total % 60;
        let text = '';
        if (days > 0) text += days + 'd ';
        if (hours > 0 || days > 0) text += hours + 'h ';
        return text + minutes + 'm ' + seconds + 's';
    }}

    function formatStartTime(startIso) {{
        return new Date(startIso).toLocaleString(undefined, {{
            year: 'numeric', month: 'long', day: 'numeric', hour: '2-digit', minute: '2-digit'
        }});
    }}

    // A card's timer lives only while the card is shown
    function mountCard(card) {{
        const id = card.dataset.contestId;
        if (timers.has(id)) return;
        const start = card.dataset.start;
        const countdown = card.querySelector('.countdown');
        card.querySelector('.start-time').textContent = formatStartTime(start);
        const tick = () => {{ countdown.textContent = formatCountdown(start); }};
        tick();
        timers.set(id, setInterval(tick, 1000));
    }}

    function unmountCard(card) {{
        const id = card.dataset.contestId;
        if (!timers.has(id)) return;
        clearInterval(timers.get(id));
        timers.delete(id);
    }}

    function render() {{
        const cards = document.querySelectorAll('#contest-grid .card');
        let visible = 0;
        cards.forEach(card => {{
            const show = selected.size === 0 || selected.has(card.dataset.host);
            card.hidden = !show;
            if (show) {{
                visible += 1;
                mountCard(card);
            }} else {{
                unmountCard(card);
            }}
        }});
        const empty = document.getElementById('no-results');
        if (empty) empty.hidden = visible > 0;
        document.querySelectorAll('.filter-btn').forEach(btn => {{
            const on = selected.has(btn.dataset.platform);
            btn.classList.toggle('selected', on);
            btn.setAttribute('aria-pressed', on ? 'true' : 'false');
        }});
        const clear = document.getElementById('clear-all');
        if (clear) clear.hidden = selected.size === 0;
    }}

    function togglePlatform(platform) {{
        if (selected.has(platform)) {{
            selected.delete(platform);
        }} else {{
            selected.add(platform);
        }}
        render();
    }}

    function clearAll() {{
        selected.clear();
        render();
    }}

    function init() {{
        document.querySelectorAll('.filter-btn').forEach(btn => {{
            if (btn.classList.contains('selected')) selected.add(btn.dataset.platform);
            btn.addEventListener('click', () => togglePlatform(btn.dataset.platform));
        }});
        const clear = document.getElementById('clear-all');
        if (clear) clear.addEventListener('click', clearAll);
        window.addEventListener('pagehide', () => {{
            document.querySelectorAll('#contest-grid .card').forEach(unmountCard);
        }});
        const el = document.getElementById('last-updated');
        if (el && GENERATED) el.textContent = new Date(GENERATED).toLocaleString();
        render();
    }}

    init();
</script>
</body>
</html>"""
