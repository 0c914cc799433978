"""Optional Pushover alerts when the dashboard could not be built."""

from __future__ import annotations

import os

import requests

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"


def pushover_credentials() -> tuple[str, str] | None:
    """Return (user_key, api_token) from the environment, or None if unset."""
    user_key = os.environ.get("PUSHOVER_USER_KEY", "")
    api_token = os.environ.get("PUSHOVER_API_TOKEN", "")
    if not user_key or not api_token:
        return None
    return user_key, api_token


def notify_errors(errors: list[str], title: str = "Contest Dashboard Error") -> bool:
    """Send one alert listing every error of a generation run.

    Returns True only when Pushover accepted the message.
    """
    if not errors:
        return False

    credentials = pushover_credentials()
    if credentials is None:
        print("  Alerts disabled (set PUSHOVER_USER_KEY and PUSHOVER_API_TOKEN)")
        return False
    user_key, api_token = credentials

    if len(errors) == 1:
        message = errors[0]
    else:
        message = f"{len(errors)} errors:\n\n" + "\n".join(f"- {e}" for e in errors)

    try:
        resp = requests.post(
            PUSHOVER_URL,
            data={"token": api_token, "user": user_key, "title": title, "message": message},
            timeout=10,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        print(f"  Failed to send alert: {e}")
        return False

    print(f"  Alert sent: {title}")
    return True
