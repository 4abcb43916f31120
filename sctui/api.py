"""Thin client for the SoundCloud web API."""

from __future__ import annotations

import requests

API_BASE = "https://api.soundcloud.com"
ME_URL = f"{API_BASE}/me"
DEFAULT_TIMEOUT = 30.0


def get_me(access_token: str) -> str:
    """Fetch the authenticated user's profile and return the raw response body.

    Raises ``requests.HTTPError`` when the server answers with an error status.
    """
    response = requests.get(
        ME_URL,
        headers={"Authorization": f"Bearer {access_token}"},
        timeout=DEFAULT_TIMEOUT,
    )
    response.raise_for_status()
    return response.text