from __future__ import annotations

"""Lightweight HTTP client util.

Uses stdlib urllib; the only remote calls are three small JSON GETs at startup.
One attempt per call: quote fetches are never retried, and an expired timeout
is an ordinary failure.
"""
import http.client
import json
import urllib.request
from typing import Any

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "emergency-fund/0.1",
}


class HttpError(Exception):
    pass


def get_json(url: str, *, timeout: float = 5.0) -> Any:
    request = urllib.request.Request(url, headers=DEFAULT_HEADERS)
    try:
        with urllib.request.urlopen(request, timeout=timeout) as resp:  # nosec B310
            if not 200 <= resp.status < 300:
                raise HttpError(f"HTTP {resp.status} for {url}")
            return json.loads(resp.read().decode("utf-8"))
    except HttpError:
        raise
    # URLError/HTTPError and TimeoutError are OSErrors; ValueError covers bad
    # JSON and bad UTF-8
    except (OSError, http.client.HTTPException, ValueError) as e:
        raise HttpError(f"Failed to fetch JSON from {url}: {e!r}") from e
