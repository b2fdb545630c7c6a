from __future__ import annotations

from urllib.parse import quote


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")
