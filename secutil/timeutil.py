"""
Timestamp helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from .config import DEFAULT_CONFIG


def formatted_time(fmt: str = "", now: datetime | None = None) -> str:
    """
    Current UTC time formatted with strftime().

    An empty format uses the configured default (20240131235959 style),
    suitable for identifiers and filenames.
    """
    if not fmt:
        fmt = DEFAULT_CONFIG.time_format
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.strftime(fmt)
