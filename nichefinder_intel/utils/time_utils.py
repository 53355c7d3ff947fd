"""
Time helpers for recency checks on upstream metadata.

Upstream timestamps arrive as RFC 3339 / ISO 8601 strings (GitHub's
``pushed_at`` uses the ``Z`` suffix).  Parsing is lenient: anything that
cannot be understood yields ``None`` from ``parse_timestamp()`` and an
infinite age from ``days_since()`` so recency checks simply evaluate false.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Optional


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO timestamp string (or pass through a datetime).

    Naive values are assumed to be UTC.

    Args:
        value: ``datetime``, ISO string, or anything else.

    Returns:
        Timezone-aware datetime, or ``None`` if ``value`` is not parseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_since(value: Any, now: Optional[datetime] = None) -> float:
    """Return whole days elapsed since ``value``.

    Args:
        value: Timestamp (string or datetime).
        now:   Reference time. Defaults to ``utcnow()``.

    Returns:
        Floor of elapsed days (negative for future timestamps), or
        ``math.inf`` when ``value`` cannot be parsed.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return math.inf
    reference = parse_timestamp(now) if now is not None else utcnow()
    if reference is None:
        return math.inf
    return float(math.floor((reference - parsed).total_seconds() / 86_400))
