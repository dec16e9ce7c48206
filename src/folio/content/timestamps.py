"""Timestamp parsing and the whole-second ordering key."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time

from folio.errors import InvalidTimestamp


def parse_timestamp(value: object, field: str = "published_at") -> datetime:
    """Coerce a front-matter value into a timezone-aware datetime.

    Accepts ``datetime``, ``date`` (midnight UTC), or an ISO-8601 string.
    A trailing ``Z`` is read as UTC and naive values are assumed to be UTC.

    Raises:
        InvalidTimestamp: If the value is of another type or does not parse.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestamp(value, field) from None
    else:
        raise InvalidTimestamp(value, field)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def ordering_key(value: object, field: str = "published_at") -> int:
    """Return whole seconds since the epoch, floored.

    Instants that fall inside the same second produce the same key.
    """
    return math.floor(parse_timestamp(value, field).timestamp())
