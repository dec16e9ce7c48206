"""Order content records newest first."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

from folio.content.models import BlogPost, ContentKind, ContentSnapshot, SpeakingEngagement
from folio.content.timestamps import ordering_key

logger = logging.getLogger(__name__)

R = TypeVar("R")


def sort_content(records: Iterable[R]) -> list[R]:
    """Return the records in descending ``published_at`` order.

    Timestamps are compared at whole-second resolution; records whose keys
    are equal keep their input order. Every key is computed before anything
    is reordered, so a single unparseable timestamp fails the whole call.

    Args:
        records: Any finite iterable of content records. It is not modified.

    Returns:
        A new list holding the same records, most recent first.

    Raises:
        InvalidTimestamp: If any record's ``published_at`` cannot be parsed.
    """
    keyed = [(ordering_key(getattr(r, "published_at", None)), r) for r in records]
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    logger.debug("Sorted %d content records", len(keyed))
    return [r for _, r in keyed]


def sort_snapshot(
    snapshot: ContentSnapshot, kind: ContentKind | str | None = None
) -> list[BlogPost | SpeakingEngagement]:
    """Sort a snapshot, or only its records of one kind."""
    records = snapshot.records if kind is None else snapshot.of_kind(kind)
    return sort_content(records)
