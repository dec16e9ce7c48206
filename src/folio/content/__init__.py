"""Content domain: typed records, the snapshot they live in, and ordering."""

from folio.content.loader import ContentLoader, load_site
from folio.content.models import (
    BlogPost,
    ContentKind,
    ContentRecord,
    ContentSnapshot,
    SpeakingEngagement,
)
from folio.content.sorting import sort_content, sort_snapshot
from folio.content.timestamps import ordering_key, parse_timestamp

__all__ = [
    "BlogPost",
    "ContentKind",
    "ContentLoader",
    "ContentRecord",
    "ContentSnapshot",
    "SpeakingEngagement",
    "load_site",
    "ordering_key",
    "parse_timestamp",
    "sort_content",
    "sort_snapshot",
]
