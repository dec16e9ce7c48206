"""Content ordering and list rendering for a personal blog and speaking portfolio.

Loads markdown content into typed records, orders them newest first, and
maps each one to a markup-independent DisplayItem for list pages.
"""

from folio.content import (
    BlogPost,
    ContentKind,
    ContentSnapshot,
    SpeakingEngagement,
    sort_content,
)
from folio.errors import ContentLoadError, FolioError, InvalidTimestamp, MissingRequiredField
from folio.rendering import DisplayItem, RenderOptions, render_item

__version__ = "0.3.0"

__all__ = [
    "BlogPost",
    "ContentKind",
    "ContentLoadError",
    "ContentSnapshot",
    "DisplayItem",
    "FolioError",
    "InvalidTimestamp",
    "MissingRequiredField",
    "RenderOptions",
    "SpeakingEngagement",
    "__version__",
    "render_item",
    "sort_content",
]
