"""Error types raised while loading, ordering, and rendering content.

None of these subclass ``ValueError``: pydantic only folds ``ValueError``
and ``AssertionError`` into a ``ValidationError``, so raising them from a
model validator lets the specific condition reach the caller as-is.
"""

from __future__ import annotations

from pathlib import Path


class FolioError(Exception):
    """Base error for content handling."""


class InvalidTimestamp(FolioError):
    """A timestamp could not be parsed into a comparable instant."""

    def __init__(self, value: object, field: str = "published_at") -> None:
        self.value = value
        self.field = field
        super().__init__(f"Invalid timestamp for {field!r}: {value!r}")


class MissingRequiredField(FolioError):
    """A required content field is absent or empty."""

    def __init__(self, field: str, kind: str | None = None) -> None:
        self.field = field
        self.kind = kind
        where = f" on {kind}" if kind else ""
        super().__init__(f"Missing required field {field!r}{where}")


class ContentLoadError(FolioError):
    """A content source file could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
