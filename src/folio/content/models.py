"""Content domain models: pure Pydantic v2 data types.

A ``ContentRecord`` is either a ``BlogPost`` or a ``SpeakingEngagement``,
told apart by ``kind``. Records are validated once, where front matter
enters the system, and are immutable from then on. No I/O here.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from folio.content.timestamps import parse_timestamp
from folio.errors import MissingRequiredField


class ContentKind(StrEnum):
    """Category of authored content."""

    POST = "post"
    TALK = "talk"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class _RecordBase(BaseModel):
    """Fields shared by every content record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ("title", "published_at")

    title: str
    published_at: datetime
    link: str | None = None
    website_link: str | None = None
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _check_required(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        kind = cls.model_fields["kind"].default
        for name in cls.required_fields:
            value = data.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise MissingRequiredField(name, kind)
        return data

    @field_validator("published_at", mode="before")
    @classmethod
    def _parse_published_at(cls, value: Any) -> datetime:
        return parse_timestamp(value, "published_at")

    @field_validator("link", "website_link", mode="before")
    @classmethod
    def _blank_link_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _none_description_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def byline(self) -> str | None:
        return None

    @property
    def display_date(self) -> datetime:
        return self.published_at

    @property
    def status_label(self) -> str | None:
        return None


class BlogPost(_RecordBase):
    """A blog article."""

    kind: Literal["post"] = "post"
    author: str | None = None
    draft: bool = False
    tags: tuple[str, ...] = ()
    slug: str | None = None

    @property
    def byline(self) -> str | None:
        return self.author

    @property
    def status_label(self) -> str | None:
        return "Draft" if self.draft else None


class SpeakingEngagement(_RecordBase):
    """A talk, workshop, or podcast appearance.

    ``event_date`` is the day of the event when it differs from the
    timestamp the list is ordered by.
    """

    required_fields: ClassVar[tuple[str, ...]] = ("title", "published_at", "organizer")

    kind: Literal["talk"] = "talk"
    organizer: str
    completed: bool = True
    event_date: datetime | None = None

    @field_validator("event_date", mode="before")
    @classmethod
    def _parse_event_date(cls, value: Any) -> datetime | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return parse_timestamp(value, "event_date")

    @property
    def byline(self) -> str | None:
        return self.organizer

    @property
    def display_date(self) -> datetime:
        return self.event_date or self.published_at

    @property
    def status_label(self) -> str | None:
        return None if self.completed else "Upcoming"


ContentRecord = Annotated[BlogPost | SpeakingEngagement, Field(discriminator="kind")]

RECORD_ADAPTER: TypeAdapter[BlogPost | SpeakingEngagement] = TypeAdapter(ContentRecord)


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


class ContentSnapshot(BaseModel):
    """Every record loaded for one site build, frozen."""

    model_config = ConfigDict(frozen=True)

    records: tuple[ContentRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def of_kind(self, kind: ContentKind | str) -> tuple[BlogPost | SpeakingEngagement, ...]:
        """Return the records of one kind, in load order."""
        kind = ContentKind(kind)
        return tuple(r for r in self.records if r.kind == kind)

    def posts(self) -> tuple[BlogPost, ...]:
        return tuple(r for r in self.records if isinstance(r, BlogPost))

    def talks(self) -> tuple[SpeakingEngagement, ...]:
        return tuple(r for r in self.records if isinstance(r, SpeakingEngagement))

    def merge(self, other: ContentSnapshot) -> ContentSnapshot:
        """Return a new snapshot holding the records of both."""
        return ContentSnapshot(records=self.records + other.records)
