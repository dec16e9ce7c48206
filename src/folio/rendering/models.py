"""Render-side data types. No markup lives here."""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, field_validator


class RenderOptions(BaseModel):
    """How list items present their dates."""

    model_config = ConfigDict(frozen=True)

    show_time: bool = False
    timezone: str = "UTC"
    date_format: str = "%B {day}, %Y"
    time_format: str = "%I:%M %p"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class DisplayItem(BaseModel):
    """A content record ready for a list, independent of markup syntax."""

    model_config = ConfigDict(frozen=True)

    heading: str
    subheading: str = ""
    formatted_date: str
    iso_date: str
    body_text: str = ""
    primary_link: str | None = None
    secondary_link: str | None = None
    status: str | None = None

    @property
    def heading_is_link(self) -> bool:
        """Whether the heading should be presented as a link."""
        return self.primary_link is not None

    @property
    def has_secondary_link(self) -> bool:
        return self.secondary_link is not None
