"""Map content records to DisplayItems."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from folio.content.timestamps import parse_timestamp
from folio.errors import MissingRequiredField
from folio.rendering.models import DisplayItem, RenderOptions

DEFAULT_OPTIONS = RenderOptions()


def format_date(moment: datetime, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Format an instant as e.g. ``January 5, 2023`` or ``January 5, 2023 | 09:30 AM``."""
    local = moment.astimezone(options.zone)
    text = local.strftime(options.date_format.replace("{day}", str(local.day)))
    if options.show_time:
        text = f"{text} | {local.strftime(options.time_format)}"
    return text


def render_item(record: Any, options: RenderOptions = DEFAULT_OPTIONS) -> DisplayItem:
    """Build the DisplayItem for a single record.

    Absent optional fields become empty strings or ``None`` links.

    Raises:
        MissingRequiredField: If ``title`` or ``published_at`` is absent,
            which only happens for records that skipped validation.
    """
    kind = getattr(record, "kind", None)
    title = getattr(record, "title", None)
    if not title:
        raise MissingRequiredField("title", kind)
    if getattr(record, "published_at", None) is None:
        raise MissingRequiredField("published_at", kind)

    moment = parse_timestamp(record.display_date, "display_date")
    return DisplayItem(
        heading=title,
        subheading=record.byline or "",
        formatted_date=format_date(moment, options),
        iso_date=moment.isoformat(),
        body_text=record.description or "",
        primary_link=record.link,
        secondary_link=record.website_link,
        status=record.status_label,
    )


def render_items(records: Iterable[Any], options: RenderOptions = DEFAULT_OPTIONS) -> list[DisplayItem]:
    """Render records in the order given."""
    return [render_item(r, options) for r in records]
