"""Rendering: records to DisplayItems, DisplayItems to list markup."""

from folio.rendering.formatters import create_formatter
from folio.rendering.models import DisplayItem, RenderOptions
from folio.rendering.renderer import format_date, render_item, render_items

__all__ = [
    "DisplayItem",
    "RenderOptions",
    "create_formatter",
    "format_date",
    "render_item",
    "render_items",
]
