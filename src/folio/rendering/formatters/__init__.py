"""List formatter factory and registry."""

from __future__ import annotations

from folio.rendering.formatters.base import ListFormatter
from folio.rendering.formatters.html import HtmlListFormatter
from folio.rendering.formatters.markdown import MarkdownListFormatter

FORMATTERS: dict[str, type[ListFormatter]] = {
    HtmlListFormatter.name: HtmlListFormatter,
    MarkdownListFormatter.name: MarkdownListFormatter,
}


def create_formatter(name: str) -> ListFormatter:
    """Create a formatter for the given output format.

    Raises:
        ValueError: If the format is unknown.
    """
    try:
        return FORMATTERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown format: {name!r}") from None


__all__ = [
    "FORMATTERS",
    "HtmlListFormatter",
    "ListFormatter",
    "MarkdownListFormatter",
    "create_formatter",
]
