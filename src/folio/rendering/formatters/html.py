"""HTML list markup, matching the site's event list structure."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from folio.rendering.formatters.base import ListFormatter
from folio.rendering.models import DisplayItem


class HtmlListFormatter(ListFormatter):
    """Formats items as ``<li>`` elements inside a ``<ul>``."""

    name = "html"

    def format_list(self, items: Iterable[DisplayItem]) -> str:
        lines: list[str] = ["<ul>"]
        for item in items:
            lines.append(self.format_item(item))
        lines.append("</ul>")
        return "\n".join(lines)

    def format_item(self, item: DisplayItem) -> str:
        lines: list[str] = ["<li>"]
        if item.subheading:
            lines.append(f"  <h3>{escape(item.subheading)}</h3>")
        if item.has_secondary_link:
            href = escape(item.secondary_link, quote=True)
            lines.append(f'  <a href="{href}">{escape(item.secondary_link)}</a>')
        lines.append(f"  {self._heading(item)}")
        date_line = (
            f'  <time datetime="{escape(item.iso_date, quote=True)}">'
            f"{escape(item.formatted_date)}</time>"
        )
        if item.status:
            date_line += f" <span>{escape(item.status)}</span>"
        lines.append(date_line)
        if item.body_text:
            lines.append(f"  <p>{escape(item.body_text)}</p>")
        lines.append("</li>")
        return "\n".join(lines)

    def _heading(self, item: DisplayItem) -> str:
        heading = f"<h2>{escape(item.heading)}</h2>"
        if not item.heading_is_link:
            return heading
        href = escape(item.primary_link, quote=True)
        return f'<a target="_blank" rel="noopener" href="{href}">{heading}</a>'
