"""Plain markdown lists for READMEs and GitHub Pages."""

from __future__ import annotations

from collections.abc import Iterable

from folio.rendering.formatters.base import ListFormatter
from folio.rendering.models import DisplayItem


class MarkdownListFormatter(ListFormatter):
    """Formats items as markdown bullets with indented detail lines."""

    name = "markdown"

    def format_list(self, items: Iterable[DisplayItem]) -> str:
        blocks = [self.format_item(item) for item in items]
        if not blocks:
            return ""
        return "\n".join(blocks) + "\n"

    def format_item(self, item: DisplayItem) -> str:
        if item.heading_is_link:
            heading = f"[{_escape(item.heading)}](<{item.primary_link}>)"
        else:
            heading = f"**{_escape(item.heading)}**"

        meta = [part for part in (item.subheading, item.formatted_date, item.status) if part]
        lines: list[str] = [f"- {heading}"]
        if meta:
            lines.append(f"  {' · '.join(_escape(m) for m in meta)}")
        if item.has_secondary_link:
            lines.append(f"  <{item.secondary_link}>")
        if item.body_text:
            for line in item.body_text.splitlines():
                lines.append(f"  {line}" if line.strip() else "")
        return "\n".join(lines)


def _escape(text: str) -> str:
    for ch in ("\\", "[", "]", "*", "_"):
        text = text.replace(ch, f"\\{ch}")
    return text
