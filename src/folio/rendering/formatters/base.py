"""Base class for markup-specific list formatting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from folio.rendering.models import DisplayItem


class ListFormatter(ABC):
    """Turns DisplayItems into list markup for one output format."""

    name: str = ""

    @abstractmethod
    def format_item(self, item: DisplayItem) -> str:
        """Format a single list entry."""

    @abstractmethod
    def format_list(self, items: Iterable[DisplayItem]) -> str:
        """Format a whole list, preserving item order."""
