"""Set-membership filter interface."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Filter(ABC):
    """Anything that can record items and answer membership queries."""

    @abstractmethod
    def add(self, item: Any) -> None:
        """Record an item."""

    @abstractmethod
    def contains(self, item: Any) -> bool:
        """True if the item may have been added, False if it definitely was not."""

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)
