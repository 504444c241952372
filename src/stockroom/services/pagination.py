"""Pagination window over a view sequence.

A window exposes a growing prefix of the view. "Load more" extends the prefix
by one page. Windows are immutable: reset() and load_more() return new
windows, which keeps them safe to hold inside the view state snapshot.

The window must be reset whenever the query, a filter, the sort or the
underlying cache changes; a window over a stale view would show rows that no
longer match.
"""

from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from stockroom.models.inventory_item import InventoryItem
from stockroom.utils.constants import PAGE_SIZE


@dataclass(frozen=True)
class PaginationWindow:
    """Displayed prefix of a view sequence."""

    view: Tuple[InventoryItem, ...] = ()
    displayed: int = 0
    page_size: int = PAGE_SIZE

    def __post_init__(self):
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if not 0 <= self.displayed <= len(self.view):
            raise ValueError(
                f"displayed must be between 0 and {len(self.view)}, got {self.displayed}"
            )

    @classmethod
    def reset(cls, view: Sequence[InventoryItem], page_size: int = PAGE_SIZE) -> "PaginationWindow":
        """Window showing the first page of a (new) view."""
        view = tuple(view)
        return cls(view=view, displayed=min(page_size, len(view)), page_size=page_size)

    def load_more(self) -> "PaginationWindow":
        """
        Window with one more page displayed.

        On an exhausted window this returns an equal window.
        """
        if not self.has_more:
            return self
        return replace(self, displayed=min(self.displayed + self.page_size, len(self.view)))

    @property
    def has_more(self) -> bool:
        return self.displayed < len(self.view)

    @property
    def visible(self) -> Tuple[InventoryItem, ...]:
        """The displayed prefix."""
        return self.view[: self.displayed]

    @property
    def total(self) -> int:
        """Length of the whole view."""
        return len(self.view)
