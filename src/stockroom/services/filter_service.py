"""Filter and sort engine for inventory lists.

Derives the view sequence shown in a tab from the cached collection:

    view = filter_sort(cache.items, query, category, sector, sort)

All functions here are pure: they never mutate their input and always return
entities taken from it (no copies, no duplicates).

Search is a substring match on the item name that ignores case and accents,
so "coca" matches "Coca-Cola" and "agua" matches "Água Mineral".
"""

from dataclasses import dataclass
from enum import Enum
import unicodedata
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from stockroom.models.inventory_item import InventoryItem


def normalize_for_search(text: str) -> str:
    """
    Normalize text for search by removing diacriticals and folding case.

    Examples:
        "Água Mineral" -> "agua mineral"
        "CAFÉ" -> "cafe"
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


class SortKey(str, Enum):
    """Sortable columns. Each key carries its own tie-break chain."""

    NAME = "name"
    QUANTITY = "quantity"
    CATEGORY = "category"
    CATEGORY_SECTOR_NAME = "category_sector_name"


def _text(value: str) -> str:
    return (value or "").casefold()


# Tie-break chains; the trailing id makes every order total
_SORT_CHAINS: Dict[SortKey, Callable[[InventoryItem], Tuple]] = {
    SortKey.NAME: lambda item: (_text(item.name), item.id),
    SortKey.QUANTITY: lambda item: (item.current_quantity, _text(item.name), item.id),
    SortKey.CATEGORY: lambda item: (_text(item.category), _text(item.name), item.id),
    SortKey.CATEGORY_SECTOR_NAME: lambda item: (
        _text(item.category),
        _text(item.sector),
        _text(item.name),
        item.id,
    ),
}


@dataclass(frozen=True)
class SortSpec:
    """Requested order: a key and one direction applied to its whole chain."""

    key: SortKey = SortKey.NAME
    descending: bool = False

    def toggled(self, key: SortKey) -> "SortSpec":
        """
        Sort spec after clicking a column header.

        Clicking the active column flips the direction; clicking another
        column sorts it ascending.
        """
        if key is self.key:
            return SortSpec(key=key, descending=not self.descending)
        return SortSpec(key=key, descending=False)


# Order used by the PDF export
CANONICAL_SORT = SortSpec(key=SortKey.CATEGORY_SECTOR_NAME)


def matches_query(item: InventoryItem, query: str) -> bool:
    """True when the normalized query is a substring of the normalized name."""
    needle = normalize_for_search((query or "").strip())
    if not needle:
        return True
    return needle in normalize_for_search(item.name)


def sort_items(items: Iterable[InventoryItem], sort: SortSpec) -> Tuple[InventoryItem, ...]:
    """Return items ordered by the sort spec's chain and direction."""
    return tuple(sorted(items, key=_SORT_CHAINS[sort.key], reverse=sort.descending))


def filter_sort(
    items: Sequence[InventoryItem],
    query: str = "",
    category: Optional[str] = None,
    sector: Optional[str] = None,
    sort: Optional[SortSpec] = None,
) -> Tuple[InventoryItem, ...]:
    """
    Build the view sequence for a list.

    Args:
        items: Cached collection
        query: Name search text; empty matches everything
        category: Exact category to keep; None or "" keeps all
        sector: Exact sector to keep; None or "" keeps all
        sort: Optional sort spec; without one the cache order is kept

    Returns:
        Tuple of the matching items
    """
    filtered: List[InventoryItem] = [
        item
        for item in items
        if (not category or item.category == category)
        and (not sector or item.sector == sector)
        and matches_query(item, query)
    ]
    if sort is None:
        return tuple(filtered)
    return sort_items(filtered, sort)


def _distinct(values: Iterable[str]) -> List[str]:
    return sorted({value for value in values if value}, key=lambda v: (v.casefold(), v))


def distinct_categories(items: Iterable[InventoryItem]) -> List[str]:
    """Non-empty categories present in the items, sorted, for filter dropdowns."""
    return _distinct(item.category for item in items)


def distinct_sectors(items: Iterable[InventoryItem]) -> List[str]:
    """Non-empty sectors present in the items, sorted, for filter dropdowns."""
    return _distinct(item.sector for item in items)
