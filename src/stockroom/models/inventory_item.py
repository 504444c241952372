"""
Inventory item models for materials and beverages.

Items are immutable snapshots of what the repository returned on the last
fetch. Edits never mutate an item in place; the form controller builds a new
item with dataclasses.replace() and the collection is refetched afterwards.

Collections:
- MATERIALS: restaurant materials (cutlery, plates, upholstery, electronics)
  grouped by category and sector
- BEVERAGES: drinks grouped by category
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Collection(str, Enum):
    """The two inventory collections, each backed by its own table."""

    MATERIALS = "materials"
    BEVERAGES = "beverages"

    @property
    def table_name(self) -> str:
        """Name of the table in the datastore."""
        return _TABLE_NAMES[self]

    @property
    def has_sector(self) -> bool:
        """Only materials are grouped by sector."""
        return self is Collection.MATERIALS

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def singular_label(self) -> str:
        return "Material" if self is Collection.MATERIALS else "Beverage"


_TABLE_NAMES = {
    Collection.MATERIALS: "materiais",
    Collection.BEVERAGES: "bebidas",
}


class StockStatus(str, Enum):
    """Stock level relative to an item's reorder point."""

    LOW = "low"
    OK = "ok"


def stock_status(current_quantity: int, reorder_point: int) -> StockStatus:
    """
    Classify stock against its reorder point.

    Stock at or below the reorder point is LOW.

    Examples:
        stock_status(10, 10) -> StockStatus.LOW
        stock_status(11, 10) -> StockStatus.OK
    """
    if current_quantity <= reorder_point:
        return StockStatus.LOW
    return StockStatus.OK


@dataclass(frozen=True)
class InventoryItem:
    """Fields shared by materials and beverages."""

    id: str
    name: str
    current_quantity: int = 0
    reorder_point: int = 0
    image: str = ""
    category: str = ""

    @property
    def status(self) -> StockStatus:
        return stock_status(self.current_quantity, self.reorder_point)

    @property
    def is_low_stock(self) -> bool:
        return self.status is StockStatus.LOW

    @property
    def sector(self) -> str:
        """Items without a sector report an empty one for sorting and filtering."""
        return ""


@dataclass(frozen=True)
class Material(InventoryItem):
    """A restaurant material, additionally grouped by sector."""

    sector: str = ""


@dataclass(frozen=True)
class Beverage(InventoryItem):
    """A beverage tracked against a reorder point."""

    pass


Item = Union[Material, Beverage]


def item_class(collection: Collection):
    """Return the dataclass used for items of a collection."""
    return Material if collection is Collection.MATERIALS else Beverage


def find_item(items, item_id: str) -> Optional[InventoryItem]:
    """Return the item with the given id, or None."""
    for item in items:
        if item.id == item_id:
            return item
    return None
