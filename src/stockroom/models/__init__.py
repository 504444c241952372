"""
Models package.

In-memory item types (frozen dataclasses) and the SQLAlchemy tables used by
the development datastore.
"""

from .base import Base, BaseRecord
from .inventory_item import (
    Beverage,
    Collection,
    InventoryItem,
    Item,
    Material,
    StockStatus,
    find_item,
    item_class,
    stock_status,
)
from .tables import BeverageRecord, MaterialRecord, record_class

__all__ = [
    "Base",
    "BaseRecord",
    "Beverage",
    "BeverageRecord",
    "Collection",
    "InventoryItem",
    "Item",
    "Material",
    "MaterialRecord",
    "StockStatus",
    "find_item",
    "item_class",
    "record_class",
    "stock_status",
]
