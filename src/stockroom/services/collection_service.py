"""Collection cache and item CRUD for one inventory collection.

The cache is an in-memory mirror of the last full fetch. It is never patched
incrementally: every successful mutation is followed by a complete refetch
(done by the caller, see inventory_controller), so the client can never drift
from what the datastore holds. A failed fetch leaves the previous cache in
place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from stockroom.models.inventory_item import Collection, InventoryItem, find_item
from stockroom.services.exceptions import ItemNotFound
from stockroom.services.field_mapping import from_record, item_fields, to_record
from stockroom.services.logging_utils import get_service_logger, log_operation
from stockroom.services.repository import EntityRepository
from stockroom.utils.datetime_utils import utc_now

logger = get_service_logger(__name__)


@dataclass(frozen=True)
class CollectionCache:
    """Snapshot of a collection as returned by the last successful fetch."""

    collection: Collection
    items: Tuple[InventoryItem, ...] = ()
    fetched_at: Optional[datetime] = None

    @property
    def is_loaded(self) -> bool:
        return self.fetched_at is not None

    def __len__(self) -> int:
        return len(self.items)

    def get(self, item_id: str) -> InventoryItem:
        """
        Look up a cached item by id.

        Raises:
            ItemNotFound: If no cached item has that id
        """
        item = find_item(self.items, item_id)
        if item is None:
            raise ItemNotFound(self.collection.value, item_id)
        return item


def empty_cache(collection: Collection) -> CollectionCache:
    """Cache for a collection that has not been fetched yet."""
    return CollectionCache(collection=collection)


def fetch_collection(repository: EntityRepository, collection: Collection) -> CollectionCache:
    """
    Fetch the whole collection and build a fresh cache.

    Args:
        repository: Datastore to read from
        collection: Collection to fetch

    Returns:
        New CollectionCache holding every stored item, in repository order

    Raises:
        RepositoryError: If the datastore call fails
    """
    records = repository.list(collection)
    items = tuple(from_record(collection, record) for record in records)
    log_operation(
        logger,
        operation="fetch_collection",
        outcome="success",
        collection=collection.value,
        count=len(items),
    )
    return CollectionCache(collection=collection, items=items, fetched_at=utc_now())


def create_item(
    repository: EntityRepository, collection: Collection, fields: Mapping[str, Any]
) -> None:
    """
    Insert a new item. Any 'id' in fields is ignored; the repository assigns one.

    Raises:
        RepositoryError: If the datastore call fails
    """
    repository.insert(collection, to_record(collection, fields))


def update_item(repository: EntityRepository, collection: Collection, item: InventoryItem) -> None:
    """
    Persist every mutable field of an item, keyed by its id.

    Raises:
        RepositoryError: If the datastore call fails
    """
    repository.update(collection, item.id, to_record(collection, item_fields(collection, item)))


def update_fields(
    repository: EntityRepository,
    collection: Collection,
    item_id: str,
    fields: Mapping[str, Any],
) -> None:
    """
    Persist a subset of fields of one item (e.g. just the quantity).

    Raises:
        RepositoryError: If the datastore call fails
    """
    repository.update(collection, item_id, to_record(collection, fields))


def delete_item(repository: EntityRepository, collection: Collection, item_id: str) -> None:
    """
    Delete an item by id.

    Raises:
        RepositoryError: If the datastore call fails
    """
    repository.delete(collection, item_id)
