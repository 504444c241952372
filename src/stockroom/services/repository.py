"""Entity repository: list/insert/update/delete against the datastore.

The repository is a thin pass-through. It speaks stored column names
(see field_mapping) and raw dictionaries; turning records into items and
refetching after mutations is the collection service's job.

Implementations:
- SupabaseRepository: production backend (Supabase/PostgREST tables)
- SqlRepository: development backend (SQLAlchemy, same table layout)

Every failure surfaces as RepositoryError with the original exception
attached. Nothing is retried.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from supabase import create_client

from stockroom.models.base import new_id
from stockroom.models.inventory_item import Collection
from stockroom.models.tables import record_class
from stockroom.services.database import session_scope
from stockroom.services.exceptions import RepositoryError
from stockroom.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


class EntityRepository(ABC):
    """Datastore operations for the inventory collections."""

    @abstractmethod
    def list(self, collection: Collection) -> List[Dict[str, Any]]:
        """Return every stored record of the collection."""

    @abstractmethod
    def insert(self, collection: Collection, fields: Mapping[str, Any]) -> None:
        """Store a new record. The repository assigns its id."""

    @abstractmethod
    def update(self, collection: Collection, item_id: str, fields: Mapping[str, Any]) -> None:
        """Overwrite the given stored fields of one record."""

    @abstractmethod
    def delete(self, collection: Collection, item_id: str) -> None:
        """Remove one record."""


def _fail(operation: str, collection: Collection, error: Exception, **context) -> RepositoryError:
    log_operation(
        logger,
        operation=operation,
        outcome="error",
        level=logging.ERROR,
        collection=collection.value,
        error=str(error),
        **context,
    )
    return RepositoryError(operation, collection.value, str(error), original_error=error)


class SupabaseRepository(EntityRepository):
    """
    Repository backed by Supabase tables.

    Args:
        client: A supabase.Client (see create_supabase_client)
    """

    def __init__(self, client):
        self._client = client

    @property
    def client(self):
        return self._client

    def _table(self, collection: Collection):
        return self._client.table(collection.table_name)

    def list(self, collection: Collection) -> List[Dict[str, Any]]:
        try:
            response = self._table(collection).select("*").execute()
        except Exception as e:
            raise _fail("list", collection, e) from e
        records = list(response.data or [])
        log_operation(
            logger, operation="list", outcome="success",
            collection=collection.value, count=len(records),
        )
        return records

    def insert(self, collection: Collection, fields: Mapping[str, Any]) -> None:
        payload = {k: v for k, v in fields.items() if k != "id"}
        try:
            self._table(collection).insert(payload).execute()
        except Exception as e:
            raise _fail("insert", collection, e) from e
        log_operation(logger, operation="insert", outcome="success", collection=collection.value)

    def update(self, collection: Collection, item_id: str, fields: Mapping[str, Any]) -> None:
        payload = {k: v for k, v in fields.items() if k != "id"}
        try:
            self._table(collection).update(payload).eq("id", item_id).execute()
        except Exception as e:
            raise _fail("update", collection, e, item_id=item_id) from e
        log_operation(
            logger, operation="update", outcome="success",
            collection=collection.value, item_id=item_id, fields=sorted(payload),
        )

    def delete(self, collection: Collection, item_id: str) -> None:
        try:
            self._table(collection).delete().eq("id", item_id).execute()
        except Exception as e:
            raise _fail("delete", collection, e, item_id=item_id) from e
        log_operation(
            logger, operation="delete", outcome="success",
            collection=collection.value, item_id=item_id,
        )


class SqlRepository(EntityRepository):
    """
    Repository backed by the local SQLAlchemy database.

    Sessions come from stockroom.services.database.session_scope(), so tests
    can swap in an in-memory database by patching the session factory.
    """

    def list(self, collection: Collection) -> List[Dict[str, Any]]:
        model = record_class(collection)
        try:
            with session_scope() as session:
                rows = session.query(model).order_by(model.nome).all()
                records = [row.to_record() for row in rows]
        except SQLAlchemyError as e:
            raise _fail("list", collection, e) from e
        log_operation(
            logger, operation="list", outcome="success",
            collection=collection.value, count=len(records),
        )
        return records

    def insert(self, collection: Collection, fields: Mapping[str, Any]) -> None:
        model = record_class(collection)
        columns = {column.name for column in model.__table__.columns}
        values = {k: v for k, v in fields.items() if k in columns and k != "id"}
        try:
            with session_scope() as session:
                session.add(model(id=new_id(), **values))
        except SQLAlchemyError as e:
            raise _fail("insert", collection, e) from e
        log_operation(logger, operation="insert", outcome="success", collection=collection.value)

    def update(self, collection: Collection, item_id: str, fields: Mapping[str, Any]) -> None:
        model = record_class(collection)
        columns = {column.name for column in model.__table__.columns}
        try:
            with session_scope() as session:
                row = session.get(model, item_id)
                if row is None:
                    raise LookupError(f"no row with id '{item_id}'")
                for key, value in fields.items():
                    if key in columns and key != "id":
                        setattr(row, key, value)
        except (SQLAlchemyError, LookupError) as e:
            raise _fail("update", collection, e, item_id=item_id) from e
        log_operation(
            logger, operation="update", outcome="success",
            collection=collection.value, item_id=item_id, fields=sorted(fields),
        )

    def delete(self, collection: Collection, item_id: str) -> None:
        model = record_class(collection)
        try:
            with session_scope() as session:
                row = session.get(model, item_id)
                if row is None:
                    raise LookupError(f"no row with id '{item_id}'")
                session.delete(row)
        except (SQLAlchemyError, LookupError) as e:
            raise _fail("delete", collection, e, item_id=item_id) from e
        log_operation(
            logger, operation="delete", outcome="success",
            collection=collection.value, item_id=item_id,
        )


def create_supabase_client(url: str, key: str):
    """Create a Supabase client from project URL and API key."""
    return create_client(url, key)


def create_repository(config, client: Optional[Any] = None) -> EntityRepository:
    """
    Build the repository for the configured backend.

    Args:
        config: Config instance
        client: Existing Supabase client to reuse (production only)

    Returns:
        SupabaseRepository in production, SqlRepository in development
    """
    if config.backend == "sqlite":
        return SqlRepository()
    if client is None:
        client = create_supabase_client(config.supabase_url, config.supabase_key)
    return SupabaseRepository(client)
