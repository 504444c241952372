"""
Base model class for the local (development) datastore tables.

The production datastore is a Supabase project; these SQLAlchemy tables mirror
its schema (table and column names included) so the development backend and
the remote one exchange identical stored records.

Provides:
- SQLAlchemy declarative base
- Repository-assigned string ids (uuid4)
- to_record() for the stored-name dictionary representation
"""

import uuid as uuid_lib
from typing import Any, Dict

from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Generate an opaque id for a new row."""
    return str(uuid_lib.uuid4())


class BaseRecord(Base):
    """
    Abstract base for stored inventory rows.

    All tables get:
    - id: opaque string primary key assigned on insert
    - to_record(): stored-name dictionary, the same shape Supabase returns
    """

    __abstract__ = True

    id = Column(String(36), primary_key=True, default=new_id)

    def to_record(self) -> Dict[str, Any]:
        """
        Convert the row to a dictionary keyed by stored column names.

        Returns:
            Dictionary representation of the row
        """
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"
