"""
Stored tables for materials and beverages.

Column names follow the datastore schema (Portuguese), which differs from the
in-memory field names; stockroom.services.field_mapping translates between
the two.
"""

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from .base import BaseRecord
from .inventory_item import Collection


class MaterialRecord(BaseRecord):
    """Row of the 'materiais' table."""

    __tablename__ = "materiais"

    nome = Column(String(200), nullable=False)
    quantidade = Column(Integer, nullable=False, default=0)
    ponto_reposicao = Column(Integer, nullable=False, default=0)
    imagem_url = Column(Text, nullable=True)
    categoria = Column(String(100), nullable=True)
    setor = Column(String(100), nullable=True)

    __table_args__ = (
        CheckConstraint("quantidade >= 0", name="ck_materiais_quantidade_non_negative"),
        CheckConstraint("ponto_reposicao >= 0", name="ck_materiais_ponto_non_negative"),
    )


class BeverageRecord(BaseRecord):
    """Row of the 'bebidas' table."""

    __tablename__ = "bebidas"

    nome = Column(String(200), nullable=False)
    quantidade = Column(Integer, nullable=False, default=0)
    ponto_reposicao = Column(Integer, nullable=False, default=0)
    imagem_url = Column(Text, nullable=True)
    categoria = Column(String(100), nullable=True)

    __table_args__ = (
        CheckConstraint("quantidade >= 0", name="ck_bebidas_quantidade_non_negative"),
        CheckConstraint("ponto_reposicao >= 0", name="ck_bebidas_ponto_non_negative"),
    )


RECORD_CLASSES = {
    Collection.MATERIALS: MaterialRecord,
    Collection.BEVERAGES: BeverageRecord,
}


def record_class(collection: Collection):
    """Return the table class backing a collection."""
    return RECORD_CLASSES[collection]
