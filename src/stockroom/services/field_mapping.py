"""Field mapping between stored records and in-memory items.

The datastore names its columns differently from the application:

    in-memory          stored
    ---------          ------
    id                 id
    name               nome
    current_quantity   quantidade
    reorder_point      ponto_reposicao
    image              imagem_url
    category           categoria
    sector             setor        (materials only)

Reading tolerates missing or null columns by substituting defaults ("" or 0),
and ignores columns the application does not know (early beverage rows carry
a deprecated 'data_validade' column). Writing never includes the id, which is
always assigned by the repository.
"""

from typing import Any, Dict, Mapping

from stockroom.models.inventory_item import Collection, InventoryItem, item_class

ID_FIELD = "id"

# in-memory name -> stored name
FIELD_MAP: Dict[str, str] = {
    "name": "nome",
    "current_quantity": "quantidade",
    "reorder_point": "ponto_reposicao",
    "image": "imagem_url",
    "category": "categoria",
    "sector": "setor",
}

_COUNT_FIELDS = ("current_quantity", "reorder_point")


def mapped_fields(collection: Collection):
    """In-memory field names stored for a collection (id excluded)."""
    if collection.has_sector:
        return tuple(FIELD_MAP)
    return tuple(field for field in FIELD_MAP if field != "sector")


def stored_name(field: str) -> str:
    """Stored column name for an in-memory field."""
    return FIELD_MAP[field]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_count(value: Any) -> int:
    """Coerce a stored number to a non-negative int, 0 when unusable."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, number)


def from_record(collection: Collection, record: Mapping[str, Any]) -> InventoryItem:
    """
    Build an in-memory item from a stored record.

    Args:
        collection: Collection the record belongs to
        record: Dictionary keyed by stored column names

    Returns:
        Material or Beverage instance
    """
    values: Dict[str, Any] = {ID_FIELD: _as_text(record.get(ID_FIELD))}
    for field in mapped_fields(collection):
        raw = record.get(FIELD_MAP[field])
        if field in _COUNT_FIELDS:
            values[field] = _as_count(raw)
        else:
            values[field] = _as_text(raw)
    return item_class(collection)(**values)


def to_record(collection: Collection, fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build a stored payload from in-memory field values.

    Only fields present in `fields` are written, so the same function serves
    full inserts and single-field updates. The id is never written.

    Args:
        collection: Target collection
        fields: Mapping of in-memory field name to value

    Returns:
        Dictionary keyed by stored column names
    """
    payload: Dict[str, Any] = {}
    for field in mapped_fields(collection):
        if field not in fields:
            continue
        value = fields[field]
        if field in _COUNT_FIELDS:
            payload[FIELD_MAP[field]] = int(value)
        else:
            payload[FIELD_MAP[field]] = _as_text(value)
    return payload


def item_fields(collection: Collection, item: InventoryItem) -> Dict[str, Any]:
    """In-memory field values of an item, id excluded."""
    return {field: getattr(item, field) for field in mapped_fields(collection)}
