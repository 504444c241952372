"""Quantity adjustment for inventory items.

An adjustment is a read-modify-write: the new quantity is computed from the
cached current quantity and written back as a single-field update. Nothing
is changed locally; the caller refetches the collection after a successful
write.

Subtraction is clamped at zero instead of failing, so a count of 5 minus 20
is stored as 0. Addition is rejected when the result would exceed
MAX_QUANTITY, the same limit the item form enforces.
"""

from enum import Enum
import logging
from typing import Any

from stockroom.models.inventory_item import Collection, InventoryItem
from stockroom.services.collection_service import update_fields
from stockroom.services.exceptions import ValidationError
from stockroom.services.logging_utils import get_service_logger, log_operation
from stockroom.services.repository import EntityRepository
from stockroom.utils.constants import MAX_QUANTITY
from stockroom.utils.validators import parse_positive_int

logger = get_service_logger(__name__)


class AdjustmentDirection(str, Enum):
    """Whether an adjustment adds to or subtracts from stock."""

    ADD = "add"
    SUBTRACT = "subtract"


def parse_direction(value: Any) -> AdjustmentDirection:
    """
    Parse an adjustment direction from a dropdown or radio value.

    Raises:
        ValidationError: If the value is neither 'add' nor 'subtract'
    """
    if isinstance(value, AdjustmentDirection):
        return value
    try:
        return AdjustmentDirection(str(value).strip().lower())
    except ValueError:
        raise ValidationError([f"Direction: '{value}' is not 'add' or 'subtract'"])


def parse_delta(value: Any) -> int:
    """
    Parse the amount to add or subtract.

    Args:
        value: int or text holding a whole number

    Returns:
        The delta as a positive int

    Raises:
        ValidationError: If the value is non-numeric, fractional, zero or negative
    """
    return parse_positive_int(value, "Quantity")


def compute_new_quantity(current: int, delta: int, direction: AdjustmentDirection) -> int:
    """
    Apply a delta to a quantity.

    Examples:
        compute_new_quantity(5, 3, ADD) -> 8
        compute_new_quantity(5, 20, SUBTRACT) -> 0
    """
    if direction is AdjustmentDirection.ADD:
        return current + delta
    return max(0, current - delta)


def adjust_quantity(
    repository: EntityRepository,
    collection: Collection,
    item: InventoryItem,
    delta: Any,
    direction: Any = AdjustmentDirection.ADD,
) -> int:
    """
    Validate an adjustment, compute the new quantity and persist it.

    Args:
        repository: Datastore to write to
        collection: Collection the item belongs to
        item: Cached item being adjusted
        delta: Amount entered by the user (validated here)
        direction: 'add' or 'subtract'

    Returns:
        The quantity that was written

    Raises:
        ValidationError: If delta or direction are invalid, or the result would
            exceed MAX_QUANTITY; no write is made
        RepositoryError: If the datastore rejects the update
    """
    try:
        amount = parse_delta(delta)
        direction = parse_direction(direction)
        new_quantity = compute_new_quantity(item.current_quantity, amount, direction)
        if new_quantity > MAX_QUANTITY:
            raise ValidationError([f"Quantity: New quantity must be {MAX_QUANTITY} or less"])
    except ValidationError as e:
        log_operation(
            logger,
            operation="adjust_quantity",
            outcome="validation_failed",
            level=logging.WARNING,
            collection=collection.value,
            item_id=item.id,
            errors=e.errors,
        )
        raise

    update_fields(repository, collection, item.id, {"current_quantity": new_quantity})

    log_operation(
        logger,
        operation="adjust_quantity",
        outcome="success",
        collection=collection.value,
        item_id=item.id,
        direction=direction.value,
        delta=amount,
        previous_quantity=item.current_quantity,
        new_quantity=new_quantity,
    )
    return new_quantity
