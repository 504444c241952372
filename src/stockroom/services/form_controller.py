"""Form controller for creating and editing inventory items.

Holds the draft values of one item at a time. The dialog seeds it, pushes
field edits into it and asks it for a submission:

    controller = FormController(Collection.MATERIALS)
    controller.seed(existing_item)        # or seed(None) for a new item
    controller.update(current_quantity=12)
    submission = controller.submit()      # UPDATE carrying the merged item

Required-field checks belong to the dialog (validators.validate_draft); the
controller does not repeat them.
"""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from stockroom.models.inventory_item import Collection, InventoryItem
from stockroom.services.field_mapping import mapped_fields


@dataclass(frozen=True)
class FormDraft:
    """Editable field values; defaults are empty text and zero."""

    name: str = ""
    current_quantity: int = 0
    reorder_point: int = 0
    image: str = ""
    category: str = ""
    sector: str = ""


class SubmissionKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class FormSubmission:
    """
    Result of submitting the form.

    CREATE submissions carry `fields` (no id). UPDATE submissions carry the
    merged `item`, which keeps the original id.
    """

    kind: SubmissionKind
    collection: Collection
    fields: Optional[Dict[str, Any]] = None
    item: Optional[InventoryItem] = None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _count(value: Any) -> int:
    return 0 if value is None else value


class FormController:
    """Draft state for one item form of a collection."""

    def __init__(self, collection: Collection):
        self.collection = collection
        self._original: Optional[InventoryItem] = None
        self._draft = FormDraft()

    @property
    def draft(self) -> FormDraft:
        return self._draft

    @property
    def original(self) -> Optional[InventoryItem]:
        """Item the form was seeded from, None when creating."""
        return self._original

    @property
    def is_editing(self) -> bool:
        return self._original is not None

    def seed(self, item: Optional[InventoryItem]) -> FormDraft:
        """
        Load an item's mutable fields into the draft, or reset it.

        Missing optional values fall back to "" and 0.

        Args:
            item: Item to edit, or None to start a blank draft

        Returns:
            The new draft
        """
        self._original = item
        if item is None:
            self._draft = FormDraft()
        else:
            self._draft = FormDraft(
                name=_text(item.name),
                current_quantity=_count(item.current_quantity),
                reorder_point=_count(item.reorder_point),
                image=_text(item.image),
                category=_text(item.category),
                sector=_text(getattr(item, "sector", "")),
            )
        return self._draft

    def update(self, **fields: Any) -> FormDraft:
        """
        Replace draft values.

        Raises:
            TypeError: If a field name is not part of the draft
        """
        self._draft = replace(self._draft, **fields)
        return self._draft

    def submit(self) -> FormSubmission:
        """
        Produce the create or update request for the current draft.

        Returns:
            UPDATE with the draft merged over the original item (id kept), or
            CREATE with the draft fields and no id
        """
        values = asdict(self._draft)
        fields = {name: values[name] for name in mapped_fields(self.collection)}

        if self._original is not None:
            merged = replace(self._original, **fields)
            return FormSubmission(
                kind=SubmissionKind.UPDATE, collection=self.collection, item=merged
            )
        return FormSubmission(kind=SubmissionKind.CREATE, collection=self.collection, fields=fields)
