"""Dialogs for item create/edit and quantity adjustment."""

from stockroom.ui.dialogs.adjustment_dialog import AdjustmentDialog
from stockroom.ui.dialogs.item_form_dialog import ItemFormDialog

__all__ = ["AdjustmentDialog", "ItemFormDialog"]
