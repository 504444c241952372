"""Adjustment Dialog - add to or subtract from an item's quantity.

Provides a modal dialog with:
- Add/Subtract selection
- Quantity entry
- Live preview with color coding (green for increase, red for decrease)

The dialog mirrors its inputs into the controller's adjustment state and
asks the controller to apply it. It stays open when the value is invalid or
the datastore rejects the update, so the user can retry.
"""

import customtkinter as ctk

from stockroom.services.exceptions import ValidationError
from stockroom.services.inventory_controller import InventoryController
from stockroom.services.quantity_service import (
    AdjustmentDirection,
    compute_new_quantity,
    parse_delta,
)
from stockroom.utils.constants import (
    COLOR_ERROR,
    COLOR_SUCCESS,
    COLOR_WARNING,
    MAX_QUANTITY,
    PADDING_LARGE,
)


class AdjustmentDialog(ctk.CTkToplevel):
    """Dialog for adjusting one item's quantity.

    Args:
        parent: Parent window
        controller: Controller of the item's collection
        item_id: Id of the item to adjust
    """

    def __init__(self, parent, controller: InventoryController, item_id: str):
        # Raises ItemNotFound before any window exists
        controller.start_adjustment(item_id)
        item = controller.state.cache.get(item_id)

        super().__init__(parent)

        self._controller = controller
        self._item = item
        self.applied = False

        self._setup_window()
        self._create_widgets()
        self._setup_modal()

    def _setup_window(self) -> None:
        self.title("Adjust Quantity")
        self.geometry("380x300")
        self.resizable(False, False)
        self.protocol("WM_DELETE_WINDOW", self._on_cancel)

    def _setup_modal(self) -> None:
        self.transient(self.master)
        self.grab_set()
        self.wait_visibility()
        self.focus_force()

    def _create_widgets(self) -> None:
        header_frame = ctk.CTkFrame(self)
        header_frame.pack(fill="x", padx=PADDING_LARGE, pady=10)

        ctk.CTkLabel(
            header_frame,
            text=self._item.name,
            font=ctk.CTkFont(size=16, weight="bold"),
        ).pack(anchor="w")
        ctk.CTkLabel(
            header_frame,
            text=f"Current quantity: {self._item.current_quantity}",
            text_color="gray",
        ).pack(anchor="w")

        controls = ctk.CTkFrame(self)
        controls.pack(fill="x", padx=PADDING_LARGE, pady=10)

        self._direction_var = ctk.StringVar(value=AdjustmentDirection.ADD.value)
        types_frame = ctk.CTkFrame(controls, fg_color="transparent")
        types_frame.pack(fill="x", pady=5)
        for direction, label in [(AdjustmentDirection.ADD, "Add"), (AdjustmentDirection.SUBTRACT, "Subtract")]:
            ctk.CTkRadioButton(
                types_frame,
                text=label,
                variable=self._direction_var,
                value=direction.value,
                command=self._on_input_changed,
            ).pack(side="left", padx=10)

        ctk.CTkLabel(controls, text="Quantity:", font=ctk.CTkFont(weight="bold")).pack(
            anchor="w", pady=(10, 0)
        )
        self._quantity_var = ctk.StringVar(value="")
        self._quantity_var.trace_add("write", lambda *args: self._on_input_changed())
        self._quantity_entry = ctk.CTkEntry(controls, textvariable=self._quantity_var, width=100)
        self._quantity_entry.pack(anchor="w", pady=5)
        self._quantity_entry.bind("<Return>", lambda e: self._on_save_click())

        self._preview_label = ctk.CTkLabel(self, text="", font=ctk.CTkFont(size=14))
        self._preview_label.pack(anchor="w", padx=PADDING_LARGE)

        buttons_frame = ctk.CTkFrame(self, fg_color="transparent")
        buttons_frame.pack(fill="x", padx=PADDING_LARGE, pady=PADDING_LARGE)

        ctk.CTkButton(buttons_frame, text="Cancel", command=self._on_cancel, fg_color="gray").pack(
            side="right", padx=5
        )
        self._save_btn = ctk.CTkButton(buttons_frame, text="Confirm", command=self._on_save_click)
        self._save_btn.pack(side="right", padx=5)

        self._update_preview()
        self._quantity_entry.focus()

    def _on_input_changed(self) -> None:
        self._controller.update_adjustment(
            delta=self._quantity_var.get(),
            direction=AdjustmentDirection(self._direction_var.get()),
        )
        self._update_preview()

    def _update_preview(self) -> None:
        current = self._item.current_quantity
        try:
            delta = parse_delta(self._quantity_var.get())
        except ValidationError:
            self._preview_label.configure(text=f"{current} → ?", text_color="gray")
            return

        direction = AdjustmentDirection(self._direction_var.get())
        new_qty = compute_new_quantity(current, delta, direction)
        if new_qty > MAX_QUANTITY:
            self._preview_label.configure(
                text=f"{current} → {new_qty} (over the {MAX_QUANTITY} limit)",
                text_color=COLOR_WARNING,
            )
            return
        color = COLOR_SUCCESS if new_qty > current else COLOR_ERROR if new_qty < current else "gray"
        self._preview_label.configure(text=f"{current} → {new_qty}", text_color=color)

    def _on_save_click(self) -> None:
        self._save_btn.configure(state="disabled")
        self._on_input_changed()
        if self._controller.apply_adjustment():
            self.applied = True
            self.destroy()
            return
        if self.winfo_exists():
            self._save_btn.configure(state="normal")

    def _on_cancel(self) -> None:
        self._controller.cancel_adjustment()
        self.destroy()
