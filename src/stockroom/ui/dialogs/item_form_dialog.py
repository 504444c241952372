"""Item Form Dialog - create or edit a material or beverage.

The dialog is a thin view over a FormController: it renders the seeded
draft, pushes the typed values back into it and validates them with
validate_draft(). On save it closes and leaves the controller in `result`;
the calling tab submits it.
"""

from typing import Callable, Optional

import customtkinter as ctk

from stockroom.services.exceptions import ValidationError
from stockroom.services.form_controller import FormController
from stockroom.ui.widgets.image_field import ImageField
from stockroom.utils.constants import PADDING_LARGE, PADDING_MEDIUM
from stockroom.utils.validators import parse_non_negative_int, validate_draft


class ItemFormDialog(ctk.CTkToplevel):
    """Modal create/edit form for one inventory item.

    Args:
        parent: Parent window
        form: FormController already seeded (seed(None) for a new item)
        resolve_image: Turns a chosen local file into the stored image reference
        categories: Known categories offered in the category combobox
        sectors: Known sectors (materials only)
    """

    def __init__(
        self,
        parent,
        form: FormController,
        resolve_image: Callable[[str], str],
        categories=(),
        sectors=(),
    ):
        super().__init__(parent)

        self.form = form
        self.result: Optional[FormController] = None
        self._resolve_image = resolve_image
        self._categories = list(categories)
        self._sectors = list(sectors)

        collection = form.collection
        action = "Edit" if form.is_editing else "Add"
        self.title(f"{action} {collection.singular_label}")
        self.geometry("460x520")
        self.resizable(False, False)

        self.grid_columnconfigure(1, weight=1)

        self._create_form()
        self._create_buttons()
        self._populate_form()
        self._setup_modal()

    def _setup_modal(self) -> None:
        self.transient(self.master)
        self.grab_set()
        self.wait_visibility()
        self.focus_force()

    def _create_form(self):
        row = 0

        ctk.CTkLabel(self, text="Name*:").grid(
            row=row, column=0, sticky="w", padx=PADDING_LARGE, pady=(PADDING_LARGE, 5)
        )
        self.name_entry = ctk.CTkEntry(self, width=280)
        self.name_entry.grid(row=row, column=1, sticky="ew", padx=PADDING_LARGE, pady=(PADDING_LARGE, 5))
        row += 1

        ctk.CTkLabel(self, text="Current quantity*:").grid(
            row=row, column=0, sticky="w", padx=PADDING_LARGE, pady=5
        )
        self.quantity_entry = ctk.CTkEntry(self, width=120)
        self.quantity_entry.grid(row=row, column=1, sticky="w", padx=PADDING_LARGE, pady=5)
        row += 1

        ctk.CTkLabel(self, text="Reorder point*:").grid(
            row=row, column=0, sticky="w", padx=PADDING_LARGE, pady=5
        )
        self.reorder_entry = ctk.CTkEntry(self, width=120)
        self.reorder_entry.grid(row=row, column=1, sticky="w", padx=PADDING_LARGE, pady=5)
        row += 1

        # Comboboxes accept free text so new categories can be typed in
        ctk.CTkLabel(self, text="Category*:").grid(
            row=row, column=0, sticky="w", padx=PADDING_LARGE, pady=5
        )
        self.category_combo = ctk.CTkComboBox(self, values=self._categories or [""], width=280)
        self.category_combo.grid(row=row, column=1, sticky="ew", padx=PADDING_LARGE, pady=5)
        row += 1

        self.sector_combo = None
        if self.form.collection.has_sector:
            ctk.CTkLabel(self, text="Sector:").grid(
                row=row, column=0, sticky="w", padx=PADDING_LARGE, pady=5
            )
            self.sector_combo = ctk.CTkComboBox(self, values=self._sectors or [""], width=280)
            self.sector_combo.grid(row=row, column=1, sticky="ew", padx=PADDING_LARGE, pady=5)
            row += 1

        ctk.CTkLabel(self, text="Image:").grid(
            row=row, column=0, sticky="nw", padx=PADDING_LARGE, pady=5
        )
        self.image_field = ImageField(self, resolve_file=self._resolve_image)
        self.image_field.grid(row=row, column=1, sticky="ew", padx=PADDING_LARGE, pady=5)
        row += 1

        self.error_label = ctk.CTkLabel(self, text="", text_color="red", justify="left", anchor="w")
        self.error_label.grid(row=row, column=0, columnspan=2, sticky="ew", padx=PADDING_LARGE, pady=5)
        self._button_row = row + 1

    def _create_buttons(self):
        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(
            row=self._button_row, column=0, columnspan=2, padx=PADDING_LARGE, pady=PADDING_LARGE, sticky="e"
        )

        self.save_button = ctk.CTkButton(button_frame, text="Save", width=100, command=self._save)
        self.save_button.pack(side="left", padx=PADDING_MEDIUM)

        ctk.CTkButton(
            button_frame, text="Cancel", width=100, fg_color="gray", command=self._cancel
        ).pack(side="left")

        self.bind("<Return>", lambda e: self._save())
        self.bind("<Escape>", lambda e: self._cancel())

    def _populate_form(self):
        """Fill the widgets from the seeded draft."""
        draft = self.form.draft
        self.name_entry.insert(0, draft.name)
        self.quantity_entry.insert(0, str(draft.current_quantity))
        self.reorder_entry.insert(0, str(draft.reorder_point))
        self.category_combo.set(draft.category)
        if self.sector_combo is not None:
            self.sector_combo.set(draft.sector)
        self.image_field.set(draft.image)
        self.name_entry.focus()

    def _read_widgets(self):
        """Push the widget values into the draft, parsing the numbers."""
        raw = dict(
            name=self.name_entry.get().strip(),
            current_quantity=self.quantity_entry.get().strip(),
            reorder_point=self.reorder_entry.get().strip(),
            category=self.category_combo.get().strip(),
            image=self.image_field.get(),
        )
        if self.sector_combo is not None:
            raw["sector"] = self.sector_combo.get().strip()

        self.form.update(**raw)
        validate_draft(self.form.draft)
        self.form.update(
            current_quantity=parse_non_negative_int(raw["current_quantity"], "Current quantity"),
            reorder_point=parse_non_negative_int(raw["reorder_point"], "Reorder point"),
        )

    def _save(self):
        try:
            self._read_widgets()
        except ValidationError as e:
            self.error_label.configure(text="\n".join(e.errors))
            return

        self.save_button.configure(state="disabled")
        self.result = self.form
        self.destroy()

    def _cancel(self):
        self.result = None
        self.destroy()
