"""
Image attachment field for the item form.

Shows the current image reference and offers "Choose file...", "Paste URL..."
and "Remove". Choosing a file hands the path to a resolver that turns it into
the stored reference (Supabase upload or local file URI).
"""

from tkinter import filedialog
from typing import Callable

import customtkinter as ctk

from stockroom.services.image_service import validate_image_url
from stockroom.ui.utils.error_handler import handle_error
from stockroom.utils.constants import IMAGE_EXTENSIONS, PADDING_SMALL

ImageResolver = Callable[[str], str]


class ImageField(ctk.CTkFrame):
    """Image reference picker."""

    def __init__(self, parent, resolve_file: ImageResolver, value: str = ""):
        """
        Args:
            parent: Parent widget
            resolve_file: Turns a local file path into the stored image reference
            value: Initial image reference
        """
        super().__init__(parent, fg_color="transparent")
        self._resolve_file = resolve_file
        self._value = value or ""

        self.value_label = ctk.CTkLabel(self, text="", anchor="w", width=260)
        self.value_label.pack(side="top", fill="x", pady=(0, PADDING_SMALL))

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.pack(side="top", fill="x")

        ctk.CTkButton(buttons, text="Choose file...", width=100, command=self._choose_file).pack(
            side="left", padx=(0, PADDING_SMALL)
        )
        ctk.CTkButton(buttons, text="Paste URL...", width=100, command=self._paste_url).pack(
            side="left", padx=(0, PADDING_SMALL)
        )
        self.remove_button = ctk.CTkButton(
            buttons, text="Remove", width=80, fg_color="gray", command=self.clear
        )
        self.remove_button.pack(side="left")

        self._render()

    def get(self) -> str:
        return self._value

    def set(self, value: str):
        self._value = value or ""
        self._render()

    def clear(self):
        self.set("")

    def _render(self):
        if self._value:
            shown = self._value if len(self._value) <= 48 else "..." + self._value[-45:]
            self.value_label.configure(text=shown, text_color=("gray10", "gray90"))
            self.remove_button.configure(state="normal")
        else:
            self.value_label.configure(text="No image", text_color="gray")
            self.remove_button.configure(state="disabled")

    def _choose_file(self):
        patterns = " ".join(f"*{ext}" for ext in sorted(IMAGE_EXTENSIONS))
        path = filedialog.askopenfilename(
            parent=self,
            title="Choose image",
            filetypes=[("Images", patterns), ("All files", "*.*")],
        )
        if not path:
            return
        try:
            self._value = self._resolve_file(path)
        except Exception as e:
            handle_error(e, parent=self, operation="Attach image")
            return
        self._render()

    def _paste_url(self):
        dialog = ctk.CTkInputDialog(text="Image URL:", title="Paste image URL")
        url = dialog.get_input()
        if not url:
            return
        try:
            self._value = validate_image_url(url)
        except Exception as e:
            handle_error(e, parent=self, operation="Attach image")
            return
        self._render()
