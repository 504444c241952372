"""
Search bar widget for filtering inventory lists.

Search entry with live filtering, category dropdown, optional sector
dropdown and a Clear button.
"""

import customtkinter as ctk
from typing import Callable, List, Optional

from stockroom.utils.constants import PADDING_MEDIUM, PADDING_SMALL

ALL_CATEGORIES = "All Categories"
ALL_SECTORS = "All Sectors"


class SearchBar(ctk.CTkFrame):
    """
    Search and filter controls for one inventory tab.

    Callbacks receive the new value; dropdown callbacks receive None when the
    "All ..." entry is selected.
    """

    def __init__(
        self,
        parent,
        on_query: Callable[[str], None],
        on_category: Callable[[Optional[str]], None],
        on_sector: Optional[Callable[[Optional[str]], None]] = None,
        on_clear: Optional[Callable[[], None]] = None,
        placeholder: str = "Search by name...",
    ):
        """
        Initialize the search bar.

        Args:
            parent: Parent widget
            on_query: Called with the search text on every key release
            on_category: Called with the selected category
            on_sector: Called with the selected sector; omit to hide the sector dropdown
            on_clear: Called after the Clear button reset the controls
            placeholder: Placeholder text for search entry
        """
        super().__init__(parent)

        self._on_query = on_query
        self._on_category = on_category
        self._on_sector = on_sector
        self._on_clear = on_clear

        search_label = ctk.CTkLabel(self, text="Search:")
        search_label.pack(side="left", padx=(PADDING_SMALL, 2), pady=PADDING_SMALL)

        self.search_entry = ctk.CTkEntry(self, placeholder_text=placeholder, width=220)
        self.search_entry.pack(side="left", padx=PADDING_SMALL, pady=PADDING_SMALL)
        self.search_entry.bind("<KeyRelease>", lambda e: self._on_query(self.get_search_term()))

        category_label = ctk.CTkLabel(self, text="Category:")
        category_label.pack(side="left", padx=(15, 2), pady=PADDING_SMALL)

        self.category_var = ctk.StringVar(value=ALL_CATEGORIES)
        self.category_dropdown = ctk.CTkOptionMenu(
            self,
            variable=self.category_var,
            values=[ALL_CATEGORIES],
            command=lambda value: self._on_category(self.get_category()),
            width=160,
        )
        self.category_dropdown.pack(side="left", padx=PADDING_SMALL, pady=PADDING_SMALL)

        self.sector_var = ctk.StringVar(value=ALL_SECTORS)
        self.sector_dropdown = None
        if on_sector is not None:
            sector_label = ctk.CTkLabel(self, text="Sector:")
            sector_label.pack(side="left", padx=(PADDING_MEDIUM, 2), pady=PADDING_SMALL)

            self.sector_dropdown = ctk.CTkOptionMenu(
                self,
                variable=self.sector_var,
                values=[ALL_SECTORS],
                command=lambda value: self._on_sector(self.get_sector()),
                width=160,
            )
            self.sector_dropdown.pack(side="left", padx=PADDING_SMALL, pady=PADDING_SMALL)

        clear_button = ctk.CTkButton(self, text="Clear", command=self.clear, width=60)
        clear_button.pack(side="left", padx=PADDING_MEDIUM, pady=PADDING_SMALL)

    def set_options(self, categories: List[str], sectors: Optional[List[str]] = None):
        """Refresh dropdown values, keeping the selection if it still exists."""
        self.category_dropdown.configure(values=[ALL_CATEGORIES] + list(categories))
        if self.category_var.get() not in categories:
            self.category_var.set(ALL_CATEGORIES)

        if self.sector_dropdown is not None and sectors is not None:
            self.sector_dropdown.configure(values=[ALL_SECTORS] + list(sectors))
            if self.sector_var.get() not in sectors:
                self.sector_var.set(ALL_SECTORS)

    def clear(self):
        """Reset search text and dropdowns."""
        self.search_entry.delete(0, "end")
        self.category_var.set(ALL_CATEGORIES)
        self.sector_var.set(ALL_SECTORS)
        if self._on_clear is not None:
            self._on_clear()

    def get_search_term(self) -> str:
        return self.search_entry.get()

    def get_category(self) -> Optional[str]:
        category = self.category_var.get()
        return None if category == ALL_CATEGORIES else category

    def get_sector(self) -> Optional[str]:
        sector = self.sector_var.get()
        return None if sector == ALL_SECTORS else sector
