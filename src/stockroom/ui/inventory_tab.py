"""
Inventory tab for one collection (materials or beverages).

Layout, top to bottom:
- search bar (name search, category filter, sector filter for materials)
- action buttons (Add, Edit, Adjust quantity, Delete, Export PDF)
- ttk.Treeview with click-to-sort headers, low-stock rows shaded
- "Load more" button and status line

The tab holds no list state of its own. It forwards every user action to an
InventoryController and re-renders whenever the controller publishes a new
view state.
"""

from tkinter import filedialog, ttk
from typing import Callable, Optional

import customtkinter as ctk

from stockroom.models.inventory_item import Collection
from stockroom.services.exceptions import ItemNotFound
from stockroom.services.export_service import default_export_filename
from stockroom.services.filter_service import SortKey
from stockroom.services.inventory_controller import (
    InventoryController,
    InventoryViewState,
    Notification,
    NotificationLevel,
)
from stockroom.services.repository import EntityRepository
from stockroom.ui.dialogs import AdjustmentDialog, ItemFormDialog
from stockroom.ui.utils.error_handler import handle_error
from stockroom.ui.widgets.dialogs import show_confirmation, show_notification
from stockroom.ui.widgets.search_bar import SearchBar
from stockroom.utils.constants import LOW_STOCK_ROW_COLOR, PADDING_MEDIUM, STATUS_LABELS

# column id -> (heading, width, sort key or None)
_COLUMNS = {
    "name": ("Name", 240, SortKey.NAME),
    "category": ("Category", 150, SortKey.CATEGORY),
    "sector": ("Sector", 130, SortKey.CATEGORY_SECTOR_NAME),
    "quantity": ("Quantity", 90, SortKey.QUANTITY),
    "reorder_point": ("Reorder point", 100, None),
    "status": ("Status", 90, None),
}


class InventoryTab(ctk.CTkFrame):
    """List view with search, filters, sorting, pagination and item actions."""

    def __init__(
        self,
        parent,
        repository: EntityRepository,
        collection: Collection,
        resolve_image: Callable[[str], str],
        export_dir=None,
        on_status: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            parent: Parent widget (a CTkTabview tab)
            repository: Datastore shared by all tabs
            collection: Collection shown by this tab
            resolve_image: Turns a chosen local image into its stored reference
            export_dir: Initial directory for PDF exports
            on_status: Called with short messages for the window status bar
        """
        super().__init__(parent, fg_color="transparent")

        self.collection = collection
        self._resolve_image = resolve_image
        self._export_dir = export_dir
        self._on_status = on_status
        self.controller = InventoryController(repository, collection, notify=self._notify)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=0)  # Search
        self.grid_rowconfigure(1, weight=0)  # Buttons
        self.grid_rowconfigure(2, weight=1)  # Grid
        self.grid_rowconfigure(3, weight=0)  # Load more / status

        self._create_search_bar()
        self._create_action_buttons()
        self._create_grid()
        self._create_footer()

        self._unsubscribe = self.controller.subscribe(self._render)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _create_search_bar(self):
        self.search_bar = SearchBar(
            self,
            on_query=self.controller.set_query,
            on_category=self.controller.set_category_filter,
            on_sector=self.controller.set_sector_filter if self.collection.has_sector else None,
            on_clear=self.controller.clear_filters,
            placeholder=f"Search {self.collection.value}...",
        )
        self.search_bar.grid(row=0, column=0, sticky="ew", padx=5, pady=5)

    def _create_action_buttons(self):
        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=1, column=0, sticky="ew", padx=5, pady=5)

        add_button = ctk.CTkButton(
            button_frame,
            text=f"+ Add {self.collection.singular_label}",
            command=self._add_item,
            width=140,
            height=36,
        )
        add_button.grid(row=0, column=0, padx=(0, PADDING_MEDIUM))

        self.edit_button = ctk.CTkButton(
            button_frame, text="Edit", command=self._edit_item, width=100, height=36, state="disabled"
        )
        self.edit_button.grid(row=0, column=1, padx=(0, PADDING_MEDIUM))

        self.adjust_button = ctk.CTkButton(
            button_frame,
            text="Adjust quantity",
            command=self._adjust_item,
            width=130,
            height=36,
            state="disabled",
        )
        self.adjust_button.grid(row=0, column=2, padx=(0, PADDING_MEDIUM))

        self.delete_button = ctk.CTkButton(
            button_frame,
            text="Delete",
            command=self._delete_item,
            width=100,
            height=36,
            fg_color="darkred",
            hover_color="red",
            state="disabled",
        )
        self.delete_button.grid(row=0, column=3, padx=(0, PADDING_MEDIUM))

        export_button = ctk.CTkButton(
            button_frame, text="Export PDF", command=self._export_pdf, width=110, height=36
        )
        export_button.grid(row=0, column=4, padx=(0, PADDING_MEDIUM))

        refresh_button = ctk.CTkButton(
            button_frame, text="Refresh", command=self.refresh, width=90, height=36
        )
        refresh_button.grid(row=0, column=5)

    def _create_grid(self):
        grid_container = ctk.CTkFrame(self)
        grid_container.grid(row=2, column=0, sticky="nsew", padx=5, pady=5)
        grid_container.grid_columnconfigure(0, weight=1)
        grid_container.grid_rowconfigure(0, weight=1)

        self._columns = [
            column for column in _COLUMNS if column != "sector" or self.collection.has_sector
        ]
        self.tree = ttk.Treeview(
            grid_container,
            columns=self._columns,
            show="headings",
            selectmode="browse",
        )

        for column in self._columns:
            heading, width, sort_key = _COLUMNS[column]
            anchor = "e" if column in ("quantity", "reorder_point") else "w"
            if sort_key is not None:
                self.tree.heading(
                    column, text=heading, anchor=anchor,
                    command=lambda key=sort_key: self.controller.sort_by(key),
                )
            else:
                self.tree.heading(column, text=heading, anchor=anchor)
            self.tree.column(column, width=width, minwidth=60, anchor=anchor)

        self.tree.tag_configure("low", background=LOW_STOCK_ROW_COLOR)

        y_scrollbar = ttk.Scrollbar(grid_container, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=y_scrollbar.set)

        self.tree.grid(row=0, column=0, sticky="nsew")
        y_scrollbar.grid(row=0, column=1, sticky="ns")

        self.tree.bind("<Double-1>", lambda e: self._edit_item())
        self.tree.bind("<<TreeviewSelect>>", self._on_tree_select)

    def _create_footer(self):
        footer = ctk.CTkFrame(self, fg_color="transparent")
        footer.grid(row=3, column=0, sticky="ew", padx=5, pady=(5, 10))
        footer.grid_columnconfigure(0, weight=1)

        self.status_label = ctk.CTkLabel(footer, text="Ready", anchor="w", height=30)
        self.status_label.grid(row=0, column=0, sticky="ew")

        self.load_more_button = ctk.CTkButton(
            footer, text="Load more", command=self.controller.load_more, width=120, state="disabled"
        )
        self.load_more_button.grid(row=0, column=1, sticky="e")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, state: InventoryViewState):
        if state.loading:
            self.update_status("Loading...")
            return

        self.search_bar.set_options(state.categories, state.sectors)

        selected = state.selected_id
        self.tree.delete(*self.tree.get_children())
        for item in state.visible:
            values = {
                "name": item.name,
                "category": item.category,
                "sector": item.sector,
                "quantity": item.current_quantity,
                "reorder_point": item.reorder_point,
                "status": STATUS_LABELS[item.status.value],
            }
            tags = ("low",) if item.is_low_stock else ()
            self.tree.insert(
                "", "end", iid=item.id, values=[values[c] for c in self._columns], tags=tags
            )
        if selected is not None and self.tree.exists(selected):
            self.tree.selection_set(selected)
        self._set_selection_buttons(selected is not None and self.tree.exists(selected))

        self._render_sort_indicator(state)
        self.load_more_button.configure(state="normal" if state.has_more else "disabled")

        shown, total = len(state.visible), state.window.total
        noun = self.collection.value
        if state.is_filtered:
            self.update_status(f"Showing {shown} of {total} matching {noun} ({len(state.cache)} total)")
        else:
            self.update_status(f"Showing {shown} of {total} {noun}")

    def _render_sort_indicator(self, state: InventoryViewState):
        for column in self._columns:
            heading, _, sort_key = _COLUMNS[column]
            if state.sort is not None and sort_key is state.sort.key:
                heading = f"{heading} {'▼' if state.sort.descending else '▲'}"
            self.tree.heading(column, text=heading)

    def _set_selection_buttons(self, enabled: bool):
        state = "normal" if enabled else "disabled"
        for button in (self.edit_button, self.adjust_button, self.delete_button):
            button.configure(state=state)

    def update_status(self, message: str):
        self.status_label.configure(text=message)

    def _notify(self, notification: Notification):
        if self._on_status is not None:
            self._on_status(notification.message)
        # Successes go to the status bar only; everything else needs attention
        if notification.level is not NotificationLevel.SUCCESS:
            show_notification(notification, parent=self)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def refresh(self):
        self.controller.refresh()

    def _selected_id(self) -> Optional[str]:
        selection = self.tree.selection()
        return selection[0] if selection else None

    def _on_tree_select(self, event=None):
        item_id = self._selected_id()
        if item_id != self.controller.state.selected_id:
            self.controller.select(item_id)

    def _add_item(self):
        form = self.controller.open_create()
        self._run_form(form)

    def _edit_item(self):
        item_id = self._selected_id()
        if item_id is None:
            return
        try:
            form = self.controller.open_edit(item_id)
        except ItemNotFound as e:
            handle_error(e, parent=self, operation="Edit item")
            self.refresh()
            return
        self._run_form(form)

    def _run_form(self, form):
        state = self.controller.state
        dialog = ItemFormDialog(
            self,
            form,
            resolve_image=self._resolve_image,
            categories=state.categories,
            sectors=state.sectors,
        )
        self.wait_window(dialog)

        if dialog.result is None:
            self.controller.close_form()
            return
        self.controller.submit_form(dialog.result)

    def _adjust_item(self):
        item_id = self._selected_id()
        if item_id is None:
            return
        try:
            dialog = AdjustmentDialog(self, self.controller, item_id)
        except ItemNotFound as e:
            handle_error(e, parent=self, operation="Adjust quantity")
            self.refresh()
            return
        self.wait_window(dialog)

    def _delete_item(self):
        item_id = self._selected_id()
        if item_id is None:
            return
        item = self.controller.state.selected_item
        name = item.name if item is not None else "this item"
        if not show_confirmation(
            "Confirm Delete",
            f"Are you sure you want to delete '{name}'?\n\nThis cannot be undone.",
            parent=self,
        ):
            return
        self.controller.delete_item(item_id)

    def _export_pdf(self):
        path = filedialog.asksaveasfilename(
            parent=self,
            title=f"Export {self.collection.label}",
            initialdir=str(self._export_dir) if self._export_dir else None,
            initialfile=default_export_filename(self.collection),
            defaultextension=".pdf",
            filetypes=[("PDF files", "*.pdf")],
        )
        if not path:
            return
        try:
            self.controller.export_pdf(path)
        except Exception as e:
            handle_error(e, parent=self, operation="Export PDF")
            return
        self.update_status(f"Exported {len(self.controller.state.cache)} {self.collection.value} to {path}")

    def destroy(self):
        self._unsubscribe()
        super().destroy()
