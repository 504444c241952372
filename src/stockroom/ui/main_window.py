"""
Main application window for Stockroom.

Provides the main window with the Materials and Beverages tabs, a menu bar
and a status bar. In production the window stays hidden until the user has
signed in.
"""

import logging
import tkinter as tk
from tkinter import messagebox
from typing import Optional

import customtkinter as ctk

from stockroom.models.inventory_item import Collection
from stockroom.services.auth_service import AuthSession, sign_out
from stockroom.services.image_service import local_image_reference, upload_image
from stockroom.services.repository import create_repository, create_supabase_client
from stockroom.ui.inventory_tab import InventoryTab
from stockroom.ui.login_dialog import LoginDialog
from stockroom.ui.utils.error_handler import handle_error
from stockroom.utils.constants import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)


class MainWindow(ctk.CTk):
    """
    Main application window.

    Args:
        config: Config instance deciding backend and credentials
    """

    def __init__(self, config):
        super().__init__()

        self.config_ = config
        self.client = None
        self.session: Optional[AuthSession] = None
        if not config.is_development:
            self.client = create_supabase_client(config.supabase_url, config.supabase_key)
        self.repository = create_repository(config, client=self.client)

        self.title(f"{APP_NAME} - v{APP_VERSION}")
        self.geometry("1200x800")
        self.minsize(900, 600)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)  # Tab view
        self.grid_rowconfigure(1, weight=0)  # Status bar

        self._create_menu_bar()
        self._create_tabs()
        self._create_status_bar()
        self.protocol("WM_DELETE_WINDOW", self._on_exit)

        self.update_status("Ready")

    def start(self) -> bool:
        """
        Sign in (production only) and load both collections.

        Returns:
            False if the user closed the login dialog
        """
        if self.client is not None and not self._login():
            return False
        self.deiconify()
        self._refresh_all_tabs()
        return True

    def _login(self) -> bool:
        self.withdraw()
        dialog = LoginDialog(self, self.client)
        self.wait_window(dialog)
        self.session = dialog.session
        if self.session is None:
            return False
        self.update_status(f"Signed in as {self.session.email}")
        return True

    def _create_menu_bar(self):
        self.menu_bar = tk.Menu(self)
        self.config(menu=self.menu_bar)

        file_menu = tk.Menu(self.menu_bar, tearoff=0)
        file_menu.add_command(label="Refresh", command=self._refresh_all_tabs)
        file_menu.add_separator()
        file_menu.add_command(label="Sign out", command=self._on_sign_out)
        file_menu.add_command(label="Exit", command=self._on_exit)
        self.menu_bar.add_cascade(label="File", menu=file_menu)

        if self.client is None:
            file_menu.entryconfigure("Sign out", state="disabled")

    def _create_tabs(self):
        self.tabview = ctk.CTkTabview(self, corner_radius=10)
        self.tabview.grid(row=0, column=0, padx=10, pady=(0, 10), sticky="nsew")

        self.tabs = {}
        for collection in (Collection.MATERIALS, Collection.BEVERAGES):
            self.tabview.add(collection.label)
            frame = self.tabview.tab(collection.label)
            frame.grid_columnconfigure(0, weight=1)
            frame.grid_rowconfigure(0, weight=1)

            tab = InventoryTab(
                frame,
                repository=self.repository,
                collection=collection,
                resolve_image=self._resolve_image,
                export_dir=self.config_.export_dir,
                on_status=self.update_status,
            )
            tab.grid(row=0, column=0, sticky="nsew")
            self.tabs[collection] = tab

        self.tabview.set(Collection.MATERIALS.label)

    def _create_status_bar(self):
        status_frame = ctk.CTkFrame(self, height=30, corner_radius=0)
        status_frame.grid(row=1, column=0, sticky="ew")
        status_frame.grid_columnconfigure(0, weight=1)

        self.status_label = ctk.CTkLabel(status_frame, text="Ready", anchor="w")
        self.status_label.grid(row=0, column=0, padx=10, pady=5, sticky="w")

        backend = self.config_.backend
        ctk.CTkLabel(status_frame, text=f"Backend: {backend}", text_color="gray").grid(
            row=0, column=1, padx=10, pady=5, sticky="e"
        )

    def update_status(self, message: str):
        """
        Update the status bar message.

        Args:
            message: Status message to display
        """
        self.status_label.configure(text=message)

    def _resolve_image(self, path: str) -> str:
        """Stored reference for a chosen image file."""
        if self.client is None:
            return local_image_reference(path)
        return upload_image(self.client, self.config_.image_bucket, path)

    def _refresh_all_tabs(self):
        for tab in self.tabs.values():
            tab.refresh()

    def _on_sign_out(self):
        if self.client is None:
            return
        try:
            sign_out(self.client)
        except Exception as e:
            handle_error(e, parent=self, operation="Sign out")
            return
        self.session = None
        if not self.start():
            self.destroy()

    def _on_exit(self):
        result = messagebox.askyesno(
            "Exit",
            "Are you sure you want to exit the application?",
            parent=self,
        )
        if result:
            self.destroy()
