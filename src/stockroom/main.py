"""
Main entry point for the Stockroom application.

This module reads the configuration, sets up logging, prepares the local
database when running in development mode, and launches the main window.
"""

import logging
import sys
import traceback

import customtkinter as ctk

from stockroom.services.database import close_connections, initialize_app_database
from stockroom.ui.main_window import MainWindow
from stockroom.utils.config import get_config


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr with module names and timestamps."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def initialize_application(config) -> bool:
    """
    Initialize the application backend.

    Development uses a local SQLite database that is created on first run.
    Production needs Supabase credentials.

    Returns:
        True if initialization successful, False otherwise
    """
    try:
        if config.is_development:
            print("Initializing local database...")
            config.ensure_database_dir()
            initialize_app_database()
            print(f"Database initialized at {config.database_path}")
            return True

        if not config.has_supabase_credentials():
            print("ERROR: SUPABASE_URL and SUPABASE_KEY must be set in production mode.")
            print("  Set STOCKROOM_ENV=development to work against a local database.")
            return False
        return True

    except Exception as e:
        print(f"ERROR: Failed to initialize application: {e}")
        traceback.print_exc()
        return False


def main():
    """
    Main application entry point.

    Initializes the application and launches the main window.
    """
    ctk.set_appearance_mode("system")
    ctk.set_default_color_theme("blue")

    config = get_config()
    configure_logging(config.log_level)
    print(f"Starting {config.app_name} v{config.app_version}")
    print(f"Environment: {config.environment} (backend: {config.backend})")

    if not initialize_application(config):
        print("Application initialization failed. Exiting.")
        sys.exit(1)

    try:
        app = MainWindow(config)
        if app.start():
            app.mainloop()
        else:
            print("Sign-in cancelled.")
            app.destroy()

    except Exception as e:
        print(f"ERROR: Application crashed: {e}")
        traceback.print_exc()
        sys.exit(1)

    close_connections()
    print("Application closed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
