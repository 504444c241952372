"""
Configuration management for the Stockroom application.

This module handles:
- Environment selection (production uses Supabase, development uses SQLite)
- Supabase connection settings
- Local database path for development
- Logging and export settings
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DATABASE_FILENAME,
    DEFAULT_IMAGE_BUCKET,
)

ENV_VARIABLE = "STOCKROOM_ENV"


class Config:
    """
    Application configuration manager.

    Values come from environment variables so that credentials never live in
    the source tree. The environment decides which repository backend is used.
    """

    def __init__(self, environment: str = "production"):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
        """
        if environment not in ("production", "development"):
            raise ValueError(
                f"Unknown environment '{environment}': expected 'production' or 'development'"
            )
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

        self._supabase_url = os.environ.get("SUPABASE_URL", "")
        self._supabase_key = os.environ.get("SUPABASE_KEY", "")
        self._image_bucket = os.environ.get("STOCKROOM_IMAGE_BUCKET", DEFAULT_IMAGE_BUCKET)
        self._log_level = os.environ.get("STOCKROOM_LOG_LEVEL", "INFO").upper()

        # Local database lives in the project data/ directory
        self._database_dir = Path(__file__).parent.parent.parent.parent / "data"
        self._database_path = self._database_dir / DATABASE_FILENAME

        export_dir = os.environ.get("STOCKROOM_EXPORT_DIR")
        self._export_dir = Path(export_dir) if export_dir else Path.home() / "Documents"

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def backend(self) -> str:
        """Repository backend: 'supabase' in production, 'sqlite' in development."""
        return "sqlite" if self.is_development else "supabase"

    @property
    def supabase_url(self) -> str:
        return self._supabase_url

    @property
    def supabase_key(self) -> str:
        return self._supabase_key

    @property
    def image_bucket(self) -> str:
        """Supabase Storage bucket that holds item pictures."""
        return self._image_bucket

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def export_dir(self) -> Path:
        """Default directory offered for PDF exports."""
        return self._export_dir

    @property
    def database_path(self) -> Path:
        """Full path to the development database file."""
        return self._database_path

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy database URL for the development backend.

        Returns:
            Database URL string for SQLAlchemy
        """
        db_path_str = str(self._database_path).replace("\\", "/")
        return f"sqlite:///{db_path_str}"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def ensure_database_dir(self) -> None:
        """Create the local database directory if it doesn't exist."""
        self._database_dir.mkdir(parents=True, exist_ok=True)

    def has_supabase_credentials(self) -> bool:
        """True when both the Supabase URL and key are configured."""
        return bool(self._supabase_url and self._supabase_key)

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(environment='{self.environment}', backend='{self.backend}')"


_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument, so the backend never switches
    mid-session.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    STOCKROOM_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(ENV_VARIABLE, "production")
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger = logging.getLogger(__name__)
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton to prevent backend switching."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None

