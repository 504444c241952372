"""
Constants for the Stockroom restaurant inventory application.

This module defines all system-wide constants including:
- Application metadata
- Pagination and limits
- Image attachment rules
- UI constants (colors, sizes)
- Validation messages
"""

from typing import Dict, FrozenSet

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Stockroom"
APP_VERSION = "0.1.0"
DATABASE_FILENAME = "stockroom.db"

# ============================================================================
# Lists and Pagination
# ============================================================================

# Rows shown per "Load more" step
PAGE_SIZE = 30

# ============================================================================
# Field Limits
# ============================================================================

MAX_NAME_LENGTH = 200
MAX_CATEGORY_LENGTH = 100
MAX_QUANTITY = 1_000_000_000

# ============================================================================
# Images
# ============================================================================

MAX_IMAGE_BYTES = 5 * 1024 * 1024  # 5MB

IMAGE_EXTENSIONS: FrozenSet[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"}
)

DEFAULT_IMAGE_BUCKET = "inventory-images"

# ============================================================================
# Stock Status
# ============================================================================

STATUS_LABELS: Dict[str, str] = {
    "low": "Low stock",
    "ok": "In stock",
}

# ============================================================================
# UI Constants
# ============================================================================

COLOR_SUCCESS = "#4CAF50"
COLOR_WARNING = "#FF9800"
COLOR_ERROR = "#F44336"

# Treeview row tag for low-stock items
LOW_STOCK_ROW_COLOR = "#FDECEA"

PADDING_SMALL = 5
PADDING_MEDIUM = 10
PADDING_LARGE = 20

# ============================================================================
# Validation Messages
# ============================================================================

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Please enter a whole number"
ERROR_INVALID_POSITIVE = "Value must be greater than zero"
ERROR_INVALID_NON_NEGATIVE = "Value must be zero or greater"
ERROR_QUANTITY_TOO_LARGE = f"Value must be {MAX_QUANTITY} or less"
