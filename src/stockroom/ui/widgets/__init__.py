"""
Widget exports for the UI package.
"""

from stockroom.ui.widgets.dialogs import (
    show_confirmation,
    show_error,
    show_info,
    show_notification,
    show_success,
    show_warning,
)
from stockroom.ui.widgets.image_field import ImageField
from stockroom.ui.widgets.search_bar import SearchBar

__all__ = [
    "ImageField",
    "SearchBar",
    "show_confirmation",
    "show_error",
    "show_info",
    "show_notification",
    "show_success",
    "show_warning",
]
