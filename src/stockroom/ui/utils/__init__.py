"""UI utility functions."""

from stockroom.ui.utils.error_handler import get_user_message, handle_error

__all__ = ["handle_error", "get_user_message"]
