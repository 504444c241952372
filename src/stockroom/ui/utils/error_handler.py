"""Centralized error handler for UI layer.

Provides consistent error display and logging across all UI components.
Maps service exceptions to user-friendly messages while preserving
technical details in logs for debugging.
"""

import logging
from tkinter import messagebox
from typing import Any, Optional, Tuple

from stockroom.services.exceptions import (
    AuthenticationError,
    ImageValidationError,
    ItemNotFound,
    RepositoryError,
    ServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def handle_error(
    exception: Exception,
    parent: Optional[Any] = None,
    operation: str = "Operation",
    show_dialog: bool = True,
) -> Tuple[str, str]:
    """Handle an exception and optionally display user-friendly error dialog.

    Args:
        exception: The caught exception to handle
        parent: Parent widget for dialog positioning (optional)
        operation: Description of what was being attempted (e.g., "Export PDF")
        show_dialog: Whether to show error dialog (default True)

    Returns:
        Tuple of (title, user_message) for further handling if needed

    Example:
        try:
            controller.export_pdf(path)
        except Exception as e:
            handle_error(e, parent=self, operation="Export PDF")
    """
    title, message = get_user_message(exception, operation)

    _log_error(exception, operation)

    if show_dialog:
        if parent is not None:
            messagebox.showerror(title, message, parent=parent)
        else:
            messagebox.showerror(title, message)

    return title, message


def get_user_message(exception: Exception, operation: str = "Operation") -> Tuple[str, str]:
    """Convert exception to user-friendly title and message.

    Args:
        exception: The exception to convert
        operation: Description of what was being attempted

    Returns:
        Tuple of (title, message) suitable for user display
    """
    # Image errors first: they are also ValidationErrors
    if isinstance(exception, ImageValidationError):
        return "Invalid Image", "; ".join(exception.errors)

    if isinstance(exception, ValidationError):
        if exception.errors:
            return "Validation Error", "\n".join(str(e) for e in exception.errors)
        return "Validation Error", str(exception)

    if isinstance(exception, ItemNotFound):
        return "Not Found", "This item no longer exists. The list will be reloaded."

    if isinstance(exception, AuthenticationError):
        return "Sign-in Failed", exception.message

    if isinstance(exception, RepositoryError):
        return "Error", f"{operation} failed: {exception.message}"

    if isinstance(exception, ServiceError):
        return "Error", f"{operation} failed: {exception}"

    if isinstance(exception, OSError):
        return "File Error", f"{operation} failed: {exception.strerror or exception}"

    return "Unexpected Error", "An unexpected error occurred. Please try again."


def _log_error(exception: Exception, operation: str) -> None:
    """Log technical error details.

    ServiceError subclasses are logged at ERROR level; anything else gets a
    full stack trace.
    """
    if isinstance(exception, ServiceError):
        log_data = {
            "operation": operation,
            "exception_type": exception.__class__.__name__,
            "detail": str(exception),
        }
        original = getattr(exception, "original_error", None)
        if original is not None:
            log_data["original_error"] = repr(original)

        logger.error(
            f"{operation} failed: {exception.__class__.__name__}: {exception}",
            extra={"error_data": log_data},
        )
    else:
        logger.exception(
            f"{operation} failed with unexpected error: {exception.__class__.__name__}"
        )
