"""
Message dialogs for Stockroom.

Confirmation, error, success, info and warning boxes, plus a helper that
shows a controller Notification with the matching box.
"""

from tkinter import messagebox

from stockroom.services.inventory_controller import Notification, NotificationLevel


def show_confirmation(title: str, message: str, parent=None) -> bool:
    """
    Show a yes/no confirmation dialog.

    Returns:
        True if user confirmed, False otherwise
    """
    return messagebox.askyesno(title, message, parent=parent)


def show_error(title: str, message: str, parent=None):
    messagebox.showerror(title, message, parent=parent)


def show_success(title: str, message: str, parent=None):
    messagebox.showinfo(title, message, parent=parent)


def show_info(title: str, message: str, parent=None):
    messagebox.showinfo(title, message, parent=parent)


def show_warning(title: str, message: str, parent=None):
    messagebox.showwarning(title, message, parent=parent)


_SHOW_BY_LEVEL = {
    NotificationLevel.INFO: show_info,
    NotificationLevel.SUCCESS: show_success,
    NotificationLevel.WARNING: show_warning,
    NotificationLevel.ERROR: show_error,
}


def show_notification(notification: Notification, parent=None):
    """
    Show a controller notification in the dialog matching its level.

    Args:
        notification: Notification emitted by an InventoryController
        parent: Parent window (optional)
    """
    show = _SHOW_BY_LEVEL.get(notification.level, show_info)
    show(notification.title, notification.message, parent=parent)
