"""Login dialog: email/password sign-in, with a toggle to create an account."""

from typing import Optional

import customtkinter as ctk

from stockroom.services.auth_service import AuthSession, sign_in, sign_up
from stockroom.services.exceptions import AuthenticationError, ValidationError
from stockroom.ui.utils.error_handler import get_user_message, handle_error
from stockroom.utils.constants import APP_NAME, COLOR_SUCCESS, PADDING_LARGE


class LoginDialog(ctk.CTkToplevel):
    """
    Modal sign-in / sign-up dialog.

    After the dialog closes, `session` holds the AuthSession of the
    signed-in user, or None if the user gave up.

    Args:
        parent: Parent window (usually the withdrawn main window)
        client: supabase.Client used for authentication
    """

    def __init__(self, parent, client):
        super().__init__(parent)

        self._client = client
        self._signing_up = False
        self.session: Optional[AuthSession] = None

        self.title(f"{APP_NAME} - Sign in")
        self.geometry("380x320")
        self.resizable(False, False)
        self.protocol("WM_DELETE_WINDOW", self._on_cancel)

        self._create_widgets()
        self._render_mode()

        self.grab_set()
        self.focus_force()

    def _create_widgets(self):
        self.heading_label = ctk.CTkLabel(self, text="", font=ctk.CTkFont(size=18, weight="bold"))
        self.heading_label.pack(pady=(PADDING_LARGE, 10))

        self.email_entry = ctk.CTkEntry(self, placeholder_text="Email", width=280)
        self.email_entry.pack(pady=5)

        self.password_entry = ctk.CTkEntry(self, placeholder_text="Password", show="*", width=280)
        self.password_entry.pack(pady=5)
        self.password_entry.bind("<Return>", lambda e: self._on_submit())

        self.message_label = ctk.CTkLabel(self, text="", wraplength=300, justify="left")
        self.message_label.pack(pady=5)

        self.submit_button = ctk.CTkButton(self, text="", width=280, command=self._on_submit)
        self.submit_button.pack(pady=5)

        self.toggle_button = ctk.CTkButton(
            self,
            text="",
            width=280,
            fg_color="transparent",
            text_color=("gray10", "gray90"),
            hover=False,
            command=self._toggle_mode,
        )
        self.toggle_button.pack(pady=5)

        self.email_entry.focus()

    def _render_mode(self):
        if self._signing_up:
            self.heading_label.configure(text="Create account")
            self.submit_button.configure(text="Sign up")
            self.toggle_button.configure(text="Already have an account? Sign in")
        else:
            self.heading_label.configure(text="Sign in")
            self.submit_button.configure(text="Sign in")
            self.toggle_button.configure(text="No account yet? Sign up")

    def _toggle_mode(self):
        self._signing_up = not self._signing_up
        self.message_label.configure(text="")
        self._render_mode()

    def _set_busy(self, busy: bool):
        state = "disabled" if busy else "normal"
        for widget in (self.email_entry, self.password_entry, self.submit_button, self.toggle_button):
            widget.configure(state=state)
        if busy:
            self.update_idletasks()

    def _on_submit(self):
        email = self.email_entry.get()
        password = self.password_entry.get()
        action = sign_up if self._signing_up else sign_in

        self._set_busy(True)
        try:
            session = action(self._client, email, password)
        except (ValidationError, AuthenticationError) as e:
            _, message = get_user_message(e, "Sign in")
            self.message_label.configure(text=message, text_color="red")
            self._set_busy(False)
            return
        except Exception as e:
            handle_error(e, parent=self, operation="Sign in")
            self._set_busy(False)
            return

        if self._signing_up:
            # Providers with email confirmation do not sign the user in yet
            self.message_label.configure(
                text="Account created. Check your email, then sign in.",
                text_color=COLOR_SUCCESS,
            )
            self._signing_up = False
            self._set_busy(False)
            self._render_mode()
            return

        self.session = session
        self.destroy()

    def _on_cancel(self):
        self.session = None
        self.destroy()
