"""Email/password authentication through Supabase Auth.

The identity provider does the real work; this module validates input,
wraps provider failures in AuthenticationError and returns a small
AuthSession describing who signed in.
"""

from dataclasses import dataclass
import logging
import re
from typing import Optional

from stockroom.services.exceptions import AuthenticationError, ValidationError
from stockroom.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class AuthSession:
    """The signed-in user."""

    user_id: str
    email: str


def validate_credentials(email: str, password: str) -> str:
    """
    Check email and password before calling the provider.

    Returns:
        The stripped email

    Raises:
        ValidationError: With one message per problem
    """
    errors = []
    email = (email or "").strip()
    if not email:
        errors.append("Email: This field is required")
    elif not _EMAIL_PATTERN.match(email):
        errors.append("Email: Please enter a valid email address")

    if not password:
        errors.append("Password: This field is required")
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password: Must be at least {MIN_PASSWORD_LENGTH} characters")

    if errors:
        raise ValidationError(errors)
    return email


def _session_from_response(response, email: str) -> Optional[AuthSession]:
    user = getattr(response, "user", None)
    if user is None:
        return None
    return AuthSession(user_id=str(user.id), email=getattr(user, "email", None) or email)


def sign_in(client, email: str, password: str) -> AuthSession:
    """
    Sign in with email and password.

    Args:
        client: supabase.Client
        email: Account email
        password: Account password

    Returns:
        AuthSession of the signed-in user

    Raises:
        ValidationError: If email or password are malformed
        AuthenticationError: If the provider rejects the credentials
    """
    email = validate_credentials(email, password)
    try:
        response = client.auth.sign_in_with_password({"email": email, "password": password})
    except Exception as e:
        log_operation(logger, "sign_in", "rejected", level=logging.WARNING, email=email)
        raise AuthenticationError(str(e), original_error=e) from e

    session = _session_from_response(response, email)
    if session is None:
        raise AuthenticationError("No user returned for these credentials")

    log_operation(logger, "sign_in", "success", user_id=session.user_id)
    return session


def sign_up(client, email: str, password: str) -> AuthSession:
    """
    Create an account.

    Depending on the project settings the provider may require email
    confirmation before the first sign-in.

    Raises:
        ValidationError: If email or password are malformed
        AuthenticationError: If the provider refuses the registration
    """
    email = validate_credentials(email, password)
    try:
        response = client.auth.sign_up({"email": email, "password": password})
    except Exception as e:
        log_operation(logger, "sign_up", "rejected", level=logging.WARNING, email=email)
        raise AuthenticationError(str(e), original_error=e) from e

    session = _session_from_response(response, email)
    if session is None:
        raise AuthenticationError("Registration did not return a user")

    log_operation(logger, "sign_up", "success", user_id=session.user_id)
    return session


def sign_out(client) -> None:
    """
    End the current session.

    Raises:
        AuthenticationError: If the provider call fails
    """
    try:
        client.auth.sign_out()
    except Exception as e:
        log_operation(logger, "sign_out", "error", level=logging.ERROR, error=str(e))
        raise AuthenticationError(str(e), original_error=e) from e
    log_operation(logger, "sign_out", "success")
