"""Tests for Supabase Auth sign-in/sign-up wrappers."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from stockroom.services.auth_service import (
    AuthSession,
    sign_in,
    sign_out,
    sign_up,
    validate_credentials,
)
from stockroom.services.exceptions import AuthenticationError, ValidationError


def auth_response(user_id="u-1", email="chef@example.com"):
    return SimpleNamespace(user=SimpleNamespace(id=user_id, email=email), session=None)


@pytest.fixture
def client():
    return MagicMock()


class TestValidateCredentials:
    def test_strips_email(self):
        assert validate_credentials("  chef@example.com ", "secret1") == "chef@example.com"

    def test_reports_both_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_credentials("not-an-email", "123")
        assert len(exc_info.value.errors) == 2

    def test_missing_values(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_credentials("", "")
        assert all("required" in e for e in exc_info.value.errors)


class TestSignIn:
    def test_success(self, client):
        client.auth.sign_in_with_password.return_value = auth_response()

        session = sign_in(client, "chef@example.com", "secret1")

        client.auth.sign_in_with_password.assert_called_once_with(
            {"email": "chef@example.com", "password": "secret1"}
        )
        assert session == AuthSession(user_id="u-1", email="chef@example.com")

    def test_invalid_input_makes_no_call(self, client):
        with pytest.raises(ValidationError):
            sign_in(client, "chef", "secret1")
        client.auth.sign_in_with_password.assert_not_called()

    def test_provider_error(self, client):
        boom = RuntimeError("Invalid login credentials")
        client.auth.sign_in_with_password.side_effect = boom

        with pytest.raises(AuthenticationError) as exc_info:
            sign_in(client, "chef@example.com", "secret1")

        assert exc_info.value.original_error is boom
        assert "Invalid login credentials" in exc_info.value.message

    def test_no_user_returned(self, client):
        client.auth.sign_in_with_password.return_value = SimpleNamespace(user=None)
        with pytest.raises(AuthenticationError):
            sign_in(client, "chef@example.com", "secret1")


class TestSignUp:
    def test_success(self, client):
        client.auth.sign_up.return_value = auth_response(user_id="u-2", email=None)
        session = sign_up(client, "new@example.com", "secret1")
        assert session.user_id == "u-2"
        assert session.email == "new@example.com"

    def test_provider_error(self, client):
        client.auth.sign_up.side_effect = RuntimeError("User already registered")
        with pytest.raises(AuthenticationError):
            sign_up(client, "new@example.com", "secret1")


class TestSignOut:
    def test_success(self, client):
        sign_out(client)
        client.auth.sign_out.assert_called_once_with()

    def test_provider_error(self, client):
        client.auth.sign_out.side_effect = RuntimeError("network")
        with pytest.raises(AuthenticationError):
            sign_out(client)
