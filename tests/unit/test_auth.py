"""Unit tests for JWT decoding and authentication utilities."""

from typing import Any
from unittest.mock import patch

import pytest

from factories import ALICE_ID, TEST_JWT_SECRET, create_test_token
from skillswap.api.middleware.auth import (
    AuthError,
    AuthErrorCode,
    decode_jwt,
    get_verification_key,
)


class TestDecodeJWT:
    """Tests for decode_jwt function."""

    def test_decode_jwt_with_valid_token(self) -> None:
        """Test decode_jwt successfully decodes a valid token."""
        payload = decode_jwt(create_test_token())

        assert payload.sub == ALICE_ID
        assert payload.email == "alice@example.com"
        assert payload.role == "authenticated"
        assert payload.user_metadata == {"name": "Alice"}

    def test_user_context_carries_display_name(self) -> None:
        """Test the metadata name ends up on the principal."""
        user = decode_jwt(create_test_token()).to_user_context()

        assert str(user.user_id) == ALICE_ID
        assert user.name == "Alice"

    def test_decode_jwt_with_expired_token(self) -> None:
        """Test decode_jwt raises AuthError for expired token."""
        token = create_test_token(exp_offset=-3600)

        with pytest.raises(AuthError) as exc_info:
            decode_jwt(token)

        assert exc_info.value.code == AuthErrorCode.TOKEN_EXPIRED
        assert "expired" in exc_info.value.message.lower()

    def test_decode_jwt_with_invalid_signature(self) -> None:
        """Test decode_jwt rejects a token signed with another secret."""
        token = create_test_token(secret="another-secret-that-is-long-enough-000")

        with pytest.raises(AuthError) as exc_info:
            decode_jwt(token)

        assert exc_info.value.code == AuthErrorCode.INVALID_SIGNATURE

    def test_decode_jwt_with_wrong_audience(self) -> None:
        """Test decode_jwt rejects tokens minted for another audience."""
        token = create_test_token(audience="anon")

        with pytest.raises(AuthError) as exc_info:
            decode_jwt(token)

        assert exc_info.value.code == AuthErrorCode.INVALID_TOKEN

    def test_decode_jwt_with_malformed_token(self) -> None:
        """Test decode_jwt rejects garbage."""
        with pytest.raises(AuthError) as exc_info:
            decode_jwt("not-a-jwt")

        assert exc_info.value.code == AuthErrorCode.INVALID_TOKEN


class TestGetVerificationKey:
    """Tests for get_verification_key."""

    @patch("skillswap.api.middleware.auth.get_settings")
    def test_falls_back_to_shared_secret(self, mock_settings: Any) -> None:
        mock_settings.return_value.supabase_signing_key_jwk = ""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET

        key, algorithms = get_verification_key()

        assert key == TEST_JWT_SECRET
        assert algorithms == ["HS256"]

    @patch("skillswap.api.middleware.auth.get_settings")
    def test_requires_a_key(self, mock_settings: Any) -> None:
        mock_settings.return_value.supabase_signing_key_jwk = ""
        mock_settings.return_value.supabase_jwt_secret = ""

        with pytest.raises(AuthError):
            get_verification_key()

    @patch("skillswap.api.middleware.auth.get_settings")
    def test_rejects_malformed_jwk(self, mock_settings: Any) -> None:
        mock_settings.return_value.supabase_signing_key_jwk = "{not json"

        with pytest.raises(AuthError) as exc_info:
            get_verification_key()

        assert "JWK" in exc_info.value.message
