"""Tests for JWT tokens, password hashing and request-id sanitizing."""

import logging
from datetime import timedelta

import pytest
from jose import jwt

from photofeed.core.config import get_settings
from photofeed.domain.enums import UserRole
from photofeed.infrastructure.security.jwt import create_access_token, verify_token
from photofeed.infrastructure.security.password import get_password_hash, verify_password
from photofeed.middleware.request_id import sanitize_request_id
from photofeed.shared.context import reset_request_id, set_request_id
from photofeed.shared.telemetry.logging import RequestIdFilter


class TestAccessToken:
    def test_round_trip_claims(self) -> None:
        payload = verify_token(create_access_token("user-1", UserRole.ADMIN))
        assert payload["sub"] == "user-1"
        assert payload["role"] == "admin"
        assert payload["type"] == "access"

    def test_expired_token_rejected(self) -> None:
        token = create_access_token("user-1", expires_delta=timedelta(seconds=-5))
        with pytest.raises(ValueError):
            verify_token(token)

    def test_wrong_signature_rejected(self) -> None:
        settings = get_settings()
        forged = jwt.encode(
            {"sub": "user-1", "type": "access", "exp": 4102444800},
            "some-other-secret",
            algorithm=settings.algorithm,
        )
        with pytest.raises(ValueError):
            verify_token(forged)

    def test_non_access_token_rejected(self) -> None:
        settings = get_settings()
        token = jwt.encode(
            {"sub": "user-1", "type": "refresh", "exp": 4102444800},
            settings.secret_key.get_secret_value(),
            algorithm=settings.algorithm,
        )
        with pytest.raises(ValueError, match="not an access token"):
            verify_token(token)


class TestPassword:
    def test_hash_and_verify(self) -> None:
        hashed = get_password_hash("correct-horse")
        assert hashed != "correct-horse"
        assert verify_password("correct-horse", hashed) is True
        assert verify_password("wrong-horse", hashed) is False

    def test_long_passwords_are_not_truncated(self) -> None:
        base = "a" * 80
        hashed = get_password_hash(base)
        assert verify_password(base[:72] + "b" * 8, hashed) is False

    def test_malformed_hash_never_matches(self) -> None:
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestRequestId:
    def test_valid_id_kept(self) -> None:
        assert sanitize_request_id("abc-123_DEF") == "abc-123_DEF"

    @pytest.mark.parametrize("raw", [None, "", "bad id\nInjected", "x" * 65])
    def test_invalid_id_replaced(self, raw: str | None) -> None:
        new_id = sanitize_request_id(raw)
        assert new_id != raw
        assert len(new_id) == 36

    def test_log_filter_attaches_bound_id(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        token = set_request_id("req-42")
        try:
            RequestIdFilter().filter(record)
        finally:
            reset_request_id(token)
        assert record.request_id == "req-42"
        RequestIdFilter().filter(record)
        assert record.request_id == "-"
