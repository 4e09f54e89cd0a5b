"""Unit tests for JWT helpers and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blogsphere.config import AuthSettings
from blogsphere.domain.service import JWTService
from blogsphere.util.error import JWTError
from blogsphere.util.jwt import create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="a-test-secret-that-is-long-enough-for-hs256")


def test_round_trip():
    """A freshly created token verifies to the same user."""
    token = create_token("user-1", "alice", SETTINGS)

    payload = verify_token(token, SETTINGS)

    assert payload.user_id == "user-1"
    assert payload.username == "alice"


def test_expired_token():
    """Expired tokens are rejected with a clear message."""
    token = jwt.encode(
        {
            "user_id": "user-1",
            "username": "alice",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        SETTINGS.jwt_secret,
        algorithm="HS256",
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(token, SETTINGS)


def test_wrong_secret():
    """Tokens signed with another secret are invalid."""
    other = AuthSettings(jwt_secret="another-secret-that-is-also-long-enough")
    token = create_token("user-1", "alice", other)

    with pytest.raises(JWTError, match="Invalid"):
        verify_token(token, SETTINGS)


def test_service_treats_bad_tokens_as_anonymous():
    """get_user_id_from_token never raises."""
    service = JWTService(SETTINGS)

    assert service.get_user_id_from_token(None) is None
    assert service.get_user_id_from_token("garbage") is None
    assert service.get_user_id_from_token(service.create_token("u", "bob")) == "u"
