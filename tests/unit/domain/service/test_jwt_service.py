"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from discuss.config import AuthSettings
from discuss.domain.service import JWTService
from discuss.util.jwt import JWTError


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service(auth_settings) -> JWTService:
    return JWTService(auth_settings=auth_settings)


class TestJWTService:
    """Tests for token creation and actor resolution."""

    def test_round_trip_resolves_actor(self, jwt_service):
        """A freshly issued token resolves to the same actor."""
        user_id = str(uuid4())

        token = jwt_service.create_token(user_id, "Alice")
        actor = jwt_service.get_actor_from_token(token)

        assert actor is not None
        assert str(actor.id) == user_id
        assert str(actor.display_name) == "Alice"

    def test_missing_token(self, jwt_service):
        assert jwt_service.get_actor_from_token(None) is None
        assert jwt_service.get_actor_from_token("") is None

    def test_garbage_token(self, jwt_service):
        assert jwt_service.get_actor_from_token("not-a-jwt") is None

    def test_wrong_secret(self, jwt_service):
        """Tokens signed with another key are rejected."""
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(str(uuid4()), "Mallory")

        assert jwt_service.get_actor_from_token(token) is None

    def test_expired_token(self, jwt_service, auth_settings):
        """Expired tokens raise on verify and resolve to no actor."""
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "display_name": "Alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
        assert jwt_service.get_actor_from_token(token) is None

    def test_malformed_user_id(self, jwt_service):
        """A validly signed token with a non-UUID user id is rejected."""
        token = jwt_service.create_token("not-a-uuid", "Alice")

        assert jwt_service.get_actor_from_token(token) is None

    def test_blank_display_name(self, jwt_service):
        """A token carrying a blank display name is rejected."""
        token = jwt_service.create_token(str(uuid4()), "   ")

        assert jwt_service.get_actor_from_token(token) is None
