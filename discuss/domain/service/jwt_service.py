"""JWT token domain service."""

from uuid import UUID

import logfire

from discuss.config import AuthSettings
from discuss.domain.value import Actor, DisplayName, UserId
from discuss.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Turns a bearer token into the acting identity the comment engine needs.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, display_name: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            display_name: Display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, display_name, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> Actor | None:
        """Resolve the acting identity from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            The actor if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Actor(
                id=UserId(UUID(payload.user_id)),
                display_name=DisplayName(payload.display_name),
            )
        except (JWTError, ValueError) as e:
            logfire.debug(
                "Token rejected, treating as unauthenticated", error=str(e)
            )
            return None
