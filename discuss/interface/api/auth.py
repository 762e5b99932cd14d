"""Request authentication helpers."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.service import JWTService
from discuss.domain.value import Actor


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_actor(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
    action: str,
) -> Actor:
    """Resolve the acting identity or reject the request.

    The cookie wins over the header when both are present.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from the ``auth_token`` cookie
        authorization: Raw ``Authorization`` header
        action: What the caller is trying to do, for the error message

    Returns:
        The authenticated actor

    Raises:
        HTTPException: 401 if no valid token was presented
    """
    token = auth_token or bearer_token(authorization)
    actor = jwt_service.get_actor_from_token(token)
    if actor is None:
        logfire.debug("Unauthenticated request rejected", action=action)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return actor
