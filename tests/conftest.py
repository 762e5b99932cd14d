"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from discuss.domain.value import Actor, DisplayName, UserId

# Services log through logfire; keep test runs local and quiet
logfire.configure(send_to_logfire=False, console=False)


def make_actor(name: str = "Alice") -> Actor:
    """Build an actor with a fresh user ID.

    Args:
        name: Display name

    Returns:
        Actor value object
    """
    return Actor(id=UserId(uuid4()), display_name=DisplayName(name))
