"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from discuss.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier coming from the outside world.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"{field} is not a valid identifier: {value!r}")
