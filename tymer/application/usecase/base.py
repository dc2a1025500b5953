"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from tymer.domain.error import NotAuthenticatedError, ValidationError
from tymer.domain.value import UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def require_user(user_id: str | None) -> UserId:
    """Resolve the session user, before anything touches the store.

    Raises:
        NotAuthenticatedError: If there is no session user
    """
    if not user_id:
        raise NotAuthenticatedError()
    try:
        return UserId(UUID(user_id))
    except ValueError:
        raise NotAuthenticatedError()


def parse_id(value: str, resource: str) -> UUID:
    """Parse a UUID path parameter.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {resource} id: {value}")
