"""Shared route dependencies"""

from uuid import UUID

from eatkwik.config import settings
from eatkwik.errors import InvalidIdentifierError
from eatkwik.services.lifecycle import OrderLifecycle


def parse_id(raw: str, message: str) -> UUID:
    """Parse a path id, raising a 400 with the given message when malformed"""
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        raise InvalidIdentifierError(message)


def get_lifecycle() -> OrderLifecycle:
    """Lifecycle gate configured from settings"""
    return OrderLifecycle(strict=settings.strict_status_transitions)
