"""Domain layer: enums, value objects and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ApplicationStatus
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    StoreUnavailableException,
    UniFriendException,
    ValidationException,
)
from app.domain.value_objects import FEES_NOT_AVAILABLE, resolve_trade_fees

__all__ = [
    # Enums
    "ApplicationStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ResourceNotFoundException",
    "StoreUnavailableException",
    "UniFriendException",
    "ValidationException",
    # Value objects
    "FEES_NOT_AVAILABLE",
    "resolve_trade_fees",
]
