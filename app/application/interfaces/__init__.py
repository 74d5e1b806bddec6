"""Ports (Protocols) implemented by infrastructure."""

from app.application.interfaces.repositories import (
    IApplicationRepository,
    IProfileRepository,
    IRegistrationRepository,
    IRoleGrantRepository,
    ISubscriptionRepository,
    IUniversityRepository,
)
from app.application.interfaces.services import IIdentityVerifier

__all__ = [
    "IApplicationRepository",
    "IIdentityVerifier",
    "IProfileRepository",
    "IRegistrationRepository",
    "IRoleGrantRepository",
    "ISubscriptionRepository",
    "IUniversityRepository",
]
