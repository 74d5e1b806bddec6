"""Pydantic request/response schemas for the API."""

from app.schemas.admin import (
    AdminListResponse,
    GrantAdminRequest,
    GrantUniversityAdminRequest,
    RoleChangeResponse,
    UniversityAdminListResponse,
)
from app.schemas.application import (
    ApplicationActionResponse,
    ApplicationCreateRequest,
    ApplicationListResponse,
    ApplicationResponse,
    StatusUpdateRequest,
    UniversityApplicationsResponse,
)
from app.schemas.auth import RolesResponse, VerifyTokenRequest, VerifyTokenResponse
from app.schemas.common import CamelModel, DocumentBody, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.lead import (
    RegistrationCreatedResponse,
    RegistrationCreateRequest,
    RegistrationListResponse,
    RegistrationResponse,
    SubscribeRequest,
    SubscriptionCreatedResponse,
    SubscriptionListResponse,
    SubscriptionResponse,
)
from app.schemas.university import UniversityListResponse, UniversityWriteRequest
from app.schemas.user import ProfileUpdateRequest

__all__ = [
    "AdminListResponse",
    "ApplicationActionResponse",
    "ApplicationCreateRequest",
    "ApplicationListResponse",
    "ApplicationResponse",
    "CamelModel",
    "DocumentBody",
    "GrantAdminRequest",
    "GrantUniversityAdminRequest",
    "HealthResponse",
    "MessageResponse",
    "ProfileUpdateRequest",
    "RegistrationCreateRequest",
    "RegistrationCreatedResponse",
    "RegistrationListResponse",
    "RegistrationResponse",
    "RoleChangeResponse",
    "RolesResponse",
    "StatusUpdateRequest",
    "SubscribeRequest",
    "SubscriptionCreatedResponse",
    "SubscriptionListResponse",
    "SubscriptionResponse",
    "UniversityAdminListResponse",
    "UniversityApplicationsResponse",
    "UniversityListResponse",
    "UniversityWriteRequest",
    "VerifyTokenRequest",
    "VerifyTokenResponse",
]
