"""Registration and newsletter API schemas."""

from datetime import datetime
from typing import Any

from app.schemas.common import CamelModel


class RegistrationCreateRequest(CamelModel):
    """Public lead form. onlineDistance is true only for true or "true"."""

    full_name: str | None = None
    email: str | None = None
    mobile_number: Any = None
    city: str | None = None
    course_interested_in: str | None = None
    online_distance: Any = None


class RegistrationResponse(CamelModel):
    id: str
    full_name: str
    email: str
    mobile_number: Any
    city: str
    course_interested_in: str
    online_distance: bool
    created_at: datetime | None = None


class RegistrationCreatedResponse(RegistrationResponse):
    message: str


class RegistrationListResponse(CamelModel):
    registrations: list[RegistrationResponse]
    total: int
    limit: int
    offset: int


class SubscribeRequest(CamelModel):
    email: str | None = None
    mobile_number: Any = None
    course: str | None = None


class SubscriptionResponse(CamelModel):
    id: str
    email: str
    mobile_number: Any = None
    course: str | None = None
    created_at: datetime | None = None


class SubscriptionCreatedResponse(SubscriptionResponse):
    message: str


class SubscriptionListResponse(CamelModel):
    subscriptions: list[SubscriptionResponse]
    total: int
    limit: int
    offset: int
