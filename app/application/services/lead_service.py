"""Public lead capture: registrations and newsletter subscriptions."""

from __future__ import annotations

import logging
from typing import Any

from app.application.dtos.lead import RegistrationResult, SubscriptionResult
from app.application.interfaces.repositories import (
    IRegistrationRepository,
    ISubscriptionRepository,
)
from app.application.services.validation import optional_text, parse_flag, require_fields
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

REQUIRED_REGISTRATION_FIELDS = [
    "fullName",
    "email",
    "mobileNumber",
    "city",
    "courseInterestedIn",
]


class RegistrationService:
    def __init__(self, registration_repo: IRegistrationRepository) -> None:
        self.registration_repo = registration_repo

    async def create(self, data: dict[str, Any]) -> RegistrationResult:
        require_fields(
            data,
            REQUIRED_REGISTRATION_FIELDS,
            "Full name, email, mobile number, city, and course interest are required.",
        )
        registration = RegistrationResult(
            id="",
            full_name=data["fullName"],
            email=data["email"],
            mobile_number=data["mobileNumber"],
            city=data["city"],
            course_interested_in=data["courseInterestedIn"],
            online_distance=parse_flag(data.get("onlineDistance")),
            created_at=utc_now(),
        )
        created = await self.registration_repo.create(registration)
        logger.info("Registration created: %s", created.id)
        return created

    async def list(self, skip: int = 0, limit: int = 100) -> list[RegistrationResult]:
        return await self.registration_repo.list(skip=skip, limit=limit)


class NewsletterService:
    def __init__(self, subscription_repo: ISubscriptionRepository) -> None:
        self.subscription_repo = subscription_repo

    async def subscribe(self, data: dict[str, Any]) -> SubscriptionResult:
        """Record a subscription; repeat emails are stored again, not deduplicated."""
        require_fields(data, ["email"], "Email is required.")
        subscription = SubscriptionResult(
            id="",
            email=data["email"],
            mobile_number=optional_text(data.get("mobileNumber")),
            course=optional_text(data.get("course")),
            created_at=utc_now(),
        )
        created = await self.subscription_repo.create(subscription)
        logger.info("Newsletter subscription created: %s", created.id)
        return created

    async def list(self, skip: int = 0, limit: int = 100) -> list[SubscriptionResult]:
        return await self.subscription_repo.list(skip=skip, limit=limit)
