"""Newsletter API: public subscribe and admin listing."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import GlobalAdmin, get_newsletter_service
from app.application.services import NewsletterService
from app.core.config import get_settings
from app.schemas.lead import (
    SubscribeRequest,
    SubscriptionCreatedResponse,
    SubscriptionListResponse,
    SubscriptionResponse,
)

router = APIRouter()

Newsletter = Annotated[NewsletterService, Depends(get_newsletter_service)]


@router.post("/subscribe", response_model=SubscriptionCreatedResponse, status_code=201)
async def subscribe(
    body: SubscribeRequest,
    newsletter_service: Newsletter,
) -> SubscriptionCreatedResponse:
    subscription = await newsletter_service.subscribe(
        body.model_dump(by_alias=True, exclude_none=True)
    )
    return SubscriptionCreatedResponse.model_validate(
        {
            **subscription.to_dict(),
            "message": "Successfully subscribed to newsletter.",
        }
    )


@router.get("/subscriptions", response_model=SubscriptionListResponse)
async def list_subscriptions(
    _admin: GlobalAdmin,
    newsletter_service: Newsletter,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> SubscriptionListResponse:
    """Newest first (global admin)."""
    limit = limit or get_settings().lead_page_size
    items = await newsletter_service.list(skip=offset, limit=limit)
    return SubscriptionListResponse(
        subscriptions=[SubscriptionResponse.model_validate(s.to_dict()) for s in items],
        total=len(items),
        limit=limit,
        offset=offset,
    )
