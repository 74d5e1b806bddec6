"""Profile (user) API schemas."""

from typing import Any

from app.schemas.common import DocumentBody


class ProfileUpdateRequest(DocumentBody):
    """Partial profile update. Extra keys are stored as profile attributes.

    ``id`` and ``createdAt`` are accepted but ignored.
    """

    email: str | None = None
    full_name: str | None = None
    phone: Any = None
    city: str | None = None
