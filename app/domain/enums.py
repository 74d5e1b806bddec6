"""Domain enumerations for the UniFriend API."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Review state of a submitted application.

    New applications start as PENDING. Admins may set any value at any time;
    no ordering between states is enforced.
    """

    PENDING = "Pending"
    IN_REVIEW = "In Review"
    REVIEWED = "Reviewed"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings, in workflow order."""
        return [status.value for status in cls]

    @classmethod
    def parse(cls, value: object) -> "ApplicationStatus | None":
        """Return the matching status for an exact string value, else None."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
