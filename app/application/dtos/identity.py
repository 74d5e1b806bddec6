"""DTOs for the caller's identity and resolved roles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Trusted identity from a verified Firebase ID token. uid cannot be forged."""

    uid: str
    email: str | None = None
    email_verified: bool = False
    name: str | None = None
    picture: str | None = None

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "email": self.email,
            "emailVerified": self.email_verified,
            "name": self.name,
            "picture": self.picture,
        }


@dataclass(frozen=True)
class ResolvedRoles:
    """Caller's privileges, resolved per request from the two grant collections."""

    is_global_admin: bool = False
    is_university_admin: bool = False
    university_id: str | None = None

    def administers(self, university_id: str | None) -> bool:
        """True when the caller is university admin for exactly this university."""
        return (
            self.is_university_admin
            and university_id is not None
            and self.university_id == university_id
        )

    def to_dict(self) -> dict:
        return {
            "isAdmin": self.is_global_admin,
            "isUniversityAdmin": self.is_university_admin,
            "universityId": self.university_id,
        }


NO_ROLES = ResolvedRoles()
