"""Unit tests for role resolution and the access-control guards."""

import pytest

from app.application.dtos import GlobalAdminGrant, Identity, ResolvedRoles, UniversityAdminGrant
from app.application.services import RoleResolver
from app.application.services.access_control import (
    ADMIN_OR_UNIVERSITY_ADMIN_REQUIRED,
    require_authenticated,
    require_global_admin,
    require_owner_or_global_admin,
    require_university_access,
    require_university_admin,
)
from app.domain.exceptions import AuthenticationException, AuthorizationException
from tests.fakes import InMemoryRoleGrantRepository

STUDENT = Identity(uid="stu-1")
GLOBAL = ResolvedRoles(is_global_admin=True)
UNI_A = ResolvedRoles(is_university_admin=True, university_id="uni-a")
NONE = ResolvedRoles()


async def test_resolver_without_grants_returns_no_roles() -> None:
    roles = await RoleResolver(InMemoryRoleGrantRepository()).resolve("stu-1")
    assert roles == ResolvedRoles()


async def test_resolver_reports_both_tiers_independently() -> None:
    repo = InMemoryRoleGrantRepository()
    repo.admins["u"] = GlobalAdminGrant(user_id="u")
    repo.university_admins["u"] = UniversityAdminGrant(user_id="u", university_id="uni-a")
    roles = await RoleResolver(repo).resolve("u")
    assert roles.is_global_admin is True
    assert roles.is_university_admin is True
    assert roles.university_id == "uni-a"


def test_administers_matches_exact_university_only() -> None:
    assert UNI_A.administers("uni-a") is True
    assert UNI_A.administers("uni-b") is False
    assert UNI_A.administers(None) is False
    assert GLOBAL.administers("uni-a") is False


def test_roles_to_dict_uses_wire_names() -> None:
    assert UNI_A.to_dict() == {
        "isAdmin": False,
        "isUniversityAdmin": True,
        "universityId": "uni-a",
    }


def test_require_authenticated() -> None:
    assert require_authenticated(STUDENT) is STUDENT
    with pytest.raises(AuthenticationException):
        require_authenticated(None)
    with pytest.raises(AuthenticationException):
        require_authenticated(Identity(uid=""))


def test_require_global_admin() -> None:
    require_global_admin(GLOBAL)
    with pytest.raises(AuthorizationException, match="Admin access required."):
        require_global_admin(UNI_A)


def test_require_university_admin_returns_university() -> None:
    assert require_university_admin(UNI_A) == "uni-a"
    with pytest.raises(AuthorizationException):
        require_university_admin(GLOBAL)
    with pytest.raises(AuthorizationException):
        require_university_admin(ResolvedRoles(is_university_admin=True))


def test_owner_or_global_admin() -> None:
    require_owner_or_global_admin(STUDENT, NONE, "stu-1")
    require_owner_or_global_admin(STUDENT, GLOBAL, "someone-else")
    with pytest.raises(AuthorizationException, match="nope"):
        require_owner_or_global_admin(STUDENT, UNI_A, "someone-else", "nope")


@pytest.mark.parametrize(
    ("roles", "university_id", "expected"),
    [
        (GLOBAL, "uni-b", None),
        (UNI_A, "uni-a", None),
        (UNI_A, "uni-b", "mismatch"),
        (NONE, "uni-a", ADMIN_OR_UNIVERSITY_ADMIN_REQUIRED),
    ],
)
def test_require_university_access(
    roles: ResolvedRoles, university_id: str, expected: str | None
) -> None:
    if expected is None:
        require_university_access(roles, university_id, mismatch_message="mismatch")
        return
    with pytest.raises(AuthorizationException) as exc_info:
        require_university_access(roles, university_id, mismatch_message="mismatch")
    assert exc_info.value.message == expected
