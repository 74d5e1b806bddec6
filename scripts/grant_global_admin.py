"""Grant the global-admin role directly in Firestore.

The API only lets an existing global admin grant the role, so the first
admin of a project is bootstrapped with this script.

Usage:
    uv run python -m scripts.grant_global_admin <uid> [--allow-missing-profile]
Requires FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH. All imports use app.*.
"""

import asyncio
import sys

from app.application.dtos.role_grant import GlobalAdminGrant
from app.core.config import get_settings
from app.infrastructure.firebase import create_firestore_client
from app.infrastructure.firebase.repositories import (
    FirestoreProfileRepository,
    FirestoreRoleGrantRepository,
)
from app.shared.utils.datetime import utc_now

GRANTED_BY = "scripts.grant_global_admin"


async def main() -> None:
    """Write roles_admin/{uid} for the given user."""
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if len(args) != 1:
        print(
            "Usage: uv run python -m scripts.grant_global_admin <uid> "
            "[--allow-missing-profile]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = args[0]
    allow_missing_profile = "--allow-missing-profile" in sys.argv[1:]

    client = create_firestore_client(get_settings())
    if client is None:
        print("Firestore is not configured (see FIREBASE_* settings)", file=sys.stderr)
        sys.exit(1)

    try:
        profile = await FirestoreProfileRepository(client).get_by_id(user_id)
        if profile is None and not allow_missing_profile:
            print(
                f"No profile for {user_id}; sign in once (GET /api/users/me) "
                "or pass --allow-missing-profile",
                file=sys.stderr,
            )
            sys.exit(1)
        grants = FirestoreRoleGrantRepository(client)
        if await grants.get_global_admin(user_id) is not None:
            print(f"{user_id} is already a global admin")
            return
        await grants.set_global_admin(
            GlobalAdminGrant(user_id=user_id, granted_at=utc_now(), granted_by=GRANTED_BY)
        )
        print(f"Granted global admin to {user_id}")
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
