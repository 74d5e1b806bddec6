"""Firestore client construction (REST-based, no firebase-admin).

Built once at app startup (see app.core.lifespan) from either
FIREBASE_SERVICE_ACCOUNT_KEY (JSON string) or FIREBASE_SERVICE_ACCOUNT_PATH
(file path) and kept on app.state; there is no module-level client.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from app.core.config import Settings
from app.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)


def load_service_account(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path, or None when unset."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def resolve_project_id(settings: Settings, key_dict: dict | None) -> str | None:
    """Explicit FIREBASE_PROJECT_ID wins; otherwise project_id from the service account."""
    if settings.firebase_project_id:
        return settings.firebase_project_id
    if key_dict:
        return key_dict.get("project_id")
    return None


def create_firestore_client(settings: Settings) -> FirestoreRESTClient | None:
    """Build the Firestore client, or return None when credentials are missing or invalid.

    Errors are logged rather than raised so the process can still serve
    /health and the public routes that do not touch the store.
    """
    try:
        key_dict = load_service_account(settings)
        if not key_dict:
            logger.warning("Firebase credentials not configured; document store disabled")
            return None
        project_id = resolve_project_id(settings, key_dict)
        if not project_id:
            logger.error("Firebase service account JSON missing 'project_id'")
            return None
        credentials = _get_credentials(key_dict)
        return FirestoreRESTClient(project_id, credentials)
    except Exception:
        logger.exception("Firebase initialization failed")
        return None
