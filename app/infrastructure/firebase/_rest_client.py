"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Supports what the API needs: document get/set/update/delete, sub-collections,
filtered/ordered/paginated queries and collection-group queries.
"""

from __future__ import annotations

import asyncio
import json
import re
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import quote

import httpx

from app.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_document,
    encode_document,
)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
_SIMPLE_FIELD = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def _field_path(name: str) -> str:
    """Quote a field name for updateMask / fieldFilter when it is not a simple identifier."""
    if _SIMPLE_FIELD.match(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    params: dict[str, Any] | None = None,
) -> dict | list | None:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method not in ("GET", "PATCH", "POST", "DELETE"):
        raise ValueError(f"Unsupported method: {method!r}")
    resp = await client.request(method, url, headers=headers, json=body, params=params)
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


class DocumentExistsError(Exception):
    """Raised when createDocument returns 409 (document ID already exists)."""


class DocumentSnapshot:
    """Snapshot of a document (id + data + full resource path)."""

    def __init__(self, id_: str, data: dict, path: str | None = None):
        self.id = id_
        self.path = path
        self._data = data

    def to_dict(self) -> dict:
        return dict(self._data)


def _snapshot_from_document(doc: dict) -> DocumentSnapshot:
    name = doc.get("name", "")
    doc_id = name.split("/")[-1] if name else ""
    return DocumentSnapshot(doc_id, decode_document(doc), path=name or None)


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    @property
    def path(self) -> str:
        return self._path

    def collection(self, collection_id: str) -> "CollectionReference":
        """Sub-collection under this document (e.g. users/{uid}/applications)."""
        return CollectionReference(self._client, f"{self._path}/{collection_id}")

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (PATCH with full replace)."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
        )

    async def update(self, data: dict[str, Any]) -> DocumentSnapshot | None:
        """Merge the given top-level fields into an existing document.

        Only the listed fields are written (updateMask). Returns the stored
        document after the write, or None when the document does not exist.
        """
        params: dict[str, Any] = {
            "updateMask.fieldPaths": [_field_path(k) for k in data],
            "currentDocument.exists": "true",
        }
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            params=params,
        )
        if out is None:
            return None
        return _snapshot_from_document(out)

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            access_token=await self._client.get_token(),
        )
        if not out:
            return None
        return _snapshot_from_document(out)

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing (404)."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="DELETE",
            access_token=await self._client.get_token(),
        )


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array_contains": "ARRAY_CONTAINS",
    "array-contains": "ARRAY_CONTAINS",
}

_DIRECTIONS = {"ASCENDING", "DESCENDING"}


class Query:
    """Fluent query builder; runs via runQuery (filter/order/offset/limit on server).

    Each builder call returns a new Query so a base query can be reused.
    """

    def __init__(
        self,
        client: "FirestoreRESTClient",
        parent: str,
        collection_id: str,
        *,
        all_descendants: bool = False,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._all_descendants = all_descendants
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, str]] = []
        self._offset: int = 0
        self._limit: int | None = None

    def _copy(self) -> "Query":
        q = Query(
            self._client,
            self._parent,
            self._collection_id,
            all_descendants=self._all_descendants,
        )
        q._filters = list(self._filters)
        q._orders = list(self._orders)
        q._offset = self._offset
        q._limit = self._limit
        return q

    def where(self, field: str, op: str, value: Any) -> "Query":
        if op not in _OP_MAP:
            raise ValueError(f"Unsupported query operator: {op!r}")
        q = self._copy()
        q._filters.append((field, _OP_MAP[op], value))
        return q

    def order_by(self, field: str, direction: str = "ASCENDING") -> "Query":
        direction = direction.upper()
        if direction not in _DIRECTIONS:
            raise ValueError(f"Unsupported order direction: {direction!r}")
        q = self._copy()
        q._orders.append((field, direction))
        return q

    def offset(self, n: int) -> "Query":
        q = self._copy()
        q._offset = n
        return q

    def limit(self, n: int | None) -> "Query":
        q = self._copy()
        q._limit = n
        return q

    def to_structured_query(self) -> dict[str, Any]:
        """Return the StructuredQuery body sent to runQuery."""
        source: dict[str, Any] = {"collectionId": self._collection_id}
        if self._all_descendants:
            source["allDescendants"] = True
        structured: dict[str, Any] = {"from": [source]}
        field_filters = [
            {
                "fieldFilter": {
                    "field": {"fieldPath": _field_path(field)},
                    "op": op,
                    "value": _encode_value(value),
                }
            }
            for field, op, value in self._filters
        ]
        if len(field_filters) == 1:
            structured["where"] = field_filters[0]
        elif field_filters:
            structured["where"] = {
                "compositeFilter": {"op": "AND", "filters": field_filters}
            }
        if self._orders:
            structured["orderBy"] = [
                {"field": {"fieldPath": _field_path(f)}, "direction": d}
                for f, d in self._orders
            ]
        if self._offset:
            structured["offset"] = self._offset
        if self._limit:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        resp = await _request_async(
            self._client._http,
            f"{_BASE}/{self._parent}:runQuery",
            method="POST",
            body={"structuredQuery": self.to_structured_query()},
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            yield _snapshot_from_document(item["document"])


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def path(self) -> str:
        return self._path

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (fail with DocumentExistsError if it exists)."""
        url = f"{_BASE}/{self._path}?documentId={quote(document_id, safe='')}"
        await _request_async(
            self._client._http,
            url,
            method="POST",
            body=encode_document(data),
            access_token=await self._client.get_token(),
        )

    def query(self) -> Query:
        """Unfiltered query over this collection (base for conditional chaining)."""
        parent, collection_id = self._path.rsplit("/", 1)
        return Query(self._client, parent, collection_id)

    def where(self, field: str, op: str, value: Any) -> Query:
        """Start a query with a filter. Chain .where(), .order_by(), .offset(), .limit(), then .stream()."""
        return self.query().where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> Query:
        return self.query().order_by(field, direction)

    def limit(self, n: int | None) -> Query:
        return self.query().limit(n)

    def offset(self, n: int) -> Query:
        return self.query().offset(n)

    def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Every document in the collection (shallow)."""
        return self.query().stream()


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    def collection_group(self, collection_id: str) -> Query:
        """Query every collection named collection_id, at any depth."""
        return Query(self, self._prefix, collection_id, all_descendants=True)

