"""Unit tests for the Firestore REST client, value encoding and repositories.

HTTP is served by httpx.MockTransport; no network or credentials are used.
"""

import json
from datetime import UTC, datetime, timedelta, timezone

import httpx
import pytest

from app.application.dtos import ApplicationResult, RegistrationResult, UniversityFilters
from app.domain.enums import ApplicationStatus
from app.infrastructure.firebase._rest_client import DocumentExistsError, FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import decode_document, encode_document
from app.infrastructure.firebase.repositories import (
    FirestoreApplicationRepository,
    FirestoreRegistrationRepository,
    FirestoreRoleGrantRepository,
    FirestoreUniversityRepository,
)

ROOT = "projects/demo/databases/(default)/documents"


class StubCredentials:
    """Already-valid credentials; never refreshed."""

    valid = True
    token = "access-token"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def make_client(recorder: Recorder) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return FirestoreRESTClient("demo", StubCredentials(), http_client=http)


def doc(path: str, fields: dict) -> dict:
    return {"name": f"{ROOT}/{path}", **encode_document(fields)}


class TestEncoding:
    def test_scalars_and_nesting(self) -> None:
        data = {
            "s": "x",
            "i": 3,
            "f": 4.5,
            "b": True,
            "n": None,
            "l": [1, "a"],
            "m": {"k": "v"},
        }
        encoded = encode_document(data)["fields"]
        assert encoded["i"] == {"integerValue": "3"}
        assert encoded["b"] == {"booleanValue": True}
        assert encoded["l"]["arrayValue"]["values"][1] == {"stringValue": "a"}
        assert decode_document(encode_document(data)) == data

    def test_timestamps_are_written_in_utc(self) -> None:
        ist = timezone(timedelta(hours=5, minutes=30))
        value = datetime(2026, 1, 1, 5, 30, tzinfo=ist)
        encoded = encode_document({"t": value})["fields"]["t"]
        assert encoded == {"timestampValue": "2026-01-01T00:00:00.000000Z"}

    def test_nanosecond_timestamps_are_truncated(self) -> None:
        decoded = decode_document(
            {"fields": {"t": {"timestampValue": "2026-03-04T05:06:07.123456789Z"}}}
        )
        assert decoded["t"] == datetime(2026, 3, 4, 5, 6, 7, 123456, tzinfo=UTC)

    def test_second_precision_timestamp(self) -> None:
        decoded = decode_document({"fields": {"t": {"timestampValue": "2026-03-04T05:06:07Z"}}})
        assert decoded["t"] == datetime(2026, 3, 4, 5, 6, 7, tzinfo=UTC)

    def test_empty_document(self) -> None:
        assert decode_document(None) == {}
        assert decode_document({"name": "x"}) == {}

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            encode_document({"x": object()})


class TestClient:
    async def test_get_missing_document_returns_none(self) -> None:
        recorder = Recorder(httpx.Response(404, json={"error": {}}))
        client = make_client(recorder)
        assert await client.collection("universities").document("nope").get() is None
        request = recorder.requests[0]
        assert request.method == "GET"
        assert request.url.path.endswith("/documents/universities/nope")
        assert request.headers["Authorization"] == "Bearer access-token"

    async def test_create_conflict_raises(self) -> None:
        client = make_client(Recorder(httpx.Response(409, json={})))
        with pytest.raises(DocumentExistsError):
            await client.collection("universities").create("u1", {"name": "x"})

    async def test_server_error_raises(self) -> None:
        client = make_client(Recorder(httpx.Response(500, json={})))
        with pytest.raises(httpx.HTTPStatusError):
            await client.collection("universities").document("u1").get()

    async def test_update_sends_mask_and_existence_precondition(self) -> None:
        recorder = Recorder(
            httpx.Response(200, json=doc("users/u1", {"city": "Pune", "email": "a@b.c"}))
        )
        client = make_client(recorder)
        snapshot = await client.collection("users").document("u1").update(
            {"city": "Pune", "preferred-intake": "2027"}
        )
        request = recorder.requests[0]
        assert request.method == "PATCH"
        assert request.url.params.get_list("updateMask.fieldPaths") == [
            "city",
            "`preferred-intake`",
        ]
        assert request.url.params["currentDocument.exists"] == "true"
        assert snapshot.id == "u1"
        assert snapshot.to_dict()["email"] == "a@b.c"

    async def test_update_missing_document_returns_none(self) -> None:
        client = make_client(Recorder(httpx.Response(404, json={})))
        assert await client.collection("users").document("u1").update({"a": 1}) is None

    async def test_collection_group_query_shape(self) -> None:
        recorder = Recorder(httpx.Response(200, json=[{"readTime": "x"}]))
        client = make_client(recorder)
        q = (
            client.collection_group("applications")
            .where("universityId", "==", "uni-a")
            .order_by("submittedAt", "descending")
            .limit(5)
        )
        assert [s async for s in q.stream()] == []
        assert recorder.requests[0].url.path.endswith("/documents:runQuery")
        structured = recorder.body()["structuredQuery"]
        assert structured["from"] == [{"collectionId": "applications", "allDescendants": True}]
        assert structured["where"]["fieldFilter"]["op"] == "EQUAL"
        assert structured["orderBy"] == [
            {"field": {"fieldPath": "submittedAt"}, "direction": "DESCENDING"}
        ]
        assert structured["limit"] == 5

    def test_query_builder_rejects_unknown_operator(self) -> None:
        client = make_client(Recorder())
        with pytest.raises(ValueError):
            client.collection("universities").where("rating", "~", 1)


class TestRepositories:
    async def test_university_list_combines_filters(self) -> None:
        recorder = Recorder(
            httpx.Response(
                200,
                json=[
                    {"document": doc("universities/u1", {"name": "Alpha", "rating": 4.2})},
                    {"readTime": "x"},
                ],
            )
        )
        repo = FirestoreUniversityRepository(make_client(recorder))
        items = await repo.list(
            UniversityFilters(location="Delhi", min_rating=4.0, max_rating=5.0),
            skip=10,
            limit=20,
        )
        assert [u.id for u in items] == ["u1"]
        structured = recorder.body()["structuredQuery"]
        filters = structured["where"]["compositeFilter"]["filters"]
        assert [f["fieldFilter"]["op"] for f in filters] == [
            "EQUAL",
            "GREATER_THAN_OR_EQUAL",
            "LESS_THAN_OR_EQUAL",
        ]
        assert structured["offset"] == 10
        assert structured["limit"] == 20

    async def test_university_list_without_limit_reads_everything(self) -> None:
        recorder = Recorder(httpx.Response(200, json=[]))
        repo = FirestoreUniversityRepository(make_client(recorder))
        assert await repo.list(UniversityFilters(), skip=0, limit=None) == []
        structured = recorder.body()["structuredQuery"]
        assert "limit" not in structured
        assert "where" not in structured

    async def test_application_is_written_under_student(self) -> None:
        recorder = Recorder(httpx.Response(200, json={}))
        repo = FirestoreApplicationRepository(make_client(recorder))
        application = ApplicationResult(
            id="app1",
            student_id="stu-1",
            student_name="Asha",
            email="a@example.com",
            university_id="uni-a",
            university_name="Alpha",
            course_name="B.Tech",
        )
        await repo.create(application)
        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.url.path.endswith("/users/stu-1/applications")
        assert request.url.params["documentId"] == "app1"
        fields = recorder.body()["fields"]
        assert fields["id"] == {"stringValue": "app1"}
        assert fields["status"] == {"stringValue": "Pending"}

    async def test_application_find_by_id_uses_collection_group(self) -> None:
        stored = ApplicationResult(
            id="app1",
            student_id="stu-1",
            student_name="Asha",
            email="a@example.com",
            university_id="uni-a",
            university_name=None,
            course_name="B.Tech",
            status=ApplicationStatus.APPROVED,
        ).to_document()
        recorder = Recorder(
            httpx.Response(
                200, json=[{"document": doc("users/stu-1/applications/app1", stored)}]
            )
        )
        repo = FirestoreApplicationRepository(make_client(recorder))
        found = await repo.find_by_id("app1")
        assert found is not None
        assert found.student_id == "stu-1"
        assert found.status is ApplicationStatus.APPROVED
        structured = recorder.body()["structuredQuery"]
        assert structured["from"][0]["allDescendants"] is True
        assert structured["limit"] == 1

    async def test_unknown_stored_status_reads_as_pending(self) -> None:
        recorder = Recorder(
            httpx.Response(
                200,
                json=doc(
                    "users/stu-1/applications/app1",
                    {"studentId": "stu-1", "status": "Archived"},
                ),
            )
        )
        repo = FirestoreApplicationRepository(make_client(recorder))
        found = await repo.get_for_student("stu-1", "app1")
        assert found.status is ApplicationStatus.PENDING
        assert found.id == "app1"

    async def test_missing_grant_means_no_role(self) -> None:
        repo = FirestoreRoleGrantRepository(make_client(Recorder(httpx.Response(404))))
        assert await repo.get_global_admin("stu-1") is None

    async def test_registration_gets_generated_id(self) -> None:
        recorder = Recorder(httpx.Response(200, json={}))
        repo = FirestoreRegistrationRepository(make_client(recorder))
        created = await repo.create(
            RegistrationResult(
                id="",
                full_name="Ravi",
                email="r@example.com",
                mobile_number="1",
                city="Agra",
                course_interested_in="MBA",
            )
        )
        assert created.id
        assert recorder.requests[0].url.params["documentId"] == created.id
        assert "id" not in recorder.body()["fields"]
