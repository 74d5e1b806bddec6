"""Firestore-backed application repository (implements IApplicationRepository).

Applications are stored under users/{studentId}/applications/{id}. Each
document also carries its own ``id`` so a collection-group query over every
``applications`` sub-collection can find it without knowing the owner.
Collection-group queries on ``id`` and on ``universityId`` + ``submittedAt``
need single-field / composite indexes enabled for collection-group scope.
"""

from __future__ import annotations

from datetime import datetime

from app.application.dtos.application import ApplicationResult
from app.domain.enums import ApplicationStatus
from app.infrastructure.firebase._rest_client import (
    CollectionReference,
    FirestoreRESTClient,
)
from app.infrastructure.firebase.collections import (
    COLLECTION_APPLICATIONS,
    COLLECTION_USERS,
)


class FirestoreApplicationRepository:
    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._users = client.collection(COLLECTION_USERS)

    def _student_applications(self, student_id: str) -> CollectionReference:
        return self._users.document(student_id).collection(COLLECTION_APPLICATIONS)

    async def create(self, application: ApplicationResult) -> ApplicationResult:
        """Write under the student's sub-collection, keyed by application.id."""
        await self._student_applications(application.student_id).create(
            application.id, application.to_document()
        )
        return application

    async def get_for_student(
        self, student_id: str, application_id: str
    ) -> ApplicationResult | None:
        doc = await self._student_applications(student_id).document(application_id).get()
        if not doc:
            return None
        return ApplicationResult.from_document(doc.id, doc.to_dict())

    async def find_by_id(self, application_id: str) -> ApplicationResult | None:
        """Look the application up across every student (collection group on ``id``)."""
        q = (
            self._client.collection_group(COLLECTION_APPLICATIONS)
            .where("id", "==", application_id)
            .limit(1)
        )
        async for snapshot in q.stream():
            return ApplicationResult.from_document(snapshot.id, snapshot.to_dict())
        return None

    async def list_for_student(self, student_id: str) -> list[ApplicationResult]:
        q = self._student_applications(student_id).order_by("submittedAt", "DESCENDING")
        return [
            ApplicationResult.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]

    async def list_for_university(self, university_id: str) -> list[ApplicationResult]:
        q = (
            self._client.collection_group(COLLECTION_APPLICATIONS)
            .where("universityId", "==", university_id)
            .order_by("submittedAt", "DESCENDING")
        )
        return [
            ApplicationResult.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]

    async def update_status(
        self,
        application: ApplicationResult,
        status: ApplicationStatus,
        updated_at: datetime,
    ) -> ApplicationResult | None:
        """Overwrite status and updatedAt only; plain write, no precondition on the old status."""
        doc = await (
            self._student_applications(application.student_id)
            .document(application.id)
            .update({"status": status.value, "updatedAt": updated_at})
        )
        if not doc:
            return None
        return ApplicationResult.from_document(doc.id, doc.to_dict())
