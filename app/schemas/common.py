"""Shared schema bases: camelCase JSON on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase aliases; accepts either camelCase or field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentBody(CamelModel):
    """Free-form JSON document body.

    Known keys are typed; any other key is kept and written as-is.
    ``to_document()`` returns only the keys the client actually sent.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement (e.g. after a delete)."""

    message: str = Field(..., description="Human-readable outcome")
