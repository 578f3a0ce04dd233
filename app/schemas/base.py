"""Shared schema configuration: camelCase on the wire, snake_case in Python."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request/response bodies; accepts and emits camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """
    Base for request bodies whose fields are all optional strings.

    A value of any other JSON type is read as absent, so {"fullName": 5}
    behaves like {} and the handler reports its own 400 message.
    """

    @field_validator("*", mode="before")
    @classmethod
    def drop_non_strings(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


class OkResponse(CamelModel):
    """Bare success envelope (e.g. after a delete)."""

    ok: bool = True
