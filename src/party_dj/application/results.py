"""Uniform response envelope returned by every room handler.

Success: ``{"status": "success", ...fields}``.
Failure: ``{"status": "error", "code": <int>, "message": <str>}``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from party_dj.domain.shared.exceptions import InvalidParameterError, UpstreamFailureError


class ResultStatus(Enum):
    """Status values of the response envelope."""

    SUCCESS = "success"
    ERROR = "error"


class HandlerResult(BaseModel):
    """Result of a room handler; subclasses add operation-specific fields."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    status: ResultStatus
    code: int | None = None
    message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @classmethod
    def success(cls, **fields: Any) -> Self:
        return cls(status=ResultStatus.SUCCESS, **fields)

    @classmethod
    def error(cls, code: int, message: str) -> Self:
        return cls(status=ResultStatus.ERROR, code=code, message=message)

    @classmethod
    def invalid_parameter(cls, exc: InvalidParameterError) -> Self:
        return cls.error(exc.status_code, exc.message)

    @classmethod
    def upstream_failure(cls, exc: UpstreamFailureError) -> Self:
        return cls.error(exc.status_code, exc.message)

    def to_envelope(self) -> dict[str, Any]:
        """Serialize to the wire envelope, dropping fields that were not set."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GenerateRoomResult(HandlerResult):
    room_code: str | None = None
    playlist_id: str | None = None


class JoinRoomResult(HandlerResult):
    is_room_open: bool | None = None
    playlist_id: str | None = None
