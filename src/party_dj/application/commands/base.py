"""Shared request model for room commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from party_dj.domain.shared.validators import require_param


class RoomCommand(BaseModel):
    """Base class for handler requests.

    Fields are optional at the model level so that a missing value surfaces as
    an ``InvalidParameterError`` naming the field, not as a pydantic error.
    ``REQUIRED_PARAMS`` lists ``(field, label)`` pairs in the order they are
    checked.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel, extra="ignore"
    )

    REQUIRED_PARAMS: ClassVar[tuple[tuple[str, str], ...]] = ()

    def check_params(self) -> None:
        """Raise ``InvalidParameterError`` for the first missing required parameter."""
        for field, label in self.REQUIRED_PARAMS:
            require_param(getattr(self, field), field, label)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build a command from a raw request payload keyed by camelCase names.

        Raises:
            InvalidParameterError: If a required parameter is missing or not a string.
        """
        values = {
            field: require_param(payload.get(to_camel(field)), field, label)
            for field, label in cls.REQUIRED_PARAMS
        }
        return cls(**values)
