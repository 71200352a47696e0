"""Base exception classes for domain-level errors."""

from __future__ import annotations

from party_dj.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidParameterError(DomainError):
    """Raised when a required request parameter is missing or malformed.

    Detected locally, before any external system is contacted.
    """

    status_code: int = 400

    def __init__(self, field: str, label: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.PARAMETER_FORMAT_INCORRECT.format(label=label)
        super().__init__(msg, code="INVALID_PARAMETER")
        self.field = field
        self.label = label


class UpstreamFailureError(DomainError):
    """Raised when the playlist service or the room store fails."""

    status_code: int = 401

    def __init__(self, service: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.UPSTREAM_FAILED.format(service=service)
        super().__init__(msg, code="UPSTREAM_FAILURE")
        self.service = service


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier
