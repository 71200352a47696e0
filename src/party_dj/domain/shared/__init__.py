"""
Shared Domain Kernel

Contains exceptions, messages and validators shared across the application.
"""

from party_dj.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvalidParameterError,
    UpstreamFailureError,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "InvalidParameterError",
    "UpstreamFailureError",
]
