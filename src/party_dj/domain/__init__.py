# ruff: noqa: N999
"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting exceptions, messages, validators and types
- rooms/: Room and track entities, room code generation, repository port
"""

from party_dj.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
