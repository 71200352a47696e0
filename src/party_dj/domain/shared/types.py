"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types shared across models are defined here once::

    from party_dj.domain.shared.types import RoomCodeStr

    class MyModel(BaseModel):
        room_code: RoomCodeStr
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

RoomCodeStr = Annotated[str, Field(min_length=1, max_length=32)]
"""Room code: 1-32 characters."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Settings-specific constraints ──────────────────────────────────

BusyTimeoutMs = Annotated[int, Field(ge=1000, le=30000)]
"""Database busy timeout in milliseconds: 1 000 … 30 000."""

ConnectionTimeoutS = Annotated[int, Field(ge=1, le=60)]
"""Database connection timeout in seconds: 1 … 60."""

RoomCodeLength = Annotated[int, Field(ge=1, le=32)]
"""Generated room code length: 1 … 32."""

CodeAttempts = Annotated[int, Field(ge=1, le=50)]
"""Room code generation attempts: 1 … 50."""

HttpTimeoutS = Annotated[float, Field(gt=0.0, le=120.0)]
"""HTTP request timeout in seconds: (0, 120]."""

PortInt = Annotated[int, Field(ge=1, le=65535)]
"""TCP port: 1 … 65 535."""
