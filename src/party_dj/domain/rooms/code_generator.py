"""Room code generation.

Codes are meant to be read aloud and typed by hand, so the alphabet is
lowercase only and leaves out ``0`` and ``l``.
"""

from __future__ import annotations

import random

from party_dj.domain.shared.messages import ErrorMessages

ROOM_CODE_ALPHABET = "123456789abcdefghijkmnopqrstuvwxyz"
DEFAULT_ROOM_CODE_LENGTH = 6


def generate_code(length: int = DEFAULT_ROOM_CODE_LENGTH, rng: random.Random | None = None) -> str:
    """Generate a random room code.

    Characters are drawn uniformly with replacement from ``ROOM_CODE_ALPHABET``.
    The source is not cryptographically secure and no uniqueness check is done.

    Args:
        length: Number of characters to produce.
        rng: Optional random source, mainly for deterministic tests.

    Returns:
        A string of exactly ``length`` characters.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError(ErrorMessages.NEGATIVE_CODE_LENGTH)

    source = rng or random
    return "".join(source.choice(ROOM_CODE_ALPHABET) for _ in range(length))
