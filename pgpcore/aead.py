"""AEAD algorithm identifiers."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["AeadAlgorithm"]


class AeadAlgorithm(IntEnum):
    """Available AEAD algorithms."""

    NONE = 0
    EAX = 1
    OCB = 2

    @classmethod
    def default(cls) -> AeadAlgorithm:
        """Return the default algorithm (none)."""
        return cls.NONE