"""Checksums used by OpenPGP secret key and session key material."""

from __future__ import annotations

import hashlib
from typing import BinaryIO

from .errors import ensure_eq

__all__ = [
    "SimpleChecksum",
    "simple",
    "simple_to_writer",
    "calculate_simple",
    "calculate_sha1",
]


class SimpleChecksum:
    """Two-octet checksum: the sum of all octets modulo 65536."""

    def __init__(self) -> None:
        self.value = 0

    def update(self, data: bytes) -> None:
        """Add ``data`` to the running sum."""
        self.value = (self.value + sum(data)) & 0xFFFF

    def digest(self) -> bytes:
        """Return the checksum as two big-endian octets."""
        return self.value.to_bytes(2, "big")

    def to_writer(self, writer: BinaryIO) -> None:
        """Write the checksum to ``writer``."""
        writer.write(self.digest())


def calculate_simple(data: bytes) -> int:
    """Return the simple checksum of ``data`` as an integer."""
    checksum = SimpleChecksum()
    checksum.update(data)
    return checksum.value


def simple(actual: bytes, data: bytes) -> None:
    """Check that the first two octets of ``actual`` are the checksum of ``data``."""
    expected = calculate_simple(data).to_bytes(2, "big")
    ensure_eq(bytes(actual[:2]), expected, "invalid simple checksum")


def simple_to_writer(data: bytes, writer: BinaryIO) -> None:
    """Write the simple checksum of ``data`` to ``writer``."""
    checksum = SimpleChecksum()
    checksum.update(data)
    checksum.to_writer(writer)


def calculate_sha1(data: bytes) -> bytes:
    """Return the 20-octet SHA-1 digest of ``data``."""
    return hashlib.sha1(data).digest()[:20]