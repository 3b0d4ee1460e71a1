"""AES key wrap and unwrap as defined in RFC 3394."""

from __future__ import annotations

from Crypto.Cipher import AES

from .errors import MessageError, ensure, ensure_eq

__all__ = ["wrap", "unwrap"]

_IV = b"\xa6" * 8


def _xor_counter(block: bytes, t: int) -> bytes:
    return (int.from_bytes(block, "big") ^ t).to_bytes(8, "big")


def _cipher(key: bytes):
    size = len(key) * 8
    if size not in (128, 192, 256):
        raise MessageError(f"invalid aes key size: {size}")
    return AES.new(bytes(key), AES.MODE_ECB)


def _blocks(data: bytes) -> list[bytes]:
    return [data[start:start + 8] for start in range(0, len(data), 8)]


def wrap(key: bytes, data: bytes) -> bytes:
    """Wrap ``data`` (a multiple of 8 octets) under the AES key ``key``."""
    data = bytes(data)
    ensure_eq(len(data) % 8, 0, "data must be a multiple of 64bit")
    cipher = _cipher(key)

    r = _blocks(data)
    n = len(r)
    a = _IV
    for j in range(6):
        for i, block in enumerate(r):
            b = cipher.encrypt(a + block)
            a = _xor_counter(b[:8], n * j + i + 1)
            r[i] = b[8:]
    return a + b"".join(r)


def unwrap(key: bytes, data: bytes) -> bytes:
    """Unwrap ``data`` under the AES key ``key``, checking its integrity."""
    data = bytes(data)
    ensure_eq(len(data) % 8, 0, "data must be a multiple of 64bit")
    cipher = _cipher(key)
    ensure(len(data) >= 8, "wrapped data too short")

    a, *r = _blocks(data)
    n = len(r)
    for j in reversed(range(6)):
        for i in reversed(range(n)):
            b = cipher.decrypt(_xor_counter(a, n * j + i + 1) + r[i])
            a = b[:8]
            r[i] = b[8:]

    if a != _IV:
        raise MessageError("failed integrity check")
    return b"".join(r)