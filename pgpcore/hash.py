"""Hash algorithm identifiers and the hashers behind them."""

from __future__ import annotations

import hashlib
from enum import IntEnum
from typing import Any, Callable

from Crypto.Hash import RIPEMD160

from .errors import UnimplementedError, UnsupportedError

__all__ = ["HashAlgorithm", "Hasher"]


class Hasher:
    """An incremental hash over some algorithm."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the hash."""
        self._inner.update(bytes(data))

    def finish(self) -> bytes:
        """Return the digest of everything fed so far."""
        return self._inner.digest()


class HashAlgorithm(IntEnum):
    """Hash algorithms as numbered on the wire."""

    NONE = 0
    MD5 = 1
    SHA1 = 2
    RIPEMD160 = 3
    SHA2_256 = 8
    SHA2_384 = 9
    SHA2_512 = 10
    SHA2_224 = 11
    SHA3_256 = 12
    SHA3_512 = 14
    # Only for compatibility with GnuPG; never used to hash anything.
    PRIVATE10 = 110

    @classmethod
    def default(cls) -> HashAlgorithm:
        """Return the default algorithm, SHA2-256."""
        return cls.SHA2_256

    def _factory(self) -> Callable[[], Any] | None:
        return _FACTORIES.get(self)

    def new_hasher(self) -> Hasher:
        """Create a new incremental hasher for this algorithm."""
        factory = self._factory()
        if factory is None:
            raise UnimplementedError(f"hasher {self.name}")
        return Hasher(factory())

    def digest(self, data: bytes) -> bytes:
        """Return the digest of ``data``."""
        if self is HashAlgorithm.PRIVATE10:
            raise UnsupportedError("Private10 should not be used")
        factory = self._factory()
        if factory is None:
            raise UnimplementedError(f"hasher: {self.name}")
        inner = factory()
        inner.update(bytes(data))
        return inner.digest()

    def digest_size(self) -> int:
        """Return the digest size in octets, or 0 if the algorithm has none."""
        return _SIZES.get(self, 0)


_FACTORIES: dict[HashAlgorithm, Callable[[], Any]] = {
    HashAlgorithm.MD5: hashlib.md5,
    HashAlgorithm.SHA1: hashlib.sha1,
    HashAlgorithm.RIPEMD160: RIPEMD160.new,
    HashAlgorithm.SHA2_256: hashlib.sha256,
    HashAlgorithm.SHA2_384: hashlib.sha384,
    HashAlgorithm.SHA2_512: hashlib.sha512,
    HashAlgorithm.SHA2_224: hashlib.sha224,
    HashAlgorithm.SHA3_256: hashlib.sha3_256,
    HashAlgorithm.SHA3_512: hashlib.sha3_512,
}

_SIZES: dict[HashAlgorithm, int] = {
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.RIPEMD160: 20,
    HashAlgorithm.SHA2_256: 32,
    HashAlgorithm.SHA2_384: 48,
    HashAlgorithm.SHA2_512: 64,
    HashAlgorithm.SHA2_224: 28,
    HashAlgorithm.SHA3_256: 32,
    HashAlgorithm.SHA3_512: 64,
}