"""RSA encryption and signatures with PKCS#1 v1.5 padding."""

from __future__ import annotations

import os
from typing import Any, Callable, Sequence

from .errors import RSAError, ensure_eq
from .hash import HashAlgorithm

__all__ = ["decrypt", "encrypt", "verify", "sign"]

# DER encoded DigestInfo prefixes for EMSA-PKCS1-v1_5.
_DIGEST_INFO: dict[HashAlgorithm, bytes] = {
    HashAlgorithm.MD5: bytes.fromhex("3020300c06082a864886f70d020505000410"),
    HashAlgorithm.SHA1: bytes.fromhex("3021300906052b0e03021a05000414"),
    HashAlgorithm.RIPEMD160: bytes.fromhex("3021300906052b2403020105000414"),
    HashAlgorithm.SHA2_224: bytes.fromhex("302d300d06096086480165030402040500041c"),
    HashAlgorithm.SHA2_256: bytes.fromhex("3031300d060960864801650304020105000420"),
    HashAlgorithm.SHA2_384: bytes.fromhex("3041300d060960864801650304020205000430"),
    HashAlgorithm.SHA2_512: bytes.fromhex("3051300d060960864801650304020305000440"),
    HashAlgorithm.SHA3_256: bytes.fromhex("3031300d060960864801650304020805000420"),
    HashAlgorithm.SHA3_512: bytes.fromhex("3051300d060960864801650304020a05000440"),
}


def _key_len(n: int) -> int:
    return (n.bit_length() + 7) // 8


def _check_public(n: int, e: int) -> None:
    if n <= 0:
        raise RSAError("invalid modulus")
    if e < 2:
        raise RSAError("public exponent too small")


def _digest_info(hash_alg: HashAlgorithm, hashed: bytes) -> bytes:
    prefix = _DIGEST_INFO.get(hash_alg)
    if prefix is None:
        return hashed
    if len(hashed) != hash_alg.digest_size():
        raise RSAError("input must be hashed")
    return prefix + hashed


def _signature_block(k: int, t: bytes) -> bytes:
    if k < len(t) + 11:
        raise RSAError("message too long")
    return b"\x00\x01" + b"\xff" * (k - len(t) - 3) + b"\x00" + t


def decrypt(priv_key: Any, mpis: Sequence[bytes], fingerprint: bytes) -> bytes:
    """Decrypt a single-MPI RSA ciphertext with ``priv_key``."""
    ensure_eq(len(mpis), 1, "invalid input")
    n, d = int(priv_key.n), int(priv_key.d)
    k = _key_len(n)
    c = int.from_bytes(bytes(mpis[0]), "big")
    if c >= n:
        raise RSAError("decryption error")
    em = pow(c, d, n).to_bytes(k, "big")
    if k < 11 or em[0] != 0 or em[1] != 2:
        raise RSAError("decryption error")
    separator = em.find(b"\x00", 2)
    if separator < 10:
        raise RSAError("decryption error")
    return em[separator + 1:]


def encrypt(
    n: bytes,
    e: bytes,
    plaintext: bytes,
    rng: Callable[[int], bytes] | None = None,
) -> list[bytes]:
    """Encrypt ``plaintext`` to the public key ``(n, e)``; returns one value."""
    random_bytes = rng or os.urandom
    modulus = int.from_bytes(bytes(n), "big")
    exponent = int.from_bytes(bytes(e), "big")
    _check_public(modulus, exponent)
    k = _key_len(modulus)
    if len(plaintext) > k - 11:
        raise RSAError("message too long")

    padding = bytearray()
    while len(padding) < k - len(plaintext) - 3:
        needed = k - len(plaintext) - 3 - len(padding)
        padding.extend(b for b in random_bytes(needed) if b != 0)

    em = b"\x00\x02" + bytes(padding) + b"\x00" + bytes(plaintext)
    c = pow(int.from_bytes(em, "big"), exponent, modulus)
    return [c.to_bytes(k, "big")]


def verify(n: bytes, e: bytes, hash_alg: HashAlgorithm, hashed: bytes, sig: bytes) -> None:
    """Check a PKCS#1 v1.5 signature; raises :class:`RSAError` if it is invalid."""
    modulus = int.from_bytes(bytes(n), "big")
    exponent = int.from_bytes(bytes(e), "big")
    _check_public(modulus, exponent)
    k = _key_len(modulus)
    expected = _signature_block(k, _digest_info(hash_alg, bytes(hashed)))
    s = int.from_bytes(bytes(sig), "big")
    if s >= modulus:
        raise RSAError("verification error")
    if pow(s, exponent, modulus).to_bytes(k, "big") != expected:
        raise RSAError("verification error")


def sign(key: Any, hash_alg: HashAlgorithm, digest: bytes) -> list[bytes]:
    """Sign ``digest`` with the private ``key``; returns one value."""
    n, d = int(key.n), int(key.d)
    k = _key_len(n)
    em = _signature_block(k, _digest_info(hash_alg, bytes(digest)))
    s = pow(int.from_bytes(em, "big"), d, n)
    return [s.to_bytes(k, "big")]