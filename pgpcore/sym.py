"""Symmetric key algorithms and OpenPGP CFB mode encryption."""

from __future__ import annotations

import os
import secrets
from enum import IntEnum
from typing import Callable

from Crypto.Cipher import AES, CAST, DES, Blowfish

from .checksum import calculate_sha1
from .errors import (
    CfbInvalidKeyIvLength,
    InvalidKeyLength,
    MdcError,
    MessageError,
    UnimplementedError,
    ensure,
    ensure_eq,
)
from .twofish import Twofish

__all__ = ["SymmetricKeyAlgorithm"]

# MDC is 1 byte packet tag, 1 byte length prefix and 20 bytes SHA1 hash.
_MDC_LEN = 22
_MDC_TAG = 0xD3
_MDC_BODY_LEN = 0x14

_PRIVATE10_MESSAGE = "Private10 should not be used, and only exist for compatability"
_RESYNC_MESSAGE = "CFB resync is not here"

BlockEncryptor = Callable[[bytes], bytes]


def _xor(left: bytes, right: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(left, right))


class _CfbStream:
    """Full-block CFB as a stream: successive calls continue the same stream."""

    def __init__(self, encrypt_block: BlockEncryptor, iv: bytes, block_size: int) -> None:
        self._encrypt_block = encrypt_block
        self._block_size = block_size
        self._register = bytes(iv)
        self._keystream = b""
        self._pos = block_size
        self._feedback = bytearray()

    def _process(self, data: bytes, decrypting: bool) -> bytes:
        out = bytearray()
        start = 0
        while start < len(data):
            if self._pos == self._block_size:
                self._keystream = self._encrypt_block(self._register)
                self._pos = 0
            take = min(self._block_size - self._pos, len(data) - start)
            chunk = data[start:start + take]
            result = _xor(chunk, self._keystream[self._pos:self._pos + take])
            self._feedback.extend(chunk if decrypting else result)
            if len(self._feedback) == self._block_size:
                self._register = bytes(self._feedback)
                self._feedback.clear()
            self._pos += take
            start += take
            out.extend(result)
        return bytes(out)

    def encrypt(self, data: bytes) -> bytes:
        return self._process(bytes(data), decrypting=False)

    def decrypt(self, data: bytes) -> bytes:
        return self._process(bytes(data), decrypting=True)


def _triple_des(key: bytes) -> BlockEncryptor:
    if len(key) != 24:
        raise CfbInvalidKeyIvLength()
    first = DES.new(key[0:8], DES.MODE_ECB)
    second = DES.new(key[8:16], DES.MODE_ECB)
    third = DES.new(key[16:24], DES.MODE_ECB)
    return lambda block: third.encrypt(second.decrypt(first.encrypt(block)))


class SymmetricKeyAlgorithm(IntEnum):
    """Symmetric key algorithms as numbered on the wire."""

    PLAINTEXT = 0
    IDEA = 1
    TRIPLE_DES = 2
    CAST5 = 3
    BLOWFISH = 4
    # 5 and 6 are reserved for DES/SK
    AES128 = 7
    AES192 = 8
    AES256 = 9
    TWOFISH = 10
    CAMELLIA128 = 11
    CAMELLIA192 = 12
    CAMELLIA256 = 13
    PRIVATE10 = 110

    @classmethod
    def default(cls) -> SymmetricKeyAlgorithm:
        """Return the default algorithm, AES-128."""
        return cls.AES128

    def block_size(self) -> int:
        """The size of a single block in bytes."""
        return _BLOCK_SIZES[self]

    def key_size(self) -> int:
        """The size of a key in bytes."""
        return _KEY_SIZES[self]

    def _unavailable(self, encrypting: bool) -> None:
        """Raise the error for algorithms without a cipher behind them."""
        if self is SymmetricKeyAlgorithm.IDEA:
            raise UnimplementedError("IDEA encrypt")
        if self in _CAMELLIA_NAMES:
            raise UnimplementedError(f"{_CAMELLIA_NAMES[self]} not yet available")
        if self is SymmetricKeyAlgorithm.PRIVATE10:
            if encrypting:
                raise MessageError(_PRIVATE10_MESSAGE)
            raise UnimplementedError(_PRIVATE10_MESSAGE)

    def _block_encryptor(self, key: bytes) -> BlockEncryptor:
        key = bytes(key)
        try:
            if self in (
                SymmetricKeyAlgorithm.AES128,
                SymmetricKeyAlgorithm.AES192,
                SymmetricKeyAlgorithm.AES256,
            ):
                if len(key) != self.key_size():
                    raise CfbInvalidKeyIvLength()
                return AES.new(key, AES.MODE_ECB).encrypt
            if self is SymmetricKeyAlgorithm.TRIPLE_DES:
                return _triple_des(key)
            if self is SymmetricKeyAlgorithm.CAST5:
                return CAST.new(key, CAST.MODE_ECB).encrypt
            if self is SymmetricKeyAlgorithm.BLOWFISH:
                return Blowfish.new(key, Blowfish.MODE_ECB).encrypt
            if self is SymmetricKeyAlgorithm.TWOFISH:
                return Twofish(key).encrypt_block
        except (ValueError, InvalidKeyLength) as err:
            raise CfbInvalidKeyIvLength() from err
        raise UnimplementedError(f"cipher {self.name}")

    def _stream(self, key: bytes, iv: bytes) -> _CfbStream:
        encrypt_block = self._block_encryptor(key)
        if len(iv) != self.block_size():
            raise CfbInvalidKeyIvLength()
        return _CfbStream(encrypt_block, bytes(iv), self.block_size())

    def decrypt(self, key: bytes, ciphertext: bytes) -> bytes:
        """Decrypt OpenPGP CFB data with resynchronization, using an all-zero IV."""
        iv = bytes(self.block_size())
        _, data = self.decrypt_with_iv(key, iv, ciphertext, True)
        return data

    def decrypt_protected(self, key: bytes, ciphertext: bytes) -> bytes:
        """Decrypt OpenPGP CFB data without resynchronization and check its MDC."""
        iv = bytes(self.block_size())
        prefix, res = self.decrypt_with_iv(key, iv, ciphertext, False)
        if len(res) < _MDC_LEN:
            raise MdcError()
        data, mdc = res[:-_MDC_LEN], res[-_MDC_LEN:]

        sha1 = calculate_sha1(prefix + data + mdc[:2])
        if mdc[0] != _MDC_TAG or mdc[1] != _MDC_BODY_LEN or mdc[2:] != sha1:
            raise MdcError()
        return data

    def decrypt_with_iv(
        self, key: bytes, iv: bytes, ciphertext: bytes, resync: bool
    ) -> tuple[bytes, bytes]:
        """Decrypt OpenPGP CFB data; return the decrypted ``(prefix, data)``.

        The prefix is BS+2 octets whose last two repeat octets BS-1 and BS;
        that repetition is checked before the rest is decrypted.
        """
        ciphertext = bytes(ciphertext)
        bs = self.block_size()
        ensure(bs + 2 < len(ciphertext), "invalid ciphertext")
        encrypted_prefix, encrypted_data = ciphertext[:bs + 2], ciphertext[bs + 2:]

        if self is SymmetricKeyAlgorithm.PLAINTEXT:
            return encrypted_prefix, encrypted_data
        self._unavailable(encrypting=False)

        stream = self._stream(key, iv)
        prefix = stream.decrypt(encrypted_prefix)
        ensure_eq(prefix[bs - 2], prefix[bs], "cfb decrypt, quick check part 1")
        ensure_eq(prefix[bs - 1], prefix[bs + 1], "cfb decrypt, quick check part 2")

        if resync:
            raise UnimplementedError(_RESYNC_MESSAGE)
        return prefix, stream.decrypt(encrypted_data)

    def decrypt_with_iv_regular(self, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        """Decrypt with regular CFB mode (no OpenPGP prefix)."""
        ciphertext = bytes(ciphertext)
        if self is SymmetricKeyAlgorithm.PLAINTEXT:
            return ciphertext
        self._unavailable(encrypting=False)
        return self._stream(key, iv).decrypt(ciphertext)

    def _prefixed(self, plaintext: bytes) -> bytearray:
        bs = self.block_size()
        ensure(bs >= 2, f"no block cipher for {self.name}")
        buf = bytearray(secrets.token_bytes(bs))
        # quick check octets
        buf.append(buf[bs - 2])
        buf.append(buf[bs - 1])
        buf.extend(plaintext)
        return buf

    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt with OpenPGP CFB and resynchronization, using an all-zero IV."""
        buf = self._prefixed(bytes(plaintext))
        iv = bytes(self.block_size())
        return self.encrypt_with_iv(key, iv, bytes(buf), True)

    def encrypt_protected(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt with OpenPGP CFB without resynchronization, appending an MDC."""
        buf = self._prefixed(bytes(plaintext))
        buf.extend((_MDC_TAG, _MDC_BODY_LEN))
        buf.extend(calculate_sha1(bytes(buf)))
        iv = bytes(self.block_size())
        return self.encrypt_with_iv(key, iv, bytes(buf), False)

    def encrypt_with_iv(self, key: bytes, iv: bytes, plaintext: bytes, resync: bool) -> bytes:
        """Encrypt prefixed plaintext (prefix of BS+2 octets) with OpenPGP CFB."""
        plaintext = bytes(plaintext)
        bs = self.block_size()
        ensure(bs + 2 <= len(plaintext), "invalid plaintext")
        prefix, data = plaintext[:bs + 2], plaintext[bs + 2:]

        if self is SymmetricKeyAlgorithm.PLAINTEXT:
            return plaintext
        self._unavailable(encrypting=True)

        stream = self._stream(key, iv)
        encrypted_prefix = stream.encrypt(prefix)
        if resync:
            raise UnimplementedError(_RESYNC_MESSAGE)
        return encrypted_prefix + stream.encrypt(data)

    def encrypt_with_iv_regular(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        """Encrypt with regular CFB mode (no OpenPGP prefix)."""
        plaintext = bytes(plaintext)
        if self is SymmetricKeyAlgorithm.PLAINTEXT:
            return plaintext
        self._unavailable(encrypting=False)
        return self._stream(key, iv).encrypt(plaintext)

    def new_session_key(self, rng: Callable[[int], bytes] | None = None) -> bytes:
        """Generate a new random session key of this algorithm's key size."""
        random_bytes = rng or os.urandom
        size = self.key_size()
        return bytes(random_bytes(size)) if size else b""


_BLOCK_SIZES = {
    SymmetricKeyAlgorithm.PLAINTEXT: 0,
    SymmetricKeyAlgorithm.IDEA: 8,
    SymmetricKeyAlgorithm.TRIPLE_DES: 8,
    SymmetricKeyAlgorithm.CAST5: 8,
    SymmetricKeyAlgorithm.BLOWFISH: 8,
    SymmetricKeyAlgorithm.AES128: 16,
    SymmetricKeyAlgorithm.AES192: 16,
    SymmetricKeyAlgorithm.AES256: 16,
    SymmetricKeyAlgorithm.TWOFISH: 16,
    SymmetricKeyAlgorithm.CAMELLIA128: 16,
    SymmetricKeyAlgorithm.CAMELLIA192: 16,
    SymmetricKeyAlgorithm.CAMELLIA256: 16,
    SymmetricKeyAlgorithm.PRIVATE10: 0,
}

_KEY_SIZES = {
    SymmetricKeyAlgorithm.PLAINTEXT: 0,
    SymmetricKeyAlgorithm.IDEA: 16,
    SymmetricKeyAlgorithm.TRIPLE_DES: 24,
    SymmetricKeyAlgorithm.CAST5: 16,
    SymmetricKeyAlgorithm.BLOWFISH: 16,
    SymmetricKeyAlgorithm.AES128: 16,
    SymmetricKeyAlgorithm.AES192: 24,
    SymmetricKeyAlgorithm.AES256: 32,
    SymmetricKeyAlgorithm.TWOFISH: 32,
    SymmetricKeyAlgorithm.CAMELLIA128: 16,
    SymmetricKeyAlgorithm.CAMELLIA192: 24,
    SymmetricKeyAlgorithm.CAMELLIA256: 32,
    SymmetricKeyAlgorithm.PRIVATE10: 0,
}

_CAMELLIA_NAMES = {
    SymmetricKeyAlgorithm.CAMELLIA128: "Camellia 128",
    SymmetricKeyAlgorithm.CAMELLIA192: "Camellia 192",
    SymmetricKeyAlgorithm.CAMELLIA256: "Camellia 256",
}