"""The Twofish block cipher (128-bit blocks, 128/192/256-bit keys)."""

from __future__ import annotations

from functools import reduce
from operator import xor

from .errors import InvalidKeyLength

__all__ = ["Twofish"]

_M32 = 0xFFFFFFFF
_RHO = 0x01010101


def _ror4(x: int, n: int) -> int:
    return ((x >> n) | (x << (4 - n))) & 0xF


def _make_q(t0, t1, t2, t3) -> bytes:
    def permute(x: int) -> int:
        a0, b0 = x >> 4, x & 0xF
        a1 = a0 ^ b0
        b1 = a0 ^ _ror4(b0, 1) ^ ((8 * a0) & 0xF)
        a2, b2 = t0[a1], t1[b1]
        a3 = a2 ^ b2
        b3 = a2 ^ _ror4(b2, 1) ^ ((8 * a2) & 0xF)
        return (t3[b3] << 4) | t2[a3]

    return bytes(permute(x) for x in range(256))


_Q0 = _make_q(
    (0x8, 0x1, 0x7, 0xD, 0x6, 0xF, 0x3, 0x2, 0x0, 0xB, 0x5, 0x9, 0xE, 0xC, 0xA, 0x4),
    (0xE, 0xC, 0xB, 0x8, 0x1, 0x2, 0x3, 0x5, 0xF, 0x4, 0xA, 0x6, 0x7, 0x0, 0x9, 0xD),
    (0xB, 0xA, 0x5, 0xE, 0x6, 0xD, 0x9, 0x0, 0xC, 0x8, 0xF, 0x3, 0x2, 0x4, 0x7, 0x1),
    (0xD, 0x7, 0xF, 0x4, 0x1, 0x2, 0x6, 0xE, 0x9, 0xB, 0x3, 0x0, 0x8, 0x5, 0xC, 0xA),
)
_Q1 = _make_q(
    (0x2, 0x8, 0xB, 0xD, 0xF, 0x7, 0x6, 0xE, 0x3, 0x1, 0x9, 0x4, 0x0, 0xA, 0xC, 0x5),
    (0x1, 0xE, 0x2, 0xB, 0x4, 0xC, 0x3, 0x7, 0x6, 0xD, 0xA, 0x5, 0xF, 0x9, 0x0, 0x8),
    (0x4, 0xC, 0x7, 0x5, 0x1, 0x6, 0x9, 0xA, 0x0, 0xE, 0xD, 0x8, 0x2, 0xB, 0x3, 0xF),
    (0xB, 0x9, 0x5, 0x1, 0xC, 0x3, 0xD, 0xE, 0x6, 0x4, 0x7, 0xF, 0x2, 0x0, 0x8, 0xA),
)

# Permutations applied to each byte position before xoring in key word i.
_STAGES = {
    3: (_Q1, _Q0, _Q0, _Q1),
    2: (_Q1, _Q1, _Q0, _Q0),
    1: (_Q0, _Q1, _Q0, _Q1),
    0: (_Q0, _Q0, _Q1, _Q1),
}
_FINAL = (_Q1, _Q0, _Q1, _Q0)


def _gf_mul(a: int, b: int, poly: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= poly
        b >>= 1
    return result


_MDS = (
    (0x01, 0xEF, 0x5B, 0x5B),
    (0x5B, 0xEF, 0xEF, 0x01),
    (0xEF, 0x5B, 0x01, 0xEF),
    (0xEF, 0x01, 0xEF, 0x5B),
)
_MDS_POLY = 0x169

_RS = (
    (0x01, 0xA4, 0x55, 0x87, 0x5A, 0x58, 0xDB, 0x9E),
    (0xA4, 0x56, 0x82, 0xF3, 0x1E, 0xC6, 0x68, 0xE5),
    (0x02, 0xA1, 0xFC, 0xC1, 0x47, 0xAE, 0x3D, 0x19),
    (0xA4, 0x55, 0x87, 0x5A, 0x58, 0xDB, 0x9E, 0x03),
)
_RS_POLY = 0x14D

# _MDS_COLUMNS[j][v]: the word contributed by byte v at input position j.
_MDS_COLUMNS = tuple(
    tuple(
        sum(_gf_mul(row[j], v, _MDS_POLY) << (8 * i) for i, row in enumerate(_MDS))
        for v in range(256)
    )
    for j in range(4)
)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _M32


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _M32


def _sbox_byte(position: int, y: int, words: list[int]) -> int:
    for i in reversed(range(len(words))):
        y = _STAGES[i][position][y] ^ ((words[i] >> (8 * position)) & 0xFF)
    return _FINAL[position][y]


def _h(x: int, words: list[int]) -> int:
    return reduce(
        xor,
        (
            _MDS_COLUMNS[j][_sbox_byte(j, (x >> (8 * j)) & 0xFF, words)]
            for j in range(4)
        ),
    )


def _rs_word(chunk: bytes) -> int:
    return sum(
        reduce(xor, (_gf_mul(coeff, m, _RS_POLY) for coeff, m in zip(row, chunk))) << (8 * i)
        for i, row in enumerate(_RS)
    )


def _words(block: bytes) -> list[int]:
    return [int.from_bytes(block[i:i + 4], "little") for i in range(0, len(block), 4)]


class Twofish:
    """A Twofish cipher instance bound to one key."""

    block_size = 16

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) not in (16, 24, 32):
            raise InvalidKeyLength(len(key))
        k = len(key) // 8

        m = _words(key)
        even, odd = m[0::2], m[1::2]
        s_words = [_rs_word(key[8 * i:8 * i + 8]) for i in range(k)]
        s_words.reverse()

        subkeys: list[int] = []
        for i in range(20):
            a = _h(2 * i * _RHO, even)
            b = _rol(_h((2 * i + 1) * _RHO, odd), 8)
            subkeys.append((a + b) & _M32)
            subkeys.append(_rol((a + 2 * b) & _M32, 9))
        self._k = subkeys

        self._tables = [
            [_MDS_COLUMNS[j][_sbox_byte(j, x, s_words)] for x in range(256)]
            for j in range(4)
        ]

    def _g(self, x: int) -> int:
        t0, t1, t2, t3 = self._tables
        return t0[x & 0xFF] ^ t1[(x >> 8) & 0xFF] ^ t2[(x >> 16) & 0xFF] ^ t3[x >> 24]

    def _f(self, r0: int, r1: int, rnd: int) -> tuple[int, int]:
        t0 = self._g(r0)
        t1 = self._g(_rol(r1, 8))
        f0 = (t0 + t1 + self._k[2 * rnd + 8]) & _M32
        f1 = (t0 + 2 * t1 + self._k[2 * rnd + 9]) & _M32
        return f0, f1

    @staticmethod
    def _check_block(block: bytes) -> bytes:
        block = bytes(block)
        if len(block) != 16:
            raise ValueError(f"block must be 16 bytes, got {len(block)}")
        return block

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        words = _words(self._check_block(block))
        r0, r1, r2, r3 = (w ^ k for w, k in zip(words, self._k[0:4]))
        for rnd in range(16):
            f0, f1 = self._f(r0, r1, rnd)
            r2 = _ror(r2 ^ f0, 1)
            r3 = _rol(r3, 1) ^ f1
            r0, r1, r2, r3 = r2, r3, r0, r1
        out = (w ^ k for w, k in zip((r2, r3, r0, r1), self._k[4:8]))
        return b"".join(w.to_bytes(4, "little") for w in out)

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        c0, c1, c2, c3 = (w ^ k for w, k in zip(_words(self._check_block(block)), self._k[4:8]))
        n0, n1, n2, n3 = c2, c3, c0, c1
        for rnd in reversed(range(16)):
            f0, f1 = self._f(n2, n3, rnd)
            n0, n1, n2, n3 = n2, n3, _rol(n0, 1) ^ f0, _ror(n1 ^ f1, 1)
        out = (w ^ k for w, k in zip((n0, n1, n2, n3), self._k[0:4]))
        return b"".join(w.to_bytes(4, "little") for w in out)