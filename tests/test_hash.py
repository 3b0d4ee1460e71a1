import hashlib

import pytest

from pgpcore.errors import UnimplementedError, UnsupportedError
from pgpcore.hash import HashAlgorithm

# wire value -> hashlib name
HASHLIB_NAMES = {
    1: "md5",
    2: "sha1",
    8: "sha256",
    9: "sha384",
    10: "sha512",
    11: "sha224",
    12: "sha3_256",
    14: "sha3_512",
}

ALL_REAL = list(HASHLIB_NAMES) + [3]


@pytest.mark.parametrize("value", list(HASHLIB_NAMES))
def test_digest_matches_reference(value):
    data = b"some message to hash"
    assert HashAlgorithm(value).digest(data) == hashlib.new(HASHLIB_NAMES[value], data).digest()


def test_sha1_known_value():
    assert HashAlgorithm.SHA1.digest(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_ripemd160_empty():
    assert (
        HashAlgorithm.RIPEMD160.digest(b"").hex()
        == "9c1185a5c5e9fc54612808977ee8f548b2258d31"
    )


@pytest.mark.parametrize("value", ALL_REAL)
def test_incremental_hasher_matches_digest(value):
    hasher = HashAlgorithm(value).new_hasher()
    hasher.update(b"hello ")
    hasher.update(b"world")
    assert hasher.finish() == HashAlgorithm(value).digest(b"hello world")


@pytest.mark.parametrize("value", ALL_REAL)
def test_digest_size_matches_output(value):
    assert HashAlgorithm(value).digest_size() == len(HashAlgorithm(value).digest(b"x"))


def test_digest_size_of_none_is_zero():
    assert HashAlgorithm.NONE.digest_size() == 0
    assert HashAlgorithm.PRIVATE10.digest_size() == 0


def test_default_is_sha256():
    assert HashAlgorithm.default() is HashAlgorithm.SHA2_256


def test_wire_values():
    assert HashAlgorithm(8) is HashAlgorithm.SHA2_256
    assert HashAlgorithm.SHA3_512 == 14


def test_digest_none_is_unimplemented():
    with pytest.raises(UnimplementedError):
        HashAlgorithm.NONE.digest(b"data")


def test_digest_private10_is_unsupported():
    with pytest.raises(UnsupportedError):
        HashAlgorithm.PRIVATE10.digest(b"data")


@pytest.mark.parametrize("alg", [HashAlgorithm.NONE, HashAlgorithm.PRIVATE10])
def test_new_hasher_unavailable(alg):
    with pytest.raises(UnimplementedError):
        alg.new_hasher()