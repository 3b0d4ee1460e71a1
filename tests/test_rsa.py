import hashlib

import pytest
from Crypto.Cipher import PKCS1_v1_5
from Crypto.Hash import SHA256
from Crypto.PublicKey import RSA
from Crypto.Signature import pkcs1_15

from pgpcore import rsa
from pgpcore.errors import MessageError, RSAError
from pgpcore.hash import HashAlgorithm


@pytest.fixture(scope="module")
def key():
    return RSA.generate(1024)


def _pub(key):
    k = (key.n.bit_length() + 7) // 8
    return key.n.to_bytes(k, "big"), key.e.to_bytes(3, "big")


def test_encrypt_decrypt_roundtrip(key):
    n, e = _pub(key)
    [ct] = rsa.encrypt(n, e, b"session key material")
    assert len(ct) == len(n)
    assert rsa.decrypt(key, [ct], b"") == b"session key material"


def test_encrypt_with_custom_rng(key):
    n, e = _pub(key)
    [ct] = rsa.encrypt(n, e, b"abc", rng=lambda size: b"\x00\x07" * size)
    assert rsa.decrypt(key, [ct], b"") == b"abc"


def test_decrypt_reference_ciphertext(key):
    ct = PKCS1_v1_5.new(key.public_key()).encrypt(b"from elsewhere")
    assert rsa.decrypt(key, [ct], b"") == b"from elsewhere"


def test_decrypt_needs_exactly_one_mpi(key):
    with pytest.raises(MessageError):
        rsa.decrypt(key, [b"\x01", b"\x02"], b"")


def test_encrypt_message_too_long(key):
    n, e = _pub(key)
    with pytest.raises(RSAError):
        rsa.encrypt(n, e, b"x" * len(n))


def test_encrypt_rejects_small_exponent(key):
    n, _ = _pub(key)
    with pytest.raises(RSAError):
        rsa.encrypt(n, b"\x01", b"abc")


def test_sign_matches_reference(key):
    digest = hashlib.sha256(b"signed data").digest()
    [sig] = rsa.sign(key, HashAlgorithm.SHA2_256, digest)
    reference = pkcs1_15.new(key).sign(SHA256.new(b"signed data"))
    assert sig == reference


def test_sign_verify_roundtrip(key):
    n, e = _pub(key)
    digest = hashlib.sha1(b"payload").digest()
    [sig] = rsa.sign(key, HashAlgorithm.SHA1, digest)
    assert rsa.verify(n, e, HashAlgorithm.SHA1, digest, sig) is None


def test_verify_accepts_stripped_leading_zeros(key):
    n, e = _pub(key)
    digest = hashlib.sha256(b"payload").digest()
    [sig] = rsa.sign(key, HashAlgorithm.SHA2_256, digest)
    assert rsa.verify(n, e, HashAlgorithm.SHA2_256, digest, sig.lstrip(b"\x00")) is None


def test_verify_rejects_tampered_digest(key):
    n, e = _pub(key)
    digest = hashlib.sha256(b"payload").digest()
    [sig] = rsa.sign(key, HashAlgorithm.SHA2_256, digest)
    other = hashlib.sha256(b"other").digest()
    with pytest.raises(RSAError):
        rsa.verify(n, e, HashAlgorithm.SHA2_256, other, sig)


def test_verify_rejects_wrong_hash_algorithm(key):
    n, e = _pub(key)
    digest = hashlib.sha256(b"payload").digest()
    [sig] = rsa.sign(key, HashAlgorithm.SHA2_256, digest)
    with pytest.raises(RSAError):
        rsa.verify(n, e, HashAlgorithm.SHA3_256, digest, sig)


def test_sign_rejects_unhashed_input(key):
    with pytest.raises(RSAError):
        rsa.sign(key, HashAlgorithm.SHA2_256, b"not a digest")


def test_raw_signature_without_hash_prefix(key):
    n, e = _pub(key)
    [sig] = rsa.sign(key, HashAlgorithm.NONE, b"raw bytes")
    assert rsa.verify(n, e, HashAlgorithm.NONE, b"raw bytes", sig) is None
    with pytest.raises(RSAError):
        rsa.verify(n, e, HashAlgorithm.NONE, b"raw bytez", sig)