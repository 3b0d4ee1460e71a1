import random

import pytest

from pgpcore.errors import InvalidKeyLength
from pgpcore.twofish import Twofish


def test_known_vector_128_zero_key():
    cipher = Twofish(bytes(16))
    ct = cipher.encrypt_block(bytes(16))
    assert ct.hex().upper() == "9F589F5CF6122C32B6BFEC2F2AE8C35A"
    assert cipher.decrypt_block(ct) == bytes(16)


def test_known_vector_256():
    key = bytes.fromhex(
        "0123456789ABCDEFFEDCBA987654321000112233445566778899AABBCCDDEEFF"
    )
    cipher = Twofish(key)
    ct = cipher.encrypt_block(bytes(16))
    assert ct.hex().upper() == "37527BE0052334B89F0CFCCAE87CFA20"
    assert cipher.decrypt_block(ct) == bytes(16)


@pytest.mark.parametrize("key_len", [16, 24, 32])
def test_round_trip_random_blocks(key_len):
    rng = random.Random(key_len)
    for _ in range(20):
        key = bytes(rng.getrandbits(8) for _ in range(key_len))
        block = bytes(rng.getrandbits(8) for _ in range(16))
        cipher = Twofish(key)
        ct = cipher.encrypt_block(block)
        assert len(ct) == 16
        assert ct != block
        assert cipher.decrypt_block(ct) == block


def test_different_keys_give_different_ciphertexts():
    block = bytes(range(16))
    first = Twofish(bytes(32)).encrypt_block(block)
    second = Twofish(bytes([1]) + bytes(31)).encrypt_block(block)
    assert first != second


def test_encryption_is_deterministic():
    key = bytes(range(24))
    block = bytes(range(16, 32))
    first = Twofish(key).encrypt_block(block)
    second = Twofish(key).encrypt_block(block)
    assert first == second
    assert len(first) == 16
    assert Twofish(key).decrypt_block(second) == block


@pytest.mark.parametrize("key_len", [0, 8, 15, 17, 33])
def test_invalid_key_length(key_len):
    with pytest.raises(InvalidKeyLength):
        Twofish(bytes(key_len))


@pytest.mark.parametrize("size", [0, 15, 17])
def test_invalid_block_length(size):
    cipher = Twofish(bytes(16))
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(size))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(size))