import pytest

from pgpcore.public_key import PublicKeyAlgorithm


def test_wire_values():
    assert PublicKeyAlgorithm(1) is PublicKeyAlgorithm.RSA
    assert PublicKeyAlgorithm(18) is PublicKeyAlgorithm.ECDH
    assert PublicKeyAlgorithm(22) is PublicKeyAlgorithm.EDDSA


def test_private_range_contiguous():
    privates = [PublicKeyAlgorithm(value) for value in range(100, 111)]
    assert all(alg.name.startswith("PRIVATE") for alg in privates)
    assert len(set(privates)) == 11


def test_roundtrip_values():
    for alg in PublicKeyAlgorithm:
        assert PublicKeyAlgorithm(int(alg)) is alg


def test_unknown_value():
    with pytest.raises(ValueError):
        PublicKeyAlgorithm(4)