import pytest

from pgpcore.ecc_curve import ECCCurve, asn1_der_object_id_val_enc, ecc_curve_from_oid
from pgpcore.public_key import PublicKeyAlgorithm


def test_ecc_curve_to_oid():
    assert ECCCurve.P256.oid() == bytes([0x2A, 0x86, 0x48, 0xCE, 0x3D, 0x03, 0x01, 0x07])
    assert ECCCurve.P384.oid() == bytes([0x2B, 0x81, 0x04, 0x00, 0x22])


def test_ecc_curve_from_oid():
    one = bytes([0x2A, 0x86, 0x48, 0xCE, 0x3D, 0x03, 0x01, 0x07])
    assert ecc_curve_from_oid(one) is ECCCurve.P256
    assert ecc_curve_from_oid(bytes([1, 2, 3])) is None


def test_asn1_der_object_id_val_enc():
    assert asn1_der_object_id_val_enc(840) == bytes([0x86, 0x48])
    assert asn1_der_object_id_val_enc(113_549) == bytes([0x86, 0xF7, 0x0D])


@pytest.mark.parametrize("curve", list(ECCCurve))
def test_oid_roundtrip(curve):
    assert ecc_curve_from_oid(curve.oid()) is curve


@pytest.mark.parametrize("curve", list(ECCCurve))
def test_str_is_standard_name(curve):
    assert str(ecc_curve_from_oid(curve.oid())) == curve.standard_name()


def test_str_pinned():
    p256 = ecc_curve_from_oid(bytes([0x2A, 0x86, 0x48, 0xCE, 0x3D, 0x03, 0x01, 0x07]))
    assert p256.__str__() == "NIST P-256"
    ed25519 = ecc_curve_from_oid(ECCCurve.ED25519.oid())
    assert ed25519.__str__() == "Ed25519"


def test_names_and_aliases():
    assert ECCCurve.P256.standard_name() == "NIST P-256"
    assert ECCCurve.CURVE25519.alias() == "cv25519"
    assert ECCCurve.SECP256K1.alias() is None
    assert ECCCurve.P521.nbits() == 521
    assert ECCCurve.ED25519.oid_str() == "1.3.6.1.4.1.11591.15.1"


def test_pubkey_algo():
    assert ECCCurve.CURVE25519.pubkey_algo() is PublicKeyAlgorithm.ECDH
    assert ECCCurve.ED25519.pubkey_algo() is PublicKeyAlgorithm.EDDSA
    assert ECCCurve.P384.pubkey_algo() is None