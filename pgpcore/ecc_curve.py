"""Elliptic curves known to OpenPGP and their OID encodings."""

from __future__ import annotations

from enum import Enum

from .public_key import PublicKeyAlgorithm

__all__ = ["ECCCurve", "ecc_curve_from_oid", "asn1_der_object_id_val_enc"]


class ECCCurve(Enum):
    """Supported elliptic curves."""

    CURVE25519 = "Curve25519"
    ED25519 = "Ed25519"
    P256 = "P256"
    P384 = "P384"
    P521 = "P521"
    BRAINPOOL_P256R1 = "BrainpoolP256r1"
    BRAINPOOL_P384R1 = "BrainpoolP384r1"
    BRAINPOOL_P512R1 = "BrainpoolP512r1"
    SECP256K1 = "Secp256k1"

    def standard_name(self) -> str:
        """Standard name of the curve."""
        return _NAMES[self]

    def oid_str(self) -> str:
        """Dotted OID of the curve."""
        return _OIDS[self]

    def nbits(self) -> int:
        """Nominal bit length of the curve."""
        return _NBITS[self]

    def alias(self) -> str | None:
        """Alternative name of the curve, if any."""
        return _ALIASES.get(self)

    def pubkey_algo(self) -> PublicKeyAlgorithm | None:
        """Required algorithm, or None for ECDSA/ECDH curves."""
        return _PUBKEY_ALGOS.get(self)

    def oid(self) -> bytes:
        """DER encoded OID value, first two arcs combined."""
        first, second, *rest = (int(part) for part in self.oid_str().split("."))
        arcs = [first * 40 + second, *rest]
        return b"".join(asn1_der_object_id_val_enc(arc) for arc in arcs)

    def __str__(self) -> str:
        return self.standard_name()


_NAMES = {
    ECCCurve.CURVE25519: "Curve25519",
    ECCCurve.ED25519: "Ed25519",
    ECCCurve.P256: "NIST P-256",
    ECCCurve.P384: "NIST P-384",
    ECCCurve.P521: "NIST P-521",
    ECCCurve.BRAINPOOL_P256R1: "brainpoolP256r1",
    ECCCurve.BRAINPOOL_P384R1: "brainpoolP384r1",
    ECCCurve.BRAINPOOL_P512R1: "brainpool5126r1",
    ECCCurve.SECP256K1: "secp256k1",
}

_OIDS = {
    ECCCurve.CURVE25519: "1.3.6.1.4.1.3029.1.5.1",
    ECCCurve.ED25519: "1.3.6.1.4.1.11591.15.1",
    ECCCurve.P256: "1.2.840.10045.3.1.7",
    ECCCurve.P384: "1.3.132.0.34",
    ECCCurve.P521: "1.3.132.0.35",
    ECCCurve.BRAINPOOL_P256R1: "1.3.36.3.3.2.8.1.1.7",
    ECCCurve.BRAINPOOL_P384R1: "1.3.36.3.3.2.8.1.1.11",
    ECCCurve.BRAINPOOL_P512R1: "1.3.36.3.3.2.8.1.1.13",
    ECCCurve.SECP256K1: "1.3.132.0.10",
}

_NBITS = {
    ECCCurve.CURVE25519: 255,
    ECCCurve.ED25519: 255,
    ECCCurve.P256: 256,
    ECCCurve.P384: 384,
    ECCCurve.P521: 521,
    ECCCurve.BRAINPOOL_P256R1: 256,
    ECCCurve.BRAINPOOL_P384R1: 384,
    ECCCurve.BRAINPOOL_P512R1: 512,
    ECCCurve.SECP256K1: 256,
}

_ALIASES = {
    ECCCurve.CURVE25519: "cv25519",
    ECCCurve.ED25519: "ed25519",
    ECCCurve.P256: "nistp256",
    ECCCurve.P384: "nistp384",
    ECCCurve.P521: "nistp521",
}

_PUBKEY_ALGOS = {
    ECCCurve.CURVE25519: PublicKeyAlgorithm.ECDH,
    ECCCurve.ED25519: PublicKeyAlgorithm.EDDSA,
}


def ecc_curve_from_oid(oid: bytes) -> ECCCurve | None:
    """Return the curve whose encoded OID equals ``oid``, or None."""
    oid = bytes(oid)
    return next((curve for curve in ECCCurve if curve.oid() == oid), None)


def asn1_der_object_id_val_enc(val: int) -> bytes:
    """Encode one OID arc in base-128 with continuation bits."""
    out = [val & 0x7F]
    val >>= 7
    while val > 0:
        out.insert(0, 0x80 | (val & 0x7F))
        val >>= 7
    return bytes(out)