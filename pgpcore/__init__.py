"""Core building blocks for OpenPGP: algorithm identifiers, hashing, checksums, AES key wrap, RSA, CFB encryption and line handling."""

__version__ = "0.1.0"