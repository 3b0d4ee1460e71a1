# pgpcore

Low-level building blocks for working with OpenPGP data.

## What it provides

- `pgpcore.errors` – the `PgpError` exception hierarchy. Every concrete error
  carries a stable numeric code (`as_code()`), e.g. `MessageError` is 18 and
  `MdcError` is 27. `ensure(condition, message)` and
  `ensure_eq(left, right, message)` raise `MessageError` when the check fails.
- `pgpcore.public_key`, `pgpcore.aead`, `pgpcore.hash`, `pgpcore.sym` – the
  OpenPGP algorithm identifiers as `IntEnum`s (`PublicKeyAlgorithm`,
  `AeadAlgorithm`, `HashAlgorithm`, `SymmetricKeyAlgorithm`), numbered as on
  the wire. `AeadAlgorithm.default()`, `HashAlgorithm.default()` and
  `SymmetricKeyAlgorithm.default()` give `NONE`, `SHA2_256` and `AES128`.
- `pgpcore.ecc_curve` – `ECCCurve` with `standard_name()`, `oid_str()`,
  `nbits()`, `alias()`, `pubkey_algo()` and the DER-encoded `oid()`;
  `ecc_curve_from_oid` looks a curve up from its encoded OID and returns
  `None` for an unknown one.
- `pgpcore.checksum` – the two-octet OpenPGP checksum (`SimpleChecksum`,
  `calculate_simple`, `simple_to_writer`, and `simple`, which raises when the
  checksum does not match) and `calculate_sha1`.
- `pgpcore.hash` – `HashAlgorithm.digest(data)`, `digest_size()` and
  `new_hasher()`, which returns a `Hasher` with `update()` and `finish()`.
  MD5, SHA-1, RIPEMD-160, SHA2-224/256/384/512 and SHA3-256/512 are supported.
- `pgpcore.aes_kw` – AES key wrap and unwrap (RFC 3394) with 128, 192 or
  256-bit key-encryption keys; `unwrap` raises on a failed integrity check.
- `pgpcore.rsa` – RSA with PKCS#1 v1.5 padding: `encrypt` and `verify` take
  the modulus and exponent as big-endian bytes; `decrypt` and `sign` take a
  private key object with integer attributes `n` and `d`. Failures raise
  `RSAError`.
- `pgpcore.sym` – OpenPGP CFB encryption for AES-128/192/256, Triple-DES,
  CAST5, Blowfish and Twofish: `encrypt_protected` / `decrypt_protected`
  (with the modification detection code; a mismatch raises `MdcError`),
  `encrypt_with_iv` / `decrypt_with_iv`, the regular CFB variants
  `encrypt_with_iv_regular` / `decrypt_with_iv_regular`, `block_size()`,
  `key_size()` and `new_session_key()`.
- `pgpcore.twofish` – `Twofish`, a block cipher with `encrypt_block` and
  `decrypt_block` on 16-byte blocks.
- `pgpcore.normalize_lines` – `normalize(chars, line_break)` yields the
  characters with every line ending rewritten to a `LineBreak` (`LF`, `CR` or
  `CRLF`).
- `pgpcore.line_reader` – `LineReader`, a reader over a seekable binary
  stream that skips `\r` and `\n`, with `read`, `read_exact`, relative `seek`
  in terms of the filtered data, and `into_inner`.

## Installation

```
pip install pgpcore
```

## Examples

AES key wrap:

```python
from pgpcore.aes_kw import wrap, unwrap

kek = bytes.fromhex("000102030405060708090A0B0C0D0E0F")
data = bytes.fromhex("00112233445566778899AABBCCDDEEFF")
wrapped = wrap(kek, data)
assert unwrap(kek, wrapped) == data
```

Protected symmetric encryption:

```python
from pgpcore.sym import SymmetricKeyAlgorithm

alg = SymmetricKeyAlgorithm.AES128
session_key = bytes(alg.key_size())
ciphertext = alg.encrypt_protected(session_key, b"hello")
assert alg.decrypt_protected(session_key, ciphertext) == b"hello"
```

Line ending normalization:

```python
from pgpcore.normalize_lines import LineBreak, normalize

text = "".join(normalize("a\r\nb\rc\n", LineBreak.LF))
assert text == "a\nb\nc\n"
```

Curve lookup:

```python
from pgpcore.ecc_curve import ECCCurve, ecc_curve_from_oid

assert ecc_curve_from_oid(ECCCurve.P256.oid()) is ECCCurve.P256
```

Failures raise subclasses of `pgpcore.errors.PgpError`.

## What it does not do

- It does not parse or write OpenPGP packets, ASCII armor, keys or messages;
  it has no command-line tool.
- It does not generate RSA keys, and has no ECDH, EdDSA, DSA or Elgamal
  operations.
- OpenPGP CFB with resynchronization is not available:
  `SymmetricKeyAlgorithm.encrypt`, `SymmetricKeyAlgorithm.decrypt`, and the
  `*_with_iv` methods called with `resync=True`, raise `UnimplementedError`.
- IDEA and Camellia have no cipher behind them; using them raises
  `UnimplementedError`.

## Running the tests

```
pip install -e .[test]
pytest
```