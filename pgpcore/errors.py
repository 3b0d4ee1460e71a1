"""Error types raised throughout the package, plus small assertion helpers."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PgpError",
    "ParsingError",
    "InvalidInput",
    "IncompleteError",
    "InvalidArmorWrappers",
    "InvalidChecksum",
    "Base64DecodeError",
    "RequestedSizeTooLarge",
    "NoMatchingPacket",
    "TooManyPackets",
    "RSAError",
    "IOError_",
    "MissingPackets",
    "InvalidKeyLength",
    "BlockModeError",
    "MissingKey",
    "CfbInvalidKeyIvLength",
    "UnimplementedError",
    "UnsupportedError",
    "MessageError",
    "PacketError",
    "PacketIncomplete",
    "UnpadError",
    "PadError",
    "Utf8Error",
    "ParseIntError",
    "InvalidPacketContent",
    "Ed25519SignatureError",
    "MdcError",
    "MPI_TOO_LONG",
    "ensure",
    "ensure_eq",
]

# Custom parser error code for an MPI whose declared length exceeds the input.
MPI_TOO_LONG = 1000


class PgpError(Exception):
    """Base class of every error this package raises.

    Each concrete subclass carries a stable numeric code and a message
    template; ``{detail}`` in the template is filled from the constructor
    argument.
    """

    code: int | None = None
    template: str = "pgp error"

    def __init__(self, detail: Any = None) -> None:
        self.detail = detail
        if "{detail" in self.template:
            message = self.template.format(detail=detail)
        else:
            message = self.template
        super().__init__(message)

    def as_code(self) -> int | None:
        """Return the numeric code identifying this kind of error."""
        return self.code


class ParsingError(PgpError):
    code = 0
    template = "failed to parse {detail!r}"


class InvalidInput(PgpError):
    code = 1
    template = "invalid input"


class IncompleteError(PgpError):
    code = 2
    template = "incomplete input: {detail!r}"


class InvalidArmorWrappers(PgpError):
    code = 3
    template = "invalid armor wrappers"


class InvalidChecksum(PgpError):
    code = 4
    template = "invalid crc24 checksum"


class Base64DecodeError(PgpError):
    code = 5
    template = "failed to decode base64 {detail!r}"


class RequestedSizeTooLarge(PgpError):
    code = 6
    template = "requested data size is larger than the packet body"


class NoMatchingPacket(PgpError):
    code = 7
    template = "no matching packet found"


class TooManyPackets(PgpError):
    code = 8
    template = "more than one matching packet was found"


class RSAError(PgpError):
    code = 9
    template = "rsa error: {detail!r}"


class IOError_(PgpError):
    code = 10
    template = "io error: {detail!r}"


class MissingPackets(PgpError):
    code = 11
    template = "missing packets"


class InvalidKeyLength(PgpError):
    code = 12
    template = "invalid key length"


class BlockModeError(PgpError):
    code = 13
    template = "block mode error"


class MissingKey(PgpError):
    code = 14
    template = "missing key"


class CfbInvalidKeyIvLength(PgpError):
    code = 15
    template = "cfb: invalid key iv length"


class UnimplementedError(PgpError):
    code = 16
    template = "Not yet implemented: {detail!r}"


class UnsupportedError(PgpError):
    code = 17
    template = "Unsupported: {detail!r}"


class MessageError(PgpError):
    code = 18
    template = "{detail}"


class PacketError(PgpError):
    code = 19
    template = "Invalid Packet {detail!r}"


class PacketIncomplete(PgpError):
    code = 20
    template = "Incomplete Packet"


class UnpadError(PgpError):
    code = 21
    template = "Unpadding failed"


class PadError(PgpError):
    code = 22
    template = "Padding failed"


class Utf8Error(PgpError):
    code = 23
    template = "Utf8 {detail!r}"


class ParseIntError(PgpError):
    code = 24
    template = "ParseInt {detail!r}"


class InvalidPacketContent(PgpError):
    code = 25
    template = "Invalid Packet Content {detail!r}"


class Ed25519SignatureError(PgpError):
    code = 26
    template = "Ed25519 {detail!r}"


class MdcError(PgpError):
    code = 27
    template = "Modification Detection Code error"


def ensure(condition: Any, message: str) -> None:
    """Raise :class:`MessageError` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise MessageError(message)


def ensure_eq(left: Any, right: Any, message: str | None = None) -> None:
    """Raise :class:`MessageError` unless ``left == right``."""
    if left == right:
        return
    text = f"assertion failed: `(left == right)`\n  left: `{left!r}`,\n right: `{right!r}`"
    if message:
        text = f"{text}: {message}"
    raise MessageError(text)