"""A reader that hides line breaks in the underlying stream."""

from __future__ import annotations

import io
from typing import BinaryIO

__all__ = ["LineReader"]

_LINE_BREAKS = frozenset(b"\r\n")


class LineReader:
    """Reads bytes from a seekable stream, skipping every ``\\r`` and ``\\n``.

    Positions of line breaks seen so far are remembered in ``lines`` so that
    relative seeks can be expressed in terms of the filtered data.
    """

    def __init__(self, inner: BinaryIO) -> None:
        self._inner = inner
        self.lines: list[int] = []
        self._last_stored_pos = 0

    def into_inner(self) -> BinaryIO:
        """Return the wrapped stream."""
        return self._inner

    def _record_breaks(self, chunk: bytes) -> bytes:
        start = self._inner.tell() - len(chunk)
        kept = bytearray()
        for index, byte in enumerate(chunk):
            if byte not in _LINE_BREAKS:
                kept.append(byte)
                continue
            position = start + index
            # The stream may be revisited, so only store breaks not seen before.
            if position > self._last_stored_pos:
                self.lines.append(position)
                self._last_stored_pos = position
        return bytes(kept)

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes with line breaks removed.

        Returns an empty bytes object only at the end of the stream.
        """
        chunk = self._inner.read(size)
        while chunk:
            kept = self._record_breaks(chunk)
            if kept:
                return kept
            # only line breaks were read, try again
            chunk = self._inner.read(size)
        return b""

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` filtered bytes; raise EOFError if the stream ends first."""
        parts = bytearray()
        while len(parts) < size:
            chunk = self.read(size - len(parts))
            if not chunk:
                raise EOFError(f"expected {size} bytes, got {len(parts)}")
            parts.extend(chunk)
        return bytes(parts)

    def seek(self, offset: int, whence: int = io.SEEK_CUR) -> int:
        """Move ``offset`` filtered bytes relative to the current position.

        Only relative seeks are supported. Returns the new position in the
        underlying stream.
        """
        if whence != io.SEEK_CUR:
            raise io.UnsupportedOperation("only relative seeks are supported")

        current = self._inner.tell()
        target = current + offset
        if target < 0:
            raise ValueError("new position is negative")

        if offset < 0:
            for line_break in reversed(self.lines):
                if line_break < target:
                    break
                if line_break < current:
                    target -= 1
        else:
            for line_break in self.lines:
                if line_break > target:
                    break
                if line_break > current:
                    target += 1

        return self._inner.seek(target, io.SEEK_SET)