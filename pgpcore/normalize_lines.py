"""Line ending normalization over character streams."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator

__all__ = ["LineBreak", "normalize"]


class LineBreak(Enum):
    """Line ending styles."""

    LF = "\n"
    CR = "\r"
    CRLF = "\r\n"


_END = object()


class _Peekable:
    def __init__(self, chars: Iterable[str]) -> None:
        self._it = iter(chars)
        self._head = next(self._it, _END)

    def peek(self) -> object:
        return self._head

    def take(self) -> object:
        current = self._head
        if current is not _END:
            self._head = next(self._it, _END)
        return current


def normalize(chars: Iterable[str], line_break: LineBreak) -> Iterator[str]:
    """Yield ``chars`` with every line ending replaced by ``line_break``.

    >>> "".join(normalize("a\\r\\nb\\rc", LineBreak.LF))
    'a\\nb\\nc'
    """
    source = _Peekable(chars)
    prev_was_cr = False

    while True:
        head = source.peek()
        out: object

        if head == "\n":
            if line_break is LineBreak.LF:
                if prev_was_cr:
                    # the \n was already emitted for the preceding \r
                    source.take()
                out = source.take()
            elif line_break is LineBreak.CR:
                source.take()
                if prev_was_cr:
                    prev_was_cr = False
                    continue
                out = "\r"
            elif prev_was_cr:
                prev_was_cr = False
                out = source.take()
            else:
                prev_was_cr = True
                out = "\r"
        elif head == "\r":
            if line_break is LineBreak.LF:
                prev_was_cr = True
                source.take()
                out = "\n"
            elif line_break is LineBreak.CR:
                prev_was_cr = True
                out = source.take()
            elif prev_was_cr:
                prev_was_cr = False
                out = "\n"
            else:
                prev_was_cr = True
                out = source.take()
        elif line_break is LineBreak.CRLF and prev_was_cr:
            prev_was_cr = False
            out = "\n"
        else:
            prev_was_cr = False
            out = source.take()

        if out is _END:
            return
        yield out  # type: ignore[misc]