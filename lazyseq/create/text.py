"""
String sources by UTF-16 code unit.

Code points above U+FFFF are split into a surrogate pair and exposed as
two separate units, the way UTF-16 based runtimes index strings.
"""

from __future__ import annotations

from kungfu import Ok

from .._types import Step
from ..core import Cursor, LazySeq, Seq, done

_BMP_LIMIT = 0xFFFF
_SUPPLEMENTARY_BASE = 0x10000
_HIGH_SURROGATE = 0xD800
_LOW_SURROGATE = 0xDC00


class _CodeUnitCursor(Cursor[int]):
    __slots__ = ("_text", "_position", "_pending")

    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text
        self._position = 0
        self._pending: int | None = None

    def _advance(self) -> Step[int]:
        if self._pending is not None:
            low, self._pending = self._pending, None
            return Ok(low)
        if self._position >= len(self._text):
            return done()

        point = ord(self._text[self._position])
        self._position += 1
        if point <= _BMP_LIMIT:
            return Ok(point)

        offset = point - _SUPPLEMENTARY_BASE
        self._pending = _LOW_SURROGATE + (offset & 0x3FF)
        return Ok(_HIGH_SURROGATE + (offset >> 10))


def from_char_codes(text: str) -> Seq[int]:
    """
    UTF-16 code units of `text` as ints.

    Example:
        list(from_char_codes("a😀"))  # [97, 55357, 56832]
    """
    return LazySeq(lambda: _CodeUnitCursor(text))


def from_chars(text: str) -> Seq[str]:
    """UTF-16 code units of `text` as one-character strings (lone surrogates included)."""
    from ..transform.map import map

    return map(from_char_codes(text), chr)


__all__ = ("from_char_codes", "from_chars")
