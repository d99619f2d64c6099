"""Single-unit decoders used by the quoting scanner.

Both decoders take a sequence and an index and return (code point, size),
where size is measured in elements of the sequence: bytes for decode_rune,
characters for decode_char. A unit that cannot be decoded comes back as
(BAD_RUNE, 1) so the caller consumes exactly one element and moves on.
"""

from __future__ import annotations

from .tables import BAD_RUNE, RUNE_SELF, UTF8_LEAD


def _is_cont(b: int) -> bool:
    return 0x80 <= b <= 0xBF


def decode_rune(s: bytes | bytearray | memoryview, i: int) -> tuple[int, int]:
    """Decode the UTF-8 sequence starting at s[i]."""
    b0 = s[i]
    if b0 < RUNE_SELF:
        return (b0, 1)
    size, lo, hi = UTF8_LEAD[b0]
    if size == 0 or i + size > len(s):
        return (BAD_RUNE, 1)
    b1 = s[i + 1]
    if b1 < lo or b1 > hi:
        return (BAD_RUNE, 1)
    if size == 2:
        return (((b0 & 0x1F) << 6) | (b1 & 0x3F), 2)
    b2 = s[i + 2]
    if not _is_cont(b2):
        return (BAD_RUNE, 1)
    if size == 3:
        return (((b0 & 0x0F) << 12) | ((b1 & 0x3F) << 6) | (b2 & 0x3F), 3)
    b3 = s[i + 3]
    if not _is_cont(b3):
        return (BAD_RUNE, 1)
    return (
        ((b0 & 0x07) << 18) | ((b1 & 0x3F) << 12) | ((b2 & 0x3F) << 6) | (b3 & 0x3F),
        4,
    )


def decode_char(s: str, i: int) -> tuple[int, int]:
    """Decode the character s[i].

    Lone surrogates have no UTF-8 form. They are also what the
    surrogateescape error handler leaves behind for undecodable bytes, so
    treating them as bad units makes text and byte input agree.
    """
    c = ord(s[i])
    if 0xD800 <= c <= 0xDFFF:
        return (BAD_RUNE, 1)
    return (c, 1)
