"""Byte classification tables for JSON string quoting."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Safe-byte sets
# ---------------------------------------------------------------------------

# Bytes >= RUNE_SELF never stand for themselves; they start or continue a
# multi-byte UTF-8 sequence and go through the decoder instead.
RUNE_SELF: int = 0x80

HEX: bytes = b"0123456789abcdef"


def _plain_safe(b: int) -> bool:
    """Printable ASCII other than quote and backslash, plus every non-ASCII byte."""
    if b >= RUNE_SELF:
        return True
    if b < 0x20 or b > 0x7E:
        return False
    return b != 0x22 and b != 0x5C


def _html_safe(b: int) -> bool:
    if b == 0x3C or b == 0x3E or b == 0x26:
        return False
    return _plain_safe(b)


# SAFE_SET[b] is True when b may be copied verbatim into a JSON string.
SAFE_SET: tuple[bool, ...] = tuple(_plain_safe(b) for b in range(256))

# HTML_SAFE_SET[b] is True when b may be copied verbatim into a JSON string
# that will be embedded in an HTML <script> element: SAFE_SET minus <, > and &.
HTML_SAFE_SET: tuple[bool, ...] = tuple(_html_safe(b) for b in range(256))


# ---------------------------------------------------------------------------
# UTF-8 lead bytes
# ---------------------------------------------------------------------------

# Marks a unit that could not be decoded. Never a valid code point.
BAD_RUNE: int = -1


def _lead(b: int) -> tuple[int, int, int]:
    """Return (sequence length, lowest second byte, highest second byte).

    The second-byte range is narrowed for E0, ED, F0 and F4 so that overlong
    forms, UTF-16 surrogates and code points past U+10FFFF are rejected.
    Length 0 means b cannot start a sequence.
    """
    if b < RUNE_SELF:
        return (1, 0, 0)
    if 0xC2 <= b <= 0xDF:
        return (2, 0x80, 0xBF)
    if b == 0xE0:
        return (3, 0xA0, 0xBF)
    if b == 0xED:
        return (3, 0x80, 0x9F)
    if 0xE1 <= b <= 0xEF:
        return (3, 0x80, 0xBF)
    if b == 0xF0:
        return (4, 0x90, 0xBF)
    if 0xF1 <= b <= 0xF3:
        return (4, 0x80, 0xBF)
    if b == 0xF4:
        return (4, 0x80, 0x8F)
    # Continuation bytes 80-BF, overlong leads C0-C1, and F5-FF
    return (0, 0, 0)


UTF8_LEAD: tuple[tuple[int, int, int], ...] = tuple(_lead(b) for b in range(256))
