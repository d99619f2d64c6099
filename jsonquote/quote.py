"""Quote text or bytes as a JSON string literal.

Every entry point funnels into _append_quote, which makes one forward pass
over the input, copies runs of safe bytes through untouched, and escapes
the rest. The output is always a complete literal including the
surrounding double quotes, and is produced for any input: malformed UTF-8
becomes the escaped replacement character rather than an error.
"""

from __future__ import annotations

from typing import Callable, Union

from .tables import BAD_RUNE, HEX, HTML_SAFE_SET, RUNE_SELF, SAFE_SET
from .utf8 import decode_char, decode_rune

ByteSource = Union[bytes, bytearray, memoryview]
Source = Union[str, bytes, bytearray, memoryview]

QUOTE: int = 0x22
BACKSLASH: int = 0x5C

# Bodies of the two-character escapes; every other unsafe ASCII byte gets
# the six-character u00XX form.
SHORT_ESCAPES: dict[int, bytes] = {
    QUOTE: b'"',
    BACKSLASH: b"\\",
    0x0A: b"n",
    0x0D: b"r",
    0x09: b"t",
}


def _byte_run(s: ByteSource, start: int, end: int) -> ByteSource:
    return s[start:end]


def _text_run(s: str, start: int, end: int) -> bytes:
    return s[start:end].encode("utf-8")


def _append_quote(
    dest: bytearray,
    s: Source,
    escape_html: bool,
    decode: Callable[[Source, int], tuple[int, int]],
    run: Callable[[Source, int, int], ByteSource],
) -> bytearray:
    """Scan s once, appending its quoted form to dest.

    decode returns (code point, size) for the non-ASCII unit at an index and
    run returns the UTF-8 bytes of a slice; together they let str and bytes
    input share this loop. s must not share memory with dest.
    """
    safe = HTML_SAFE_SET if escape_html else SAFE_SET
    is_text = isinstance(s, str)
    n = len(s)
    dest.append(QUOTE)
    start = 0
    i = 0
    while i < n:
        b = ord(s[i]) if is_text else s[i]
        if b < RUNE_SELF:
            if safe[b]:
                i += 1
                continue
            if start < i:
                dest += run(s, start, i)
            dest.append(BACKSLASH)
            body = SHORT_ESCAPES.get(b)
            if body is not None:
                dest += body
            else:
                # Control bytes, DEL, and <, >, & in HTML mode
                dest += b"u00"
                dest.append(HEX[b >> 4])
                dest.append(HEX[b & 0xF])
            i += 1
            start = i
            continue
        c, size = decode(s, i)
        if c == BAD_RUNE:
            if start < i:
                dest += run(s, start, i)
            dest += b"\\ufffd"
            i += size
            start = i
            continue
        # LINE SEPARATOR and PARAGRAPH SEPARATOR are legal in JSON but end a
        # statement when the text is evaluated as JavaScript (JSONP).
        if c == 0x2028 or c == 0x2029:
            if start < i:
                dest += run(s, start, i)
            dest += b"\\u202"
            dest.append(HEX[c & 0xF])
            i += size
            start = i
            continue
        i += size
    if start < n:
        dest += run(s, start, n)
    dest.append(QUOTE)
    return dest


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------


def _check_dest(dest: bytearray | None) -> bytearray:
    if dest is None:
        return bytearray()
    if not isinstance(dest, bytearray):
        raise TypeError("dest must be a bytearray or None, not " + type(dest).__name__)
    return dest


def _check_text(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError("expected str, not " + type(s).__name__ + "; use the *_bytes variant")
    return s


def _check_bytes(s: ByteSource, dest: bytearray) -> ByteSource:
    """Normalize s to a flat byte sequence that does not alias dest."""
    if isinstance(s, memoryview):
        # Strided views cannot be concatenated onto a bytearray
        if not s.contiguous:
            return s.tobytes()
        if s.format != "B" or s.ndim != 1:
            return s.cast("B")
        return s
    if not isinstance(s, (bytes, bytearray)):
        raise TypeError("expected a bytes-like object, not " + type(s).__name__)
    if s is dest:
        return bytes(s)
    return s


def _append_text(dest: bytearray | None, s: str, escape_html: bool) -> bytearray:
    out = _check_dest(dest)
    return _append_quote(out, _check_text(s), escape_html, decode_char, _text_run)


def _append_bytes(
    dest: bytearray | None, s: ByteSource, escape_html: bool
) -> bytearray:
    out = _check_dest(dest)
    return _append_quote(out, _check_bytes(s, out), escape_html, decode_rune, _byte_run)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def append_quote(dest: bytearray | None, s: str) -> bytearray:
    """Append the JSON string literal representing s to dest and return dest."""
    return _append_text(dest, s, False)


def append_quote_escape_html(dest: bytearray | None, s: str) -> bytearray:
    """Like append_quote, but also escapes <, > and &."""
    return _append_text(dest, s, True)


def append_quote_bytes(dest: bytearray | None, s: ByteSource) -> bytearray:
    """Append the JSON string literal representing the UTF-8 bytes s to dest and return dest."""
    return _append_bytes(dest, s, False)


def append_quote_bytes_escape_html(
    dest: bytearray | None, s: ByteSource
) -> bytearray:
    """Like append_quote_bytes, but also escapes <, > and &."""
    return _append_bytes(dest, s, True)


def quote(s: str) -> bytes:
    """Return the JSON string literal representing s."""
    return bytes(_append_text(None, s, False))


def quote_escape_html(s: str) -> bytes:
    """Like quote, but also escapes <, > and &."""
    return bytes(_append_text(None, s, True))


def quote_bytes(s: ByteSource) -> bytes:
    """Return the JSON string literal representing the UTF-8 bytes s."""
    return bytes(_append_bytes(None, s, False))


def quote_bytes_escape_html(s: ByteSource) -> bytes:
    """Like quote_bytes, but also escapes <, > and &."""
    return bytes(_append_bytes(None, s, True))
