"""Public API for jsonquote, JSON string-literal quoting for text and raw bytes."""

from __future__ import annotations

from .quote import (
    append_quote as append_quote,
    append_quote_bytes as append_quote_bytes,
    append_quote_bytes_escape_html as append_quote_bytes_escape_html,
    append_quote_escape_html as append_quote_escape_html,
    quote as quote,
    quote_bytes as quote_bytes,
    quote_bytes_escape_html as quote_bytes_escape_html,
    quote_escape_html as quote_escape_html,
)
from .tables import HTML_SAFE_SET as HTML_SAFE_SET, SAFE_SET as SAFE_SET

__version__ = "0.1.0"
