"""Base64url segment codec and canonical JSON helpers."""

from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any

from .errors import InvalidPayload, MalformedEncoding

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*")

# Escaped inside JSON strings so output matches HTML-safe encoders byte for byte.
_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}
_HTML_RE = re.compile("[<>&\u2028\u2029]")


def encode(data: bytes) -> str:
    """Return unpadded base64url text for ``data``."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(segment: str) -> bytes:
    """Decode unpadded base64url text, rejecting anything ``encode`` cannot emit."""
    if not isinstance(segment, str) or not _SEGMENT_RE.fullmatch(segment):
        raise MalformedEncoding("segment contains characters outside the base64url alphabet")
    if len(segment) % 4 == 1:
        raise MalformedEncoding("segment has an invalid base64url length")
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise MalformedEncoding(str(exc)) from exc


def canonical_json(value: Any, *, sort_keys: bool = False) -> bytes:
    """Return compact UTF-8 JSON for ``value``."""
    try:
        text = json.dumps(value, sort_keys=sort_keys, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise InvalidPayload(f"value is not JSON serializable: {exc}") from exc
    # These characters can only occur inside string literals.
    return _HTML_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text).encode("utf-8")


def load_json(data: bytes) -> Any:
    """Parse UTF-8 JSON bytes."""
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidPayload(f"segment is not valid JSON: {exc}") from exc
