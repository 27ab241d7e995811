"""Standard base64 encoding with padding."""

from __future__ import annotations

import base64


def encode(data: bytes | str) -> str:
    """Return the standard base64 encoding of ``data``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def decode(s: str) -> str:
    """Decode standard base64 text; raise ValueError if it is malformed."""
    cleaned = s.replace("\r", "").replace("\n", "")
    return base64.b64decode(cleaned, validate=True).decode("utf-8", "replace")