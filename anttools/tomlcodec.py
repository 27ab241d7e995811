"""TOML encoding and decoding."""

from __future__ import annotations

import tomllib
from typing import Any

import tomli_w

from anttools.jsonpath import encode as _json_encode


def encode(value: dict[str, Any]) -> bytes:
    """Serialise a mapping as TOML."""
    return tomli_w.dumps(value).encode("utf-8")


def decode(data: bytes | str) -> dict[str, Any]:
    """Parse TOML text; raise ValueError if it is malformed."""
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    return tomllib.loads(text)


def to_json(data: bytes | str) -> bytes:
    """Convert TOML text to JSON."""
    return _json_encode(decode(data)).encode("utf-8")