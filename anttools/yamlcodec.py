"""YAML encoding and decoding."""

from __future__ import annotations

from typing import Any

import yaml

from anttools.jsonpath import encode as _json_encode


def encode(value: Any) -> bytes:
    """Serialise ``value`` as YAML with sorted keys."""
    return yaml.safe_dump(value, allow_unicode=True, sort_keys=True).encode("utf-8")


def decode(data: bytes | str) -> dict[str, Any] | None:
    """Parse a YAML mapping; an empty document gives None."""
    try:
        result = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ValueError(str(exc)) from exc
    if result is not None and not isinstance(result, dict):
        raise ValueError("YAML document is not a mapping")
    return result


def to_json(data: bytes | str) -> bytes:
    """Convert a YAML mapping to JSON."""
    return _json_encode(decode(data)).encode("utf-8")