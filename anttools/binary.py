"""Little-endian binary packing of fixed-size numbers."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from typing import Any

_KINDS = {
    "bool": "?",
    "int8": "b",
    "uint8": "B",
    "byte": "B",
    "int16": "h",
    "uint16": "H",
    "int32": "i",
    "uint32": "I",
    "int64": "q",
    "uint64": "Q",
    "float32": "f",
    "float64": "d",
}


def _code(kind: str) -> str:
    code = _KINDS.get(kind, kind)
    if not code or code[0] in "@=<>!":
        raise ValueError(f"invalid kind {kind!r}")
    return code


def encode(value: Any, kind: str) -> bytes:
    """Pack ``value`` little-endian as ``kind``.

    ``kind`` is a type name such as ``"uint64"`` or a struct format code.
    A sequence value packs each element as ``kind``.
    """
    code = _code(kind)
    try:
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return struct.pack(f"<{len(value)}{code}", *value)
        return struct.pack(f"<{code}", value)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def decode(data: bytes, kind: str) -> Any:
    """Unpack a little-endian ``kind`` from the start of ``data``.

    Returns a single value, or a tuple when ``kind`` holds several fields.
    """
    try:
        fmt = f"<{_code(kind)}"
        size = struct.calcsize(fmt)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc
    if len(data) < size:
        raise ValueError("unexpected EOF")
    values = struct.unpack_from(fmt, data)
    return values[0] if len(values) == 1 else values