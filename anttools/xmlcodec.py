"""Flat XML documents mapped to and from string dictionaries."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from anttools.jsonpath import encode as _json_encode

_ESCAPES = str.maketrans({
    "&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&#34;", "'": "&#39;",
    "\t": "&#x9;", "\n": "&#xA;", "\r": "&#xD;",
})


def encode(data: dict[str, str]) -> bytes:
    """Write each entry as a child element of a ``StringMap`` root; empty gives b''."""
    if not data:
        return b""
    body = "".join(f"<{k}>{str(v).translate(_ESCAPES)}</{k}>" for k, v in data.items())
    return f"<StringMap>{body}</StringMap>".encode("utf-8")


def decode(data: bytes | str) -> dict[str, str]:
    """Read the root's child elements into a dictionary of their text."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    try:
        root = ET.fromstring(raw.lstrip())
    except ET.ParseError as exc:
        raise ValueError(str(exc)) from exc
    result = {}
    for child in root:
        text = (child.text or "") + "".join(g.tail or "" for g in child)
        result[child.tag] = text
    return result


def to_json(data: bytes | str) -> bytes:
    """Convert a flat XML document to JSON."""
    return _json_encode(decode(data)).encode("utf-8")