"""A small INI reader and writer."""

from __future__ import annotations

from typing import Any

from anttools.jsonpath import encode as _json_encode


def decode(data: bytes | str) -> dict[str, dict[str, str]]:
    """Parse INI text into sections of key/value strings.

    Lines outside a section are ignored, and only newline-terminated lines are read.
    """
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    result: dict[str, dict[str, str]] = {}
    fields: dict[str, str] = {}
    section = last_section = ""
    have_section = False
    for raw in text.split("\n")[:-1]:
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        begin, end = line.find("["), line.find("]")
        if begin >= 0 and end >= 2:
            section = line[begin + 1:end]
            if last_section == "":
                last_section = section
            elif last_section != section:
                last_section = section
                fields = {}
            have_section = True
        elif not have_section:
            continue
        if "=" in line:
            key, *rest = line.split("=")
            fields[key.strip()] = "".join(rest).strip()
            result[section] = fields
    if not have_section:
        raise ValueError("failed to parse INI file, section not found")
    return result


def encode(data: dict[str, dict[str, Any]]) -> bytes:
    """Write sections of string values as INI text."""
    lines = []
    for section, fields in data.items():
        lines.append(f"[{section}]\n")
        for key, value in fields.items():
            if not isinstance(value, str):
                raise TypeError(f"value for {key!r} is not a string")
            lines.append(f"{key}={value}\n")
    if not lines:
        raise ValueError("write data failed")
    return "".join(lines).encode("utf-8")


def to_json(data: bytes | str) -> bytes:
    """Convert INI text to JSON."""
    return _json_encode(decode(data)).encode("utf-8")