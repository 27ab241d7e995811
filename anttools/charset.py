"""Decoding of text in a named character set."""

from __future__ import annotations

import codecs

_CHARSET_ALIASES = {
    "HZGB2312": "HZ-GB-2312",
    "GB2312": "HZ-GB-2312",
    "hzgb2312": "HZ-GB-2312",
    "gb2312": "HZ-GB-2312",
}

_CODEC_NAMES = {
    "hz-gb-2312": "hz",
    "windows-874": "cp874",
    "macintosh": "mac_roman",
}


def _decode_utf16(data: bytes) -> str:
    if data.startswith(b"\xfe\xff"):
        return data[2:].decode("utf-16-be", "replace")
    if data.startswith(b"\xff\xfe"):
        return data[2:].decode("utf-16-le", "replace")
    return data.decode("utf-16-be", "replace")


def _codec_for(charset: str) -> str:
    name = _CHARSET_ALIASES.get(charset, charset)
    codec = _CODEC_NAMES.get(name.lower(), name)
    info = codecs.lookup(codec)
    b"".decode(info.name)  # raises LookupError for non-text codecs
    return info.name


def decode(data: bytes | str, charset: str) -> str:
    """Decode ``data`` from ``charset``; raise LookupError for an unknown charset.

    A str argument is taken as its UTF-8 bytes.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else data
    if _CHARSET_ALIASES.get(charset, charset).lower() == "utf-16":
        return _decode_utf16(raw)
    return raw.decode(_codec_for(charset), "replace")