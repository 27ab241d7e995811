"""Hex digests and CRC-32 checksums of strings."""

from __future__ import annotations

import hashlib
import zlib


def _as_bytes(s: str | bytes) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else s


def sha256(s: str | bytes) -> str:
    """Return the SHA-256 digest of ``s`` as lower-case hex."""
    return hashlib.sha256(_as_bytes(s)).hexdigest()


def md5(s: str | bytes) -> str:
    """Return the MD5 digest of ``s`` as lower-case hex."""
    return hashlib.md5(_as_bytes(s)).hexdigest()


def sha1(s: str | bytes) -> str:
    """Return the SHA-1 digest of ``s`` as lower-case hex."""
    return hashlib.sha1(_as_bytes(s)).hexdigest()


def crc32(s: str | bytes) -> int:
    """Return the IEEE CRC-32 checksum of ``s`` as an unsigned integer."""
    return zlib.crc32(_as_bytes(s)) & 0xFFFFFFFF