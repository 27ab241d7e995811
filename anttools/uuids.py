"""UUID generators for versions 1 to 5, including DCE security UUIDs."""

from __future__ import annotations

import enum
import hashlib
import os
import uuid as _uuid

UUID = _uuid.UUID


class Domain(enum.IntEnum):
    """DCE security domains."""

    PERSON = 0
    GROUP = 1
    ORG = 2


def _group_id() -> int:
    try:
        value = os.getgid()
    except AttributeError:
        value = -1
    return value & 0xFFFFFFFF


def _user_id() -> int:
    try:
        value = os.getuid()
    except AttributeError:
        value = -1
    return value & 0xFFFFFFFF


def _from_hash(digest: bytes, version: int) -> UUID:
    raw = bytearray(digest[:16])
    raw[6] = (raw[6] & 0x0F) | (version << 4)
    raw[8] = (raw[8] & 0x3F) | 0x80
    return UUID(bytes=bytes(raw))


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def _dce_security(domain: Domain, ident: int) -> UUID:
    raw = bytearray(_uuid.uuid1().bytes)
    raw[0:4] = ident.to_bytes(4, "big")
    raw[9] = int(domain)
    raw[6] = (raw[6] & 0x0F) | 0x20
    return UUID(bytes=bytes(raw))


def new() -> UUID:
    """Return a random (version 4) UUID."""
    return _uuid.uuid4()


def create() -> UUID:
    """Return a time-based (version 1) UUID."""
    return _uuid.uuid1()


def new_dce_group() -> UUID:
    """Return a DCE security (version 2) UUID for the current group id."""
    return _dce_security(Domain.GROUP, _group_id())


def new_dce_person() -> UUID:
    """Return a DCE security (version 2) UUID for the current user id."""
    return _dce_security(Domain.PERSON, _user_id())


def new_md5(space: UUID, data: bytes | str) -> UUID:
    """Return a name-based (version 3, MD5) UUID."""
    return _from_hash(hashlib.md5(space.bytes + _as_bytes(data)).digest(), 3)


def new_random() -> UUID:
    """Return a random (version 4) UUID."""
    return _uuid.uuid4()


def new_sha1(space: UUID, data: bytes | str) -> UUID:
    """Return a name-based (version 5, SHA-1) UUID."""
    return _from_hash(hashlib.sha1(space.bytes + _as_bytes(data)).digest(), 5)