"""Column value types for JSON documents and nullable timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

TIME_LAYOUT = "%Y-%m-%d %H:%M:%S"
_ZERO_TIME = datetime(1, 1, 1)


@dataclass(frozen=True)
class JsonValue:
    """Raw JSON text stored in a database column; ``None`` stands for SQL NULL."""

    raw: bytes | None = None

    def is_null(self) -> bool:
        """True when the value is empty or the JSON literal ``null``."""
        return not self.raw or self.raw == b"null"

    def to_db(self) -> str | None:
        """The value to store: the JSON text, or None for a null value."""
        if self.is_null():
            return None
        return self.raw.decode("utf-8")

    @classmethod
    def from_db(cls, value: Any) -> JsonValue:
        """Build from a column value (bytes, str or None)."""
        if value is None:
            return cls(None)
        if isinstance(value, str):
            return cls(value.encode("utf-8"))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(bytes(value))
        raise TypeError("Invalid Scan Source")

    def to_json(self) -> bytes:
        """The JSON text, ``null`` when no value is held."""
        if self.raw is None:
            return b"null"
        return self.raw

    @classmethod
    def from_json(cls, data: bytes | str) -> JsonValue:
        """Keep ``data`` as the raw JSON text."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return cls(bytes(data))


def _format(moment: datetime) -> str:
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


@dataclass(frozen=True)
class NullableTime:
    """A timestamp written as ``YYYY-MM-DD HH:MM:SS``; no time means zero."""

    time: datetime | None = None

    @property
    def is_zero(self) -> bool:
        """True when no time is set."""
        if self.time is None:
            return True
        return self.time.replace(tzinfo=None, microsecond=0) == _ZERO_TIME

    def to_json(self) -> bytes:
        """A quoted timestamp, or an empty JSON string for the zero time."""
        if self.is_zero:
            return b'""'
        return f'"{_format(self.time)}"'.encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes | str) -> NullableTime:
        """Parse a quoted timestamp; an empty string gives the zero time."""
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        text = text.replace('"', "")
        if not text:
            return cls(None)
        return cls(datetime.strptime(text, TIME_LAYOUT))

    def to_db(self) -> str | None:
        """The formatted timestamp, or None for the zero time."""
        if self.is_zero:
            return None
        return _format(self.time)

    @classmethod
    def from_db(cls, value: Any) -> NullableTime:
        """Build from a datetime column value."""
        if isinstance(value, datetime):
            return cls(value)
        raise TypeError(f"can not convert {value!r} to timestamp")