"""Decoding JSON and walking into it along dotted paths."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_TRUE_WORDS = {"1", "t", "T", "true", "TRUE", "True"}


def encode(data: Any) -> str:
    """Serialise ``data`` as compact JSON with sorted keys and HTML-safe escapes."""
    text = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def decode(data: bytes | str) -> Json:
    """Parse JSON text; raise ValueError if it is malformed."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return Json(json.loads(data.strip("\n").strip(" ")))


def open_file(path: str | Path) -> bytes:
    """Return the raw contents of a JSON file."""
    return Path(path).read_bytes()


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return encode(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return str(value)


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    try:
        return float(value if isinstance(value, (int, float)) else str(value).strip())
    except ValueError:
        return 0.0


def _to_int(value: Any) -> int:
    if isinstance(value, int):
        return int(value)
    return int(_to_float(value))


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value in _TRUE_WORDS
    return False


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip().startswith("["):
        return json.loads(value)
    return [value]


@dataclass
class Json:
    """A cursor into decoded JSON data; conversions consume the current value."""

    child: Any = None

    def next(self, name: Any) -> Json:
        """Return a cursor one level down, by key for objects or index for arrays."""
        child = self.child
        if isinstance(child, dict):
            return Json(child.get(_to_string(name)))
        if isinstance(child, list):
            return Json(child[int(_to_string(name))])
        return Json(child)

    def get(self, name: str) -> Json:
        """Move along a dot-separated path and return this cursor."""
        for part in name.split("."):
            self.child = self.next(part).child
        return self

    @property
    def value(self) -> Any:
        """The current value, left in place."""
        return self.child

    def _take(self) -> Any:
        value, self.child = self.child, None
        return value

    def string(self) -> str:
        return _to_string(self._take())

    def int(self) -> int:
        return _to_int(self._take())

    def float(self) -> float:
        return _to_float(self._take())

    def bool(self) -> bool:
        return _to_bool(self._take())

    def map(self) -> dict[str, Any] | None:
        value = self._take()
        if value is not None and not isinstance(value, dict):
            raise TypeError(f"value is not an object: {value!r}")
        return value

    def array(self) -> list[Any] | None:
        value = self._take()
        if value is not None and not isinstance(value, list):
            raise TypeError(f"value is not an array: {value!r}")
        return value

    def strings(self) -> list[str]:
        return [_to_string(v) for v in _as_list(self._take())]

    def ints(self) -> list[int]:
        return [_to_int(v) for v in _as_list(self._take())]