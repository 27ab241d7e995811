"""Translations loaded from per-language TOML, YAML or JSON files."""

from __future__ import annotations

import json
import re
import tomllib
from pathlib import Path
from typing import Any

import yaml

from anttools.jsonpath import Json, _to_string

_VERB = re.compile(r"%([-+# 0]*\d*(?:\.\d+)?)([a-zA-Z%])")


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    remaining = list(args)

    def repl(match: re.Match[str]) -> str:
        flags, verb = match.groups()
        if verb == "%":
            return "%"
        if not remaining:
            return f"%!{verb}(MISSING)"
        arg = remaining.pop(0)
        if verb in "vs":
            return ("%" + flags + "s") % _to_string(arg)
        if verb in "dxXobc":
            py = {"b": "s"}.get(verb, verb)
            value = bin(int(arg))[2:] if verb == "b" else int(arg) if verb != "c" else int(arg)
            return ("%" + flags + py) % value
        if verb in "feEgG":
            return ("%" + flags + verb) % float(arg)
        if verb == "q":
            return json.dumps(_to_string(arg), ensure_ascii=False)
        if verb == "t":
            return _to_string(bool(arg))
        return f"%!{verb}({_to_string(arg)})"

    out = _VERB.sub(repl, fmt)
    if remaining:
        extra = ", ".join(f"{type(a).__name__}={_to_string(a)}" for a in remaining)
        out += f"%!(EXTRA {extra})"
    return out


def _load(path: Path, kind: str) -> dict[str, Any]:
    if kind == "toml":
        return tomllib.loads(path.read_text(encoding="utf-8"))
    if kind in ("yml", "yaml"):
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path} does not hold a mapping")
        return data
    if kind == "json":
        return json.loads(path.read_bytes())
    return {}


class I18n:
    """Messages for one language, read from ``<path>/<language>.<type>``."""

    def __init__(self, path: str | Path, language: str, type: str = "toml") -> None:
        self.path = str(path)
        self.language = language
        self.type = type
        self.data = _load(Path(self.path) / f"{language}.{type}", type)

    def t(self, key: str, *args: Any) -> str:
        """Translate ``key`` (dots walk nested tables), formatting with ``args``."""
        if "." in key:
            message = Json(self.data).get(key).string()
        else:
            message = _to_string(self.data[key]) if key in self.data else key
        if args:
            message = _sprintf(message, args)
        return message or key

    def t_option(self, key: str, language: str, *args: Any) -> str:
        """Translate ``key`` using the TOML messages of another language."""
        other = I18n(self.path, language)
        message = _to_string(other.data[key]) if key in other.data else key
        return _sprintf(message, args) if args else message