"""HTML tag stripping and entity escaping helpers."""

from __future__ import annotations

import html
import re

_TAG_RE = re.compile(r"<!--.*?-->|<[/!?]?[A-Za-z][^>]*>", re.DOTALL)

_SPECIAL = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
}
_SPECIAL_TABLE = str.maketrans(_SPECIAL)
_SPECIAL_REVERSE = {escaped: char for char, escaped in _SPECIAL.items()}
_SPECIAL_REVERSE_RE = re.compile("|".join(re.escape(e) for e in _SPECIAL_REVERSE))


def strip_tags(s: str) -> str:
    """Remove HTML tags and comments, keeping only the text."""
    return _TAG_RE.sub("", s)


def entities(s: str) -> str:
    """Escape ``& < > " '`` as HTML entities."""
    return s.translate(_SPECIAL_TABLE)


def entities_decode(s: str) -> str:
    """Decode every HTML entity in ``s``."""
    return html.unescape(s)


def special_chars(s: str) -> str:
    """Escape the five HTML special characters."""
    return s.translate(_SPECIAL_TABLE)


def special_chars_decode(s: str) -> str:
    """Turn the five special-character entities back into characters."""
    return _SPECIAL_REVERSE_RE.sub(lambda m: _SPECIAL_REVERSE[m.group(0)], s)