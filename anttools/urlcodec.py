"""URL escaping, query building and URL component parsing."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Mapping
from urllib.parse import quote_plus, unquote_to_bytes, urlsplit


class URLComponent(enum.IntFlag):
    """Bits selecting which parts :func:`parse_url` returns."""

    SCHEME = 1
    HOST = 2
    PORT = 4
    USER = 8
    PASS = 16
    PATH = 32
    QUERY = 64
    FRAGMENT = 128
    ALL = 255


_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unescape(s: str, plus_is_space: bool) -> str:
    bad = _BAD_ESCAPE.search(s)
    if bad:
        raise ValueError(f"invalid URL escape {s[bad.start():bad.start() + 3]!r}")
    if plus_is_space:
        s = s.replace("+", " ")
    return unquote_to_bytes(s).decode("utf-8", "replace")


def encode(s: str) -> str:
    """Escape ``s`` for use inside a URL query."""
    return quote_plus(s, safe="")


def decode(s: str) -> str:
    """Reverse :func:`encode`; raise ValueError on a malformed escape."""
    return _unescape(s, plus_is_space=True)


def raw_encode(s: str) -> str:
    """Escape ``s`` with spaces as ``%20``."""
    return encode(s).replace("+", "%20")


def raw_decode(s: str) -> str:
    """Reverse :func:`raw_encode`."""
    return decode(s.replace("%20", "+"))


def build_query(query: Mapping[str, str | Iterable[str]]) -> str:
    """Build a query string, keys sorted, each value escaped."""
    pairs = []
    for key in sorted(query):
        values = query[key]
        if isinstance(values, str):
            values = [values]
        pairs.extend(f"{encode(key)}={encode(value)}" for value in values)
    return "&".join(pairs)


def _valid_optional_port(port: str) -> bool:
    if port == "":
        return True
    return port[0] == ":" and all(c in "0123456789" for c in port[1:])


def _split_host_port(hostport: str) -> tuple[str, str]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise ValueError("missing ']' in host")
        if not _valid_optional_port(hostport[end + 1:]):
            raise ValueError(f"invalid port {hostport[end + 1:]!r} after host")
    else:
        colon = hostport.rfind(":")
        if colon != -1 and not _valid_optional_port(hostport[colon:]):
            raise ValueError(f"invalid port {hostport[colon:]!r} after host")

    host, port = hostport, ""
    colon = hostport.rfind(":")
    if colon != -1 and _valid_optional_port(hostport[colon:]):
        host, port = hostport[:colon], hostport[colon + 1:]
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def parse_url(url: str, component: int = -1) -> dict[str, str]:
    """Return the parts of ``url`` selected by the ``component`` bit mask (-1 for all)."""
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in url):
        raise ValueError("invalid control character in URL")
    if url.startswith(":"):
        raise ValueError("missing protocol scheme")
    parts = urlsplit(url)

    userinfo, has_user, hostport = parts.netloc.rpartition("@")
    decoded_userinfo = ("", "")
    if has_user:
        first, _, second = userinfo.partition(":")
        decoded_userinfo = (
            _unescape(first, plus_is_space=False),
            _unescape(second, plus_is_space=False),
        )
    host, port = _split_host_port(hostport)
    path = _unescape(parts.path, plus_is_space=False)
    fragment = _unescape(parts.fragment, plus_is_space=False)

    mask = URLComponent.ALL if component == -1 else URLComponent(component & URLComponent.ALL)
    values = {
        URLComponent.SCHEME: ("scheme", parts.scheme),
        URLComponent.HOST: ("host", host),
        URLComponent.PORT: ("port", port),
        URLComponent.USER: ("user", decoded_userinfo[0]),
        URLComponent.PASS: ("pass", decoded_userinfo[1]),
        URLComponent.PATH: ("path", path),
        URLComponent.QUERY: ("query", parts.query),
        URLComponent.FRAGMENT: ("fragment", fragment),
    }
    return {name: value for flag, (name, value) in values.items() if mask & flag}