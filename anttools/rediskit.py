"""A thin convenience client over a single, cluster or sentinel-managed Redis."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any

import redis
from redis.cluster import ClusterNode, RedisCluster
from redis.sentinel import Sentinel


def _split_addr(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"missing port in address {addr!r}")
    return host or "localhost", int(port)


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return str(value)


class RedisClient:
    """Wraps a redis-py client with string, list, set and sorted-set helpers."""

    def __init__(self, client: Any, *, cluster: bool = False) -> None:
        self.client = client
        self.cluster = cluster

    def __enter__(self) -> RedisClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @classmethod
    def connect(cls, addr: str, password: str = "", db: int = 0) -> RedisClient:
        """Connect to a single server at ``host:port`` and check it answers."""
        host, port = _split_addr(addr)
        client = redis.Redis(
            host=host, port=port, password=password or None, db=db, decode_responses=True
        )
        client.ping()
        return cls(client)

    @classmethod
    def cluster(cls, addrs: list[str], password: str = "") -> RedisClient:
        """Connect to a cluster through its seed nodes and check it answers."""
        nodes = [ClusterNode(*_split_addr(addr)) for addr in addrs]
        client = RedisCluster(
            startup_nodes=nodes, password=password or None, decode_responses=True
        )
        client.ping()
        return cls(client, cluster=True)

    @classmethod
    def failover(
        cls, sentinel_addrs: list[str], master_name: str, password: str = "", db: int = 0
    ) -> RedisClient:
        """Connect to the master that the sentinels name and check it answers."""
        sentinel = Sentinel(
            [_split_addr(addr) for addr in sentinel_addrs],
            password=password or None,
            db=db,
        )
        client = sentinel.master_for(master_name, decode_responses=True)
        client.ping()
        return cls(client)

    def close(self) -> None:
        """Close the connection."""
        self.client.close()

    def ping(self) -> str:
        """Return ``"PONG"`` when the server answers."""
        if not self.client.ping():
            raise redis.ConnectionError("no reply to PING")
        return "PONG"

    def ttl(self, key: str) -> timedelta:
        """Remaining time to live; -1 s means no expiry, -2 s a missing key."""
        return timedelta(seconds=int(self.client.ttl(key)))

    # strings

    def get(self, key: str) -> str:
        """The value of ``key``, or an empty string if it is missing or unreadable."""
        try:
            value = self.client.get(key)
        except redis.RedisError:
            return ""
        return "" if value is None else _text(value)

    def set(self, key: str, value: Any, expiration: int = 0) -> None:
        """Store ``value``; a positive ``expiration`` is in milliseconds."""
        if expiration > 0:
            self.client.set(key, value, px=expiration)
        else:
            self.client.set(key, value)

    def set_nx(self, key: str, value: Any, expiration: int = 0) -> bool:
        """Store ``value`` only if ``key`` is absent; return whether it was stored."""
        if expiration > 0:
            result = self.client.set(key, value, nx=True, px=expiration)
        else:
            result = self.client.set(key, value, nx=True)
        return bool(result)

    # lists

    def get_list_length(self, key: str) -> int:
        return int(self.client.llen(key))

    def get_list(self, key: str) -> list[str]:
        """Every element of the list at ``key``."""
        length = self.get_list_length(key)
        return [_text(v) for v in self.client.lrange(key, 0, length - 1)]

    def get_list_index(self, key: str, index: int) -> str:
        """The element at ``index``; raise IndexError if there is none."""
        value = self.client.lindex(key, index)
        if value is None:
            raise IndexError(f"no element at index {index} of {key!r}")
        return _text(value)

    def set_list(self, key: str, index: int, value: Any) -> None:
        self.client.lset(key, index, value)

    def remove_list(self, key: str, value: Any, count: int = 0) -> int:
        """Remove up to ``count`` occurrences of ``value`` (0 removes all)."""
        return int(self.client.lrem(key, count, value))

    def remove_list_left(self, key: str) -> str | None:
        """Remove and return the head element."""
        value = self.client.lpop(key)
        return None if value is None else _text(value)

    def remove_list_right(self, key: str) -> str | None:
        """Remove and return the tail element."""
        value = self.client.rpop(key)
        return None if value is None else _text(value)

    def push_list(self, key: str, value: Any) -> int:
        """Append ``value`` to the tail; return the new length."""
        return int(self.client.rpush(key, value))

    # sets

    def add_set(self, key: str, *args: Any) -> int:
        """Add members; return how many were new."""
        return int(self.client.sadd(key, *args))

    def get_set_length(self, key: str) -> int:
        return int(self.client.scard(key))

    def get_set(self, key: str) -> list[str]:
        """The members, sorted."""
        return sorted(_text(v) for v in self.client.smembers(key))

    def remove_set(self, key: str, *args: Any) -> int:
        return int(self.client.srem(key, *args))

    # sorted sets

    def add_zset(self, key: str, mapping: Mapping[str, float]) -> int:
        """Add members with scores, leaving existing members untouched."""
        return int(self.client.zadd(key, dict(mapping), nx=True))

    def get_zset_length(self, key: str) -> int:
        return int(self.client.zcard(key))

    def get_zset_member(self, key: str, member: str) -> float:
        """The score of ``member``; raise KeyError if it is absent."""
        score = self.client.zscore(key, member)
        if score is None:
            raise KeyError(member)
        return float(score)

    def get_zset_score(self, key: str, member: str) -> int:
        """The rank of ``member`` by ascending score; raise KeyError if absent."""
        rank = self.client.zrank(key, member)
        if rank is None:
            raise KeyError(member)
        return int(rank)

    def get_zset_range(self, key: str, start: int, stop: int) -> list[str]:
        return [_text(v) for v in self.client.zrange(key, start, stop)]

    def get_zset_rev_range(self, key: str, start: int, stop: int) -> list[str]:
        """Members in the rank range, highest score first."""
        return [_text(v) for v in self.client.zrevrange(key, start, stop)]

    def get_zset_range_by_score(
        self, key: str, min_score: float | str, max_score: float | str
    ) -> list[str]:
        """Members whose score lies between the bounds (``"-inf"``, ``"(1"`` allowed)."""
        return [_text(v) for v in self.client.zrangebyscore(key, min_score, max_score)]

    def remove_zset(self, key: str, *args: Any) -> int:
        return int(self.client.zrem(key, *args))