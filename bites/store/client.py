from __future__ import annotations

import redis

from .config import DEFAULT_STORE_CONFIG, StoreConfig

_client: redis.Redis | None = None


def connect(config: StoreConfig = DEFAULT_STORE_CONFIG) -> redis.Redis:
    return redis.Redis.from_url(config.redis_url, decode_responses=True)


def get_client() -> redis.Redis:
    """Return the shared Redis client, creating it on first call.

    Request handlers receive it through ``Depends(get_client)`` so tests can
    swap it out with ``app.dependency_overrides``.
    """
    global _client
    if _client is None:
        _client = connect()
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
