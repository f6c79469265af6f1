from __future__ import annotations

import redis

from ..store import keys


def list_cuisines(client: redis.Redis) -> list[str]:
    return sorted(client.smembers(keys.cuisines_key()))


def restaurant_names_for(client: redis.Redis, cuisine: str) -> list[str]:
    """Names of restaurants tagged with ``cuisine`` (case-insensitive)."""
    restaurant_ids = client.smembers(keys.cuisine_key(cuisine.strip().lower()))
    if not restaurant_ids:
        return []
    pipe = client.pipeline(transaction=False)
    for rid in sorted(restaurant_ids):
        pipe.hget(keys.restaurant_key(rid), "name")
    return [name for name in pipe.execute() if name]
