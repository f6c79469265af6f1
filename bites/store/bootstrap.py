"""
Create the Redis Stack structures the API depends on.

Usage:
    python -m bites.store.bootstrap
"""
from __future__ import annotations

import logging

import redis
from redis.commands.search.field import NumericField, TextField
from redis.commands.search.index_definition import IndexDefinition, IndexType
from redis.exceptions import ResponseError

from . import keys
from .config import DEFAULT_STORE_CONFIG, StoreConfig

logger = logging.getLogger(__name__)

RESTAURANT_SCHEMA = (
    TextField("name", weight=5.0),
    TextField("location"),
    NumericField("avg_stars", sortable=True),
)


def create_search_index(client: redis.Redis) -> bool:
    """Create the restaurant search index. Returns ``False`` if it already exists."""
    index = client.ft(keys.index_key())
    try:
        index.info()
        return False
    except ResponseError:
        pass

    index.create_index(
        RESTAURANT_SCHEMA,
        definition=IndexDefinition(
            prefix=[keys.restaurant_key("")],
            index_type=IndexType.HASH,
        ),
    )
    logger.info("Created search index %s", keys.index_key())
    return True


def create_bloom_filter(
    client: redis.Redis,
    config: StoreConfig = DEFAULT_STORE_CONFIG,
) -> bool:
    """Reserve the restaurant Bloom filter. Returns ``False`` if it already exists."""
    try:
        client.bf().reserve(keys.bloom_key(), config.bloom_error_rate, config.bloom_capacity)
    except ResponseError as exc:
        if "exists" in str(exc).lower():
            return False
        raise
    logger.info("Reserved Bloom filter %s", keys.bloom_key())
    return True


def bootstrap_store(
    client: redis.Redis,
    config: StoreConfig = DEFAULT_STORE_CONFIG,
) -> dict[str, bool]:
    return {
        "search_index_created": create_search_index(client),
        "bloom_filter_created": create_bloom_filter(client, config),
    }


if __name__ == "__main__":
    from .client import connect

    logging.basicConfig(level=logging.INFO)
    result = bootstrap_store(connect())
    print(f"Bootstrap complete: {result}")
