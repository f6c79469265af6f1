from __future__ import annotations

import re
import secrets
from typing import Any

import redis
from redis.commands.search.query import Query

from ..store import keys
from .models import RestaurantCreate, RestaurantDetails, RestaurantOut, SearchResults

# Characters the search query parser treats as syntax
_QUERY_SPECIAL = re.compile(r"([,.<>{}\[\]\"':;!@#$%^&*()\-+=~|/\\])")


def new_id() -> str:
    return secrets.token_urlsafe(12)


def page_window(page: int, limit: int) -> tuple[int, int]:
    """Return the inclusive ``(start, end)`` range for a 1-based page."""
    start = (page - 1) * limit
    return start, start + limit - 1


def _fetch_hashes(client: redis.Redis, hash_keys: list[str]) -> list[dict[str, str]]:
    if not hash_keys:
        return []
    pipe = client.pipeline(transaction=False)
    for key in hash_keys:
        pipe.hgetall(key)
    return [h for h in pipe.execute() if h]


def list_by_rating(client: redis.Redis, page: int = 1, limit: int = 10) -> list[RestaurantOut]:
    start, end = page_window(page, limit)
    ids = client.zrange(keys.restaurants_by_rating_key(), start, end, desc=True)
    hashes = _fetch_hashes(client, [keys.restaurant_key(rid) for rid in ids])
    return [RestaurantOut(**h) for h in hashes]


def create_restaurant(client: redis.Redis, data: RestaurantCreate) -> RestaurantOut | None:
    """
    Store a new restaurant and index it by cuisine and rating.

    Returns ``None`` when the Bloom filter has already seen the
    name/location pair.
    """
    bloom_item = f"{data.name}:{data.location}"
    if client.bf().exists(keys.bloom_key(), bloom_item):
        return None

    restaurant_id = new_id()
    record: dict[str, Any] = {
        "id": restaurant_id,
        "name": data.name,
        "location": data.location,
        "avg_stars": 0,
        "total_stars": 0,
        "view_count": 0,
    }

    pipe = client.pipeline(transaction=True)
    for cuisine in data.cuisines:
        pipe.sadd(keys.cuisines_key(), cuisine)
        pipe.sadd(keys.cuisine_key(cuisine), restaurant_id)
        pipe.sadd(keys.restaurant_cuisines_key(restaurant_id), cuisine)
    pipe.hset(keys.restaurant_key(restaurant_id), mapping=record)
    pipe.zadd(keys.restaurants_by_rating_key(), {restaurant_id: 0})
    pipe.execute()

    client.bf().add(keys.bloom_key(), bloom_item)

    return RestaurantOut(**record, cuisines=sorted(data.cuisines))


def get_restaurant(client: redis.Redis, restaurant_id: str) -> RestaurantOut:
    """Fetch a restaurant with its cuisines, counting the view."""
    key = keys.restaurant_key(restaurant_id)
    pipe = client.pipeline(transaction=False)
    pipe.hincrby(key, "view_count", 1)
    pipe.hgetall(key)
    pipe.smembers(keys.restaurant_cuisines_key(restaurant_id))
    _, restaurant, cuisines = pipe.execute()
    return RestaurantOut(**restaurant, cuisines=sorted(cuisines))


def build_name_query(text: str) -> str:
    terms = [_QUERY_SPECIAL.sub(r"\\\1", t) for t in text.split()]
    if not terms:
        raise ValueError("search text has no terms")
    return f"@name:({' '.join(terms)})"


def search_restaurants(
    client: redis.Redis,
    text: str,
    limit: int = 10,
) -> SearchResults:
    query = Query(build_name_query(text)).paging(0, limit)
    result = client.ft(keys.index_key()).search(query)

    restaurants: list[RestaurantOut] = []
    for doc in result.docs:
        fields = {k: v for k, v in vars(doc).items() if k not in ("id", "payload")}
        restaurants.append(RestaurantOut(**{**fields, "id": keys.id_from_key(doc.id)}))

    return SearchResults(total=result.total, restaurants=restaurants)


def set_details(client: redis.Redis, restaurant_id: str, details: RestaurantDetails) -> None:
    client.json().set(keys.restaurant_details_key(restaurant_id), "$", details.model_dump())


def get_details(client: redis.Redis, restaurant_id: str) -> dict | None:
    return client.json().get(keys.restaurant_details_key(restaurant_id))
