from __future__ import annotations

from .config import DEFAULT_STORE_CONFIG


def get_key_name(*parts: str) -> str:
    """Join ``parts`` under the configured key prefix, e.g. ``bites:restaurant:42``."""
    return ":".join((DEFAULT_STORE_CONFIG.key_prefix, *parts))


def restaurant_key(restaurant_id: str) -> str:
    return get_key_name("restaurant", restaurant_id)


def reviews_key(restaurant_id: str) -> str:
    return get_key_name("reviews", restaurant_id)


def review_details_key(review_id: str) -> str:
    return get_key_name("review_details", review_id)


def cuisines_key() -> str:
    return get_key_name("cuisines")


def cuisine_key(name: str) -> str:
    return get_key_name("cuisine", name)


def restaurant_cuisines_key(restaurant_id: str) -> str:
    return get_key_name("restaurant_cuisines", restaurant_id)


def restaurants_by_rating_key() -> str:
    return get_key_name("restaurants_by_rating")


def weather_key(restaurant_id: str) -> str:
    return get_key_name("weather", restaurant_id)


def restaurant_details_key(restaurant_id: str) -> str:
    return get_key_name("restaurant_details", restaurant_id)


def index_key() -> str:
    return get_key_name("idx", "restaurants")


def bloom_key() -> str:
    return get_key_name("bloom_restaurants")


def id_from_key(key: str) -> str:
    """Return the trailing id segment of a namespaced key."""
    return key.rsplit(":", 1)[-1]
