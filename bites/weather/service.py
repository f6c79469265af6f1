from __future__ import annotations

import json
import logging
from typing import Any

import redis

from ..store import keys
from .client import fetch_current_weather
from .config import DEFAULT_WEATHER_CONFIG, WeatherConfig

logger = logging.getLogger(__name__)


class MissingCoordinatesError(LookupError):
    pass


class InvalidCoordinatesError(ValueError):
    pass


class WeatherUnavailableError(RuntimeError):
    pass


def parse_coordinates(location: str) -> tuple[float, float]:
    """Split a ``"lng,lat"`` string into ``(lng, lat)`` floats."""
    parts = [p.strip() for p in location.split(",")]
    if len(parts) != 2:
        raise InvalidCoordinatesError(f"Location {location!r} is not a 'lng,lat' pair")
    try:
        lng, lat = float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise InvalidCoordinatesError(f"Location {location!r} is not a 'lng,lat' pair") from exc
    if not (-180.0 <= lng <= 180.0 and -90.0 <= lat <= 90.0):
        raise InvalidCoordinatesError(f"Location {location!r} is out of range")
    return lng, lat


def get_restaurant_weather(
    client: redis.Redis,
    restaurant_id: str,
    config: WeatherConfig = DEFAULT_WEATHER_CONFIG,
) -> dict[str, Any]:
    cache_key = keys.weather_key(restaurant_id)
    cached = client.get(cache_key)
    if cached:
        logger.info("Weather cache hit for restaurant %s", restaurant_id)
        return json.loads(cached)

    location = client.hget(keys.restaurant_key(restaurant_id), "location")
    if not location:
        raise MissingCoordinatesError("Coordinates have not been found")

    lng, lat = parse_coordinates(location)
    weather = fetch_current_weather(lat, lng, config)
    if weather is None:
        raise WeatherUnavailableError("Couldn't fetch weather info")

    client.set(cache_key, json.dumps(weather), ex=config.cache_ttl)
    return weather
