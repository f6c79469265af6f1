from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import DEFAULT_WEATHER_CONFIG, WeatherConfig

logger = logging.getLogger(__name__)


def fetch_current_weather(
    lat: float,
    lng: float,
    config: WeatherConfig = DEFAULT_WEATHER_CONFIG,
) -> dict[str, Any] | None:
    """
    Fetch current weather for a coordinate pair.

    Returns ``None`` on any failure (disabled, missing key, timeout,
    non-200 status, bad JSON).
    """
    if not config.enabled or not config.api_key:
        return None

    try:
        response = httpx.get(
            config.base_url,
            params={
                "lat": lat,
                "lon": lng,
                "units": config.units,
                "appid": config.api_key,
            },
            timeout=config.timeout,
        )
        if response.status_code != 200:
            logger.warning("Weather API returned status %s", response.status_code)
            return None
        return response.json()

    except (httpx.HTTPError, ValueError):
        logger.warning("Weather API call failed", exc_info=True)
        return None
