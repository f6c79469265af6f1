from __future__ import annotations

import redis
from fastapi import Depends, HTTPException

from ..store import keys
from ..store.client import get_client


def require_restaurant(
    restaurant_id: str,
    client: redis.Redis = Depends(get_client),
) -> str:
    """Raise 404 unless the restaurant hash exists. Returns the id."""
    if not client.exists(keys.restaurant_key(restaurant_id)):
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant_id
