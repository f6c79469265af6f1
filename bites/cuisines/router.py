from __future__ import annotations

import redis
from fastapi import APIRouter, Depends

from ..responses import success_response
from ..store.client import get_client
from .service import list_cuisines, restaurant_names_for

router = APIRouter(prefix="/cuisines", tags=["cuisines"])


@router.get("")
def read_cuisines(client: redis.Redis = Depends(get_client)) -> dict:
    return success_response(list_cuisines(client))


@router.get("/{cuisine}")
def read_cuisine(cuisine: str, client: redis.Redis = Depends(get_client)) -> dict:
    return success_response(restaurant_names_for(client, cuisine))
