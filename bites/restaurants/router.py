from __future__ import annotations

import redis
from fastapi import APIRouter, Depends, HTTPException, Query

from ..responses import success_response
from ..store.client import get_client
from ..weather.service import (
    InvalidCoordinatesError,
    MissingCoordinatesError,
    WeatherUnavailableError,
    get_restaurant_weather,
)
from .dependencies import require_restaurant
from .models import RestaurantCreate, RestaurantDetails
from .service import (
    create_restaurant,
    get_details,
    get_restaurant,
    list_by_rating,
    search_restaurants,
    set_details,
)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.get("")
def list_restaurants(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=50),
    client: redis.Redis = Depends(get_client),
) -> dict:
    restaurants = list_by_rating(client, page, limit)
    return success_response([r.model_dump() for r in restaurants])


@router.post("")
def add_restaurant(
    body: RestaurantCreate,
    client: redis.Redis = Depends(get_client),
) -> dict:
    restaurant = create_restaurant(client, body)
    if restaurant is None:
        raise HTTPException(status_code=409, detail="Restaurant already exists")
    return success_response(restaurant.model_dump(), "Added new restaurant")


# Declared before "/{restaurant_id}" so "search" is not taken as an id
@router.get("/search")
def search(
    q: str = Query(..., min_length=1),
    limit: int = Query(default=10, ge=1, le=50),
    client: redis.Redis = Depends(get_client),
) -> dict:
    if not q.strip():
        raise HTTPException(status_code=422, detail="Search query must not be blank")
    results = search_restaurants(client, q, limit)
    return success_response(results.model_dump())


@router.post("/{restaurant_id}/details")
def add_details(
    body: RestaurantDetails,
    restaurant_id: str = Depends(require_restaurant),
    client: redis.Redis = Depends(get_client),
) -> dict:
    set_details(client, restaurant_id, body)
    return success_response({}, "Restaurant details added")


@router.get("/{restaurant_id}/details")
def read_details(
    restaurant_id: str = Depends(require_restaurant),
    client: redis.Redis = Depends(get_client),
) -> dict:
    details = get_details(client, restaurant_id)
    if details is None:
        raise HTTPException(status_code=404, detail="Restaurant details not found")
    return success_response(details)


@router.get("/{restaurant_id}/weather")
def read_weather(
    restaurant_id: str = Depends(require_restaurant),
    client: redis.Redis = Depends(get_client),
) -> dict:
    try:
        weather = get_restaurant_weather(client, restaurant_id)
    except MissingCoordinatesError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InvalidCoordinatesError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except WeatherUnavailableError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return success_response(weather)


@router.get("/{restaurant_id}")
def read_restaurant(
    restaurant_id: str = Depends(require_restaurant),
    client: redis.Redis = Depends(get_client),
) -> dict:
    return success_response(get_restaurant(client, restaurant_id).model_dump())
