from __future__ import annotations

import redis
from fastapi import APIRouter, Depends, HTTPException, Query

from ..responses import success_response
from ..restaurants.dependencies import require_restaurant
from ..store.client import get_client
from .models import ReviewCreate
from .service import add_review, delete_review, list_reviews

router = APIRouter(prefix="/restaurants/{restaurant_id}/reviews", tags=["reviews"])


@router.post("")
def create_review(
    body: ReviewCreate,
    restaurant_id: str = Depends(require_restaurant),
    client: redis.Redis = Depends(get_client),
) -> dict:
    review = add_review(client, restaurant_id, body)
    return success_response(review.model_dump(), "Review added")


@router.get("")
def read_reviews(
    restaurant_id: str = Depends(require_restaurant),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=50),
    client: redis.Redis = Depends(get_client),
) -> dict:
    reviews = list_reviews(client, restaurant_id, page, limit)
    return success_response([r.model_dump() for r in reviews])


@router.delete("/{review_id}")
def remove_review(
    review_id: str,
    restaurant_id: str = Depends(require_restaurant),
    client: redis.Redis = Depends(get_client),
) -> dict:
    if not delete_review(client, restaurant_id, review_id):
        raise HTTPException(status_code=404, detail="Review not found")
    return success_response(review_id, "Review deleted")
