from __future__ import annotations

import time

import redis

from ..restaurants.service import new_id, page_window
from ..store import keys
from .models import ReviewCreate, ReviewOut


def _average(total_stars: float, review_count: int) -> float:
    if review_count <= 0:
        return 0.0
    return round(total_stars / review_count, 1)


def _set_average(client: redis.Redis, restaurant_id: str, average: float) -> None:
    """Keep the rating sorted set and the hash field in step."""
    pipe = client.pipeline(transaction=True)
    pipe.zadd(keys.restaurants_by_rating_key(), {restaurant_id: average})
    pipe.hset(keys.restaurant_key(restaurant_id), "avg_stars", average)
    pipe.execute()


def add_review(client: redis.Redis, restaurant_id: str, data: ReviewCreate) -> ReviewOut:
    review = ReviewOut(
        id=new_id(),
        review=data.review,
        rating=data.rating,
        timestamp=int(time.time() * 1000),
        restaurant_id=restaurant_id,
    )

    pipe = client.pipeline(transaction=True)
    pipe.lpush(keys.reviews_key(restaurant_id), review.id)
    pipe.hset(keys.review_details_key(review.id), mapping=review.model_dump())
    pipe.hincrbyfloat(keys.restaurant_key(restaurant_id), "total_stars", data.rating)
    review_count, _, total_stars = pipe.execute()

    _set_average(client, restaurant_id, _average(float(total_stars), int(review_count)))
    return review


def list_reviews(
    client: redis.Redis,
    restaurant_id: str,
    page: int = 1,
    limit: int = 10,
) -> list[ReviewOut]:
    start, end = page_window(page, limit)
    review_ids = client.lrange(keys.reviews_key(restaurant_id), start, end)
    if not review_ids:
        return []
    pipe = client.pipeline(transaction=False)
    for review_id in review_ids:
        pipe.hgetall(keys.review_details_key(review_id))
    return [ReviewOut(**r) for r in pipe.execute() if r]


def delete_review(client: redis.Redis, restaurant_id: str, review_id: str) -> bool:
    """
    Remove a review and rebalance the restaurant's average.

    Returns ``False`` when the review belongs to another restaurant, or when
    neither the list entry nor the review hash existed. A list entry whose
    hash is already gone is still cleared from this restaurant's list.
    """
    details_key = keys.review_details_key(review_id)
    rating, owner = client.hmget(details_key, "rating", "restaurant_id")
    if owner is not None and owner != restaurant_id:
        return False

    pipe = client.pipeline(transaction=True)
    pipe.lrem(keys.reviews_key(restaurant_id), 0, review_id)
    pipe.delete(details_key)
    removed, deleted = pipe.execute()

    if not removed and not deleted:
        return False

    if removed and rating is not None:
        pipe = client.pipeline(transaction=True)
        pipe.hincrbyfloat(keys.restaurant_key(restaurant_id), "total_stars", -float(rating))
        pipe.llen(keys.reviews_key(restaurant_id))
        total_stars, review_count = pipe.execute()
        _set_average(client, restaurant_id, _average(float(total_stars), int(review_count)))

    return True
