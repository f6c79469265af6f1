from __future__ import annotations

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    review: str = Field(..., min_length=1, max_length=2000)
    rating: float = Field(..., ge=1.0, le=5.0)


class ReviewOut(BaseModel):
    id: str
    review: str
    rating: float
    timestamp: int
    restaurant_id: str
