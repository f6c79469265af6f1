from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RestaurantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, description='Coordinates as "lng,lat"')
    cuisines: list[str] = Field(..., min_length=1)

    @field_validator("name", "location")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("cuisines")
    @classmethod
    def _normalise_cuisines(cls, value: list[str]) -> list[str]:
        cleaned: list[str] = []
        for c in value:
            c = c.strip().lower()
            if c and c not in cleaned:
                cleaned.append(c)
        if not cleaned:
            raise ValueError("at least one cuisine is required")
        return cleaned


class RestaurantOut(BaseModel):
    id: str
    name: str
    location: str
    avg_stars: float = 0.0
    total_stars: float = 0.0
    view_count: int = 0
    cuisines: list[str] = Field(default_factory=list)


class DetailsLink(BaseModel):
    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class DetailsContact(BaseModel):
    phone: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RestaurantDetails(BaseModel):
    links: list[DetailsLink] = Field(default_factory=list)
    contact: DetailsContact


class SearchResults(BaseModel):
    total: int
    restaurants: list[RestaurantOut]
