import sys
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Sorting(str, Enum):
    MAX_AVG_RATING = "MAX_AVG_RATING"
    MAX_REVIEWS = "MAX_REVIEWS"
    MIN_PRICE = "MIN_PRICE"
    MAX_PRICE = "MAX_PRICE"


class ListFilters(BaseModel):
    """Inclusion thresholds for a list query. Every comparison is strict."""

    title: str = Field(default="", description="Case-insensitive title substring")
    max_centre: int = Field(default=sys.maxsize, description="Listings must be closer than this, in km")
    min_price: int = Field(default=0, description="Listings must cost more than this")
    min_avg_rating: int = Field(default=0, description="Listings must be rated above this")
    min_reviews_count: int = Field(default=0, description="Listings must have more reviews than this")

    model_config = ConfigDict(frozen=True)
