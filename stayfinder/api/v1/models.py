from typing import List
from pydantic import BaseModel, ConfigDict, Field

from stayfinder.models.accommodation import (
    AccommodationType, Cover, Demand, Facility, Insight, RoomType
)


# Response Models
class ListItemLocation(BaseModel):
    address: str
    centre: str = Field(..., description="Distance to the city centre with unit, e.g. '2.5 km'")


class RatingResponse(BaseModel):
    average: str
    reviews: str


class PriceResponse(BaseModel):
    amount: str
    currency: str
    breakfast: bool


class AccommodationListItem(BaseModel):
    id: str
    title: str
    cover: Cover
    location: ListItemLocation
    rating: RatingResponse
    insights: List[Insight]
    demand: Demand
    room: RoomType
    price: PriceResponse


class Suggestion(BaseModel):
    label: str


class AccommodationDetails(BaseModel):
    id: str
    title: str
    images: List[str]
    address: str
    rating: RatingResponse
    price: PriceResponse
    type: AccommodationType
    description: str
    facilities: List[Facility]


class AccommodationListResponse(BaseModel):
    items: List[AccommodationListItem] = Field(..., alias="list")

    model_config = ConfigDict(populate_by_name=True)


class SuggestionsResponse(BaseModel):
    suggestions: List[Suggestion]


class AccommodationDetailsResponse(BaseModel):
    data: AccommodationDetails


class ErrorResponse(BaseModel):
    detail: str
