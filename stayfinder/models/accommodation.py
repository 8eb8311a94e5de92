from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Demand(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class RoomType(str, Enum):
    DOUBLE = "DOUBLE"
    SINGLE = "SINGLE"
    FAMILY = "FAMILY"


class AccommodationType(str, Enum):
    HOTEL = "HOTEL"
    PRIVATE = "PRIVATE"
    HOSTEL = "HOSTEL"
    HOUSE = "HOUSE"


class Facility(str, Enum):
    NON_SMOKING = "NON_SMOKING"
    DISABLED_GUESTS_SERVICE = "DISABLED_GUESTS_SERVICE"
    PARKING = "PARKING"
    FREE_WIFI = "FREE_WIFI"
    PETS_ALLOWED = "PETS_ALLOWED"
    BREAKFAST = "BREAKFAST"


class Cover(BaseModel):
    url: str
    tag: str

    model_config = ConfigDict(frozen=True)


class AccommodationLocation(BaseModel):
    address: str
    centre: float = Field(..., ge=1.0, le=10.0, description="Distance to the city centre in km")

    model_config = ConfigDict(frozen=True)


class Rating(BaseModel):
    average: float = Field(..., ge=1.0, le=10.0)
    reviews: int = Field(..., ge=0, le=10000)

    model_config = ConfigDict(frozen=True)


class Insight(BaseModel):
    text: str
    tag: Optional[str] = None
    highlights: bool = False

    model_config = ConfigDict(frozen=True)


class Price(BaseModel):
    amount: int = Field(..., ge=100, le=10000)
    currency: str
    breakfast: bool = False

    model_config = ConfigDict(frozen=True)


class Accommodation(BaseModel):
    id: str
    title: str
    images: List[str] = Field(..., min_length=3, max_length=30)
    cover: Cover
    location: AccommodationLocation
    rating: Rating
    insights: List[Insight] = Field(default_factory=list, max_length=25)
    demand: Demand
    room: RoomType
    price: Price
    type: AccommodationType
    description: str = ""
    facilities: List[Facility] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
