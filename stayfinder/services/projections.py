from typing import Union

from stayfinder.api.v1.models import (
    AccommodationDetails, AccommodationListItem, ListItemLocation,
    PriceResponse, RatingResponse, Suggestion
)
from stayfinder.models.accommodation import Accommodation, Price, Rating

DISTANCE_UNIT = "km"


def format_number(value: Union[int, float]) -> str:
    """Render a number for display, dropping a zero fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _rating(rating: Rating) -> RatingResponse:
    return RatingResponse(
        average=format_number(rating.average),
        reviews=format_number(rating.reviews),
    )


def _price(price: Price) -> PriceResponse:
    return PriceResponse(
        amount=format_number(price.amount),
        currency=str(price.currency),
        breakfast=price.breakfast,
    )


def to_list_item(accommodation: Accommodation) -> AccommodationListItem:
    return AccommodationListItem(
        id=accommodation.id,
        title=accommodation.title,
        cover=accommodation.cover,
        location=ListItemLocation(
            address=accommodation.location.address,
            centre=f"{format_number(accommodation.location.centre)} {DISTANCE_UNIT}",
        ),
        rating=_rating(accommodation.rating),
        insights=accommodation.insights,
        demand=accommodation.demand,
        room=accommodation.room,
        price=_price(accommodation.price),
    )


def to_suggestion(accommodation: Accommodation) -> Suggestion:
    return Suggestion(label=accommodation.title)


def to_details(accommodation: Accommodation) -> AccommodationDetails:
    return AccommodationDetails(
        id=accommodation.id,
        title=accommodation.title,
        images=accommodation.images,
        address=accommodation.location.address,
        rating=_rating(accommodation.rating),
        price=_price(accommodation.price),
        type=accommodation.type,
        description=accommodation.description,
        facilities=accommodation.facilities,
    )
