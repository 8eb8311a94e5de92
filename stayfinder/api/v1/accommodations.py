from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query

from stayfinder.api.dependencies import get_accommodation_service
from stayfinder.api.v1.models import (
    AccommodationDetailsResponse, AccommodationListResponse, ErrorResponse,
    SuggestionsResponse
)
from stayfinder.core.exceptions import AccommodationNotFoundError
from stayfinder.services.accommodation import AccommodationService
from stayfinder.services.query import map_list_query_to_filters, parse_sorting

router = APIRouter(tags=["accommodations"])


@router.get("/list", response_model=AccommodationListResponse)
async def get_list(
    search: Optional[str] = Query(None, description="Case-insensitive title fragment"),
    centre: Optional[str] = Query(None, description="Maximum distance to the centre in km"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    min_avg_rating: Optional[str] = Query(None, alias="minAvgRating"),
    min_reviews_count: Optional[str] = Query(None, alias="minReviewsCount"),
    sorting: Optional[str] = Query(
        None, description="MAX_AVG_RATING, MAX_REVIEWS, MIN_PRICE or MAX_PRICE"
    ),
    service: AccommodationService = Depends(get_accommodation_service),
):
    """
    List accommodations matching the filters, ordered by the requested sort key.
    Malformed numeric filters are ignored rather than rejected.
    """
    filters = map_list_query_to_filters(
        search=search,
        centre=centre,
        min_price=min_price,
        min_avg_rating=min_avg_rating,
        min_reviews_count=min_reviews_count,
    )
    return service.get_list(filters, parse_sorting(sorting))


@router.get("/suggestions", response_model=SuggestionsResponse)
async def get_suggestions(
    search: Optional[str] = Query(None, description="Case-sensitive title fragment"),
    service: AccommodationService = Depends(get_accommodation_service),
):
    """
    Suggest accommodation titles for autocomplete.
    """
    return service.get_suggestions(search)


@router.get(
    "/details",
    response_model=AccommodationDetailsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_details(
    id: Optional[str] = Query(None, description="Accommodation id"),
    service: AccommodationService = Depends(get_accommodation_service),
):
    """
    Get detailed information about a single accommodation.
    """
    try:
        return service.get_details(id or "")
    except AccommodationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
