import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from stayfinder.api.v1.models import (
    AccommodationDetailsResponse, AccommodationListResponse, SuggestionsResponse
)
from stayfinder.core.exceptions import AccommodationNotFoundError
from stayfinder.models.accommodation import Accommodation
from stayfinder.models.filters import ListFilters, Sorting
from stayfinder.repositories.base import BaseAccommodationRepository
from stayfinder.services.projections import to_details, to_list_item, to_suggestion

logger = logging.getLogger(__name__)

# Sort key and whether it runs descending
SORT_ORDERS: Dict[Sorting, Tuple[Callable[[Accommodation], float], bool]] = {
    Sorting.MAX_AVG_RATING: (lambda acc: acc.rating.average, True),
    Sorting.MAX_REVIEWS: (lambda acc: acc.rating.reviews, True),
    Sorting.MIN_PRICE: (lambda acc: acc.price.amount, False),
    Sorting.MAX_PRICE: (lambda acc: acc.price.amount, True),
}


def sort_accommodations(
    accommodations: Sequence[Accommodation], sorting: Optional[Sorting]
) -> List[Accommodation]:
    """Order accommodations by a single key.

    The sort is stable in both directions: listings with equal keys keep
    their catalog order. Without a sort key the input order is returned.
    """
    if sorting is None:
        return list(accommodations)
    key, descending = SORT_ORDERS[sorting]
    return sorted(accommodations, key=key, reverse=descending)


class AccommodationService:
    """Query pipeline over a read-only accommodation catalog."""

    def __init__(self, repository: BaseAccommodationRepository):
        self.repository = repository

    def get_list(
        self, filters: ListFilters, sorting: Optional[Sorting] = None
    ) -> AccommodationListResponse:
        logger.debug(f"get_list filters={filters} sorting={sorting}")
        accommodations = sort_accommodations(self.repository.find_all(filters), sorting)
        return AccommodationListResponse(list=[to_list_item(acc) for acc in accommodations])

    def get_suggestions(self, search: Optional[str] = None) -> SuggestionsResponse:
        logger.debug(f"get_suggestions search={search!r}")
        accommodations = self.repository.find_by_title(search or "")
        return SuggestionsResponse(suggestions=[to_suggestion(acc) for acc in accommodations])

    def get_details(self, accommodation_id: str) -> AccommodationDetailsResponse:
        """Get one accommodation in detail form.

        Raises:
            AccommodationNotFoundError: if no accommodation has this id.
        """
        try:
            accommodation = self.repository.find_by_id(accommodation_id)
        except AccommodationNotFoundError:
            logger.warning(f"Accommodation not found: {accommodation_id}")
            raise
        return AccommodationDetailsResponse(data=to_details(accommodation))
