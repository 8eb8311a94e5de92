import logging
from typing import Iterable, Iterator, List

from stayfinder.core.exceptions import AccommodationNotFoundError
from stayfinder.models.accommodation import Accommodation
from stayfinder.models.filters import ListFilters
from stayfinder.repositories.base import BaseAccommodationRepository

logger = logging.getLogger(__name__)


class InMemoryAccommodationRepository(BaseAccommodationRepository):
    """Catalog held in process memory for its whole lifetime.

    The listings are copied into a tuple on construction and never
    reassigned, so any number of requests can read them concurrently.
    """

    def __init__(self, accommodations: Iterable[Accommodation]):
        self._accommodations = tuple(accommodations)

    def __len__(self) -> int:
        return len(self._accommodations)

    def __iter__(self) -> Iterator[Accommodation]:
        return iter(self._accommodations)

    def find_all(self, filters: ListFilters) -> List[Accommodation]:
        logger.debug(f"find_all filters: {filters}")
        title = filters.title.lower()
        return [
            accommodation
            for accommodation in self._accommodations
            if title in accommodation.title.lower()
            and accommodation.location.centre < filters.max_centre
            and accommodation.price.amount > filters.min_price
            and accommodation.rating.reviews > filters.min_reviews_count
            and accommodation.rating.average > filters.min_avg_rating
        ]

    def find_by_id(self, accommodation_id: str) -> Accommodation:
        for accommodation in self._accommodations:
            if accommodation.id == accommodation_id:
                return accommodation
        raise AccommodationNotFoundError(accommodation_id)

    def find_by_title(self, title: str) -> List[Accommodation]:
        # Case-sensitive, unlike the title filter of find_all
        return [
            accommodation
            for accommodation in self._accommodations
            if title in accommodation.title
        ]
