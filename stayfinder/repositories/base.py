from abc import ABC, abstractmethod
from typing import List

from stayfinder.models.accommodation import Accommodation
from stayfinder.models.filters import ListFilters


class BaseAccommodationRepository(ABC):
    """Base class for read-only accommodation catalogs."""

    @abstractmethod
    def find_all(self, filters: ListFilters) -> List[Accommodation]:
        """Return every accommodation matching all filter thresholds."""
        pass

    @abstractmethod
    def find_by_id(self, accommodation_id: str) -> Accommodation:
        """Get a single accommodation, raising AccommodationNotFoundError if missing."""
        pass

    @abstractmethod
    def find_by_title(self, title: str) -> List[Accommodation]:
        """Return accommodations whose title contains the given text."""
        pass
