from functools import lru_cache
from fastapi import Depends

from stayfinder.core.settings import get_settings
from stayfinder.repositories.base import BaseAccommodationRepository
from stayfinder.repositories.catalog import InMemoryAccommodationRepository
from stayfinder.repositories.generator import AccommodationGenerator
from stayfinder.services.accommodation import AccommodationService


@lru_cache()
def get_accommodation_repository() -> InMemoryAccommodationRepository:
    """Build the process-wide catalog. Cached, so it is generated only once."""
    settings = get_settings()
    generator = AccommodationGenerator(seed=settings.CATALOG_SEED, locale=settings.FAKER_LOCALE)
    return InMemoryAccommodationRepository(generator.generate(settings.CATALOG_SIZE))


def get_accommodation_service(
    repository: BaseAccommodationRepository = Depends(get_accommodation_repository),
) -> AccommodationService:
    """Get AccommodationService instance."""
    return AccommodationService(repository=repository)
