import logging
from typing import List, Optional
from faker import Faker

from stayfinder.models.accommodation import (
    Accommodation, AccommodationLocation, AccommodationType, Cover, Demand,
    Facility, Insight, Price, Rating, RoomType
)

logger = logging.getLogger(__name__)

FACILITIES = list(Facility)
TITLE_SUFFIXES = ("Hotel", "Residence", "Lodge", "Inn", "Suites", "Apartments", "Villa", "Rooms")


class AccommodationGenerator:
    """Builds synthetic accommodation listings.

    Every field is drawn independently from its own range or vocabulary,
    except ``cover.url`` which always repeats the first image. Two generators
    built with the same seed and locale yield identical catalogs.
    """

    def __init__(self, seed: Optional[int] = None, locale: str = "pl_PL"):
        self.seed = seed
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    def generate(self, count: int) -> List[Accommodation]:
        """Generate exactly ``count`` listings with unique ids."""
        accommodations = [self._generate_accommodation() for _ in range(count)]
        logger.info(f"Generated {len(accommodations)} accommodations (seed={self.seed})")
        return accommodations

    def _generate_accommodation(self) -> Accommodation:
        fake = self.fake
        images = [fake.image_url() for _ in range(fake.random_int(min=3, max=30))]

        return Accommodation(
            id=fake.unique.uuid4(),
            title=f"{fake.last_name()} {fake.random_element(TITLE_SUFFIXES)}",
            images=images,
            cover=Cover(url=images[0], tag=fake.word()),
            location=AccommodationLocation(
                address=f"{fake.street_address()}, {fake.postcode()}, {fake.country()}",
                centre=fake.random_int(min=10, max=100) / 10,
            ),
            rating=Rating(
                average=fake.random_int(min=10, max=100) / 10,
                reviews=fake.random_int(min=0, max=10000),
            ),
            insights=[self._generate_insight() for _ in range(fake.random_int(min=0, max=25))],
            demand=fake.random_element(list(Demand)),
            room=fake.random_element(list(RoomType)),
            price=Price(
                amount=fake.random_int(min=10, max=1000) * 10,
                currency=fake.currency_symbol(),
                breakfast=fake.pybool(),
            ),
            type=fake.random_element(list(AccommodationType)),
            description="\n\n".join(fake.paragraphs()),
            facilities=fake.random_sample(
                FACILITIES, length=fake.random_int(min=0, max=len(FACILITIES))
            ),
        )

    def _generate_insight(self) -> Insight:
        fake = self.fake
        # Tag is either a few words or missing, with even odds
        return Insight(
            text=fake.sentence(),
            tag=" ".join(fake.words()) if fake.pybool() else None,
            highlights=fake.pybool(),
        )
