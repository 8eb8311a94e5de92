import pytest
from fastapi.testclient import TestClient

from stayfinder.api.dependencies import get_accommodation_repository
from stayfinder.main import app
from stayfinder.models.accommodation import (
    Accommodation, AccommodationLocation, AccommodationType, Cover, Demand,
    Facility, Insight, Price, Rating, RoomType
)
from stayfinder.repositories.catalog import InMemoryAccommodationRepository
from stayfinder.repositories.generator import AccommodationGenerator


def make_accommodation(
    id: str,
    title: str,
    centre: float = 5.0,
    amount: int = 1000,
    average: float = 5.0,
    reviews: int = 100,
) -> Accommodation:
    images = [f"https://images.example.com/{id}/{n}.jpg" for n in range(3)]
    return Accommodation(
        id=id,
        title=title,
        images=images,
        cover=Cover(url=images[0], tag="view"),
        location=AccommodationLocation(address="Prosta 1, 00-001, Polska", centre=centre),
        rating=Rating(average=average, reviews=reviews),
        insights=[Insight(text="Quiet street", tag=None, highlights=True)],
        demand=Demand.MEDIUM,
        room=RoomType.DOUBLE,
        price=Price(amount=amount, currency="zł", breakfast=False),
        type=AccommodationType.HOTEL,
        description="A place to stay.",
        facilities=[Facility.FREE_WIFI, Facility.PARKING],
    )


@pytest.fixture
def grand_hotel():
    return make_accommodation("a", "Grand Hotel", centre=2.0, amount=500, average=8.0, reviews=50)


@pytest.fixture
def budget_inn():
    return make_accommodation("b", "Budget Inn", centre=8.0, amount=100, average=5.0, reviews=5)


@pytest.fixture
def two_listing_catalog(grand_hotel, budget_inn):
    return InMemoryAccommodationRepository([grand_hotel, budget_inn])


@pytest.fixture(scope="session")
def generated_catalog():
    """A realistic seeded catalog shared by the property tests."""
    return InMemoryAccommodationRepository(AccommodationGenerator(seed=1234).generate(100))


@pytest.fixture
def client(two_listing_catalog):
    app.dependency_overrides[get_accommodation_repository] = lambda: two_listing_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
