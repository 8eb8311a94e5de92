class StayfinderError(Exception):
    """Base class for errors raised by the catalog layer."""


class AccommodationNotFoundError(StayfinderError):
    """Raised when no accommodation in the catalog has the requested id."""

    def __init__(self, accommodation_id: str):
        self.accommodation_id = accommodation_id
        super().__init__(f"Accommodation '{accommodation_id}' not found")
