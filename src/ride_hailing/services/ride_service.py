"""Ride record operations."""

from ride_hailing.entities import RIDE_ID_PREFIX, Ride, new_id
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import ride_from_document, ride_to_document
from ride_hailing.repositories.documents import FIELD_AVAILABLE, FIELD_PASSENGER_ID
from ride_hailing.results import Result

from .base import RecordService


class RideService(RecordService[Ride]):
    """Create, read and update rides."""

    entity_name = "ride"
    not_found_message = "Ride not found"

    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store, ride_to_document, ride_from_document)

    def create(self, driver: str) -> Result[Ride]:
        """Open a new ride for a driver. The driver id is not checked."""
        ride = Ride(id=new_id(RIDE_ID_PREFIX), driver=driver)
        return self._insert(ride)

    def update_availability(
        self,
        ride_id: str,
        available: bool,
        passenger_id: str | None,
    ) -> Result[Ride]:
        return self._update(
            ride_id,
            {
                FIELD_AVAILABLE: available,
                FIELD_PASSENGER_ID: passenger_id,
            },
        )
