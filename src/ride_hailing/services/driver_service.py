"""Driver record operations."""

from typing import Any

from ride_hailing.entities import DRIVER_ID_PREFIX, Driver, new_id
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import driver_from_document, driver_to_document
from ride_hailing.repositories.documents import FIELD_BUSY, FIELD_CAR, FIELD_TRAVEL, FIELD_TRAVELING
from ride_hailing.results import Result

from .base import RecordService


class DriverService(RecordService[Driver]):
    """Create, read and update drivers."""

    entity_name = "driver"
    not_found_message = "Driver not found"

    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store, driver_to_document, driver_from_document)

    def create(self, name: str, car: str | None = None) -> Result[Driver]:
        """Register a new driver who is neither traveling nor busy."""
        driver = Driver(id=new_id(DRIVER_ID_PREFIX), name=name, car=car)
        return self._insert(driver)

    def update_travel(
        self,
        driver_id: str,
        traveling: bool,
        travel: str | None,
        busy: bool | None = None,
        car: str | None = None,
    ) -> Result[Driver]:
        """Set a driver's travel state.

        ``traveling`` and ``travel`` are always written. ``busy`` and
        ``car`` are written only when given.
        """
        fields: dict[str, Any] = {
            FIELD_TRAVELING: traveling,
            FIELD_TRAVEL: travel,
        }
        if busy is not None:
            fields[FIELD_BUSY] = busy
        if car is not None:
            fields[FIELD_CAR] = car
        return self._update(driver_id, fields)
