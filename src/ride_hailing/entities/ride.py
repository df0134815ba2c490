"""Ride domain entity."""

from dataclasses import dataclass

RIDE_ID_PREFIX = "r_"


@dataclass(frozen=True)
class Ride:
    """A ride offered by a driver.

    Attributes:
        id: Immutable identifier, "r_" followed by a UUID
        driver: Id of the driver offering the ride (not checked)
        available: Whether the ride can still be taken
        passenger_id: Id of the user who took the ride, if any
    """

    id: str
    driver: str
    available: bool = True
    passenger_id: str | None = None
