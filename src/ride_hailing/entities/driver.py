"""Driver domain entity."""

from dataclasses import dataclass

DRIVER_ID_PREFIX = "d_"


@dataclass(frozen=True)
class Driver:
    """A driver record.

    Attributes:
        id: Immutable identifier, "d_" followed by a UUID
        name: Display name
        traveling: Whether the driver is currently on a trip
        travel: Id of the ride the driver is on, if any
        busy: Whether the driver is unavailable for new rides
        car: Free-form car description
    """

    id: str
    name: str
    traveling: bool = False
    travel: str | None = None
    busy: bool = False
    car: str | None = None
