"""HTTP handler for the rides endpoint."""

from ride_hailing.dto import CreateRideRequest, RideResponse, UpdateRideRequest
from ride_hailing.entities import Ride
from ride_hailing.results import Failure, Result
from ride_hailing.services import RideService

from .base import RecordHandler


class RideHandler(RecordHandler[Ride]):
    name = "rides"
    response_model = RideResponse

    def __init__(self, service: RideService) -> None:
        super().__init__(service)
        self._rides = service

    def create(self, body: str | bytes | None) -> Result:
        request = self.parse(CreateRideRequest, body)
        if request is None:
            return Failure.invalid()
        return self._rides.create(driver=request.driver)

    def update(self, body: str | bytes | None) -> Result:
        request = self.parse(UpdateRideRequest, body)
        if request is None:
            return Failure.invalid()
        return self._rides.update_availability(
            ride_id=request.id,
            available=request.available,
            passenger_id=request.passenger_id,
        )
