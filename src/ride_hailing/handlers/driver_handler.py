"""HTTP handler for the drivers endpoint."""

from ride_hailing.dto import CreateDriverRequest, DriverResponse, UpdateDriverRequest
from ride_hailing.entities import Driver
from ride_hailing.results import Failure, Result
from ride_hailing.services import DriverService

from .base import RecordHandler


class DriverHandler(RecordHandler[Driver]):
    """GET/POST/PUT on drivers. DELETE is not supported."""

    name = "drivers"
    response_model = DriverResponse

    def __init__(self, service: DriverService) -> None:
        super().__init__(service)
        self._drivers = service

    def create(self, body: str | bytes | None) -> Result:
        request = self.parse(CreateDriverRequest, body)
        if request is None:
            return Failure.invalid()
        return self._drivers.create(name=request.name, car=request.car)

    def update(self, body: str | bytes | None) -> Result:
        request = self.parse(UpdateDriverRequest, body)
        if request is None:
            return Failure.invalid()
        return self._drivers.update_travel(
            driver_id=request.id,
            traveling=request.traveling,
            travel=request.ride_id,
            busy=request.busy,
            car=request.car,
        )
