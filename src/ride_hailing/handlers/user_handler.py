"""HTTP handler for the users endpoint."""

from ride_hailing.dto import CreateUserRequest, UpdateUserRequest, UserResponse
from ride_hailing.entities import User
from ride_hailing.results import Failure, Result
from ride_hailing.services import UserService

from .base import RecordHandler


class UserHandler(RecordHandler[User]):
    name = "users"
    response_model = UserResponse

    def __init__(self, service: UserService) -> None:
        super().__init__(service)
        self._users = service

    def create(self, body: str | bytes | None) -> Result:
        request = self.parse(CreateUserRequest, body)
        if request is None:
            return Failure.invalid()
        return self._users.create(name=request.name)

    def update(self, body: str | bytes | None) -> Result:
        request = self.parse(UpdateUserRequest, body)
        if request is None:
            return Failure.invalid()
        return self._users.update_travel(
            user_id=request.id,
            traveling=request.traveling,
            travel=request.ride_id,
        )
