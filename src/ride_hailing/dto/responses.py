"""Response DTOs for the record handlers."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ride_hailing.entities import Driver, Payment, Ride, User


class RecordResponse(BaseModel):
    """Base for response bodies, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DriverResponse(RecordResponse):
    id: str
    name: str | None
    traveling: bool
    travel: str | None
    busy: bool
    car: str | None

    @classmethod
    def from_entity(cls, driver: Driver) -> "DriverResponse":
        return cls(
            id=driver.id,
            name=driver.name,
            traveling=driver.traveling,
            travel=driver.travel,
            busy=driver.busy,
            car=driver.car,
        )


class RideResponse(RecordResponse):
    id: str
    driver: str | None
    available: bool
    passenger_id: str | None

    @classmethod
    def from_entity(cls, ride: Ride) -> "RideResponse":
        return cls(
            id=ride.id,
            driver=ride.driver,
            available=ride.available,
            passenger_id=ride.passenger_id,
        )


class UserResponse(RecordResponse):
    id: str
    name: str | None
    traveling: bool
    travel: str | None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, traveling=user.traveling, travel=user.travel)


class PaymentResponse(RecordResponse):
    id: str
    user_id: str | None
    amount: float
    processed: bool
    transaction_id: str | None
    ride_id: str | None

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            id=payment.id,
            user_id=payment.user_id,
            amount=payment.amount,
            processed=payment.processed,
            transaction_id=payment.transaction_id,
            ride_id=payment.ride_id,
        )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    stores: dict[str, bool] = Field(
        default_factory=dict,
        description="Reachability of each entity's store",
    )
