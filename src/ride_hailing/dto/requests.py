"""Request DTOs for the record handlers.

Bodies use camelCase keys on the wire. Unknown keys are ignored. Flags that
are missing or null read as false, the way an unset boolean does in the
rest of the system.
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, FiniteFloat
from pydantic.alias_generators import to_camel


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _null_as(default: Any):
    def convert(value: Any) -> Any:
        return default if value is None else value

    return convert


NonBlankStr = Annotated[str, AfterValidator(_require_text)]
Flag = Annotated[bool, BeforeValidator(_null_as(False))]
Amount = Annotated[FiniteFloat, BeforeValidator(_null_as(0.0))]


class RequestBody(BaseModel):
    """Base for request bodies: camelCase aliases, extra keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CreateDriverRequest(RequestBody):
    """Request DTO for creating a driver."""

    name: NonBlankStr = Field(..., description="Driver display name")
    car: str | None = Field(None, description="Optional car description")


class UpdateDriverRequest(RequestBody):
    """Request DTO for updating a driver's travel state.

    ``busy`` and ``car`` are optional: when absent or null the stored
    values are left alone.
    """

    id: NonBlankStr
    traveling: Flag = False
    ride_id: str | None = Field(None, description="Ride the driver is on, stored as 'travel'")
    busy: bool | None = None
    car: str | None = None


class CreateRideRequest(RequestBody):
    driver: NonBlankStr = Field(..., description="Id of the driver offering the ride")


class UpdateRideRequest(RequestBody):
    id: NonBlankStr
    available: Flag = False
    passenger_id: str | None = None


class CreateUserRequest(RequestBody):
    name: NonBlankStr


class UpdateUserRequest(RequestBody):
    id: NonBlankStr
    traveling: Flag = False
    ride_id: str | None = Field(None, description="Ride the user is on, stored as 'travel'")


class CreatePaymentRequest(RequestBody):
    """Request DTO for creating a payment."""

    user_id: NonBlankStr
    ride_id: NonBlankStr
    amount: Amount = 0.0


class UpdatePaymentRequest(RequestBody):
    """Request DTO for recording the processing of a payment.

    ``amount`` is optional: when absent or null the stored amount is kept.
    """

    id: NonBlankStr
    processed: Flag = False
    transaction_id: NonBlankStr
    ride_id: NonBlankStr
    amount: FiniteFloat | None = None
