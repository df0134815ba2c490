"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request validation and response serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    CreateDriverRequest,
    CreatePaymentRequest,
    CreateRideRequest,
    CreateUserRequest,
    UpdateDriverRequest,
    UpdatePaymentRequest,
    UpdateRideRequest,
    UpdateUserRequest,
)
from .responses import (
    DriverResponse,
    HealthCheckResponse,
    PaymentResponse,
    RideResponse,
    UserResponse,
)

__all__ = [
    "CreateDriverRequest",
    "UpdateDriverRequest",
    "CreateRideRequest",
    "UpdateRideRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
    "CreatePaymentRequest",
    "UpdatePaymentRequest",
    "DriverResponse",
    "RideResponse",
    "UserResponse",
    "PaymentResponse",
    "HealthCheckResponse",
]
