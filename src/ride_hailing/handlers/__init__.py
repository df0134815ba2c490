"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on stores.

Architecture:
    Handler -> Service -> DocumentStore
    (HTTP)  -> (Business) -> (Data Access)
"""

from .base import RecordHandler
from .driver_handler import DriverHandler
from .gateway import GatewayRequest, GatewayResponse
from .payment_handler import PaymentHandler
from .ride_handler import RideHandler
from .user_handler import UserHandler

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "RecordHandler",
    "DriverHandler",
    "RideHandler",
    "UserHandler",
    "PaymentHandler",
]
