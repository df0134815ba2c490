"""Ride Hailing Records - drivers, rides, users and payments over MongoDB.

This package provides a layered architecture for four record handlers:

Layers:
    - protocols: Interface contracts (DocumentStore)
    - repositories: MongoDB store and entity/document conversion
    - services: Record operations returning Result values
    - handlers: Method routing, validation and serialization
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from ride_hailing.bootstrap import build_handler, create_stores
    from ride_hailing.handlers import GatewayRequest

    handler = build_handler("drivers", create_stores(["drivers"])["drivers"])
    response = handler.handle(GatewayRequest(method="POST", body='{"name": "Alice"}'))
    ```

For HTTP API:
    ```python
    from ride_hailing.api.app import app
    ```

For API-Gateway functions:
    ```python
    from ride_hailing.functions import drivers_handler
    ```
"""

from ride_hailing.config import ConfigurationError, Settings, get_settings
from ride_hailing.entities import Driver, Payment, Ride, User
from ride_hailing.handlers import (
    DriverHandler,
    GatewayRequest,
    GatewayResponse,
    PaymentHandler,
    RideHandler,
    UserHandler,
)
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import MongoDocumentStore
from ride_hailing.results import Failure, FailureKind, Ok
from ride_hailing.services import DriverService, PaymentService, RideService, UserService

__all__ = [
    # Configuration
    "Settings",
    "ConfigurationError",
    "get_settings",
    # Protocols (interfaces)
    "DocumentStore",
    # Services (business logic)
    "DriverService",
    "RideService",
    "UserService",
    "PaymentService",
    # Handlers (HTTP)
    "GatewayRequest",
    "GatewayResponse",
    "DriverHandler",
    "RideHandler",
    "UserHandler",
    "PaymentHandler",
    # Repositories (data access)
    "MongoDocumentStore",
    # Entities (domain models)
    "Driver",
    "Ride",
    "User",
    "Payment",
    # Results
    "Ok",
    "Failure",
    "FailureKind",
]
