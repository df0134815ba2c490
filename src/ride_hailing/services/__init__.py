"""Service layer for business logic.

This layer contains the record operations for each entity. Services depend
on the DocumentStore protocol, not on MongoDB, which keeps them testable
with an in-memory store. They return Result values instead of raising
for expected outcomes.

Architecture:
    Handler -> Service -> DocumentStore
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from ride_hailing.repositories import MongoDocumentStore
    from ride_hailing.services import DriverService

    drivers = DriverService(MongoDocumentStore.create("drivers"))
    result = drivers.create(name="Alice")
    ```
"""

from .base import RecordService
from .driver_service import DriverService
from .payment_service import PaymentService
from .ride_service import RideService
from .user_service import UserService

__all__ = [
    "RecordService",
    "DriverService",
    "RideService",
    "UserService",
    "PaymentService",
]
