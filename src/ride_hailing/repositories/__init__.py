"""Repository layer for data access.

This layer keeps MongoDB behind the DocumentStore protocol and owns the
conversion between domain entities and stored documents. This enables:
- Swapping MongoDB for another document store
- Unit testing with in-memory implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from ride_hailing.protocols import DocumentStore

from .documents import (
    driver_from_document,
    driver_to_document,
    payment_from_document,
    payment_to_document,
    ride_from_document,
    ride_to_document,
    user_from_document,
    user_to_document,
)
from .mongo_repository import MongoDocumentStore

__all__ = [
    "DocumentStore",
    "MongoDocumentStore",
    "driver_to_document",
    "driver_from_document",
    "ride_to_document",
    "ride_from_document",
    "user_to_document",
    "user_from_document",
    "payment_to_document",
    "payment_from_document",
]
