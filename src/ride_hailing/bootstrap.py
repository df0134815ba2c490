"""Wiring of stores, services and handlers.

The hosting process calls these once at startup and keeps the result for
its lifetime. Nothing here holds state of its own.
"""

import logging
from collections.abc import Iterable, Mapping

from pymongo import MongoClient

from ride_hailing.config import Settings, get_mongo_client, get_settings
from ride_hailing.handlers import (
    DriverHandler,
    PaymentHandler,
    RecordHandler,
    RideHandler,
    UserHandler,
)
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import MongoDocumentStore
from ride_hailing.services import DriverService, PaymentService, RideService, UserService

logger = logging.getLogger(__name__)

ENTITIES = ("drivers", "rides", "users", "payments")


def build_handler(entity: str, store: DocumentStore) -> RecordHandler:
    """Build the service and handler for one entity on top of its store.

    Raises:
        ValueError: If the entity is unknown
    """
    if entity == "drivers":
        return DriverHandler(DriverService(store))
    if entity == "rides":
        return RideHandler(RideService(store))
    if entity == "users":
        return UserHandler(UserService(store))
    if entity == "payments":
        return PaymentHandler(PaymentService(store))
    raise ValueError(f"Unknown entity: {entity}")


def build_handlers(stores: Mapping[str, DocumentStore]) -> dict[str, RecordHandler]:
    """Build a handler for every entity that has a store."""
    return {entity: build_handler(entity, store) for entity, store in stores.items()}


def create_stores(
    entities: Iterable[str] = ENTITIES,
    settings: Settings | None = None,
    client: MongoClient | None = None,
) -> dict[str, DocumentStore]:
    """Open one MongoDB collection per entity over a single shared client.

    Raises:
        ConfigurationError: If any required setting is missing or blank
    """
    settings = settings or get_settings()
    # Resolve every collection before connecting so a bad config fails fast
    for entity in entities:
        settings.collection_for(entity)

    client = client or get_mongo_client(settings.mongo_uri)  # type: ignore[arg-type]
    stores: dict[str, DocumentStore] = {}
    for entity in entities:
        stores[entity] = MongoDocumentStore.create(entity, client=client, settings=settings)
    logger.info("Opened stores for %s", ", ".join(stores))
    return stores
