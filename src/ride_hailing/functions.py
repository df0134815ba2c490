"""API-Gateway entry points, one per entity.

Each function takes a proxy event and returns a proxy response::

    {"statusCode": 201, "headers": {"Content-Type": "application/json"}, "body": "..."}

The handler for an entity (and its MongoDB connection) is built on the
first invocation in a process and reused by every later one.
"""

import logging
from functools import lru_cache
from typing import Any

from pymongo import MongoClient

from ride_hailing.bootstrap import build_handler
from ride_hailing.config import get_mongo_client, get_settings
from ride_hailing.handlers import GatewayRequest, RecordHandler
from ride_hailing.logging_setup import setup_logging
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import MongoDocumentStore
from ride_hailing.results import Failure

logger = logging.getLogger(__name__)


@lru_cache
def get_client(uri: str) -> MongoClient:
    """Get the process-wide MongoDB client for a URI."""
    return get_mongo_client(uri)


def create_store(entity: str) -> DocumentStore:
    """Open the entity's collection from settings.

    Raises:
        ConfigurationError: If MONGO_URI, MONGO_DB or the collection is missing
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    client = get_client(settings.mongo_uri)  # type: ignore[arg-type]
    return MongoDocumentStore.create(entity, client=client, settings=settings)


@lru_cache
def get_handler(entity: str) -> RecordHandler:
    """Get the cached handler for an entity, building it on first use."""
    logger.info("Initializing %s handler", entity)
    return build_handler(entity, create_store(entity))


def invoke(entity: str, event: dict[str, Any], context: object = None) -> dict[str, Any]:
    """Run one proxy event through the entity's handler."""
    handler = get_handler(entity)
    try:
        request = GatewayRequest.from_event(event)
    except ValueError:
        logger.debug("Rejected undecodable %s event body", entity)
        return handler.render(Failure.invalid()).to_event()
    return handler.handle(request).to_event()


def drivers_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return invoke("drivers", event, context)


def rides_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return invoke("rides", event, context)


def users_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return invoke("users", event, context)


def payments_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return invoke("payments", event, context)
