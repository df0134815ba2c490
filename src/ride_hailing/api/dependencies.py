"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing handler instances.

Pattern:
    - Stores, services and handlers built once during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from ride_hailing.bootstrap import build_handlers, create_stores
from ride_hailing.handlers import RecordHandler
from ride_hailing.protocols import DocumentStore

logger = logging.getLogger(__name__)


def get_handlers(request: Request) -> dict[str, RecordHandler]:
    """Dependency injection for the entity handlers from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        Mapping of entity name to its handler

    Raises:
        RuntimeError: If handlers are not initialized
    """
    handlers = getattr(request.app.state, "handlers", None)
    if handlers is None:
        raise RuntimeError("Handlers not initialized. Check lifespan setup.")
    return handlers


def get_stores(request: Request) -> dict[str, DocumentStore]:
    """Dependency injection for the entity stores from app.state."""
    stores = getattr(request.app.state, "stores", None)
    if stores is None:
        raise RuntimeError("Stores not initialized. Check lifespan setup.")
    return stores


def build_lifespan(stores: Mapping[str, DocumentStore] | None = None):
    """Create the lifespan context manager for the app.

    Args:
        stores: Stores to serve, keyed by entity. If None, MongoDB
            collections are opened from settings for every entity.

    Returns:
        An async context manager usable as FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initializes all layers and stores them in app.state.

        1. Stores (data access) - opened once, shared by every request
        2. Services and handlers - one pair per entity in app.state.handlers

        Cleanup:
            Removes handlers and stores from app.state on shutdown
        """
        opened = dict(stores) if stores is not None else create_stores()
        app.state.stores = opened
        app.state.handlers = build_handlers(opened)
        logger.info("Record handlers initialized: %s", ", ".join(app.state.handlers))

        yield

        del app.state.handlers
        del app.state.stores
        logger.info("Record handlers shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlersDep = Annotated[dict[str, RecordHandler], Depends(get_handlers)]
StoresDep = Annotated[dict[str, DocumentStore], Depends(get_stores)]
