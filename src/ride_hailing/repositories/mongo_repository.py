"""MongoDB implementation of DocumentStore.

One instance wraps one pymongo collection. Records are looked up by their
own ``id`` field; MongoDB's ``_id`` is never exposed.
"""

import logging
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection

from ride_hailing.config import Settings, get_mongo_client, get_settings

logger = logging.getLogger(__name__)

FIELD_ID = "id"

# Hide MongoDB's own key from every read
_PROJECTION = {"_id": False}


class MongoDocumentStore:
    """MongoDB implementation of the DocumentStore protocol.

    This class satisfies the DocumentStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, collection: Collection) -> None:
        """Initialize the store.

        Args:
            collection: The pymongo collection holding one entity kind
        """
        self._collection = collection

    @classmethod
    def create(
        cls,
        entity: str,
        client: MongoClient | None = None,
        settings: Settings | None = None,
    ) -> "MongoDocumentStore":
        """Factory method to create a store for an entity from settings.

        Args:
            entity: One of "drivers", "rides", "users", "payments"
            client: Shared MongoClient. If None, creates one from settings.
            settings: Settings to use. If None, uses get_settings().

        Returns:
            Configured MongoDocumentStore

        Raises:
            ConfigurationError: If the URI, database or collection is missing
        """
        settings = settings or get_settings()
        collection_name = settings.collection_for(entity)
        client = client or get_mongo_client(settings.mongo_uri)  # type: ignore[arg-type]
        collection = client[settings.mongo_db][collection_name]  # type: ignore[index]
        logger.info("Using collection %s.%s for %s", settings.mongo_db, collection_name, entity)
        return cls(collection)

    def insert_one(self, document: dict[str, Any]) -> bool:
        # insert_one mutates its argument by adding _id
        result = self._collection.insert_one(dict(document))
        return result.acknowledged

    def find_by_id(self, record_id: str) -> dict[str, Any] | None:
        return self._collection.find_one({FIELD_ID: record_id}, _PROJECTION)

    def find_all(self) -> list[dict[str, Any]]:
        return list(self._collection.find({}, _PROJECTION))

    def update_by_id(self, record_id: str, fields: dict[str, Any]) -> int:
        result = self._collection.update_one({FIELD_ID: record_id}, {"$set": fields})
        return result.matched_count

    def delete_by_id(self, record_id: str) -> int:
        result = self._collection.delete_one({FIELD_ID: record_id})
        return result.deleted_count

    def health_check(self) -> bool:
        """Check if MongoDB is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            self._collection.database.client.admin.command("ping")
            return True
        except Exception:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False

    @property
    def collection(self) -> Collection:
        """Get the underlying collection."""
        return self._collection
