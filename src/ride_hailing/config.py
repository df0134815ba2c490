import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv
from pymongo import MongoClient

load_dotenv()

ENTITY_COLLECTION_ENV = {
    "drivers": "MONGO_DRIVERS_COLLECTION",
    "rides": "MONGO_RIDES_COLLECTION",
    "users": "MONGO_USERS_COLLECTION",
    "payments": "MONGO_PAYMENTS_COLLECTION",
}

# Single-entity deployments set one collection name for the whole process
FALLBACK_COLLECTION_ENV = "MONGO_COLLECTION"


class ConfigurationError(ValueError):
    """Raised when a required environment value is missing or blank."""


def _env(name: str) -> str | None:
    return os.getenv(name)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is built, not at import time, so a
    process that is missing configuration fails when its composition root
    runs rather than when the module is first imported.
    """

    # MongoDB
    mongo_uri: str | None = field(default_factory=lambda: _env("MONGO_URI"))
    mongo_db: str | None = field(default_factory=lambda: _env("MONGO_DB"))
    collections: dict[str, str | None] = field(
        default_factory=lambda: {entity: _env(name) for entity, name in ENTITY_COLLECTION_ENV.items()}
    )
    fallback_collection: str | None = field(default_factory=lambda: _env(FALLBACK_COLLECTION_ENV))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_json: bool = field(default_factory=lambda: os.getenv("LOG_JSON", "false").lower() == "true")

    # API
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))
    api_reload: bool = field(default_factory=lambda: os.getenv("API_RELOAD", "false").lower() == "true")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if _is_blank(self.mongo_uri):
            raise ConfigurationError("Missing environment variable: MONGO_URI")
        if _is_blank(self.mongo_db):
            raise ConfigurationError("Missing environment variable: MONGO_DB")

    def collection_for(self, entity: str) -> str:
        """Resolve the collection name for an entity.

        Args:
            entity: One of "drivers", "rides", "users", "payments"

        Returns:
            The configured collection name

        Raises:
            ConfigurationError: If neither the entity variable nor
                MONGO_COLLECTION is set to a non-blank value
        """
        if entity not in ENTITY_COLLECTION_ENV:
            raise ConfigurationError(f"Unknown entity: {entity}")

        name = self.collections.get(entity)
        if _is_blank(name):
            name = self.fallback_collection
        if _is_blank(name):
            raise ConfigurationError(
                f"Missing environment variable: {ENTITY_COLLECTION_ENV[entity]}"
            )
        return name  # type: ignore[return-value]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_mongo_client(uri: str) -> MongoClient:
    """Create a MongoDB client instance.

    One client is meant to live for the whole process; pymongo pools
    connections internally and is safe to share across threads.
    """
    return MongoClient(uri)
