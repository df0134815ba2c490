"""Shared persistence pipeline for record services.

Every entity service does the same things against its own collection:
insert a new record, fetch one or all, set fields on one and read it
back. Subclasses supply the entity conversion and the not-found message.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ride_hailing.protocols import DocumentStore
from ride_hailing.results import Failure, Ok, Result

logger = logging.getLogger(__name__)

E = TypeVar("E")


class RecordService(Generic[E]):
    """Base service for a single collection of records.

    Subclasses set ``entity_name`` and ``not_found_message`` and pass
    their conversion functions to ``__init__``.
    """

    entity_name: str = "record"
    not_found_message: str = "Record not found"

    def __init__(
        self,
        store: DocumentStore,
        to_document: Callable[[E], dict[str, Any]],
        from_document: Callable[[dict[str, Any]], E],
    ) -> None:
        self._store = store
        self._to_document = to_document
        self._from_document = from_document

    def list_all(self) -> Result[list[E]]:
        """Fetch every record in the collection."""
        return Ok([self._from_document(doc) for doc in self._store.find_all()])

    def get(self, record_id: str | None) -> Result[E]:
        """Fetch one record by id.

        Args:
            record_id: The record id; None or blank is rejected

        Returns:
            Ok(entity), Failure(INVALID_REQUEST) or Failure(NOT_FOUND)
        """
        if is_blank(record_id):
            return Failure.invalid()
        document = self._store.find_by_id(record_id)  # type: ignore[arg-type]
        if document is None:
            logger.debug("%s %s not found", self.entity_name, record_id)
            return Failure.not_found(self.not_found_message)
        return Ok(self._from_document(document))

    def _insert(self, entity: E) -> Result[E]:
        """Insert a freshly built entity and return it with status 201."""
        if not self._store.insert_one(self._to_document(entity)):
            logger.error("Insert of %s was not acknowledged", self.entity_name)
            return Failure.unexpected()
        return Ok(entity, status_code=201)

    def _update(self, record_id: str, fields: dict[str, Any]) -> Result[E]:
        """Set fields on a record, then read back its stored state.

        The read-back can miss if the record was deleted in between; that
        is reported as not found rather than an error.
        """
        if self._store.update_by_id(record_id, fields) == 0:
            logger.debug("%s %s not found for update", self.entity_name, record_id)
            return Failure.not_found(self.not_found_message)

        document = self._store.find_by_id(record_id)
        if document is None:
            logger.debug("%s %s disappeared after update", self.entity_name, record_id)
            return Failure.not_found(self.not_found_message)
        return Ok(self._from_document(document))


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
