"""Document store protocol.

Defines the interface for a collection of flat records keyed by a string
``id`` field. Every operation is a single call against the store; there is
no batching and no transaction spanning more than one call.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for a single collection of records.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed.
    """

    def insert_one(self, document: dict[str, Any]) -> bool:
        """Insert a new document.

        Args:
            document: The document to insert, including its ``id``

        Returns:
            True if the store acknowledged the write
        """
        ...

    def find_by_id(self, record_id: str) -> dict[str, Any] | None:
        """Fetch the document whose ``id`` equals record_id.

        Returns:
            The document, or None if nothing matches
        """
        ...

    def find_all(self) -> list[dict[str, Any]]:
        """Fetch every document in the collection (unbounded)."""
        ...

    def update_by_id(self, record_id: str, fields: dict[str, Any]) -> int:
        """Set the given fields on the document whose ``id`` equals record_id.

        Returns:
            Number of documents matched (0 or 1)
        """
        ...

    def delete_by_id(self, record_id: str) -> int:
        """Delete the document whose ``id`` equals record_id.

        Returns:
            Number of documents deleted (0 or 1)
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable."""
        ...
