"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the MongoDB store for another document store
- Unit testing with in-memory implementations
- Clear separation of concerns

Usage:
    ```python
    from ride_hailing.protocols import DocumentStore

    store: DocumentStore = MongoDocumentStore(collection)  # works
    store: DocumentStore = InMemoryDocumentStore()          # also works
    ```
"""

from .document_store import DocumentStore

__all__ = [
    "DocumentStore",
]
