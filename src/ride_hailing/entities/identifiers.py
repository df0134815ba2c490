"""Record identifier generation."""

import uuid


def new_id(prefix: str) -> str:
    """Build a new record id from an entity prefix and a random UUID4.

    No uniqueness check is made against the store; UUID4 collisions are
    not a practical concern.
    """
    return f"{prefix}{uuid.uuid4()}"
