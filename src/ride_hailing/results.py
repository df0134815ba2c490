"""Typed outcomes passed from services to handlers.

Services never raise for expected conditions. They return either ``Ok``
with the value to serialize or ``Failure`` with a kind that the handler
maps to an HTTP status. Anything that is raised anyway is treated as
``FailureKind.UNEXPECTED`` at the handler boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

MESSAGE_INVALID_BODY = "Invalid request body"
MESSAGE_METHOD_NOT_ALLOWED = "Method not allowed"
MESSAGE_INTERNAL_ERROR = "Internal server error"


class FailureKind(Enum):
    """Failure categories and the status code each one maps to."""

    INVALID_REQUEST = 400
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    UNEXPECTED = 500

    @property
    def status_code(self) -> int:
        return self.value


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Entity, list of entities, or a plain message
        status_code: 200 for reads/updates/deletes, 201 for creates
    """

    value: T
    status_code: int = 200


@dataclass(frozen=True)
class Failure:
    """Failed outcome with the plain-text message to return."""

    kind: FailureKind
    message: str

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @classmethod
    def invalid(cls) -> "Failure":
        return cls(FailureKind.INVALID_REQUEST, MESSAGE_INVALID_BODY)

    @classmethod
    def not_found(cls, message: str) -> "Failure":
        return cls(FailureKind.NOT_FOUND, message)

    @classmethod
    def method_not_allowed(cls) -> "Failure":
        return cls(FailureKind.METHOD_NOT_ALLOWED, MESSAGE_METHOD_NOT_ALLOWED)

    @classmethod
    def unexpected(cls) -> "Failure":
        return cls(FailureKind.UNEXPECTED, MESSAGE_INTERNAL_ERROR)


Result = Ok[T] | Failure
