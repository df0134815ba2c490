"""Method routing, body parsing and response rendering for record handlers.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ride_hailing.results import Failure, Result
from ride_hailing.services import RecordService

from .gateway import GatewayRequest, GatewayResponse

logger = logging.getLogger(__name__)

E = TypeVar("E")
M = TypeVar("M", bound=BaseModel)

QUERY_PARAM_ID = "id"

METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"


class RecordHandler(ABC, Generic[E]):
    """Handler for one entity's endpoint.

    Routes GET to list/get, POST to ``create`` and PUT to ``update``.
    Every other method is answered with 405 unless a subclass handles it
    in ``dispatch_other``. Nothing raised below ``handle`` escapes it: any
    exception is logged and answered with a generic 500.

    Example:
        ```python
        handler = DriverHandler(DriverService(store))
        response = handler.handle(GatewayRequest(method="GET"))
        ```
    """

    name: str = "records"
    response_model: type[BaseModel]

    def __init__(self, service: RecordService[E]) -> None:
        self._service = service
        self._list_adapter = TypeAdapter(list[self.response_model])  # type: ignore[name-defined]

    def handle(self, request: GatewayRequest) -> GatewayResponse:
        """Handle one invocation end to end."""
        try:
            return self.render(self.dispatch(request))
        except Exception:
            logger.exception("Unhandled error in %s handler for %s", self.name, request.method)
            return self.render(Failure.unexpected())

    def dispatch(self, request: GatewayRequest) -> Result:
        if request.method == METHOD_GET:
            return self.read(request)
        if request.method == METHOD_POST:
            return self.create(request.body)
        if request.method == METHOD_PUT:
            return self.update(request.body)
        return self.dispatch_other(request)

    def dispatch_other(self, request: GatewayRequest) -> Result:
        """Route methods beyond GET/POST/PUT. Rejects them by default."""
        return Failure.method_not_allowed()

    def read(self, request: GatewayRequest) -> Result:
        """List all records, or fetch one when the ``id`` parameter is present."""
        if QUERY_PARAM_ID in request.query:
            return self._service.get(request.query[QUERY_PARAM_ID])
        return self._service.list_all()

    @abstractmethod
    def create(self, body: str | bytes | None) -> Result:
        """Validate a create body and insert the record."""

    @abstractmethod
    def update(self, body: str | bytes | None) -> Result:
        """Validate an update body and apply it."""

    def to_response(self, entity: E) -> BaseModel:
        """Convert an entity to its response DTO."""
        return self.response_model.from_entity(entity)  # type: ignore[attr-defined]

    def render(self, result: Result) -> GatewayResponse:
        """Serialize a result into the outbound response."""
        if isinstance(result, Failure):
            return GatewayResponse.text(result.status_code, result.message)

        value = result.value
        if isinstance(value, str):
            return GatewayResponse.text(result.status_code, value)
        if isinstance(value, list):
            items = [self.to_response(entity) for entity in value]
            body = self._list_adapter.dump_json(items, by_alias=True).decode()
            return GatewayResponse.json(result.status_code, body)
        body = self.to_response(value).model_dump_json(by_alias=True)
        return GatewayResponse.json(result.status_code, body)

    @staticmethod
    def parse(model: type[M], body: str | bytes | None) -> M | None:
        """Parse and validate a JSON body.

        Returns:
            The validated DTO, or None for a missing, malformed or
            incomplete body. The two cases are not told apart.
        """
        if not body:
            return None
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            logger.debug("Rejected %s body: %s", model.__name__, e.error_count())
            return None
