"""HTTP handler for the payments endpoint.

Payments are the only records with a DELETE route. It takes the id from
the ``id`` query parameter and answers with a plain-text confirmation.
"""

from ride_hailing.dto import CreatePaymentRequest, PaymentResponse, UpdatePaymentRequest
from ride_hailing.entities import Payment
from ride_hailing.results import Failure, Result
from ride_hailing.services import PaymentService

from .base import METHOD_DELETE, QUERY_PARAM_ID, RecordHandler
from .gateway import GatewayRequest


class PaymentHandler(RecordHandler[Payment]):
    name = "payments"
    response_model = PaymentResponse

    def __init__(self, service: PaymentService) -> None:
        super().__init__(service)
        self._payments = service

    def dispatch_other(self, request: GatewayRequest) -> Result:
        if request.method == METHOD_DELETE:
            return self._payments.delete(request.query.get(QUERY_PARAM_ID))
        return super().dispatch_other(request)

    def create(self, body: str | bytes | None) -> Result:
        request = self.parse(CreatePaymentRequest, body)
        if request is None:
            return Failure.invalid()
        return self._payments.create(
            user_id=request.user_id,
            ride_id=request.ride_id,
            amount=request.amount,
        )

    def update(self, body: str | bytes | None) -> Result:
        request = self.parse(UpdatePaymentRequest, body)
        if request is None:
            return Failure.invalid()
        return self._payments.update_processing(
            payment_id=request.id,
            processed=request.processed,
            transaction_id=request.transaction_id,
            ride_id=request.ride_id,
            amount=request.amount,
        )
