"""Payment record operations.

Payments are the only records that can be deleted.
"""

import logging
from typing import Any

from ride_hailing.entities import PAYMENT_ID_PREFIX, Payment, new_id
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import payment_from_document, payment_to_document
from ride_hailing.repositories.documents import (
    FIELD_AMOUNT,
    FIELD_PROCESSED,
    FIELD_RIDE_ID,
    FIELD_TRANSACTION_ID,
)
from ride_hailing.results import Failure, Ok, Result

from .base import RecordService, is_blank

logger = logging.getLogger(__name__)

MESSAGE_DELETED = "Deleted payment"


class PaymentService(RecordService[Payment]):
    """Create, read, update and delete payments."""

    entity_name = "payment"
    not_found_message = "Payment not found"

    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store, payment_to_document, payment_from_document)

    def create(self, user_id: str, ride_id: str, amount: float = 0.0) -> Result[Payment]:
        """Record a new, unprocessed payment for a ride."""
        payment = Payment(
            id=new_id(PAYMENT_ID_PREFIX),
            user_id=user_id,
            ride_id=ride_id,
            amount=amount,
        )
        return self._insert(payment)

    def update_processing(
        self,
        payment_id: str,
        processed: bool,
        transaction_id: str,
        ride_id: str,
        amount: float | None = None,
    ) -> Result[Payment]:
        """Record the processing state of a payment.

        ``processed``, ``transaction_id`` and ``ride_id`` are always
        written; ``amount`` only when given.
        """
        fields: dict[str, Any] = {
            FIELD_PROCESSED: processed,
            FIELD_TRANSACTION_ID: transaction_id,
            FIELD_RIDE_ID: ride_id,
        }
        if amount is not None:
            fields[FIELD_AMOUNT] = amount
        return self._update(payment_id, fields)

    def delete(self, payment_id: str | None) -> Result[str]:
        """Delete a payment by id.

        Returns:
            Ok with the confirmation message, Failure(INVALID_REQUEST) for a
            missing or blank id, or Failure(NOT_FOUND)
        """
        if is_blank(payment_id):
            return Failure.invalid()
        if self._store.delete_by_id(payment_id) == 0:  # type: ignore[arg-type]
            logger.debug("payment %s not found for delete", payment_id)
            return Failure.not_found(self.not_found_message)
        return Ok(MESSAGE_DELETED)
