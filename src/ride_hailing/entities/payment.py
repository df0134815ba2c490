"""Payment domain entity."""

from dataclasses import dataclass

PAYMENT_ID_PREFIX = "pay_"


@dataclass(frozen=True)
class Payment:
    """A payment for a ride.

    Attributes:
        id: Immutable identifier, "pay_" followed by a UUID
        user_id: Id of the paying user (not checked)
        ride_id: Id of the ride being paid for (not checked)
        amount: Amount charged
        processed: Whether the payment went through
        transaction_id: External transaction reference, set once processed
    """

    id: str
    user_id: str
    ride_id: str
    amount: float = 0.0
    processed: bool = False
    transaction_id: str | None = None
