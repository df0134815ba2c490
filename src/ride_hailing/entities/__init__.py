"""Domain entities for internal representation.

These are frozen dataclasses used internally by services and
repositories. They are NOT used for API contracts - use DTOs
from the dto package for that, and the conversion functions in
repositories.documents for the stored representation.
"""

from .driver import DRIVER_ID_PREFIX, Driver
from .identifiers import new_id
from .payment import PAYMENT_ID_PREFIX, Payment
from .ride import RIDE_ID_PREFIX, Ride
from .user import USER_ID_PREFIX, User

__all__ = [
    "Driver",
    "Ride",
    "User",
    "Payment",
    "DRIVER_ID_PREFIX",
    "RIDE_ID_PREFIX",
    "USER_ID_PREFIX",
    "PAYMENT_ID_PREFIX",
    "new_id",
]
