"""Conversion between entities and stored documents.

Each entity has a ``*_to_document`` / ``*_from_document`` pair. The
conversion is written out field by field: stored field names follow the
camelCase used on the wire, and a document missing a field reads back as
that field's creation default.
"""

from typing import Any

from ride_hailing.entities import Driver, Payment, Ride, User

FIELD_ID = "id"
FIELD_NAME = "name"
FIELD_TRAVELING = "traveling"
FIELD_TRAVEL = "travel"
FIELD_BUSY = "busy"
FIELD_CAR = "car"
FIELD_DRIVER = "driver"
FIELD_AVAILABLE = "available"
FIELD_PASSENGER_ID = "passengerId"
FIELD_USER_ID = "userId"
FIELD_AMOUNT = "amount"
FIELD_PROCESSED = "processed"
FIELD_TRANSACTION_ID = "transactionId"
FIELD_RIDE_ID = "rideId"

Document = dict[str, Any]


def driver_to_document(driver: Driver) -> Document:
    return {
        FIELD_ID: driver.id,
        FIELD_NAME: driver.name,
        FIELD_TRAVELING: driver.traveling,
        FIELD_TRAVEL: driver.travel,
        FIELD_BUSY: driver.busy,
        FIELD_CAR: driver.car,
    }


def driver_from_document(document: Document) -> Driver:
    return Driver(
        id=document[FIELD_ID],
        name=document.get(FIELD_NAME),
        traveling=bool(document.get(FIELD_TRAVELING, False)),
        travel=document.get(FIELD_TRAVEL),
        busy=bool(document.get(FIELD_BUSY, False)),
        car=document.get(FIELD_CAR),
    )


def ride_to_document(ride: Ride) -> Document:
    return {
        FIELD_ID: ride.id,
        FIELD_DRIVER: ride.driver,
        FIELD_AVAILABLE: ride.available,
        FIELD_PASSENGER_ID: ride.passenger_id,
    }


def ride_from_document(document: Document) -> Ride:
    # A ride with no stored availability is still open
    return Ride(
        id=document[FIELD_ID],
        driver=document.get(FIELD_DRIVER),
        available=bool(document.get(FIELD_AVAILABLE, True)),
        passenger_id=document.get(FIELD_PASSENGER_ID),
    )


def user_to_document(user: User) -> Document:
    return {
        FIELD_ID: user.id,
        FIELD_NAME: user.name,
        FIELD_TRAVELING: user.traveling,
        FIELD_TRAVEL: user.travel,
    }


def user_from_document(document: Document) -> User:
    return User(
        id=document[FIELD_ID],
        name=document.get(FIELD_NAME),
        traveling=bool(document.get(FIELD_TRAVELING, False)),
        travel=document.get(FIELD_TRAVEL),
    )


def payment_to_document(payment: Payment) -> Document:
    return {
        FIELD_ID: payment.id,
        FIELD_USER_ID: payment.user_id,
        FIELD_AMOUNT: payment.amount,
        FIELD_PROCESSED: payment.processed,
        FIELD_TRANSACTION_ID: payment.transaction_id,
        FIELD_RIDE_ID: payment.ride_id,
    }


def payment_from_document(document: Document) -> Payment:
    amount = document.get(FIELD_AMOUNT)
    return Payment(
        id=document[FIELD_ID],
        user_id=document.get(FIELD_USER_ID),
        ride_id=document.get(FIELD_RIDE_ID),
        amount=float(amount) if amount is not None else 0.0,
        processed=bool(document.get(FIELD_PROCESSED, False)),
        transaction_id=document.get(FIELD_TRANSACTION_ID),
    )
