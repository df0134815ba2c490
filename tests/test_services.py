"""
Tests for the record services.
"""

import pytest

from ride_hailing.entities import Driver, Payment
from ride_hailing.results import Failure, FailureKind, Ok
from ride_hailing.services import DriverService, PaymentService, RideService, UserService
from tests.conftest import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore()


def test_create_driver_stores_document(store):
    result = DriverService(store).create(name="Alice", car="Fiat")

    assert isinstance(result, Ok)
    assert result.status_code == 201
    driver = result.value
    assert isinstance(driver, Driver)
    assert driver.id.startswith("d_")
    assert store.documents[driver.id] == {
        "id": driver.id,
        "name": "Alice",
        "traveling": False,
        "travel": None,
        "busy": False,
        "car": "Fiat",
    }


def test_generated_ids_are_unique(store):
    service = UserService(store)
    ids = {service.create(name=f"user {i}").value.id for i in range(50)}
    assert len(ids) == 50


def test_get_returns_same_fields_as_create(store):
    service = RideService(store)
    created = service.create(driver="d_1").value

    fetched = service.get(created.id)

    assert fetched == Ok(created)


@pytest.mark.parametrize("record_id", [None, "", "   "])
def test_get_rejects_blank_id(store, record_id):
    result = UserService(store).get(record_id)
    assert result == Failure(FailureKind.INVALID_REQUEST, "Invalid request body")


def test_get_missing_record(store):
    result = DriverService(store).get("d_missing")
    assert isinstance(result, Failure)
    assert result.status_code == 404
    assert result.message == "Driver not found"


def test_driver_partial_update_keeps_absent_fields(store):
    service = DriverService(store)
    driver = service.create(name="Alice", car="Fiat").value
    service.update_travel(driver.id, traveling=False, travel=None, busy=True)

    result = service.update_travel(driver.id, traveling=True, travel="r_1")

    updated = result.value
    assert updated.busy is True
    assert updated.car == "Fiat"
    assert updated.traveling is True
    assert updated.travel == "r_1"


def test_driver_update_always_writes_travel(store):
    service = DriverService(store)
    driver = service.create(name="Alice").value
    service.update_travel(driver.id, traveling=True, travel="r_1")

    updated = service.update_travel(driver.id, traveling=False, travel=None).value

    assert updated.traveling is False
    assert updated.travel is None


def test_update_missing_record_is_not_found(store):
    result = RideService(store).update_availability("r_missing", available=False, passenger_id="u_1")
    assert result == Failure(FailureKind.NOT_FOUND, "Ride not found")
    assert store.documents == {}


def test_payment_update_keeps_amount_when_absent(store):
    service = PaymentService(store)
    payment = service.create(user_id="u_1", ride_id="r_1", amount=20.0).value

    updated = service.update_processing(
        payment.id, processed=True, transaction_id="t1", ride_id="r_1"
    ).value

    assert updated == Payment(
        id=payment.id,
        user_id="u_1",
        ride_id="r_1",
        amount=20.0,
        processed=True,
        transaction_id="t1",
    )


def test_payment_delete(store):
    service = PaymentService(store)
    payment = service.create(user_id="u_1", ride_id="r_1").value

    assert service.delete(payment.id) == Ok("Deleted payment")
    assert service.delete(payment.id) == Failure(FailureKind.NOT_FOUND, "Payment not found")


@pytest.mark.parametrize("payment_id", [None, "", " "])
def test_payment_delete_rejects_blank_id(store, payment_id):
    result = PaymentService(store).delete(payment_id)
    assert isinstance(result, Failure)
    assert result.kind is FailureKind.INVALID_REQUEST


def test_list_all(store):
    service = UserService(store)
    service.create(name="Carol")
    service.create(name="Dave")

    result = service.list_all()

    assert sorted(user.name for user in result.value) == ["Carol", "Dave"]
