"""
Tests for the records API.
"""

import re

import pytest

UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Ride Hailing Records API"
    assert set(data["endpoints"]) == {"drivers", "rides", "users", "payments"}


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert all(data["stores"].values())


def test_unknown_entity(client):
    response = client.get("/trips")
    assert response.status_code == 404


# Drivers


def test_create_driver_defaults(client):
    response = client.post("/drivers", json={"name": "Alice"})
    assert response.status_code == 201
    assert response.headers["content-type"].startswith("application/json")
    data = response.json()
    assert re.fullmatch(rf"d_{UUID}", data["id"])
    assert data == {
        "id": data["id"],
        "name": "Alice",
        "traveling": False,
        "travel": None,
        "busy": False,
        "car": None,
    }


def test_create_driver_with_car(client):
    response = client.post("/drivers", json={"name": "Bob", "car": "Mazda 3"})
    assert response.status_code == 201
    assert response.json()["car"] == "Mazda 3"


def test_create_driver_rejects_blank_name(client, stores):
    response = client.post("/drivers", json={"name": "   "})
    assert response.status_code == 400
    assert response.text == "Invalid request body"
    assert stores["drivers"].documents == {}


def test_create_driver_rejects_malformed_json(client):
    response = client.post(
        "/drivers",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.text == "Invalid request body"


def test_create_driver_rejects_empty_body(client):
    response = client.post("/drivers")
    assert response.status_code == 400
    assert response.text == "Invalid request body"


def test_get_driver_after_create(client):
    created = client.post("/drivers", json={"name": "Alice", "car": "Fiat"}).json()

    response = client.get("/drivers", params={"id": created["id"]})

    assert response.status_code == 200
    assert response.json() == created


def test_get_driver_blank_id(client):
    response = client.get("/drivers", params={"id": ""})
    assert response.status_code == 400
    assert response.text == "Invalid request body"


def test_get_driver_unknown_id(client):
    response = client.get("/drivers", params={"id": "d_missing"})
    assert response.status_code == 404
    assert response.text == "Driver not found"


def test_list_drivers(client):
    assert client.get("/drivers").json() == []

    client.post("/drivers", json={"name": "Alice"})
    client.post("/drivers", json={"name": "Bob"})

    response = client.get("/drivers")
    assert response.status_code == 200
    assert sorted(d["name"] for d in response.json()) == ["Alice", "Bob"]


def test_update_driver_travel(client):
    created = client.post("/drivers", json={"name": "Alice", "car": "Fiat"}).json()

    response = client.put(
        "/drivers",
        json={"id": created["id"], "traveling": True, "rideId": "r_1"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["traveling"] is True
    assert data["travel"] == "r_1"
    # busy and car were not sent, so they keep their stored values
    assert data["busy"] is False
    assert data["car"] == "Fiat"


def test_update_driver_partial_fields_overwrite_when_present(client):
    created = client.post("/drivers", json={"name": "Alice", "car": "Fiat"}).json()

    response = client.put(
        "/drivers",
        json={"id": created["id"], "traveling": False, "busy": True, "car": "Renault"},
    )

    data = response.json()
    assert data["busy"] is True
    assert data["car"] == "Renault"
    assert data["travel"] is None


def test_update_driver_unknown_id(client):
    response = client.put("/drivers", json={"id": "d_missing", "traveling": True})
    assert response.status_code == 404
    assert response.text == "Driver not found"


def test_update_driver_requires_id(client):
    response = client.put("/drivers", json={"traveling": True})
    assert response.status_code == 400


def test_delete_driver_not_allowed(client, stores):
    created = client.post("/drivers", json={"name": "Alice"}).json()

    response = client.delete("/drivers", params={"id": created["id"]})

    assert response.status_code == 405
    assert response.text == "Method not allowed"
    assert created["id"] in stores["drivers"].documents


# Rides


def test_create_ride_defaults(client):
    response = client.post("/rides", json={"driver": "d_123"})
    assert response.status_code == 201
    data = response.json()
    assert re.fullmatch(rf"r_{UUID}", data["id"])
    assert data["driver"] == "d_123"
    assert data["available"] is True
    assert data["passengerId"] is None


def test_create_ride_requires_driver(client):
    response = client.post("/rides", json={})
    assert response.status_code == 400


def test_take_ride(client):
    ride = client.post("/rides", json={"driver": "d_123"}).json()

    response = client.put(
        "/rides",
        json={"id": ride["id"], "available": False, "passengerId": "u_9"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "id": ride["id"],
        "driver": "d_123",
        "available": False,
        "passengerId": "u_9",
    }


def test_get_ride_unknown_id(client):
    response = client.get("/rides", params={"id": "r_missing"})
    assert response.status_code == 404
    assert response.text == "Ride not found"


# Users


def test_create_user_defaults(client):
    response = client.post("/users", json={"name": "Carol"})
    assert response.status_code == 201
    data = response.json()
    assert re.fullmatch(rf"u_{UUID}", data["id"])
    assert data == {"id": data["id"], "name": "Carol", "traveling": False, "travel": None}


def test_update_user_travel(client):
    user = client.post("/users", json={"name": "Carol"}).json()

    response = client.put("/users", json={"id": user["id"], "traveling": True, "rideId": "r_5"})

    assert response.status_code == 200
    assert response.json()["travel"] == "r_5"
    assert client.get("/users", params={"id": user["id"]}).json()["traveling"] is True


def test_update_user_unknown_id(client):
    response = client.put("/users", json={"id": "u_missing"})
    assert response.status_code == 404
    assert response.text == "User not found"


# Payments


def test_create_payment_defaults(client):
    response = client.post("/payments", json={"userId": "u_1", "rideId": "r_1", "amount": 12.5})
    assert response.status_code == 201
    data = response.json()
    assert re.fullmatch(rf"pay_{UUID}", data["id"])
    assert data == {
        "id": data["id"],
        "userId": "u_1",
        "amount": 12.5,
        "processed": False,
        "transactionId": None,
        "rideId": "r_1",
    }


def test_create_payment_requires_ride(client):
    response = client.post("/payments", json={"userId": "u_1", "rideId": " "})
    assert response.status_code == 400


def test_process_payment(client):
    payment = client.post("/payments", json={"userId": "u_1", "rideId": "r_1", "amount": 10}).json()

    response = client.put(
        "/payments",
        json={"id": payment["id"], "processed": True, "transactionId": "t1", "rideId": "r_1"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["processed"] is True
    assert data["transactionId"] == "t1"
    assert data["amount"] == 10.0


def test_process_payment_updates_amount_when_sent(client):
    payment = client.post("/payments", json={"userId": "u_1", "rideId": "r_1", "amount": 10}).json()

    response = client.put(
        "/payments",
        json={
            "id": payment["id"],
            "processed": True,
            "transactionId": "t1",
            "rideId": "r_2",
            "amount": 14.75,
        },
    )

    data = response.json()
    assert data["amount"] == 14.75
    assert data["rideId"] == "r_2"


def test_update_payment_unknown_id(client):
    response = client.put(
        "/payments",
        json={"id": "pay_missing", "processed": True, "transactionId": "t1", "rideId": "r1"},
    )
    assert response.status_code == 404
    assert response.text == "Payment not found"


def test_update_payment_requires_transaction_id(client):
    payment = client.post("/payments", json={"userId": "u_1", "rideId": "r_1"}).json()

    response = client.put("/payments", json={"id": payment["id"], "rideId": "r_1"})

    assert response.status_code == 400


def test_delete_payment_twice(client, stores):
    payment = client.post("/payments", json={"userId": "u_1", "rideId": "r_1"}).json()

    first = client.delete("/payments", params={"id": payment["id"]})
    second = client.delete("/payments", params={"id": payment["id"]})

    assert first.status_code == 200
    assert first.text == "Deleted payment"
    assert second.status_code == 404
    assert second.text == "Payment not found"
    assert stores["payments"].documents == {}


def test_delete_payment_requires_id(client):
    assert client.delete("/payments").status_code == 400
    assert client.delete("/payments", params={"id": ""}).status_code == 400


def test_unsupported_method(client, stores):
    client.post("/payments", json={"userId": "u_1", "rideId": "r_1"})
    before = dict(stores["payments"].documents)

    response = client.patch("/payments", json={"processed": True})

    assert response.status_code == 405
    assert response.text == "Method not allowed"
    assert stores["payments"].documents == before


@pytest.mark.parametrize("method", ["TRACE", "PROPFIND"])
def test_unrouted_method_is_plain_text(client, method):
    response = client.request(method, "/drivers")

    assert response.status_code == 405
    assert response.text == "Method not allowed"
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_path_keeps_json_not_found(client):
    response = client.get("/drivers/d_1")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}
