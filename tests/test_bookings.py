from datetime import date, datetime, timedelta

import pytest

from salon_backend.routers.bookings_router import hours_until


@pytest.fixture
def booking_payload(make_employee, make_service):
    day = (date.today() + timedelta(days=7)).isoformat()
    return {
        "employeeId": make_employee(),
        "serviceId": make_service(),
        "bookingDate": day,
        "bookingTime": "10:00",
        "clientName": "Cleo Client",
        "clientEmail": "client@example.com",
    }


def _book(client, payload, headers=None):
    resp = client.post("/api/bookings", json=payload, headers=headers or {})
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]["id"]


def test_anonymous_booking_is_pending(client, booking_payload, owner_headers):
    booking_id = _book(client, booking_payload)
    got = client.get(f"/api/bookings/{booking_id}", headers=owner_headers).json()["data"]
    assert got["status"] == "pending"
    assert got["createdByRole"] == "client"


def test_booking_requires_fields(client):
    resp = client.post("/api/bookings", json={"clientName": "X"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields: employeeId, serviceId, bookingDate, bookingTime"


def test_booking_unknown_service_is_404(client, booking_payload):
    resp = client.post("/api/bookings", json={**booking_payload, "serviceId": "missing"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Service not found for this booking"


def test_booking_by_signed_in_user_records_creator(client, booking_payload, employee_headers):
    booking_id = _book(client, booking_payload, employee_headers)
    got = client.get(f"/api/bookings/{booking_id}", headers=employee_headers).json()["data"]
    assert got["createdByRole"] == "employee"
    assert got["createdByName"] == "Sam Staff"


def test_list_requires_auth_and_scopes_clients(client, booking_payload, owner_headers, client_headers):
    _book(client, booking_payload)
    _book(client, {**booking_payload, "bookingTime": "11:00", "clientEmail": "someone@example.com"})

    assert client.get("/api/bookings").status_code == 401
    assert len(client.get("/api/bookings", headers=owner_headers).json()["data"]) == 2
    mine = client.get("/api/bookings", headers=client_headers).json()["data"]
    assert [b["clientEmail"] for b in mine] == ["client@example.com"]


def test_list_filters(client, booking_payload, owner_headers):
    _book(client, booking_payload)
    _book(client, {**booking_payload, "status": "confirmed", "bookingTime": "12:00"})
    confirmed = client.get("/api/bookings", params={"status": "confirmed"}, headers=owner_headers).json()["data"]
    assert [b["bookingTime"] for b in confirmed] == ["12:00"]


def test_update_status(client, booking_payload, employee_headers):
    booking_id = _book(client, booking_payload)
    resp = client.put(f"/api/bookings/{booking_id}", json={"status": "completed"}, headers=employee_headers)
    assert resp.json()["data"]["status"] == "completed"
    assert resp.json()["data"]["completedAt"] is not None


def test_update_cannot_cancel(client, booking_payload, owner_headers):
    booking_id = _book(client, booking_payload)
    resp = client.put(f"/api/bookings/{booking_id}", json={"status": "cancelled"}, headers=owner_headers)
    assert resp.status_code == 400


def test_client_cancels_well_ahead(client, booking_payload, client_headers):
    booking_id = _book(client, booking_payload)
    resp = client.post(f"/api/bookings/{booking_id}/cancel", json={"reason": "sick"}, headers=client_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["hoursUntil"] > 24

    got = client.get(f"/api/bookings/{booking_id}", headers=client_headers).json()["data"]
    assert got["status"] == "cancelled"
    assert got["cancelledAt"] is not None
    assert "sick" in got["notes"]

    again = client.post(f"/api/bookings/{booking_id}/cancel", headers=client_headers)
    assert again.status_code == 400


def test_late_cancellation_only_for_staff(client, booking_payload, client_headers, owner_headers):
    tomorrow_soon = datetime.now() + timedelta(hours=3)
    payload = {
        **booking_payload,
        "bookingDate": tomorrow_soon.date().isoformat(),
        "bookingTime": tomorrow_soon.strftime("%H:%M"),
    }
    booking_id = _book(client, payload)

    denied = client.post(f"/api/bookings/{booking_id}/cancel", headers=client_headers)
    assert denied.status_code == 403
    assert client.post(f"/api/bookings/{booking_id}/cancel").status_code == 403

    allowed = client.post(f"/api/bookings/{booking_id}/cancel", headers=owner_headers)
    assert allowed.status_code == 200


def test_delete_is_owner_only(client, booking_payload, owner_headers, employee_headers):
    booking_id = _book(client, booking_payload)
    assert client.delete(f"/api/bookings/{booking_id}", headers=employee_headers).status_code == 403
    assert client.delete(f"/api/bookings/{booking_id}", headers=owner_headers).status_code == 200
    assert client.get(f"/api/bookings/{booking_id}", headers=owner_headers).status_code == 404


def test_hours_until():
    now = datetime(2030, 1, 1, 8, 0)
    assert hours_until("2030-01-02", "08:00", now=now) == 24
    assert hours_until("2030-01-01", "07:30", now=now) == -0.5


def test_single_booking_needs_a_token(client, booking_payload):
    booking_id = _book(client, booking_payload)
    resp = client.get(f"/api/bookings/{booking_id}")
    assert resp.status_code == 401
    assert resp.json()["error"] == "Authentication required"


def test_client_only_reads_own_booking(client, booking_payload, make_account, client_headers):
    mine = _book(client, booking_payload)
    theirs = _book(client, {**booking_payload, "bookingTime": "11:00", "clientEmail": "other@example.com"})

    assert client.get(f"/api/bookings/{mine}", headers=client_headers).status_code == 200
    resp = client.get(f"/api/bookings/{theirs}", headers=client_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "Booking not found"

    _, other_headers = make_account("other@example.com", "client")
    assert client.get(f"/api/bookings/{theirs}", headers=other_headers).status_code == 200


def test_update_rejects_null_for_required_fields(client, booking_payload, owner_headers):
    booking_id = _book(client, booking_payload)
    resp = client.put(f"/api/bookings/{booking_id}", json={"clientName": None}, headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Invalid value for clientName")
