from datetime import date, datetime, timedelta

import pytest

from salon_backend.models.availability_model import Availability
from salon_backend.models.blocked_slot_model import BlockedSlot
from salon_backend.services.slot_service import compute_slots, day_number, generate_time_slots


def _next_weekday(number: int) -> date:
    """Next date (from tomorrow on) whose day number, 0 = Sunday, is ``number``."""
    day = date.today() + timedelta(days=1)
    while day_number(day) != number:
        day += timedelta(days=1)
    return day


@pytest.fixture
def setup(client, owner_headers, make_employee, make_service):
    emp = make_employee()
    svc = make_service(duration=60)
    day = _next_weekday(2)
    client.post("/api/availability", json={
        "employeeId": emp, "dayOfWeek": 2, "startTime": "09:00", "endTime": "12:00",
    }, headers=owner_headers)
    return emp, svc, day.isoformat()


def _slots(client, emp, svc, day):
    resp = client.get("/api/slots/available", params={"employeeId": emp, "serviceId": svc, "date": day})
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def test_slots_from_weekly_window(client, setup):
    emp, svc, day = setup
    data = _slots(client, emp, svc, day)
    assert data["date"] == day
    assert [(s["time"], s["available"]) for s in data["slots"]] == [
        ("09:00", True), ("10:00", True), ("11:00", True), ("12:00", True),
    ]


def test_booked_and_blocked_times_are_unavailable(client, owner_headers, setup):
    emp, svc, day = setup
    client.post("/api/bookings", json={
        "employeeId": emp, "serviceId": svc, "bookingDate": day, "bookingTime": "10:00", "clientName": "C",
    })
    client.post("/api/blocked-slots", json={
        "employeeId": emp, "date": day, "startTime": "11:00", "endTime": "12:00",
    }, headers=owner_headers)

    free = {s["time"]: s["available"] for s in _slots(client, emp, svc, day)["slots"]}
    assert free == {"09:00": True, "10:00": False, "11:00": False, "12:00": True}


def test_cancelled_bookings_free_the_slot(client, owner_headers, setup):
    emp, svc, day = setup
    booking = client.post("/api/bookings", json={
        "employeeId": emp, "serviceId": svc, "bookingDate": day, "bookingTime": "09:00", "clientName": "C",
    }).json()["data"]["id"]
    client.post(f"/api/bookings/{booking}/cancel", headers=owner_headers)
    free = {s["time"]: s["available"] for s in _slots(client, emp, svc, day)["slots"]}
    assert free["09:00"] is True


def test_other_weekday_has_no_slots(client, setup):
    emp, svc, _day = setup
    assert _slots(client, emp, svc, _next_weekday(5).isoformat())["slots"] == []


def test_past_date_has_no_slots(client, setup):
    emp, svc, _day = setup
    assert _slots(client, emp, svc, "2000-01-04")["slots"] == []


def test_parameters_and_unknown_service(client, setup):
    emp, _svc, day = setup
    resp = client.get("/api/slots/available", params={"employeeId": emp, "date": day})
    assert resp.status_code == 400
    assert resp.json()["error"] == "employeeId, serviceId, and date are required"
    resp = client.get("/api/slots/available", params={"employeeId": emp, "serviceId": "nope", "date": day})
    assert resp.status_code == 404


def test_service_window_adds_to_generic_ones(client, owner_headers, setup):
    emp, svc, day = setup
    client.post("/api/availability", json={
        "employeeId": emp, "serviceId": svc, "dayOfWeek": 2, "startTime": "14:00", "endTime": "15:00",
    }, headers=owner_headers)
    times = [s["time"] for s in _slots(client, emp, svc, day)["slots"]]
    assert times == ["09:00", "10:00", "11:00", "12:00", "14:00", "15:00"]


def test_windows_of_other_services_are_the_fallback(client, owner_headers, make_employee, make_service):
    emp, svc, other = make_employee("Ben", "Two"), make_service("Cut", duration=60), make_service("Color")
    day = _next_weekday(3)
    client.post("/api/availability", json={
        "employeeId": emp, "serviceId": other, "dayOfWeek": 3, "startTime": "13:00", "endTime": "14:00",
    }, headers=owner_headers)
    times = [s["time"] for s in _slots(client, emp, svc, day.isoformat())["slots"]]
    assert times == ["13:00", "14:00"]


def test_generate_time_slots_includes_end():
    assert generate_time_slots("09:00", "10:30", 30) == ["09:00", "09:30", "10:00", "10:30"]


def test_compute_slots_applies_buffer_today():
    now = datetime(2030, 3, 5, 9, 40)
    window = Availability(day_of_week=2, start_time="09:00", end_time="11:00", is_available=True)
    slots = compute_slots("2030-03-05", 30, [window], [], [], now=now, buffer_minutes=30)
    assert slots == [
        ("09:00", False), ("09:30", False), ("10:00", False), ("10:30", True), ("11:00", True),
    ]


def test_compute_slots_blocked_without_end_uses_duration():
    window = Availability(day_of_week=2, start_time="09:00", end_time="10:00", is_available=True)
    blocked = BlockedSlot(start_time="09:00", end_time=None)
    slots = compute_slots("2030-03-05", 30, [window], [], [blocked], now=datetime(2030, 1, 1))
    assert slots == [("09:00", False), ("09:30", True), ("10:00", True)]
