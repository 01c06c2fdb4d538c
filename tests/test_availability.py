import pytest


@pytest.fixture
def employee_id(make_employee):
    return make_employee()


def test_employee_id_is_required(client):
    resp = client.get("/api/availability")
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Employee ID is required"}


def test_create_accepts_day_names(client, employee_headers, employee_id):
    resp = client.post("/api/availability", json={
        "employeeId": employee_id, "dayOfWeek": "Monday", "startTime": "09:00", "endTime": "17:00",
    }, headers=employee_headers)
    assert resp.status_code == 200

    rows = client.get("/api/availability", params={"employeeId": employee_id}).json()["data"]
    assert len(rows) == 1
    assert rows[0]["dayOfWeek"] == 1
    assert rows[0]["isAvailable"] is True


def test_rows_are_ordered_monday_first(client, owner_headers, employee_id):
    for day in (0, 3, 1):
        client.post("/api/availability", json={
            "employeeId": employee_id, "dayOfWeek": day, "startTime": "10:00", "endTime": "12:00",
        }, headers=owner_headers)
    rows = client.get("/api/availability", params={"employeeId": employee_id}).json()["data"]
    assert [r["dayOfWeek"] for r in rows] == [1, 3, 0]


def test_service_filter_keeps_generic_windows(client, owner_headers, employee_id, make_service):
    svc, other = make_service("Cut"), make_service("Color")
    base = {"employeeId": employee_id, "dayOfWeek": 2, "startTime": "09:00", "endTime": "11:00"}
    client.post("/api/availability", json=base, headers=owner_headers)
    client.post("/api/availability", json={**base, "serviceId": svc}, headers=owner_headers)
    client.post("/api/availability", json={**base, "serviceId": other}, headers=owner_headers)

    rows = client.get("/api/availability", params={"employeeId": employee_id, "serviceId": svc}).json()["data"]
    assert sorted(r["serviceId"] or "" for r in rows) == sorted(["", svc])


def test_missing_fields_and_bad_window(client, owner_headers, employee_id):
    resp = client.post("/api/availability", json={"employeeId": employee_id}, headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields: dayOfWeek, startTime, endTime"

    resp = client.post("/api/availability", json={
        "employeeId": employee_id, "dayOfWeek": 1, "startTime": "12:00", "endTime": "09:00",
    }, headers=owner_headers)
    assert resp.status_code == 400


def test_clients_cannot_edit_availability(client, client_headers, employee_id):
    resp = client.post("/api/availability", json={
        "employeeId": employee_id, "dayOfWeek": 1, "startTime": "09:00", "endTime": "10:00",
    }, headers=client_headers)
    assert resp.status_code == 403


def test_update_and_delete(client, owner_headers, employee_id):
    entry = client.post("/api/availability", json={
        "employeeId": employee_id, "dayOfWeek": 4, "startTime": "09:00", "endTime": "10:00",
    }, headers=owner_headers).json()["data"]["id"]

    updated = client.put(f"/api/availability/{entry}", json={"endTime": "13:30"}, headers=owner_headers)
    assert updated.json()["data"]["endTime"] == "13:30"
    assert updated.json()["data"]["startTime"] == "09:00"

    assert client.delete(f"/api/availability/{entry}", headers=owner_headers).status_code == 200
    assert client.put(f"/api/availability/{entry}", json={"endTime": "14:00"}, headers=owner_headers).status_code == 404


def test_blocked_slots_crud(client, employee_headers, employee_id):
    resp = client.post("/api/blocked-slots", json={
        "employeeId": employee_id, "date": "2030-05-06", "startTime": "10:00", "reason": "dentist",
    }, headers=employee_headers)
    slot_id = resp.json()["data"]["id"]

    listed = client.get("/api/blocked-slots", params={
        "employeeId": employee_id, "startDate": "2030-05-01", "endDate": "2030-05-31",
    }).json()["data"]
    assert [s["id"] for s in listed] == [slot_id]
    assert client.get("/api/blocked-slots", params={
        "employeeId": employee_id, "startDate": "2030-06-01",
    }).json()["data"] == []

    assert client.delete(f"/api/blocked-slots/{slot_id}", headers=employee_headers).status_code == 200
    assert client.get("/api/blocked-slots").status_code == 400


def test_weekly_window_for_unlinked_employee_id(client, owner_headers):
    resp = client.post("/api/availability", json={
        "employeeId": "e1", "dayOfWeek": 1, "startTime": "09:00", "endTime": "17:00", "isAvailable": True,
    }, headers=owner_headers)
    assert resp.status_code == 200
    entry_id = resp.json()["data"]["id"]

    rows = client.get("/api/availability", params={"employeeId": "e1"}).json()["data"]
    assert [r["id"] for r in rows] == [entry_id]


def test_update_rejects_null_times(client, owner_headers, employee_id):
    entry = client.post("/api/availability", json={
        "employeeId": employee_id, "dayOfWeek": 2, "startTime": "09:00", "endTime": "10:00",
    }, headers=owner_headers).json()["data"]["id"]
    for field in ("startTime", "dayOfWeek"):
        resp = client.put(f"/api/availability/{entry}", json={field: None}, headers=owner_headers)
        assert resp.status_code == 400
        assert resp.json()["error"].startswith(f"Invalid value for {field}")
