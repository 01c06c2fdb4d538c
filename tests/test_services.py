def test_create_service_with_employees(client, make_employee, make_service):
    ana, ben = make_employee("Ana", "One"), make_employee("Ben", "Two")
    svc_id = make_service(employeeIds=[ana, ben])

    data = client.get(f"/api/services/{svc_id}/employees").json()["data"]
    assert {e["id"] for e in data} == {ana, ben}


def test_employees_for_service_skips_inactive_and_not_offered(client, owner_headers, make_employee, make_service):
    active, inactive, unoffered = make_employee("A", "A"), make_employee("B", "B"), make_employee("C", "C")
    svc_id = make_service(employeeIds=[active, inactive])
    client.put(f"/api/employees/{inactive}", json={"status": "inactive"}, headers=owner_headers)
    client.post("/api/employee-services", json={
        "employeeId": unoffered, "serviceId": svc_id, "isOffered": False,
    }, headers=owner_headers)

    data = client.get(f"/api/services/{svc_id}/employees").json()["data"]
    assert [e["id"] for e in data] == [active]


def test_employees_for_service_without_assignments_is_empty(client, make_service):
    svc_id = make_service()
    assert client.get(f"/api/services/{svc_id}/employees").json() == {"success": True, "data": []}


def test_with_employees_filter(client, make_employee, make_service):
    emp = make_employee()
    staffed = make_service("Color", employeeIds=[emp])
    make_service("Unstaffed")
    data = client.get("/api/services", params={"withEmployees": "true"}).json()["data"]
    assert [s["id"] for s in data] == [staffed]


def test_update_replaces_offered_set(client, owner_headers, make_employee, make_service):
    ana, ben = make_employee("Ana", "One"), make_employee("Ben", "Two")
    svc_id = make_service(employeeIds=[ana])
    resp = client.put(f"/api/services/{svc_id}", json={"price": 55, "employeeIds": [ben]}, headers=owner_headers)
    assert resp.json()["data"] == {"id": svc_id}

    svc = client.get(f"/api/services/{svc_id}").json()["data"]
    assert svc["price"] == 55
    assert svc["name"] == "Haircut"
    assert [e["id"] for e in client.get(f"/api/services/{svc_id}/employees").json()["data"]] == [ben]


def test_create_service_validation(client, owner_headers):
    resp = client.post("/api/services", json={"name": "Trim"}, headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields: duration, price"


def test_delete_service(client, owner_headers, make_service):
    svc_id = make_service()
    assert client.delete(f"/api/services/{svc_id}", headers=owner_headers).json() == {"success": True, "data": None}
    assert client.get(f"/api/services/{svc_id}").status_code == 404


def test_employee_service_link_is_unique_per_pair(client, owner_headers, make_employee, make_service):
    emp, svc = make_employee(), make_service()
    payload = {"employeeId": emp, "serviceId": svc}
    first = client.post("/api/employee-services", json=payload, headers=owner_headers).json()["data"]["id"]
    second = client.post("/api/employee-services", json=payload, headers=owner_headers).json()["data"]["id"]
    assert first == second
    assert len(client.get("/api/employee-services", params={"employeeId": emp}).json()["data"]) == 1

    assert client.delete(f"/api/employee-services/{first}", headers=owner_headers).status_code == 200
    assert client.delete(f"/api/employee-services/{first}", headers=owner_headers).status_code == 404


def test_update_rejects_null_duration(client, owner_headers, make_service):
    svc_id = make_service()
    resp = client.put(f"/api/services/{svc_id}", json={"duration": None}, headers=owner_headers)
    assert resp.status_code == 400
    assert client.get(f"/api/services/{svc_id}").json()["data"]["duration"] == 30
