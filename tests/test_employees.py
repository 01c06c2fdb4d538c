from salon_backend.config.settings import DEFAULT_SALON_ID


def test_create_and_fetch_employee(client, owner_headers):
    resp = client.post("/api/employees", json={
        "firstName": "Ana", "lastName": "Stylist", "position": "Senior stylist",
    }, headers=owner_headers)
    assert resp.status_code == 200
    emp_id = resp.json()["data"]["id"]

    got = client.get(f"/api/employees/{emp_id}").json()["data"]
    assert got["name"] == "Ana Stylist"
    assert got["salonId"] == DEFAULT_SALON_ID
    assert got["status"] == "active"


def test_create_requires_names(client, owner_headers):
    resp = client.post("/api/employees", json={"firstName": "Ana"}, headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Missing required fields: lastName"}


def test_mutations_are_owner_only(client, employee_headers, make_employee):
    emp_id = make_employee()
    assert client.post("/api/employees", json={"firstName": "A", "lastName": "B"}).status_code == 401
    resp = client.put(f"/api/employees/{emp_id}", json={"position": "x"}, headers=employee_headers)
    assert resp.status_code == 403
    assert resp.json()["error"] == "You do not have permission to perform this action"


def test_list_filters_by_salon(client, make_employee):
    make_employee("Ana", "One", salonId="salon-a")
    make_employee("Ben", "Two", salonId="salon-b")
    data = client.get("/api/employees", params={"salonId": "salon-a"}).json()["data"]
    assert [e["firstName"] for e in data] == ["Ana"]
    assert len(client.get("/api/employees").json()["data"]) == 2


def test_partial_update(client, owner_headers, make_employee):
    emp_id = make_employee()
    resp = client.put(f"/api/employees/{emp_id}", json={"status": "inactive"}, headers=owner_headers)
    assert resp.json() == {"success": True, "data": {"id": emp_id}}
    got = client.get(f"/api/employees/{emp_id}").json()["data"]
    assert got["status"] == "inactive"
    assert got["firstName"] == "Ana"


def test_missing_employee_is_404(client, owner_headers):
    assert client.get("/api/employees/nope").status_code == 404
    assert client.put("/api/employees/nope", json={"bio": "x"}, headers=owner_headers).status_code == 404
    resp = client.delete("/api/employees/nope", headers=owner_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "Employee not found"


def test_delete_removes_service_links(client, owner_headers, make_employee, make_service):
    emp_id = make_employee()
    svc_id = make_service(employeeIds=[emp_id])
    assert client.delete(f"/api/employees/{emp_id}", headers=owner_headers).status_code == 200
    assert client.get("/api/employee-services", params={"serviceId": svc_id}).json()["data"] == []


def test_empty_collection(client):
    assert client.get("/api/employees").json() == {"success": True, "data": []}


def test_update_rejects_null_for_required_fields(client, owner_headers, make_employee):
    emp_id = make_employee()
    resp = client.put(f"/api/employees/{emp_id}", json={"firstName": None}, headers=owner_headers)
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Invalid value for firstName")
    assert client.get(f"/api/employees/{emp_id}").json()["data"]["firstName"] == "Ana"

    # nullable columns can still be cleared
    resp = client.put(f"/api/employees/{emp_id}", json={"position": None}, headers=owner_headers)
    assert resp.status_code == 200


def test_database_errors_do_not_leak_sql(client, monkeypatch):
    from sqlalchemy.exc import OperationalError

    from salon_backend.queries import employee_queries

    def broken(db, salon_id=None):
        raise OperationalError("SELECT secret FROM employees", {"salon_id": "x"}, Exception("locked"))

    monkeypatch.setattr(employee_queries, "get_employees", broken)
    resp = client.get("/api/employees")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to fetch employees"}
