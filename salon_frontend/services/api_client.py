# salon_frontend/services/api_client.py
from typing import List, Optional, Dict, Any
import os, requests

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")

def _url(p: str) -> str:
    return f"{API_BASE_URL}/api{p}"

def _headers(token: Optional[str]) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token else {}

def _err(resp: requests.Response) -> str:
    try:
        j = resp.json()
        if isinstance(j, dict) and j.get("error"):
            return str(j["error"])
        if isinstance(j, dict) and "detail" in j:
            return str(j["detail"])
        return str(j)
    except Exception:
        return resp.text or f"HTTP {resp.status_code}"

def _unwrap(resp: requests.Response) -> Any:
    """Return ``data`` of a success envelope, raise RuntimeError with the server's error otherwise."""
    if resp.status_code >= 400:
        raise RuntimeError(_err(resp))
    try:
        body = resp.json()
    except ValueError:
        raise RuntimeError(resp.text or f"HTTP {resp.status_code}")
    if not isinstance(body, dict) or not body.get("success"):
        raise RuntimeError(_err(resp))
    return body.get("data")

def _clean(params: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}

# ---- Auth API ----
def login(email: str, password: str) -> Dict[str, Any]:
    r = requests.post(_url("/auth/login"), json={"email": email, "password": password}, timeout=15)
    return _unwrap(r)

def logout(token: str) -> None:
    r = requests.post(_url("/auth/logout"), headers=_headers(token), timeout=10)
    _unwrap(r)

def register(payload: Dict[str, Any]) -> Dict[str, Any]:
    r = requests.post(_url("/auth/register"), json=payload, timeout=15)
    return _unwrap(r)

def get_me(token: str) -> Dict[str, Any]:
    r = requests.get(_url("/auth/me"), headers=_headers(token), timeout=10)
    return _unwrap(r)

def change_password(token: str, new_password: str) -> Dict[str, Any]:
    r = requests.post(
        _url("/auth/change-password"),
        json={"newPassword": new_password},
        headers=_headers(token),
        timeout=15,
    )
    return _unwrap(r)

def create_user(token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    r = requests.post(_url("/users"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)

# ---- Employees API ----
def get_employees(salon_id: Optional[str] = None) -> List[Dict[str, Any]]:
    r = requests.get(_url("/employees"), params=_clean({"salonId": salon_id}), timeout=10)
    return _unwrap(r)

def get_employee(employee_id: str) -> Dict[str, Any]:
    r = requests.get(_url(f"/employees/{employee_id}"), timeout=10)
    return _unwrap(r)

def create_employee(token: str, payload: Dict[str, Any]) -> str:
    r = requests.post(_url("/employees"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)["id"]

def update_employee(token: str, employee_id: str, payload: Dict[str, Any]) -> str:
    r = requests.put(_url(f"/employees/{employee_id}"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)["id"]

def delete_employee(token: str, employee_id: str) -> None:
    r = requests.delete(_url(f"/employees/{employee_id}"), headers=_headers(token), timeout=10)
    _unwrap(r)

# ---- Services API ----
def get_services(salon_id: Optional[str] = None, with_employees: bool = False) -> List[Dict[str, Any]]:
    params = _clean({"salonId": salon_id, "withEmployees": "true" if with_employees else None})
    r = requests.get(_url("/services"), params=params, timeout=10)
    return _unwrap(r)

def get_service(service_id: str) -> Dict[str, Any]:
    r = requests.get(_url(f"/services/{service_id}"), timeout=10)
    return _unwrap(r)

def get_employees_for_service(service_id: str) -> List[Dict[str, Any]]:
    r = requests.get(_url(f"/services/{service_id}/employees"), timeout=10)
    return _unwrap(r)

def create_service(token: str, payload: Dict[str, Any]) -> str:
    r = requests.post(_url("/services"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)["id"]

def update_service(token: str, service_id: str, payload: Dict[str, Any]) -> str:
    r = requests.put(_url(f"/services/{service_id}"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)["id"]

def delete_service(token: str, service_id: str) -> None:
    r = requests.delete(_url(f"/services/{service_id}"), headers=_headers(token), timeout=10)
    _unwrap(r)

# ---- Availability API ----
def get_availability(employee_id: str, service_id: Optional[str] = None) -> List[Dict[str, Any]]:
    params = _clean({"employeeId": employee_id, "serviceId": service_id})
    r = requests.get(_url("/availability"), params=params, timeout=10)
    return _unwrap(r)

def create_availability(token: str, payload: Dict[str, Any]) -> str:
    r = requests.post(_url("/availability"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)["id"]

def update_availability(token: str, availability_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    r = requests.put(_url(f"/availability/{availability_id}"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)

def delete_availability(token: str, availability_id: str) -> None:
    r = requests.delete(_url(f"/availability/{availability_id}"), headers=_headers(token), timeout=10)
    _unwrap(r)

def get_available_slots(employee_id: str, service_id: str, date: str) -> List[Dict[str, Any]]:
    params = {"employeeId": employee_id, "serviceId": service_id, "date": date}
    r = requests.get(_url("/slots/available"), params=params, timeout=10)
    return _unwrap(r)["slots"]

# ---- Bookings API ----
def get_bookings(token: str, **filters) -> List[Dict[str, Any]]:
    """filters: salonId, employeeId, status, startDate, endDate"""
    r = requests.get(_url("/bookings"), params=_clean(filters), headers=_headers(token), timeout=10)
    return _unwrap(r)

def create_booking(payload: Dict[str, Any], token: Optional[str] = None) -> str:
    r = requests.post(_url("/bookings"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)["id"]

def update_booking(token: str, booking_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    r = requests.put(_url(f"/bookings/{booking_id}"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)

def cancel_booking(booking_id: str, reason: Optional[str] = None, token: Optional[str] = None) -> Dict[str, Any]:
    r = requests.post(
        _url(f"/bookings/{booking_id}/cancel"),
        json=_clean({"reason": reason}),
        headers=_headers(token),
        timeout=15,
    )
    return _unwrap(r)

# ---- Expenses API ----
def get_expenses(token: str, **filters) -> List[Dict[str, Any]]:
    r = requests.get(_url("/expenses"), params=_clean(filters), headers=_headers(token), timeout=10)
    return _unwrap(r)

def create_expense(token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    r = requests.post(_url("/expenses"), json=payload, headers=_headers(token), timeout=15)
    return _unwrap(r)

def delete_expense(token: str, expense_id: str) -> None:
    r = requests.delete(_url(f"/expenses/{expense_id}"), headers=_headers(token), timeout=10)
    _unwrap(r)
