from types import SimpleNamespace

from salon_frontend.services.access_guard import GuardDecision, evaluate_access


def _session(user=None, loading=False):
    return SimpleNamespace(user=user, loading=loading)


def test_loading_shows_placeholder():
    assert evaluate_access(_session(loading=True), ["owner"], "/dashboard") == GuardDecision("loading")


def test_anonymous_goes_to_login():
    assert evaluate_access(_session(), ["owner"], "/dashboard") == GuardDecision("redirect", "/login")
    assert evaluate_access(_session(), ["owner"], "/dashboard", redirect_to="/welcome").target == "/welcome"


def test_wrong_role_goes_home():
    client = _session({"role": "client"})
    assert evaluate_access(client, ["owner"], "/dashboard") == GuardDecision("redirect", "/client")
    employee = _session({"role": "employee"})
    assert evaluate_access(employee, ["client"], "/client") == GuardDecision("redirect", "/employee")


def test_allowed_role_renders():
    assert evaluate_access(_session({"role": "owner"}), ["owner"], "/dashboard") == GuardDecision("render")


def test_employee_must_change_password_first():
    employee = _session({"role": "employee", "mustChangePassword": True})
    assert evaluate_access(employee, ["employee"], "/employee") == GuardDecision("redirect", "/change-password")
    assert evaluate_access(employee, ["employee"], "/change-password") == GuardDecision("render")
    assert evaluate_access(
        employee, ["employee"], "/employee", enforce_password_reset=False,
    ) == GuardDecision("render")
