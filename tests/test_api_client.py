import pytest

from salon_frontend.services import api_client
from salon_frontend.services.session_service import AuthSession


class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body
        self.text = str(body)

    def json(self):
        return self._body


def test_unwraps_success_envelope(monkeypatch):
    calls = {}

    def fake_get(url, params=None, timeout=None, **kwargs):
        calls.update(url=url, params=params)
        return FakeResponse(200, {"success": True, "data": [{"id": "e1"}]})

    monkeypatch.setattr(api_client.requests, "get", fake_get)
    assert api_client.get_employees("salon-1") == [{"id": "e1"}]
    assert calls["url"].endswith("/api/employees")
    assert calls["params"] == {"salonId": "salon-1"}


def test_failure_envelope_raises(monkeypatch):
    monkeypatch.setattr(
        api_client.requests, "get",
        lambda *a, **k: FakeResponse(404, {"success": False, "error": "Employee not found"}),
    )
    with pytest.raises(RuntimeError, match="Employee not found"):
        api_client.get_employee("missing")


def test_session_login_and_logout(monkeypatch):
    posted = []

    def fake_post(url, json=None, headers=None, timeout=None, **kwargs):
        posted.append((url, headers))
        if url.endswith("/auth/login"):
            return FakeResponse(200, {"success": True, "data": {"id": "u1", "role": "owner", "idToken": "tok"}})
        return FakeResponse(200, {"success": True, "data": None})

    monkeypatch.setattr(api_client.requests, "post", fake_post)

    session = AuthSession()
    seen = []
    session.subscribe(lambda s: seen.append(s.role))
    assert session.loading is True

    user = session.login("owner@example.com", "secret123")
    assert user == {"id": "u1", "role": "owner"}
    assert session.token == "tok"
    assert session.loading is False

    session.logout()
    assert session.user is None and session.token is None
    assert posted[-1][1] == {"Authorization": "Bearer tok"}
    assert seen == ["owner", None]


def test_session_load_with_rejected_token(monkeypatch):
    monkeypatch.setattr(
        api_client.requests, "get",
        lambda *a, **k: FakeResponse(401, {"success": False, "error": "Invalid or expired token"}),
    )
    session = AuthSession()
    session.load("stale")
    assert session.user is None
    assert session.loading is False
