import pytest

from salon_backend.services import firebase_identity
from salon_backend.services.firebase_identity import FirebaseIdentityProvider
from salon_backend.services.identity_provider import AuthError


class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body

    def json(self):
        return self._body


@pytest.fixture
def provider():
    return FirebaseIdentityProvider(api_key="key", base_url="https://auth.example.com/v1", timeout=5)


def test_sign_in(monkeypatch, provider):
    seen = {}

    def fake_post(url, params=None, json=None, timeout=None):
        seen.update(url=url, params=params, json=json)
        return FakeResponse(200, {"localId": "uid-1", "email": "a@example.com", "idToken": "tok"})

    monkeypatch.setattr(firebase_identity.requests, "post", fake_post)
    identity = provider.sign_in("a@example.com", "secret123")

    assert (identity.uid, identity.email, identity.id_token) == ("uid-1", "a@example.com", "tok")
    assert seen["url"] == "https://auth.example.com/v1/accounts:signInWithPassword"
    assert seen["params"] == {"key": "key"}
    assert seen["json"]["returnSecureToken"] is True


def test_sign_in_error_is_auth_error(monkeypatch, provider):
    monkeypatch.setattr(
        firebase_identity.requests, "post",
        lambda *a, **k: FakeResponse(400, {"error": {"message": "INVALID_PASSWORD"}}),
    )
    with pytest.raises(AuthError):
        provider.sign_in("a@example.com", "wrong")


def test_lookup_of_bad_token_is_none(monkeypatch, provider):
    monkeypatch.setattr(
        firebase_identity.requests, "post",
        lambda *a, **k: FakeResponse(400, {"error": {"message": "INVALID_ID_TOKEN"}}),
    )
    assert provider.get_current_user("bad") is None
