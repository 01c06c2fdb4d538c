# salon_backend/services/firebase_identity.py
import logging
from typing import Any, Dict, Optional

import requests

from salon_backend.services.identity_provider import AuthError, Identity, IdentityProvider

logger = logging.getLogger(__name__)

# Identity Toolkit error codes -> readable messages
_MESSAGES = {
    "EMAIL_NOT_FOUND": "Invalid email or password",
    "INVALID_PASSWORD": "Invalid email or password",
    "INVALID_LOGIN_CREDENTIALS": "Invalid email or password",
    "USER_DISABLED": "This account has been disabled",
    "EMAIL_EXISTS": "Email already in use",
    "WEAK_PASSWORD": "Password is too weak",
    "INVALID_ID_TOKEN": "Invalid or expired token",
    "TOKEN_EXPIRED": "Invalid or expired token",
    "CREDENTIAL_TOO_OLD_LOGIN_AGAIN": "Please sign in again before changing the password",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "Too many attempts, try again later",
}


class FirebaseIdentityProvider(IdentityProvider):
    """Firebase Authentication through the Identity Toolkit REST API."""
    name = "firebase"

    def __init__(self, api_key: str, base_url: str = "https://identitytoolkit.googleapis.com/v1", timeout: int = 10):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _post(self, method: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            r = requests.post(
                f"{self.base_url}/accounts:{method}",
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Identity Toolkit {method} failed: {e}")
            raise AuthError(f"Identity provider unavailable: {e}")

        try:
            body = r.json()
        except ValueError:
            body = {}

        if r.status_code >= 400:
            code = str((body.get("error") or {}).get("message") or f"HTTP {r.status_code}")
            # codes may carry a suffix, e.g. "WEAK_PASSWORD : Password should be ..."
            key = code.split(" ")[0].strip()
            raise AuthError(_MESSAGES.get(key, code))
        return body

    def sign_in(self, email: str, password: str) -> Identity:
        body = self._post(
            "signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return Identity(uid=body["localId"], email=body.get("email", email), id_token=body.get("idToken"))

    def get_current_user(self, id_token: str) -> Optional[Identity]:
        if not id_token:
            return None
        try:
            body = self._post("lookup", {"idToken": id_token})
        except AuthError:
            return None
        users = body.get("users") or []
        if not users:
            return None
        return Identity(uid=users[0]["localId"], email=users[0].get("email", ""), id_token=id_token)

    def sign_out(self, id_token: str) -> None:
        # ID tokens are stateless; the client drops its copy
        logger.debug("Firebase sign-out requested")

    def create_user(self, email: str, password: str) -> Identity:
        body = self._post("signUp", {"email": email, "password": password, "returnSecureToken": True})
        return Identity(uid=body["localId"], email=body.get("email", email), id_token=body.get("idToken"))

    def change_password(self, id_token: str, new_password: str) -> Identity:
        body = self._post(
            "update",
            {"idToken": id_token, "password": new_password, "returnSecureToken": True},
        )
        return Identity(uid=body["localId"], email=body.get("email", ""), id_token=body.get("idToken"))
