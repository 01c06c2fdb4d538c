# salon_frontend/services/session_service.py
import logging
from typing import Any, Callable, Dict, List, Optional

from salon_frontend.services import api_client

logger = logging.getLogger(__name__)


class AuthSession:
    """
    The signed-in user shared by every page.

    ``loading`` is True until the first resolution (``load`` or ``login``)
    has finished; pages render a placeholder meanwhile. Listeners are called
    with the session itself after every change.
    """

    def __init__(self):
        self.user: Optional[Dict[str, Any]] = None
        self.token: Optional[str] = None
        self.loading: bool = True
        self._listeners: List[Callable[["AuthSession"], None]] = []

    # ---------- listeners ----------
    def subscribe(self, callback: Callable[["AuthSession"], None]) -> Callable[[], None]:
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback) if callback in self._listeners else None

    def _notify(self):
        for cb in list(self._listeners):
            cb(self)

    # ---------- state ----------
    @property
    def role(self) -> Optional[str]:
        return self.user.get("role") if self.user else None

    def _set(self, user: Optional[Dict[str, Any]], token: Optional[str]):
        self.user, self.token, self.loading = user, token, False
        self._notify()

    def load(self, token: Optional[str] = None):
        """Resolve a stored token into the current user; a rejected token leaves the session empty."""
        if not token:
            self._set(None, None)
            return
        try:
            self._set(api_client.get_me(token), token)
        except RuntimeError as e:
            logger.info(f"Stored session rejected: {e}")
            self._set(None, None)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        user = api_client.login(email, password)
        token = user.pop("idToken", None)
        self._set(user, token)
        return user

    def change_password(self, new_password: str) -> Dict[str, Any]:
        user = api_client.change_password(self.token, new_password)
        token = user.pop("idToken", None) or self.token
        self._set(user, token)
        return user

    def logout(self):
        if self.token:
            try:
                api_client.logout(self.token)
            except RuntimeError as e:
                # the local session is dropped either way
                logger.warning(f"Logout failed on server: {e}")
        self._set(None, None)
