# salon_backend/services/identity_provider.py
"""
Authentication is an injected capability: route handlers only talk to an
``IdentityProvider``. Two implementations exist:

* ``LocalIdentityProvider`` keeps credentials in the ``auth_accounts`` table
  (werkzeug password hashes, itsdangerous signed tokens).
* ``FirebaseIdentityProvider`` (see ``firebase_identity.py``) forwards to the
  Firebase Identity Toolkit REST API.
"""
import logging
import secrets
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from salon_backend.models.user_model import AuthAccount

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Credential or token rejected by the identity provider."""


@dataclass
class Identity:
    uid: str
    email: str
    id_token: Optional[str] = None


class IdentityProvider(ABC):
    name = "abstract"

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Identity:
        ...

    @abstractmethod
    def get_current_user(self, id_token: str) -> Optional[Identity]:
        """Resolve a token to its identity, or None when it is not valid."""

    @abstractmethod
    def sign_out(self, id_token: str) -> None:
        ...

    @abstractmethod
    def create_user(self, email: str, password: str) -> Identity:
        ...

    @abstractmethod
    def change_password(self, id_token: str, new_password: str) -> Identity:
        ...


class LocalIdentityProvider(IdentityProvider):
    name = "local"

    def __init__(self, session_factory: Callable[[], Session], secret_key: str, max_age: int = 86400):
        self._session_factory = session_factory
        self._serializer = URLSafeTimedSerializer(secret_key, salt="salon-auth-token")
        self._max_age = max_age

    # ---------- helpers ----------
    def _issue_token(self, account: AuthAccount) -> str:
        return self._serializer.dumps({"uid": account.uid, "nonce": account.session_nonce})

    def _account_for_token(self, db: Session, id_token: str) -> Optional[AuthAccount]:
        try:
            payload = self._serializer.loads(id_token, max_age=self._max_age)
        except SignatureExpired:
            logger.info("Rejected expired token")
            return None
        except BadSignature:
            return None
        account = db.get(AuthAccount, payload.get("uid"))
        if not account or account.session_nonce != payload.get("nonce"):
            return None
        return account

    @staticmethod
    def _normalize_email(email: str) -> str:
        return (email or "").strip().lower()

    # ---------- IdentityProvider ----------
    def sign_in(self, email: str, password: str) -> Identity:
        db = self._session_factory()
        try:
            account = (
                db.query(AuthAccount)
                .filter(AuthAccount.email == self._normalize_email(email))
                .first()
            )
            if not account or not check_password_hash(account.password_hash, password):
                raise AuthError("Invalid email or password")
            return Identity(uid=account.uid, email=account.email, id_token=self._issue_token(account))
        finally:
            db.close()

    def get_current_user(self, id_token: str) -> Optional[Identity]:
        if not id_token:
            return None
        db = self._session_factory()
        try:
            account = self._account_for_token(db, id_token)
            if not account:
                return None
            return Identity(uid=account.uid, email=account.email, id_token=id_token)
        finally:
            db.close()

    def sign_out(self, id_token: str) -> None:
        db = self._session_factory()
        try:
            account = self._account_for_token(db, id_token)
            if not account:
                raise AuthError("Invalid or expired token")
            # a new nonce invalidates every token issued before
            account.session_nonce = secrets.token_hex(8)
            db.commit()
        finally:
            db.close()

    def create_user(self, email: str, password: str) -> Identity:
        email = self._normalize_email(email)
        db = self._session_factory()
        try:
            if db.query(AuthAccount).filter(AuthAccount.email == email).count() > 0:
                raise AuthError("Email already in use")
            account = AuthAccount(
                uid=uuid.uuid4().hex,
                email=email,
                password_hash=generate_password_hash(password),
                session_nonce=secrets.token_hex(8),
            )
            db.add(account)
            db.commit()
            logger.info("Local identity created for %s", email)
            return Identity(uid=account.uid, email=email, id_token=self._issue_token(account))
        except AuthError:
            raise
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def change_password(self, id_token: str, new_password: str) -> Identity:
        db = self._session_factory()
        try:
            account = self._account_for_token(db, id_token)
            if not account:
                raise AuthError("Invalid or expired token")
            account.password_hash = generate_password_hash(new_password)
            account.session_nonce = secrets.token_hex(8)
            db.commit()
            return Identity(uid=account.uid, email=account.email, id_token=self._issue_token(account))
        finally:
            db.close()


def build_identity_provider(kind: str, session_factory, **options) -> Optional[IdentityProvider]:
    """Provider selected by configuration; None when the selected one is not configured."""
    if kind == "firebase":
        from salon_backend.services.firebase_identity import FirebaseIdentityProvider

        api_key = options.get("firebase_api_key")
        if not api_key:
            logger.warning("IDENTITY_PROVIDER=firebase but FIREBASE_API_KEY is missing")
            return None
        return FirebaseIdentityProvider(
            api_key=api_key,
            base_url=options.get("firebase_auth_url", "https://identitytoolkit.googleapis.com/v1"),
            timeout=options.get("timeout", 10),
        )
    if kind == "local":
        return LocalIdentityProvider(
            session_factory,
            secret_key=options.get("secret_key", "dev-secret-change-me"),
            max_age=options.get("max_age", 86400),
        )
    raise ValueError(f"Unknown identity provider: {kind}")
