# salon_backend/routers/deps.py
import logging
from contextlib import contextmanager
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from salon_backend.database.session import get_db
from salon_backend.models.user_model import User
from salon_backend.queries import user_queries
from salon_backend.services.identity_provider import AuthError, IdentityProvider

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


@contextmanager
def downstream(db: Session, action: str):
    """Turn unexpected persistence failures into a 500 envelope."""
    try:
        yield
    except (HTTPException, AuthError):
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Failed to {action}")
        # database errors carry the statement and its parameters
        if isinstance(e, SQLAlchemyError) or not str(e):
            raise HTTPException(status_code=500, detail=f"Failed to {action}")
        raise HTTPException(status_code=500, detail=f"Failed to {action}: {e}")


def get_identity_provider(request: Request) -> IdentityProvider:
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise HTTPException(status_code=500, detail="Auth not configured")
    return provider


def get_bearer_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_optional_user(
    request: Request,
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """The caller's profile when a valid token was sent, otherwise None."""
    provider = getattr(request.app.state, "identity_provider", None)
    if not token or provider is None:
        return None
    identity = provider.get_current_user(token)
    if not identity:
        return None
    return user_queries.get_user(db, identity.uid)


def get_current_user(
    request: Request,
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> User:
    if not token:
        raise HTTPException(status_code=401, detail="Authentication required")
    provider = get_identity_provider(request)
    identity = provider.get_current_user(token)
    if not identity:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user = user_queries.get_user(db, identity.uid)
    if not user:
        raise HTTPException(status_code=401, detail="User profile not found")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is disabled")
    return user


def require_roles(*roles: str):
    """Dependency factory: only callers whose profile role is listed get through."""
    def _check(user: User = Depends(get_current_user)) -> User:
        if roles and user.role not in roles:
            raise HTTPException(status_code=403, detail="You do not have permission to perform this action")
        return user
    return _check
