# salon_backend/services/account_service.py
import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from salon_backend.models.user_model import User
from salon_backend.queries import user_queries
from salon_backend.services.identity_provider import Identity, IdentityProvider

logger = logging.getLogger(__name__)


def create_account(
    db: Session,
    provider: IdentityProvider,
    email: str,
    password: str,
    role: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    phone: Optional[str] = None,
    must_change_password: bool = False,
) -> Tuple[User, Identity]:
    """Create the provider identity and the matching profile row."""
    identity = provider.create_user(email, password)
    user_queries.create_user(db, identity.uid, {
        "email": identity.email or email,
        "role": role,
        "first_name": first_name,
        "last_name": last_name,
        "phone": phone,
        "must_change_password": must_change_password,
        "is_active": True,
    })
    logger.info("Account %s created with role %s", identity.uid, role)
    return user_queries.get_user(db, identity.uid), identity
