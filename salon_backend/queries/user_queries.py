# salon_backend/queries/user_queries.py
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from salon_backend.models.user_model import User
from salon_backend.queries._helpers import apply_updates


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def create_user(db: Session, user_id: str, data: Dict[str, Any]) -> str:
    """Profile rows reuse the identity provider's uid as their id."""
    user = User(id=user_id)
    apply_updates(user, data, stamp=False)
    db.add(user)
    db.commit()
    return user.id


def update_user(db: Session, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
    user = db.get(User, user_id)
    if not user:
        return None
    apply_updates(user, updates)
    db.commit()
    db.refresh(user)
    return user
