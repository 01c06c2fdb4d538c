# salon_backend/models/user_model.py
from sqlalchemy import Column, Boolean, DateTime
from sqlalchemy.types import String, Unicode

from salon_backend.database.session import Base
from salon_backend.models._timestamps import utcnow


class User(Base):
    """Profile record keyed by the identity provider's uid."""
    __tablename__ = "users"

    id                   = Column(String(128), primary_key=True)
    email                = Column(Unicode(255), nullable=False, index=True)
    role                 = Column(String(20), nullable=False)  # 'owner' / 'employee' / 'client'
    first_name           = Column(Unicode(100))
    last_name            = Column(Unicode(100))
    phone                = Column(Unicode(32))
    must_change_password = Column(Boolean, nullable=False, default=False)
    is_active            = Column(Boolean, nullable=False, default=True)
    created_at           = Column(DateTime, nullable=False, default=utcnow)
    updated_at           = Column(DateTime, nullable=False, default=utcnow)


class AuthAccount(Base):
    """Credentials used by the local identity provider."""
    __tablename__ = "auth_accounts"

    uid           = Column(String(128), primary_key=True)
    email         = Column(Unicode(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    session_nonce = Column(String(32), nullable=False)
    created_at    = Column(DateTime, nullable=False, default=utcnow)
