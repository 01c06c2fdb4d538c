# salon_backend/routers/auth_router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from salon_backend.database.session import get_db
from salon_backend.models.user_model import User
from salon_backend.queries import user_queries
from salon_backend.routers.deps import (
    downstream, get_bearer_token, get_current_user, get_identity_provider,
)
from salon_backend.schemas import (
    ApiResponse, ChangePasswordPayload, LoginPayload, RegisterPayload, SessionUserOut, UserOut,
)
from salon_backend.services.account_service import create_account
from salon_backend.services.identity_provider import AuthError, IdentityProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_user(user: User, id_token: Optional[str]) -> SessionUserOut:
    out = SessionUserOut.model_validate(user)
    out.id_token = id_token
    return out


@router.post("/login", response_model=ApiResponse[SessionUserOut])
def login(body: LoginPayload, request: Request, db: Session = Depends(get_db)):
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise HTTPException(status_code=500, detail="Auth not configured")

    if not body.email or not body.password:
        raise HTTPException(status_code=400, detail="Email and password are required")

    try:
        identity = provider.sign_in(body.email, body.password)
        user = user_queries.get_user(db, identity.uid)
        if not user:
            # the provider accepted the credentials but no profile exists
            logger.warning(f"Identity {identity.uid} has no user profile")
            raise HTTPException(status_code=404, detail="User not found")

        if user.role != "employee" and user.must_change_password:
            user = user_queries.update_user(db, user.id, {"must_change_password": False})
    except HTTPException:
        raise
    except Exception as e:
        logger.info(f"Login failed for {body.email}: {e}")
        raise HTTPException(status_code=401, detail=str(e) or "Failed to login")

    return ApiResponse(data=_session_user(user, identity.id_token))


@router.post("/logout", response_model=ApiResponse[None])
def logout(
    token: Optional[str] = Depends(get_bearer_token),
    provider: IdentityProvider = Depends(get_identity_provider),
):
    if not token:
        raise HTTPException(status_code=401, detail="Authentication required")
    try:
        provider.sign_out(token)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return ApiResponse(data=None)


@router.post("/register", response_model=ApiResponse[SessionUserOut])
def register(
    body: RegisterPayload,
    provider: IdentityProvider = Depends(get_identity_provider),
    db: Session = Depends(get_db),
):
    """Self sign-up; always creates a client."""
    try:
        with downstream(db, "register"):
            user, identity = create_account(
                db, provider, body.email, body.password, "client",
                first_name=body.first_name, last_name=body.last_name, phone=body.phone,
            )
    except AuthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ApiResponse(data=_session_user(user, identity.id_token))


@router.get("/me", response_model=ApiResponse[UserOut])
def me(user: User = Depends(get_current_user)):
    return ApiResponse(data=UserOut.model_validate(user))


@router.post("/change-password", response_model=ApiResponse[SessionUserOut])
def change_password(
    body: ChangePasswordPayload,
    token: Optional[str] = Depends(get_bearer_token),
    user: User = Depends(get_current_user),
    provider: IdentityProvider = Depends(get_identity_provider),
    db: Session = Depends(get_db),
):
    try:
        identity = provider.change_password(token, body.new_password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))

    with downstream(db, "update user"):
        user = user_queries.update_user(db, user.id, {"must_change_password": False})
    return ApiResponse(data=_session_user(user, identity.id_token))
