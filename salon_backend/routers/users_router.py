# salon_backend/routers/users_router.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from salon_backend.database.session import get_db
from salon_backend.queries import user_queries
from salon_backend.routers.deps import downstream, get_identity_provider, require_roles
from salon_backend.schemas import ApiResponse, UserCreate, UserOut
from salon_backend.services.account_service import create_account
from salon_backend.services.identity_provider import AuthError, IdentityProvider

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=ApiResponse[UserOut])
def create_user(
    body: UserCreate,
    provider: IdentityProvider = Depends(get_identity_provider),
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    """Owner-created accounts; employees must pick their own password on first login."""
    try:
        with downstream(db, "create user"):
            user, _identity = create_account(
                db, provider, body.email, body.password, body.role,
                first_name=body.first_name, last_name=body.last_name, phone=body.phone,
                must_change_password=body.role == "employee",
            )
    except AuthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ApiResponse(data=UserOut.model_validate(user))


@router.get("/{user_id}", response_model=ApiResponse[UserOut])
def get_user(user_id: str, db: Session = Depends(get_db), _owner=Depends(require_roles("owner"))):
    with downstream(db, "fetch user"):
        user = user_queries.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return ApiResponse(data=UserOut.model_validate(user))
