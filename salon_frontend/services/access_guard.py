# salon_frontend/services/access_guard.py
from dataclasses import dataclass
from typing import Iterable, Optional

LOGIN_PATH = "/login"
CHANGE_PASSWORD_PATH = "/change-password"

ROLE_HOME = {
    "owner": "/dashboard",
    "employee": "/employee",
    "client": "/client",
}

LOADING, REDIRECT, RENDER = "loading", "redirect", "render"


@dataclass(frozen=True)
class GuardDecision:
    action: str
    target: Optional[str] = None


def home_for(role: Optional[str]) -> str:
    return ROLE_HOME.get(role or "", LOGIN_PATH)


def evaluate_access(
    session,
    allowed_roles: Iterable[str],
    current_path: str,
    redirect_to: str = LOGIN_PATH,
    enforce_password_reset: bool = True,
) -> GuardDecision:
    """
    Decide what a protected page shows for the current session.

    * while the session is still resolving: a loading placeholder
    * no user: redirect to ``redirect_to``
    * role not allowed: redirect to that role's home
    * employee that must change the password: redirect to the change-password page
    """
    if session.loading:
        return GuardDecision(LOADING)

    user = session.user
    if not user:
        return GuardDecision(REDIRECT, redirect_to)

    role = user.get("role")
    allowed = set(allowed_roles)
    if allowed and role not in allowed:
        return GuardDecision(REDIRECT, home_for(role))

    if (
        enforce_password_reset
        and role == "employee"
        and user.get("mustChangePassword")
        and current_path != CHANGE_PASSWORD_PATH
    ):
        return GuardDecision(REDIRECT, CHANGE_PASSWORD_PATH)

    return GuardDecision(RENDER)
