# bookit/gate.py

from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple, Optional, Union

from jose import jwt, JWTError

from bookit.data import LOGIN_VIEW, ROLE_HOME
from bookit.repository import Repository
from bookit.schemas import AuthSession, PublicUser, UserRole


class GateState(str, Enum):
    unauthenticated = "unauthenticated"
    owner = "owner"
    user = "user"


class Permit(NamedTuple):
    user: PublicUser


class RedirectTo(NamedTuple):
    view: str


Decision = Union[Permit, RedirectTo]


def home_view(role: UserRole) -> str:
    return ROLE_HOME[UserRole(role).value]


class SessionGate:
    # Advisory only: a role mismatch redirects home, and the token
    # endpoint never checks role or ownership.
    def __init__(self, repository: Repository):
        self.repository = repository

    @property
    def current(self) -> Optional[AuthSession]:
        auth = self.repository.get_auth()
        if auth is None or not auth.token:
            return None
        return auth

    @property
    def state(self) -> GateState:
        auth = self.current
        if auth is None:
            return GateState.unauthenticated
        return GateState(auth.user.role.value)

    def start(self, user: PublicUser, token: str) -> AuthSession:
        auth = AuthSession(user=user, token=token)
        self.repository.save_auth(auth)
        return auth

    def end(self) -> None:
        self.repository.clear_auth()

    def authorize(self, required_role: Optional[UserRole] = None) -> Decision:
        auth = self.current
        if auth is None:
            return RedirectTo(LOGIN_VIEW)
        if required_role is not None and auth.user.role != UserRole(required_role):
            return RedirectTo(home_view(auth.user.role))
        return Permit(auth.user)

    def token_expired(self, now: Optional[datetime] = None) -> bool:
        # reads exp without verifying the signature; never enforced
        auth = self.current
        if auth is None:
            return True
        try:
            claims = jwt.get_unverified_claims(auth.token)
        except JWTError:
            return True
        exp = claims.get("exp")
        if exp is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now.timestamp() >= float(exp)
