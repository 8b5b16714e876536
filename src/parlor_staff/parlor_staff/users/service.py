from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role
    store_id: Optional[int]

    def to_dict(self) -> dict:
        return {"id": self.user_id, "name": self.name, "role": self.role.value, "storeId": self.store_id}


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, login_id: str, password: str) -> SessionUser:
        user = self._users.get_by_login_id((login_id or "").strip())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid login id or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            logger.info("Rejected login for login_id=%r", login_id)
            raise AuthenticationError("Invalid login id or password")

        return SessionUser(user_id=user.user_id, name=user.name, role=user.role, store_id=user.store_id)


def ensure_can_access_user(*, current_user_id: int, current_role: Role, target_user_id: int) -> None:
    """Members only see their own /users/{id}/... resources; admins see everyone."""
    if current_role == Role.ADMIN:
        return
    if int(current_user_id) != int(target_user_id):
        raise AuthorizationError("You can only access your own records")
