from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a staff member (parlor employee) or an admin.

    Plain data only; no database access lives here.
    """

    user_id: int
    name: str
    login_id: str
    password_hash: str
    role: Role
    store_id: Optional[int]
    is_active: bool = True

    def to_dict(self) -> dict:
        return {"id": self.user_id, "name": self.name, "role": self.role.value, "storeId": self.store_id}
