from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User; services depend on this, not on MySQL."""

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        raise NotImplementedError

    def list_by_store(self, store_id: int) -> Sequence[User]:
        raise NotImplementedError

    def names_for(self, user_ids: Iterable[int]) -> dict[int, str]:
        raise NotImplementedError
