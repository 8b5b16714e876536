from __future__ import annotations

from typing import Optional, Protocol

from .model import GameSettings


class GameSettingsRepository(Protocol):
    def get_for_user(self, user_id: int) -> Optional[GameSettings]:
        raise NotImplementedError

    def save(self, settings: GameSettings) -> None:
        """Insert or replace the user's single settings row."""

        raise NotImplementedError
