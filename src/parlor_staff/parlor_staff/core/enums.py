from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access checks."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class GameType(str, Enum):
    """YONMA = four-player mahjong, SANMA = three-player."""

    YONMA = "YONMA"
    SANMA = "SANMA"


class WageType(str, Enum):
    HOURLY = "HOURLY"
    FIXED = "FIXED"


class ShiftType(str, Enum):
    EARLY = "EARLY"
    LATE = "LATE"


class StaffingState(str, Enum):
    """Display classification of an actual-minus-required diff."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


class AllowanceType(str, Enum):
    SPECIAL_REGULAR = "special_regular"
    SPECIAL_LATE_NIGHT = "special_late_night"
