from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .database.connection import DBConfig, DatabaseConnection
from .games.mysql_game_result_repository import MySQLGameResultRepository, MySQLSimpleBatchRepository
from .games.service import GameResultService
from .payroll.aggregator import PayrollAggregator
from .payroll.factory import WageCalculatorFactory
from .payroll.mysql_advance_repository import MySQLAdvancePaymentRepository
from .payroll.service import SalaryService
from .settings.mysql_settings_repository import MySQLGameSettingsRepository
from .settings.service import GameSettingsService
from .shift_board.diff_engine import ShiftTypeWindows
from .shift_board.mysql_requirement_repository import MySQLShiftRequirementRepository
from .shift_board.service import ShiftBoardService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.night_hours import NightWindow
from .shifts.service import ShiftService
from .special_wages.mysql_special_wage_repository import MySQLSpecialWageRepository
from .special_wages.service import SpecialWageService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    auth_service: AuthService
    shift_service: ShiftService
    settings_service: GameSettingsService
    special_wage_service: SpecialWageService
    game_result_service: GameResultService
    salary_service: SalaryService
    shift_board_service: ShiftBoardService


def build_services(
    *,
    conn: Optional[DatabaseConnection],
    users,
    shifts,
    wages,
    settings,
    results,
    batches,
    advances,
    requirements,
    window: NightWindow,
    windows: ShiftTypeWindows,
    advance_step: int,
    today=None,
) -> Container:
    """Wire services over any set of repositories (MySQL in production, fakes in tests)."""
    settings_service = GameSettingsService(settings)
    return Container(
        conn=conn,
        auth_service=AuthService(users),
        shift_service=ShiftService(shifts, wages, window=window, users=users),
        settings_service=settings_service,
        special_wage_service=SpecialWageService(wages),
        game_result_service=GameResultService(results, batches, settings_service, users),
        salary_service=SalaryService(
            shifts=shifts,
            results=results,
            wages=wages,
            advances=advances,
            settings=settings_service,
            aggregator=PayrollAggregator(window=window, factory=WageCalculatorFactory()),
            advance_step=advance_step,
        ),
        shift_board_service=ShiftBoardService(
            shifts=shifts,
            requirements=requirements,
            users=users,
            windows=windows,
            today=today,
        ),
    )


def build_container(
    *,
    db_config: Mapping,
    night_window: tuple[str, str],
    shift_type_windows: Mapping[str, tuple[str, str]],
    advance_step: int,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        conn=conn,
        users=MySQLUserRepository(conn),
        shifts=MySQLShiftRepository(conn),
        wages=MySQLSpecialWageRepository(conn),
        settings=MySQLGameSettingsRepository(conn),
        results=MySQLGameResultRepository(conn),
        batches=MySQLSimpleBatchRepository(conn),
        advances=MySQLAdvancePaymentRepository(conn),
        requirements=MySQLShiftRequirementRepository(conn),
        window=NightWindow.parse(*night_window),
        windows=ShiftTypeWindows.parse(shift_type_windows),
        advance_step=advance_step,
    )
