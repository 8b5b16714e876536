from decimal import Decimal

from src.parlor_staff.parlor_staff.core.enums import WageType
from src.parlor_staff.parlor_staff.payroll.calculator.base import WageInput
from src.parlor_staff.parlor_staff.payroll.calculator.fixed_calculator import FixedWageCalculator
from src.parlor_staff.parlor_staff.payroll.calculator.hourly_calculator import HourlyWageCalculator
from src.parlor_staff.parlor_staff.payroll.factory import WageCalculatorFactory
from src.parlor_staff.parlor_staff.settings.model import GameSettings


def test_factory_picks_strategy_by_wage_type():
    factory = WageCalculatorFactory()
    assert isinstance(factory.for_settings(GameSettings(user_id=1, wage_type=WageType.HOURLY)), HourlyWageCalculator)
    assert isinstance(factory.for_settings(GameSettings(user_id=1, wage_type=WageType.FIXED)), FixedWageCalculator)


def test_hourly_wage_uses_minimum_wage_floor():
    settings = GameSettings(user_id=1, hourly_wage=1000, base_min_wage=1200, night_rate_multiplier=Decimal("0.25"))
    out = HourlyWageCalculator().calculate(WageInput(worked_minutes=600, night_minutes=120, shift_days=1), settings)

    assert out.base_wage == Decimal(12000)
    # 2h x 1200 x 0.25
    assert out.night_extra == Decimal(600)
    assert out.night_hourly_wage == Decimal(1200)


def test_amounts_are_not_rounded_midway():
    settings = GameSettings(user_id=1, hourly_wage=1163, base_min_wage=0)
    out = HourlyWageCalculator().calculate(WageInput(worked_minutes=50, night_minutes=0, shift_days=1), settings)
    assert out.base_wage == Decimal(50) / Decimal(60) * Decimal(1163)


def test_fixed_salary_still_earns_night_extra():
    settings = GameSettings(
        user_id=1,
        wage_type=WageType.FIXED,
        fixed_salary=250000,
        hourly_wage=1500,
        base_min_wage=1163,
        night_rate_multiplier=Decimal("0.25"),
    )
    out = FixedWageCalculator().calculate(WageInput(worked_minutes=9000, night_minutes=60, shift_days=20), settings)

    assert out.base_wage == Decimal(250000)
    assert out.night_extra == Decimal("375.00")


def test_explicit_night_hourly_wage_overrides_default():
    settings = GameSettings(user_id=1, hourly_wage=1200, base_min_wage=0, night_rate_multiplier=Decimal("0.5"))
    out = HourlyWageCalculator().calculate(
        WageInput(worked_minutes=60, night_minutes=60, shift_days=1, night_hourly_wage=Decimal(2000)), settings
    )
    assert out.night_extra == Decimal(1000)


def test_transport_per_distinct_day():
    settings = GameSettings(user_id=1, transport_per_shift=500)
    out = HourlyWageCalculator().calculate(WageInput(worked_minutes=0, night_minutes=0, shift_days=3), settings)
    assert out.transport == Decimal(1500)
