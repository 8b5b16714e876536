from decimal import Decimal

import pytest

from src.parlor_staff.parlor_staff.core.enums import WageType
from src.parlor_staff.parlor_staff.core.exceptions import ValidationError


def test_defaults_created_lazily_once(container, repos):
    first = container.settings_service.get_or_create(2)
    second = container.settings_service.get_or_create(2)

    assert first == second
    assert first.yonma_game_fee == 400
    assert first.wage_type == WageType.HOURLY
    assert repos.settings.saves == 1


def test_patch_changes_only_given_fields(container):
    updated = container.settings_service.patch(2, {"yonmaTipUnit": 500, "wageType": "fixed", "incomeTaxRate": "0.05"})

    assert updated.yonma_tip_unit == 500
    assert updated.wage_type == WageType.FIXED
    assert updated.income_tax_rate == Decimal("0.05")
    assert updated.sanma_tip_unit == 50


def test_patch_collects_errors_per_field(container):
    with pytest.raises(ValidationError) as exc:
        container.settings_service.patch(
            2,
            {"yonmaGameFee": -1, "nightRateMultiplier": "nan", "wageType": "DAILY", "hourlyWage": 1.5},
        )
    assert set(exc.value.errors) == {"yonmaGameFee", "nightRateMultiplier", "wageType", "hourlyWage"}


def test_income_tax_rate_above_one_rejected(container):
    with pytest.raises(ValidationError) as exc:
        container.settings_service.patch(2, {"incomeTaxRate": 1.5})
    assert "incomeTaxRate" in exc.value.errors


def test_replace_requires_every_field(container):
    with pytest.raises(ValidationError) as exc:
        container.settings_service.replace(2, {"yonmaGameFee": 100})
    assert "sanmaGameFee" in exc.value.errors
    assert "yonmaGameFee" not in exc.value.errors
