import pytest

from src.parlor_staff.parlor_staff.core.enums import Role
from src.parlor_staff.parlor_staff.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_admin_creates_wage(container):
    wage = container.special_wage_service.create(current_role=Role.ADMIN, label="  New year ", hourly_wage="500")
    assert wage.label == "New year"
    assert wage.hourly_wage == 500
    assert wage.to_dict() == {"id": wage.special_wage_id, "label": "New year", "hourlyWage": 500}


def test_member_cannot_create(container):
    with pytest.raises(AuthorizationError):
        container.special_wage_service.create(current_role=Role.MEMBER, label="x", hourly_wage=1)


def test_duplicate_label_is_label_error(container):
    with pytest.raises(ValidationError) as exc:
        container.special_wage_service.create(current_role=Role.ADMIN, label="Event night", hourly_wage=100)
    assert exc.value.errors == {"label": "label already exists"}


@pytest.mark.parametrize("label, wage, field", [("", 100, "label"), ("x" * 51, 100, "label"), ("ok", 100001, "hourlyWage"), ("ok", -1, "hourlyWage"), ("ok", 12.5, "hourlyWage")])
def test_invalid_input(container, label, wage, field):
    with pytest.raises(ValidationError) as exc:
        container.special_wage_service.create(current_role=Role.ADMIN, label=label, hourly_wage=wage)
    assert field in exc.value.errors


def test_delete_missing_wage(container):
    with pytest.raises(NotFoundError):
        container.special_wage_service.delete(current_role=Role.ADMIN, special_wage_id=999)


def test_delete_referenced_wage_keeps_shift_payroll_working(container, repos):
    container.shift_service.create(
        user_id=2,
        payload={"date": "2026-03-02", "startTime": "10:00", "endTime": "14:00", "specialHourlyWageId": 7},
    )
    container.special_wage_service.delete(current_role=Role.ADMIN, special_wage_id=7)

    summary = container.salary_service.summary(user_id=2, year_month="2026-03")
    assert summary.special_allowance_total == 0
    assert summary.total_work_minutes == 240
