from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_int, require_max_length, require_non_empty
from ..core.constants import SPECIAL_WAGE_LABEL_MAX, SPECIAL_WAGE_MAX, SPECIAL_WAGE_MIN
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import SpecialHourlyWage
from .repository import SpecialWageRepository

logger = logging.getLogger(__name__)


class SpecialWageService:
    def __init__(self, wages: SpecialWageRepository):
        self._wages = wages

    def list_all(self) -> Sequence[SpecialHourlyWage]:
        return self._wages.list_all()

    def create(self, *, current_role: Role, label: Any, hourly_wage: Any) -> SpecialHourlyWage:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can manage special wages")

        label = require_max_length(require_non_empty(label, "label"), "label", SPECIAL_WAGE_LABEL_MAX)
        wage = require_int(hourly_wage, "hourlyWage", min_value=SPECIAL_WAGE_MIN, max_value=SPECIAL_WAGE_MAX)

        if self._wages.get_by_label(label):
            raise ValidationError("label already exists", field="label")

        wage_id = self._wages.create(label=label, hourly_wage=wage)
        logger.info("Created special hourly wage id=%s label=%r wage=%s", wage_id, label, wage)
        return SpecialHourlyWage(special_wage_id=wage_id, label=label, hourly_wage=wage)

    def delete(self, *, current_role: Role, special_wage_id: int) -> None:
        """Shifts keep their dangling id; payroll treats it as no allowance."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can manage special wages")

        if not self._wages.delete(special_wage_id=int(special_wage_id)):
            raise NotFoundError("Special wage not found")
        logger.info("Deleted special hourly wage id=%s", special_wage_id)
