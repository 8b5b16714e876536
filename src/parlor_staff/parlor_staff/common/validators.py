from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    return str(value).strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters", field=field_name)
    return value


def require_int(value: Any, field_name: str, *, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    """Accept ints and integral floats/strings; reject bools, NaN, inf and fractions."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be an integer", field=field_name)
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValidationError(f"{field_name} must be an integer", field=field_name)
        number = int(value)
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be an integer", field=field_name)

    if min_value is not None and number < min_value:
        raise ValidationError(f"{field_name} must be greater than or equal to {min_value}", field=field_name)
    if max_value is not None and number > max_value:
        raise ValidationError(f"{field_name} must be less than or equal to {max_value}", field=field_name)
    return number


def require_decimal(value: Any, field_name: str, *, min_value: Optional[Decimal] = None, max_value: Optional[Decimal] = None) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a finite number", field=field_name)

    if min_value is not None and number < min_value:
        raise ValidationError(f"{field_name} must be greater than or equal to {min_value}", field=field_name)
    if max_value is not None and number > max_value:
        raise ValidationError(f"{field_name} must be less than or equal to {max_value}", field=field_name)
    return number


def optional_int(value: Any, field_name: str, **bounds: int) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_int(value, field_name, **bounds)
