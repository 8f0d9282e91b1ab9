import math
from decimal import Decimal, InvalidOperation
from typing import Any

import pydash

from crypto_portfolio_tracker.commons.constants import (
    AMOUNT_DECIMAL_PLACES,
    ERROR_MESSAGE_MAX_LENGTH,
    PERCENTAGE_DECIMAL_PLACES,
)


def to_optional_float(value: Any) -> float | None:
    """
    Coerces a backend numeric value into a float.

    The backend may send numbers or numeric strings (SQL decimals are serialised as strings).
    Anything that is not a finite number is returned as None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        ret = float(value)
    elif isinstance(value, str):
        try:
            ret = float(Decimal(value.strip()))
        except (InvalidOperation, ValueError):
            return None
    else:
        return None
    return ret if math.isfinite(ret) else None


def to_float_or_zero(value: Any) -> float:
    ret = to_optional_float(value)
    return ret if ret is not None else 0.0


def format_amount(value: Any, *, ndigits: int = AMOUNT_DECIMAL_PLACES) -> str:
    return f"{to_float_or_zero(value):.{ndigits}f}"


def format_signed_percentage(value: Any, *, ndigits: int = PERCENTAGE_DECIMAL_PLACES) -> str:
    number = to_float_or_zero(value)
    return f"{'+' if number >= 0 else ''}{number:.{ndigits}f}%"


def format_exception(e: Exception) -> str:
    exception_message = str(e) or ""
    if exception_message:
        exception_message = pydash.truncate(exception_message, length=ERROR_MESSAGE_MAX_LENGTH)
    return f"{e.__class__.__name__} :: {exception_message}" if exception_message else e.__class__.__name__


def calculate_percentage(part: Any, total: Any) -> float:
    """
    Guarded percentage: (part / total) * 100 when total > 0, 0.0 otherwise.
    Missing or non numeric inputs are treated as 0, so the result is never NaN nor infinite.
    """
    total = to_float_or_zero(total)
    if total <= 0:
        return 0.0
    return (to_float_or_zero(part) / total) * 100


def format_percentage(part: Any, total: Any, *, ndigits: int = PERCENTAGE_DECIMAL_PLACES) -> str:
    return f"{calculate_percentage(part, total):.{ndigits}f}"
