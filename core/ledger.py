"""
Shared ledger arithmetic used by the livestock and crop domains and by the
dashboard aggregation.

Cost allocation uses one policy everywhere: accrued cost divided by the
cumulative quantity ever acquired (``initial_quantity``), so the cost per
unit stays stable as stock is sold or lost.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.utils import timezone

from core.exceptions import InvalidInput

ZERO = Decimal('0.00')
COST_PER_UNIT_PLACES = Decimal('0.0001')
MONEY_PLACES = Decimal('0.01')

MONTH_LABEL_RE = re.compile(r'^\d{4}-(0[1-9]|1[0-2])$')

# Largest value a PositiveIntegerField holds on every supported backend
MAX_QUANTITY = 2147483647


def cost_per_unit(total_cost, baseline) -> Decimal:
    """
    Cost attributed to one unit at the moment of a sale.

    Returns 0 when the baseline is zero so a sale is never rejected just
    because nothing has been acquired on record.
    """
    total_cost = Decimal(str(total_cost or 0))
    if not baseline or baseline <= 0:
        return Decimal('0').quantize(COST_PER_UNIT_PLACES)
    return (total_cost / Decimal(baseline)).quantize(
        COST_PER_UNIT_PLACES, rounding=ROUND_HALF_UP
    )


def month_key(value) -> str:
    """``YYYY-MM`` bucket key for a date or datetime."""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.strftime('%Y-%m')
    if isinstance(value, date):
        return value.strftime('%Y-%m')
    raise TypeError(f"Cannot derive a month from {value!r}")


def current_month_label() -> str:
    return month_key(timezone.now())


def validate_month_label(value) -> str:
    value = (value or '').strip()
    if not MONTH_LABEL_RE.match(value):
        raise InvalidInput(f"Invalid month '{value}'. Use YYYY-MM.")
    return value


def to_decimal(value, field='amount') -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInput(f"{field} must be a number.")


def require_non_negative(value, field):
    if value is None or value < 0:
        raise InvalidInput(f"{field} must be zero or greater.")
    return value


def require_positive(value, field):
    if value is None or value <= 0:
        raise InvalidInput(f"{field} must be greater than zero.")
    return value


def require_within_limit(value, field):
    if value is not None and value > MAX_QUANTITY:
        raise InvalidInput(f"{field} cannot exceed {MAX_QUANTITY}.")
    return value


def to_number(value):
    """Render a Decimal amount for JSON payloads (2 decimal places)."""
    if value is None:
        return 0.0
    return float(Decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP))