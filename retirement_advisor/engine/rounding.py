"""Currency rounding shared by every engine computation."""

from __future__ import annotations

import math

from retirement_advisor.engine.errors import InvalidArgumentError


def round_currency(amount: float) -> int:
    """Round to the nearest whole unit, halves rounding up.

    ``round()`` uses banker's rounding, which would drift from the reference
    figures on exact halves (e.g. 31.5 must become 32).

    Raises:
        InvalidArgumentError: ``amount`` is infinite or NaN, which happens
            when inputs push a projection past float range.
    """

    if not math.isfinite(amount):
        raise InvalidArgumentError(f"Amount is out of range ({amount})")
    return int(math.floor(amount + 0.5))
