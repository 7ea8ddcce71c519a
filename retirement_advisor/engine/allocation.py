"""Asset allocation validation, expected returns, and suggestions."""

from __future__ import annotations

from typing import Tuple

from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import (
    ASSET_CLASS_RETURNS,
    PRESET_ALLOCATIONS,
    RISK_TOLERANCE_RATES,
    AssetAllocation,
    UserProfile,
    ValidationResult,
)
from retirement_advisor.engine.rounding import round_currency


ALLOCATION_SUM_TOLERANCE = 0.01

# (minimum combined stock percentage, label), checked top down.
ALLOCATION_STYLE_BANDS = [
    (80, "very aggressive"),
    (65, "aggressive"),
    (45, "balanced"),
    (25, "conservative"),
]
LOWEST_ALLOCATION_STYLE = "very conservative"


def validate_asset_allocation(allocation: AssetAllocation) -> ValidationResult:
    """Check that percentages are non-negative and sum to 100 (within 0.01)."""

    components = (
        allocation.us_stocks,
        allocation.international_stocks,
        allocation.bonds,
        allocation.cash,
    )
    if any(value < 0 for value in components):
        return ValidationResult(is_valid=False, error="Allocation percentages cannot be negative")

    total = sum(components)
    if abs(total - 100) > ALLOCATION_SUM_TOLERANCE:
        return ValidationResult(
            is_valid=False,
            error=f"Allocation must sum to 100% (currently {total:.1f}%)",
        )
    return ValidationResult(is_valid=True)


def calculate_expected_return(allocation: AssetAllocation) -> float:
    """Weighted nominal return for a valid allocation, as an unrounded decimal."""

    validation = validate_asset_allocation(allocation)
    if not validation.is_valid:
        raise InvalidArgumentError(validation.error)
    return weighted_return(allocation)


def weighted_return(allocation: AssetAllocation) -> float:
    """Percentage-weighted asset class return, without validating the allocation."""

    return (
        allocation.us_stocks / 100 * ASSET_CLASS_RETURNS["us_stocks"]
        + allocation.international_stocks / 100 * ASSET_CLASS_RETURNS["international_stocks"]
        + allocation.bonds / 100 * ASSET_CLASS_RETURNS["bonds"]
        + allocation.cash / 100 * ASSET_CLASS_RETURNS["cash"]
    )


def describe_allocation_style(allocation: AssetAllocation) -> str:
    """Label an allocation by its combined stock percentage.

    Each band includes its lower bound: exactly 80% stocks is "very aggressive"
    and 79.9% is "aggressive". Below 25% the style is "very conservative".
    """

    stocks = allocation.stock_percentage
    for threshold, label in ALLOCATION_STYLE_BANDS:
        if stocks >= threshold:
            return label
    return LOWEST_ALLOCATION_STYLE


def suggest_allocation_by_time_horizon(years_to_retirement: float) -> AssetAllocation:
    """Suggest a glide-path allocation from the years left until retirement.

    Stocks are ``40 + 2 * years`` clamped to [20, 90], split 70/30 between US
    and international with each part rounded on its own. Cash is
    ``15 - years`` clamped to [3, 10] and bonds take the remainder, floored at
    zero. The stock parts are rounded independently, so together they can
    drift from the clamped percentage (45% stocks becomes 32 + 14).
    """

    stock_percentage = _clamp(40 + 2 * years_to_retirement, 20, 90)
    us_stocks = round_currency(stock_percentage * 0.7)
    international_stocks = round_currency(stock_percentage * 0.3)
    cash = _clamp(15 - years_to_retirement, 3, 10)
    bonds = max(0, 100 - us_stocks - international_stocks - cash)
    return AssetAllocation(
        us_stocks=us_stocks,
        international_stocks=international_stocks,
        bonds=bonds,
        cash=cash,
    )


def allocation_for_profile(profile: UserProfile) -> Tuple[AssetAllocation, str]:
    """Return the profile's allocation and its source ("custom" or "preset")."""

    if profile.asset_allocation is not None:
        return profile.asset_allocation, "custom"
    return PRESET_ALLOCATIONS[profile.risk_tolerance], "preset"


def expected_return_for_profile(profile: UserProfile) -> float:
    """A custom allocation's expected return overrides the risk-tolerance rate."""

    if profile.asset_allocation is not None:
        return calculate_expected_return(profile.asset_allocation)
    return RISK_TOLERANCE_RATES[profile.risk_tolerance]


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
