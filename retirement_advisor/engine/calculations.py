"""Growth and target math: compounding, inflation, and savings targets."""

from __future__ import annotations

from typing import List, Optional, Tuple

from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import (
    DEFAULT_INFLATION_RATE,
    FOUR_PERCENT_RULE_MULTIPLIER,
    CompoundGrowthResult,
    WithdrawalRateGuidance,
)
from retirement_advisor.engine.rounding import round_currency


# (max retirement years, guidance), ascending by bracket.
WITHDRAWAL_RATE_TABLE: List[Tuple[int, WithdrawalRateGuidance]] = [
    (
        20,
        WithdrawalRateGuidance(
            standard_rate=0.05,
            conservative_rate=0.045,
            description="A retirement of 20 years or less can support a higher withdrawal rate.",
        ),
    ),
    (
        25,
        WithdrawalRateGuidance(
            standard_rate=0.045,
            conservative_rate=0.04,
            description="A 25-year retirement can sustain slightly more than the classic 4% rule.",
        ),
    ),
    (
        30,
        WithdrawalRateGuidance(
            standard_rate=0.04,
            conservative_rate=0.035,
            description="The classic 4% rule was designed around a 30-year retirement.",
        ),
    ),
    (
        35,
        WithdrawalRateGuidance(
            standard_rate=0.0375,
            conservative_rate=0.0325,
            description="A 35-year retirement calls for trimming the 4% rule to reduce depletion risk.",
        ),
    ),
    (
        40,
        WithdrawalRateGuidance(
            standard_rate=0.035,
            conservative_rate=0.03,
            description="Retirements of 40 years or more (e.g. early retirement) need a lower rate.",
        ),
    ),
]


def calculate_compound_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: float,
) -> CompoundGrowthResult:
    """Project savings growth under monthly compounding.

    Args:
        principal: Current savings.
        monthly_contribution: Amount added at the end of every month.
        annual_rate: Expected annual return as a decimal (0.07 for 7%).
        years: Projection horizon in years.

    Returns:
        Future value, total contributions, and total growth, all rounded.
        ``future_value == total_contributions + total_growth`` always holds.
    """

    if years <= 0:
        rounded_principal = round_currency(principal)
        return CompoundGrowthResult(
            future_value=rounded_principal,
            total_contributions=rounded_principal,
            total_growth=0,
        )

    monthly_rate = annual_rate / 12
    months = years * 12
    if monthly_rate <= -1:
        raise InvalidArgumentError(f"Annual rate must be greater than -12 (got {annual_rate})")

    try:
        growth_factor = (1 + monthly_rate) ** months
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"Growth over {years} years at {annual_rate} is too large to represent"
        ) from exc

    principal_fv = principal * growth_factor
    if monthly_rate > 0:
        contributions_fv = monthly_contribution * ((growth_factor - 1) / monthly_rate)
    else:
        contributions_fv = monthly_contribution * months

    future_value = round_currency(principal_fv + contributions_fv)
    total_contributions = round_currency(principal + monthly_contribution * months)
    return CompoundGrowthResult(
        future_value=future_value,
        total_contributions=total_contributions,
        total_growth=future_value - total_contributions,
    )


def adjust_for_inflation(
    future_amount: float,
    years: float,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> int:
    """Express a future amount in today's purchasing power."""

    if years <= 0:
        return round_currency(future_amount)
    if inflation_rate <= -1:
        raise InvalidArgumentError(f"Inflation rate must be greater than -1 (got {inflation_rate})")
    try:
        return round_currency(future_amount / (1 + inflation_rate) ** years)
    except OverflowError as exc:
        raise InvalidArgumentError(f"Inflation over {years} years is too large to represent") from exc


def calculate_retirement_target(monthly_expenses: float) -> int:
    """Savings needed under the 4% rule (25x annual expenses)."""

    return round_currency(monthly_expenses * 12 * FOUR_PERCENT_RULE_MULTIPLIER)


def calculate_retirement_target_with_swr(monthly_expenses: float, withdrawal_rate: float) -> int:
    """Savings needed to fund ``monthly_expenses`` at a custom withdrawal rate."""

    if withdrawal_rate <= 0 or withdrawal_rate > 1:
        raise InvalidArgumentError(
            f"Withdrawal rate must be greater than 0 and at most 1 (got {withdrawal_rate})"
        )
    return round_currency(monthly_expenses * 12 / withdrawal_rate)


def suggest_withdrawal_rate(retirement_years: float) -> WithdrawalRateGuidance:
    """Return guidance for the shortest bracket covering ``retirement_years``.

    This is a ceiling lookup: 22 years selects the 25-year bracket. Horizons
    past the last bracket get the most conservative guidance.
    """

    for max_years, guidance in WITHDRAWAL_RATE_TABLE:
        if retirement_years <= max_years:
            return guidance
    return WITHDRAWAL_RATE_TABLE[-1][1]


def project_retirement_age(
    current_age: int,
    current_savings: float,
    monthly_contribution: float,
    target_amount: float,
    annual_rate: float,
    max_age: int = 80,
) -> Optional[int]:
    """Return the first age whose projected savings reach ``target_amount``.

    ``None`` means the target is not reachable by ``max_age``; that is an
    ordinary outcome, not an error.
    """

    for age in range(current_age, max_age + 1):
        projection = calculate_compound_growth(
            current_savings,
            monthly_contribution,
            annual_rate,
            age - current_age,
        )
        if projection.future_value >= target_amount:
            return age
    return None
