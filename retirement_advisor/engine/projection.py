"""Profile-level retirement readiness projection."""

from __future__ import annotations

from retirement_advisor.engine.allocation import expected_return_for_profile
from retirement_advisor.engine.calculations import calculate_compound_growth, calculate_retirement_target
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.income_flows import calculate_income_flow_summary
from retirement_advisor.engine.models import (
    DEFAULT_INFLATION_RATE,
    DEFAULT_LIFE_EXPECTANCY,
    ProjectionResult,
    UserProfile,
)


def project_profile(
    profile: UserProfile,
    *,
    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> ProjectionResult:
    """Compare projected savings at the target retirement age with the savings target.

    The target is the 4% rule target for the expected expenses, reduced by the
    savings offset of the profile's income flows.
    """

    if profile.expected_monthly_expenses is None:
        raise InvalidArgumentError("Profile has no expected monthly expenses to size a target from")

    years = profile.target_retirement_age - profile.age
    growth = calculate_compound_growth(
        profile.current_savings,
        profile.monthly_contribution,
        expected_return_for_profile(profile),
        years,
    )
    income = calculate_income_flow_summary(
        profile.income_flows,
        profile.target_retirement_age,
        life_expectancy,
        inflation_rate,
    )
    target = max(0, calculate_retirement_target(profile.expected_monthly_expenses) - income.savings_reduction)
    return ProjectionResult(
        target_age=profile.target_retirement_age,
        projected_savings=growth.future_value,
        target_amount=target,
        gap=max(0, target - growth.future_value),
        on_track=growth.future_value >= target,
    )
