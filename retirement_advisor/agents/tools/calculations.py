"""Tools for growth projections, inflation, and savings targets."""

from __future__ import annotations

from typing import Any, Dict, Optional

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine import calculations
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import DEFAULT_INFLATION_RATE


@tool
def calculate_compound_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: int,
) -> Dict[str, Any]:
    """Calculate the future value of investments with compound growth over time.

    Use this to project how much savings will grow given the current balance,
    monthly contributions, expected return rate, and time horizon.

    Args:
        principal: Current savings amount in dollars.
        monthly_contribution: Monthly contribution amount in dollars.
        annual_rate: Expected annual return rate as a decimal (e.g. 0.07 for 7%).
        years: Number of years to project.
    """

    try:
        result = calculations.calculate_compound_growth(principal, monthly_contribution, annual_rate, years)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    return {
        **result.to_dict(),
        "summary": (
            f"After {years} years: {common.dollars(result.future_value)} "
            f"(contributed {common.dollars(result.total_contributions)}, "
            f"earned {common.dollars(result.total_growth)} in growth)"
        ),
    }


@tool
def adjust_for_inflation(
    future_amount: float,
    years: int,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> Dict[str, Any]:
    """Convert a future dollar amount to today's purchasing power.

    Args:
        future_amount: The future dollar amount to adjust.
        years: Number of years in the future.
        inflation_rate: Annual inflation rate as a decimal (defaults to 0.03).
    """

    try:
        adjusted = calculations.adjust_for_inflation(future_amount, years, inflation_rate)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    return {
        "original_amount": future_amount,
        "adjusted_amount": adjusted,
        "years_ahead": years,
        "inflation_rate": inflation_rate,
        "summary": (
            f"{common.dollars(future_amount)} in {years} years is worth about {common.dollars(adjusted)} "
            f"in today's dollars (assuming {common.percent(inflation_rate)} annual inflation)"
        ),
    }


@tool
def calculate_retirement_target(monthly_expenses: float) -> Dict[str, Any]:
    """Calculate total savings needed for retirement from expected monthly expenses.

    Uses the 4% safe withdrawal rule (25x annual expenses).

    Args:
        monthly_expenses: Expected monthly expenses in retirement in dollars.
    """

    try:
        target = calculations.calculate_retirement_target(monthly_expenses)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    annual_expenses = monthly_expenses * 12
    return {
        "monthly_expenses": monthly_expenses,
        "annual_expenses": annual_expenses,
        "target_savings": target,
        "withdrawal_rate": 0.04,
        "summary": (
            f"To support {common.dollars(monthly_expenses)}/month ({common.dollars(annual_expenses)}/year) in retirement, "
            f"you need approximately {common.dollars(target)} saved (using the 4% withdrawal rule)"
        ),
    }


@tool
def project_retirement_age(
    current_age: int,
    current_savings: float,
    monthly_contribution: float,
    target_amount: float,
    annual_rate: float,
    max_age: Optional[int] = None,
) -> Dict[str, Any]:
    """Find the age at which savings reach a target amount.

    Args:
        current_age: User's current age.
        current_savings: Current retirement savings in dollars.
        monthly_contribution: Monthly contribution to retirement in dollars.
        target_amount: Target retirement savings amount in dollars.
        annual_rate: Expected annual return rate as a decimal (e.g. 0.07 for 7%).
        max_age: Maximum age to project to (defaults to 80).
    """

    limit = max_age if max_age is not None else 80
    try:
        retirement_age = calculations.project_retirement_age(
            current_age,
            current_savings,
            monthly_contribution,
            target_amount,
            annual_rate,
            limit,
        )
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    if retirement_age is None:
        return {
            "reachable": False,
            "current_age": current_age,
            "target_amount": target_amount,
            "summary": (
                f"Based on the current trajectory, the target of {common.dollars(target_amount)} may not be "
                f"reached by age {limit}. Consider increasing contributions or adjusting the target."
            ),
        }

    years_until = retirement_age - current_age
    return {
        "reachable": True,
        "retirement_age": retirement_age,
        "current_age": current_age,
        "years_until_retirement": years_until,
        "target_amount": target_amount,
        "summary": (
            f"At the current pace, the target of {common.dollars(target_amount)} can be reached "
            f"at age {retirement_age} ({years_until} years from now)"
        ),
    }
