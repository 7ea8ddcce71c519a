"""Tools for choosing a safe withdrawal rate."""

from __future__ import annotations

from typing import Any, Dict

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine import calculations
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.rounding import round_currency


@tool
def suggest_withdrawal_rate(retirement_years: int) -> Dict[str, Any]:
    """Suggest a safe withdrawal rate (SWR) for the expected retirement length.

    The traditional 4% rule assumes a 30-year retirement; longer retirements
    need lower rates and shorter ones can use higher rates.

    Args:
        retirement_years: Expected years in retirement (e.g. 95 minus retirement age).
    """

    guidance = calculations.suggest_withdrawal_rate(retirement_years)
    return {
        "retirement_years": retirement_years,
        "standard_rate": guidance.standard_rate,
        "conservative_rate": guidance.conservative_rate,
        "standard_rate_percent": common.percent(guidance.standard_rate, 2),
        "conservative_rate_percent": common.percent(guidance.conservative_rate, 2),
        "description": guidance.description,
        "summary": (
            f"For a {retirement_years}-year retirement: standard rate is {common.percent(guidance.standard_rate)}, "
            f"conservative rate is {common.percent(guidance.conservative_rate, 2)}. {guidance.description}"
        ),
    }


@tool
def calculate_retirement_target_with_swr(monthly_expenses: float, withdrawal_rate: float) -> Dict[str, Any]:
    """Calculate savings needed for retirement at a specific safe withdrawal rate.

    Args:
        monthly_expenses: Expected monthly expenses in retirement in dollars.
        withdrawal_rate: Safe withdrawal rate as a decimal (e.g. 0.035 for 3.5%).
    """

    try:
        target = calculations.calculate_retirement_target_with_swr(monthly_expenses, withdrawal_rate)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)

    annual_expenses = monthly_expenses * 12
    multiplier = round_currency(1 / withdrawal_rate)
    return {
        "success": True,
        "monthly_expenses": monthly_expenses,
        "annual_expenses": annual_expenses,
        "withdrawal_rate": withdrawal_rate,
        "withdrawal_rate_percent": common.percent(withdrawal_rate, 2),
        "target_savings": target,
        "multiplier": multiplier,
        "summary": (
            f"To support {common.dollars(monthly_expenses)}/month ({common.dollars(annual_expenses)}/year) "
            f"with a {common.percent(withdrawal_rate)} withdrawal rate, you need approximately "
            f"{common.dollars(target)} saved ({multiplier}x annual expenses)"
        ),
    }
