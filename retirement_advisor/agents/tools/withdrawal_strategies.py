"""Tools for explaining, simulating, and comparing withdrawal strategies."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine import withdrawal_strategies as strategies
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import (
    DEFAULT_GUARDRAILS_CONFIG,
    DEFAULT_INFLATION_RATE,
    GuardrailsConfig,
    StrategySimulationResult,
    YearlyWithdrawal,
)

PREVIEW_YEARS = 5


def _strategy_name(result: StrategySimulationResult) -> str:
    info = strategies.get_strategy_info(result.strategy_type.value)
    return info.name if info else result.strategy_type.value


def _year_preview(rows: List[YearlyWithdrawal]) -> List[Dict[str, int]]:
    return [{"year": row.year, "withdrawal": row.withdrawal, "ending_balance": row.ending_balance} for row in rows]


@tool
def list_withdrawal_strategies() -> Dict[str, Any]:
    """List the available retirement withdrawal strategies with brief descriptions."""

    catalog = strategies.get_all_strategies()
    return {
        "strategies": [
            {"type": item.type.value, "name": item.name, "description": item.description} for item in catalog
        ],
        "summary": "\n".join(f"- {item.name}: {item.description.split('.')[0]}." for item in catalog),
    }


@tool
def explain_withdrawal_strategy(strategy: str) -> Dict[str, Any]:
    """Explain a withdrawal strategy in depth: how it works, pros, cons, and an example.

    Args:
        strategy: One of constant_dollar, constant_percentage, guardrails, bucket.
    """

    info = strategies.get_strategy_info(strategy)
    if info is None:
        return common.failure(f"Unknown strategy: {strategy}")
    return {
        "success": True,
        "type": info.type.value,
        "name": info.name,
        "description": info.description,
        "pros": list(info.pros),
        "cons": list(info.cons),
        "example": info.example,
        "simulatable": info.simulatable,
        "summary": f"{info.name}: {info.description}",
    }


@tool
def compare_withdrawal_strategies(
    initial_portfolio: float,
    years: int,
    annual_return: float,
    monthly_expenses: float,
) -> Dict[str, Any]:
    """Compare withdrawal strategies by simulating them with the same starting conditions.

    Args:
        initial_portfolio: Starting portfolio value in dollars.
        years: Number of years to simulate (e.g. 30 for a 30-year retirement).
        annual_return: Expected annual return rate as a decimal (e.g. 0.07 for 7%).
        monthly_expenses: Expected monthly expenses in retirement.
    """

    if years < 0:
        return common.failure("Years to simulate cannot be negative")

    try:
        results = strategies.compare_strategies(initial_portfolio, years, annual_return, monthly_expenses)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)

    comparison = []
    for result in results:
        comparison.append(
            {
                "strategy": _strategy_name(result),
                "final_balance": result.final_balance,
                "total_withdrawn": result.total_withdrawn,
                "average_annual_withdrawal": result.average_withdrawal,
                "min_withdrawal": result.min_withdrawal,
                "max_withdrawal": result.max_withdrawal,
                "income_variability": result.max_withdrawal - result.min_withdrawal,
                "ran_out_of_money": result.ran_out_of_money,
                "depletion_year": result.depletion_year,
            }
        )

    lines = []
    for entry in comparison:
        line = (
            f"{entry['strategy']}: Avg withdrawal {common.dollars(entry['average_annual_withdrawal'])}/yr, "
            f"final balance {common.dollars(entry['final_balance'])}"
        )
        if entry["ran_out_of_money"]:
            line += f" (depleted year {entry['depletion_year']})"
        lines.append(line)

    return {
        "success": True,
        "initial_portfolio": initial_portfolio,
        "years": years,
        "annual_return": annual_return,
        "monthly_expenses": monthly_expenses,
        "comparison": comparison,
        "summary": "\n".join(lines),
    }


@tool
def simulate_withdrawal_strategy(
    strategy: str,
    initial_portfolio: float,
    years: int,
    annual_return: float,
    annual_withdrawal: Optional[float] = None,
    withdrawal_rate: Optional[float] = None,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
    initial_rate: Optional[float] = None,
    floor_guardrail: Optional[float] = None,
    ceiling_guardrail: Optional[float] = None,
    adjustment_percent: Optional[float] = None,
) -> Dict[str, Any]:
    """Simulate one withdrawal strategy year by year.

    Args:
        strategy: One of constant_dollar, constant_percentage, guardrails.
        initial_portfolio: Starting portfolio value in dollars.
        years: Number of years to simulate.
        annual_return: Expected annual return rate as a decimal (e.g. 0.07 for 7%).
        annual_withdrawal: For constant_dollar, the first-year withdrawal (defaults to 4% of the portfolio).
        withdrawal_rate: For constant_percentage, the yearly rate (defaults to 0.04).
        inflation_rate: For constant_dollar, the yearly raise (defaults to 0.03).
        initial_rate: For guardrails, the starting withdrawal rate (default 0.05).
        floor_guardrail: For guardrails, the rate above which spending is cut (default 0.06).
        ceiling_guardrail: For guardrails, the rate below which spending is raised (default 0.04).
        adjustment_percent: For guardrails, the size of each cut or raise (default 0.10).
    """

    defaults = DEFAULT_GUARDRAILS_CONFIG
    guardrails = GuardrailsConfig(
        initial_rate=initial_rate if initial_rate is not None else defaults.initial_rate,
        floor_guardrail=floor_guardrail if floor_guardrail is not None else defaults.floor_guardrail,
        ceiling_guardrail=ceiling_guardrail if ceiling_guardrail is not None else defaults.ceiling_guardrail,
        adjustment_percent=adjustment_percent if adjustment_percent is not None else defaults.adjustment_percent,
    )
    try:
        result = strategies.simulate_strategy(
            strategy,
            initial_portfolio,
            years,
            annual_return,
            annual_withdrawal=annual_withdrawal,
            withdrawal_rate=withdrawal_rate,
            inflation_rate=inflation_rate,
            guardrails_config=guardrails,
        )
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)

    name = _strategy_name(result)
    if result.ran_out_of_money:
        outcome = f"Portfolio depleted in year {result.depletion_year}."
    else:
        outcome = f"Final balance: {common.dollars(result.final_balance)} after {result.years} years."
    return {
        "success": True,
        "strategy": name,
        "initial_portfolio": result.initial_portfolio,
        "years": result.years,
        "annual_return": result.annual_return,
        "final_balance": result.final_balance,
        "total_withdrawn": result.total_withdrawn,
        "average_annual_withdrawal": result.average_withdrawal,
        "min_withdrawal": result.min_withdrawal,
        "max_withdrawal": result.max_withdrawal,
        "ran_out_of_money": result.ran_out_of_money,
        "depletion_year": result.depletion_year,
        "first_years": _year_preview(result.yearly_results[:PREVIEW_YEARS]),
        "last_years": _year_preview(result.yearly_results[-PREVIEW_YEARS:]),
        "summary": (
            f"{name}: Starting with {common.dollars(result.initial_portfolio)}, "
            f"avg withdrawal {common.dollars(result.average_withdrawal)}/yr "
            f"(range: {common.dollars(result.min_withdrawal)}-{common.dollars(result.max_withdrawal)}). {outcome}"
        ),
        "details": strategies.format_simulation_summary(result),
    }
