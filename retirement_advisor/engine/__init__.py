"""Deterministic retirement-finance calculation engine."""

from __future__ import annotations

from .allocation import (
    allocation_for_profile,
    calculate_expected_return,
    describe_allocation_style,
    expected_return_for_profile,
    suggest_allocation_by_time_horizon,
    validate_asset_allocation,
)
from .calculations import (
    adjust_for_inflation,
    calculate_compound_growth,
    calculate_retirement_target,
    calculate_retirement_target_with_swr,
    project_retirement_age,
    suggest_withdrawal_rate,
)
from .errors import InvalidArgumentError, UnsupportedStrategyError
from .income_flows import (
    calculate_income_flow_lifetime_value,
    calculate_income_flow_summary,
    calculate_monthly_income_at_age,
)
from .projection import project_profile
from .withdrawal_strategies import (
    compare_strategies,
    simulate_constant_dollar,
    simulate_constant_percentage,
    simulate_guardrails,
    simulate_strategy,
)

__all__ = [
    "InvalidArgumentError",
    "UnsupportedStrategyError",
    "adjust_for_inflation",
    "allocation_for_profile",
    "calculate_compound_growth",
    "calculate_expected_return",
    "calculate_income_flow_lifetime_value",
    "calculate_income_flow_summary",
    "calculate_monthly_income_at_age",
    "calculate_retirement_target",
    "calculate_retirement_target_with_swr",
    "compare_strategies",
    "describe_allocation_style",
    "expected_return_for_profile",
    "project_profile",
    "project_retirement_age",
    "simulate_constant_dollar",
    "simulate_constant_percentage",
    "simulate_guardrails",
    "simulate_strategy",
    "suggest_allocation_by_time_horizon",
    "suggest_withdrawal_rate",
    "validate_asset_allocation",
]
