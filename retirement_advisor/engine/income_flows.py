"""Aggregation of guaranteed retirement income (Social Security, pensions, annuities)."""

from __future__ import annotations

import uuid
from typing import Iterable, List, Optional, Sequence

from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import (
    DEFAULT_INFLATION_RATE,
    DEFAULT_LIFE_EXPECTANCY,
    FOUR_PERCENT_RULE_MULTIPLIER,
    IncomeFlow,
    IncomeFlowBreakdown,
    IncomeFlowSummary,
    IncomeFlowType,
    UserProfile,
)
from retirement_advisor.engine.rounding import round_currency


def generate_income_flow_id() -> str:
    return f"flow_{uuid.uuid4().hex[:12]}"


def calculate_monthly_income_at_age(flows: Iterable[IncomeFlow], age: int) -> float:
    """Total monthly income from flows paying at ``age`` (end age is exclusive)."""

    return sum(
        flow.monthly_amount
        for flow in flows
        if age >= flow.start_age and (flow.end_age is None or age < flow.end_age)
    )


def calculate_income_flow_lifetime_value(
    flow: IncomeFlow,
    retirement_age: int,
    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> int:
    """Value of a flow over the modeled retirement horizon.

    Inflation-adjusted (COLA) flows are summed nominally since they keep their
    purchasing power; this is a simplification, not a present value. Fixed
    flows are discounted year by year to model real erosion.
    """

    effective_start = max(flow.start_age, retirement_age)
    effective_end = flow.end_age if flow.end_age is not None else life_expectancy
    if effective_start >= effective_end:
        return 0

    years = effective_end - effective_start
    annual_amount = flow.monthly_amount * 12
    if flow.inflation_adjusted:
        return round_currency(annual_amount * years)

    if inflation_rate <= -1:
        raise InvalidArgumentError(f"Inflation rate must be greater than -1 (got {inflation_rate})")
    try:
        value = sum(annual_amount / (1 + inflation_rate) ** offset for offset in range(years))
    except OverflowError as exc:
        raise InvalidArgumentError("Income flow value is out of range") from exc
    return round_currency(value)


def calculate_income_flow_summary(
    flows: Sequence[IncomeFlow],
    retirement_age: int,
    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> IncomeFlowSummary:
    """Aggregate flows into monthly income, lifetime value, and savings offset.

    The savings reduction applies the 4% rule multiplier to the monthly
    income received at retirement.
    """

    total_monthly_income = calculate_monthly_income_at_age(flows, retirement_age)
    breakdown = [
        IncomeFlowBreakdown(
            name=flow.name,
            monthly_amount=flow.monthly_amount,
            lifetime_value=calculate_income_flow_lifetime_value(
                flow, retirement_age, life_expectancy, inflation_rate
            ),
        )
        for flow in flows
    ]
    return IncomeFlowSummary(
        total_monthly_income=total_monthly_income,
        total_lifetime_value=sum(item.lifetime_value for item in breakdown),
        savings_reduction=round_currency(total_monthly_income * 12 * FOUR_PERCENT_RULE_MULTIPLIER),
        breakdown=breakdown,
    )


def build_income_flow(
    *,
    name: str,
    flow_type: str,
    monthly_amount: float,
    start_age: int,
    inflation_adjusted: bool,
    end_age: Optional[int] = None,
) -> IncomeFlow:
    """Create a flow with a fresh id, validating its type and ages."""

    try:
        income_type = IncomeFlowType(flow_type)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in IncomeFlowType)
        raise InvalidArgumentError(f"Invalid income flow type '{flow_type}'. Expected one of: {allowed}") from exc
    if monthly_amount < 0:
        raise InvalidArgumentError("Monthly amount cannot be negative")
    if end_age is not None and end_age <= start_age:
        raise InvalidArgumentError("End age must be greater than start age")
    return IncomeFlow(
        id=generate_income_flow_id(),
        name=name,
        type=income_type,
        monthly_amount=monthly_amount,
        start_age=start_age,
        end_age=end_age,
        inflation_adjusted=inflation_adjusted,
    )


def add_income_flow(profile: UserProfile, flow: IncomeFlow) -> UserProfile:
    return profile.with_changes(income_flows=[*profile.income_flows, flow])


def remove_income_flow(profile: UserProfile, flow_id: str) -> tuple[UserProfile, Optional[IncomeFlow]]:
    """Return the profile without ``flow_id`` and the removed flow (None if absent)."""

    removed = next((flow for flow in profile.income_flows if flow.id == flow_id), None)
    if removed is None:
        return profile, None
    remaining: List[IncomeFlow] = [flow for flow in profile.income_flows if flow.id != flow_id]
    return profile.with_changes(income_flows=remaining), removed


def describe_income_flow(flow: IncomeFlow) -> str:
    duration = f"ages {flow.start_age}-{flow.end_age}" if flow.end_age is not None else f"age {flow.start_age}+"
    inflation = "COLA" if flow.inflation_adjusted else "fixed"
    return f"{flow.name}: ${flow.monthly_amount:,.0f}/mo ({duration}, {inflation}) [id: {flow.id}]"
