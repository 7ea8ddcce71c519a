"""Tools for managing retirement income flows (Social Security, pensions, annuities)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine import income_flows
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import DEFAULT_LIFE_EXPECTANCY

logger = logging.getLogger(__name__)


@tool
def add_income_flow(
    name: str,
    type: str,
    monthly_amount: float,
    start_age: int,
    inflation_adjusted: bool,
    end_age: Optional[int] = None,
) -> Dict[str, Any]:
    """Add a retirement income flow such as Social Security, a pension, or an annuity.

    For Social Security estimates, suggest the user visit ssa.gov/myaccount.

    Args:
        name: Name of the income source (e.g. "Social Security", "Company Pension").
        type: One of social_security, pension, annuity, part_time_work, other.
        monthly_amount: Monthly income amount in dollars.
        start_age: Age when the income starts.
        inflation_adjusted: Whether the income adjusts for inflation (Social Security has COLA).
        end_age: Age when the income ends; omit for lifetime income.
    """

    try:
        flow = income_flows.build_income_flow(
            name=name,
            flow_type=type,
            monthly_amount=monthly_amount,
            start_age=start_age,
            end_age=end_age,
            inflation_adjusted=inflation_adjusted,
        )
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error, "Could not add income flow - no profile exists yet.")

    save_error = common.save_updated_profile(income_flows.add_income_flow(profile, flow))
    if save_error:
        return common.failure(save_error, f"Failed to save income flow: {save_error}")

    logger.info("Added income flow %s (%s)", flow.id, flow.type.value)
    inflation_note = "inflation-adjusted" if inflation_adjusted else "fixed (not inflation-adjusted)"
    duration_note = (
        f"from age {start_age} to {end_age}" if end_age is not None else f"starting at age {start_age} (lifetime)"
    )
    return {
        "success": True,
        "income_flow": flow.to_dict(),
        "summary": f"Added {name}: {common.dollars(monthly_amount)}/month, {duration_note}, {inflation_note}.",
    }


@tool
def list_income_flows() -> Dict[str, Any]:
    """List the retirement income flows configured in the user's profile."""

    profile, error = common.load_existing_profile()
    if profile is None:
        return {"found": False, "income_flows": [], "error": error, "summary": f"{error} No income flows configured."}

    flows = profile.income_flows
    if not flows:
        return {
            "found": True,
            "income_flows": [],
            "summary": "No income flows configured yet. Consider adding Social Security or pension income.",
        }
    descriptions = "\n".join(income_flows.describe_income_flow(flow) for flow in flows)
    return {
        "found": True,
        "income_flows": [flow.to_dict() for flow in flows],
        "summary": f"{len(flows)} income flow(s) configured:\n{descriptions}",
    }


@tool
def remove_income_flow(income_flow_id: str) -> Dict[str, Any]:
    """Remove an income flow from the user's profile by its id.

    Args:
        income_flow_id: The id of the income flow to remove.
    """

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error, "Could not remove income flow - no profile exists.")

    updated, removed = income_flows.remove_income_flow(profile, income_flow_id)
    if removed is None:
        return common.failure("Income flow not found.", f"No income flow found with id {income_flow_id}.")

    save_error = common.save_updated_profile(updated)
    if save_error:
        return common.failure(save_error, f"Failed to remove income flow: {save_error}")

    logger.info("Removed income flow %s", removed.id)
    return {
        "success": True,
        "removed_flow": removed.to_dict(),
        "summary": f"Removed income flow: {removed.name}",
    }


@tool
def calculate_income_flow_impact(
    retirement_age: int,
    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY,
) -> Dict[str, Any]:
    """Calculate how the profile's income flows reduce the savings needed for retirement.

    Args:
        retirement_age: The age at which the user plans to retire.
        life_expectancy: Expected lifespan for calculations (default 95).
    """

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error, "Could not calculate impact - no profile exists.")

    flows = profile.income_flows
    if not flows:
        return {
            "success": True,
            "has_income_flows": False,
            "summary": "No income flows configured. All retirement expenses must come from savings.",
        }

    try:
        summary = income_flows.calculate_income_flow_summary(flows, retirement_age, life_expectancy)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    return {
        "success": True,
        "has_income_flows": True,
        **summary.to_dict(),
        "summary": (
            f"Income flows reduce needed savings by approximately {common.dollars(summary.savings_reduction)}. "
            f"At retirement (age {retirement_age}), you'll receive "
            f"{common.dollars(summary.total_monthly_income)}/month from {len(flows)} source(s). "
            f"Total lifetime value: ~{common.dollars(summary.total_lifetime_value)}."
        ),
    }
