"""Tools for detailed asset allocation management."""

from __future__ import annotations

import logging
from typing import Any, Dict

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine import allocation as allocation_model
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import (
    ASSET_CLASS_RETURNS,
    PRESET_ALLOCATIONS,
    AssetAllocation,
)

logger = logging.getLogger(__name__)


def _describe(allocation: AssetAllocation) -> Dict[str, Any]:
    expected = allocation_model.calculate_expected_return(allocation)
    return {
        "allocation": allocation.to_dict(),
        "expected_return": expected,
        "expected_return_percent": common.percent(expected),
        "style": allocation_model.describe_allocation_style(allocation),
    }


@tool
def set_asset_allocation(
    us_stocks: float,
    international_stocks: float,
    bonds: float,
    cash: float,
) -> Dict[str, Any]:
    """Set a custom asset allocation on the user's profile.

    Percentages must sum to 100. The allocation overrides the risk tolerance
    for return calculations.

    Args:
        us_stocks: Percentage in US stocks (0-100).
        international_stocks: Percentage in international stocks (0-100).
        bonds: Percentage in bonds/fixed income (0-100).
        cash: Percentage in cash/money market (0-100).
    """

    allocation = AssetAllocation(us_stocks, international_stocks, bonds, cash)
    validation = allocation_model.validate_asset_allocation(allocation)
    if not validation.is_valid:
        return common.failure(validation.error or "Invalid allocation")

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error)

    save_error = common.save_updated_profile(profile.with_changes(asset_allocation=allocation))
    if save_error:
        return common.failure(save_error, f"Failed to save allocation: {save_error}")

    details = _describe(allocation)
    logger.info("Custom asset allocation saved: %s", allocation)
    return {
        "success": True,
        **details,
        "summary": (
            f"Asset allocation set: {us_stocks:g}% US stocks, {international_stocks:g}% international stocks, "
            f"{bonds:g}% bonds, {cash:g}% cash. Expected return: {details['expected_return_percent']} "
            f"({details['style']})."
        ),
    }


@tool
def calculate_allocation_return(
    us_stocks: float,
    international_stocks: float,
    bonds: float,
    cash: float,
) -> Dict[str, Any]:
    """Calculate the expected annual return for an allocation without saving it.

    Args:
        us_stocks: Percentage in US stocks (0-100).
        international_stocks: Percentage in international stocks (0-100).
        bonds: Percentage in bonds/fixed income (0-100).
        cash: Percentage in cash/money market (0-100).
    """

    allocation = AssetAllocation(us_stocks, international_stocks, bonds, cash)
    try:
        details = _describe(allocation)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    return {
        "success": True,
        **details,
        "summary": f"Expected annual return: {details['expected_return_percent']} ({details['style']} allocation).",
    }


@tool
def suggest_allocation(years_to_retirement: int) -> Dict[str, Any]:
    """Suggest an asset allocation based on the years until retirement.

    Longer horizons suggest more stocks, shorter horizons more bonds.

    Args:
        years_to_retirement: Number of years until planned retirement.
    """

    allocation = allocation_model.suggest_allocation_by_time_horizon(years_to_retirement)
    # Suggestions carry the stock rounding drift, so they skip validation.
    expected = allocation_model.weighted_return(allocation)
    style = allocation_model.describe_allocation_style(allocation)
    if years_to_retirement >= 20:
        rationale = (
            "With 20+ years until retirement, you have time to ride out market volatility "
            "and can afford a stock-heavy allocation."
        )
    elif years_to_retirement >= 10:
        rationale = (
            "With 10-20 years until retirement, a balanced approach provides growth potential "
            "while reducing volatility risk."
        )
    else:
        rationale = (
            "With less than 10 years until retirement, a more conservative allocation helps "
            "protect your savings from market downturns."
        )
    return {
        "success": True,
        "years_to_retirement": years_to_retirement,
        "suggested_allocation": allocation.to_dict(),
        "expected_return_percent": common.percent(expected),
        "style": style,
        "rationale": rationale,
        "summary": (
            f"Suggested for {years_to_retirement} years to retirement: {allocation.us_stocks:g}% US stocks, "
            f"{allocation.international_stocks:g}% international, {allocation.bonds:g}% bonds, "
            f"{allocation.cash:g}% cash ({style}). {rationale}"
        ),
    }


@tool
def show_preset_allocations() -> Dict[str, Any]:
    """Show the preset allocations for conservative, moderate, and aggressive risk tolerances."""

    presets = {tolerance.value: _describe(preset) for tolerance, preset in PRESET_ALLOCATIONS.items()}
    lines = [
        f"{name.title()}: {details['expected_return_percent']} expected return ({details['style']})"
        for name, details in presets.items()
    ]
    return {
        "success": True,
        "presets": presets,
        "asset_class_returns": {
            name: f"{rate * 100:.0f}% (historical average)" for name, rate in ASSET_CLASS_RETURNS.items()
        },
        "summary": "\n".join(lines),
    }


@tool
def get_current_allocation() -> Dict[str, Any]:
    """Get the user's current allocation: the custom one if set, otherwise the risk-tolerance preset."""

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error)

    allocation, source = allocation_model.allocation_for_profile(profile)
    try:
        details = _describe(allocation)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)
    payload = {"success": True, "source": source, **details}
    if source == "preset":
        payload["risk_tolerance"] = profile.risk_tolerance.value
        label = f"{profile.risk_tolerance.value} preset"
    else:
        label = "custom allocation"
    payload["summary"] = f"Using {label}: {details['expected_return_percent']} expected return ({details['style']})."
    return payload


@tool
def clear_custom_allocation() -> Dict[str, Any]:
    """Remove the custom allocation, reverting to the risk-tolerance preset."""

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error)

    tolerance = profile.risk_tolerance.value
    if profile.asset_allocation is None:
        return {
            "success": True,
            "summary": f"No custom allocation was set. Using preset for {tolerance} risk tolerance.",
        }

    save_error = common.save_updated_profile(profile.with_changes(asset_allocation=None))
    if save_error:
        return common.failure(save_error, f"Failed to clear allocation: {save_error}")

    preset = PRESET_ALLOCATIONS[profile.risk_tolerance]
    expected = allocation_model.calculate_expected_return(preset)
    return {
        "success": True,
        "allocation": preset.to_dict(),
        "summary": (
            f"Custom allocation cleared. Now using {tolerance} preset with "
            f"{common.percent(expected)} expected return."
        ),
    }
