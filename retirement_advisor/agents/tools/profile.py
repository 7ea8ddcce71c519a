"""Tools for loading, saving, and deleting the user's profile."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import MaritalStatus, RiskTolerance, UserProfile

logger = logging.getLogger(__name__)


@tool
def load_user_profile() -> Dict[str, Any]:
    """Load the previously saved user profile, if any.

    Use this at the start of a conversation to check for existing data.
    """

    store = common.get_store()
    result = store.load()
    if result.error:
        return {
            "found": False,
            "profile": None,
            "error": result.error,
            "summary": f"Error loading profile: {result.error}",
        }
    if not result.found or result.profile is None:
        return {
            "found": False,
            "profile": None,
            "summary": "No saved profile found. This appears to be a new user.",
        }

    profile = result.profile
    return {
        "found": True,
        "profile": profile.to_dict(),
        "summary": (
            f"Found saved profile for {profile.age}-year-old ({profile.marital_status.value}) "
            f"with {common.dollars(profile.current_savings)} saved. Last updated: {profile.saved_at}"
        ),
    }


@tool
def save_user_profile(
    age: int,
    target_retirement_age: int,
    marital_status: str,
    current_savings: float,
    monthly_contribution: float,
    risk_tolerance: str,
    expected_monthly_expenses: Optional[float] = None,
) -> Dict[str, Any]:
    """Save the user's financial profile for future sessions.

    Existing income flows and custom asset allocation are kept.

    Args:
        age: User's current age.
        target_retirement_age: User's target retirement age.
        marital_status: "single" or "married".
        current_savings: Current retirement savings in dollars.
        monthly_contribution: Monthly contribution to retirement in dollars.
        risk_tolerance: "conservative", "moderate", or "aggressive".
        expected_monthly_expenses: Expected monthly expenses in retirement (optional).
    """

    try:
        status = MaritalStatus(marital_status)
        tolerance = RiskTolerance(risk_tolerance)
    except ValueError as exc:
        return common.invalid_argument(InvalidArgumentError(str(exc)))
    if target_retirement_age < age:
        return common.failure("Target retirement age cannot be earlier than current age")
    if current_savings < 0 or monthly_contribution < 0:
        return common.failure("Savings and contributions cannot be negative")

    store = common.get_store()
    existing = store.load()
    if existing.error:
        # Saving now would discard the unreadable file's allocation and income flows.
        return common.failure(
            existing.error,
            f"Could not read the existing profile, so nothing was saved: {existing.error}. "
            "Delete the profile first to start over.",
        )
    previous = existing.profile if existing.found else None
    profile = UserProfile(
        age=age,
        target_retirement_age=target_retirement_age,
        marital_status=status,
        current_savings=current_savings,
        monthly_contribution=monthly_contribution,
        risk_tolerance=tolerance,
        expected_monthly_expenses=expected_monthly_expenses,
        asset_allocation=previous.asset_allocation if previous else None,
        income_flows=list(previous.income_flows) if previous else [],
    )

    result = store.save(profile)
    if not result.success:
        return common.failure(result.error or "Unknown error", f"Failed to save profile: {result.error}")
    logger.info("Saved user profile to %s", result.path)
    return {
        "success": True,
        "path": result.path,
        "summary": "Profile saved successfully. It will be available in future sessions.",
    }


@tool
def check_profile_exists() -> Dict[str, Any]:
    """Check whether a saved profile exists without loading it."""

    exists = common.get_store().exists()
    return {
        "exists": exists,
        "summary": "A saved profile exists for this user." if exists else "No saved profile found. This is a new user.",
    }


@tool
def delete_user_profile() -> Dict[str, Any]:
    """Delete the user's saved profile so they can start fresh."""

    store = common.get_store()
    if not store.exists():
        return {"deleted": False, "summary": "No profile to delete."}
    deleted = store.delete()
    return {
        "deleted": deleted,
        "summary": "Profile deleted successfully." if deleted else "Failed to delete profile.",
    }
