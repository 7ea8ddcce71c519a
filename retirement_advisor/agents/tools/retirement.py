"""Retirement readiness tool built on the saved profile."""

from __future__ import annotations

from typing import Any, Dict

from strands import tool

from retirement_advisor.agents.tools import profile_common as common
from retirement_advisor.engine.allocation import expected_return_for_profile
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import DEFAULT_LIFE_EXPECTANCY
from retirement_advisor.engine.projection import project_profile


@tool
def retirement_projection(life_expectancy: int = DEFAULT_LIFE_EXPECTANCY) -> Dict[str, Any]:
    """Check whether the saved profile is on track for its target retirement age.

    Projects savings at the target age using the profile's asset allocation
    (or risk tolerance) and compares them with the 4% rule target for the
    expected monthly expenses, net of guaranteed income flows.

    Args:
        life_expectancy: Expected lifespan used to value income flows (default 95).

    Returns:
        The projection plus a short qualitative assessment with a suggested next step.
    """

    profile, error = common.load_existing_profile()
    if profile is None:
        return common.failure(error)

    try:
        projection = project_profile(profile, life_expectancy=life_expectancy)
        annual_rate = expected_return_for_profile(profile)
    except InvalidArgumentError as exc:
        return common.invalid_argument(exc)

    if projection.on_track:
        status = "on_track"
        recommendation = (
            "Projected savings cover the target. Stress-test the plan with lower returns "
            "and compare withdrawal strategies."
        )
    elif projection.projected_savings >= 0.75 * projection.target_amount:
        status = "needs_adjustment"
        recommendation = (
            "You're within striking distance. Consider increasing contributions, "
            "delaying retirement a few years, or trimming planned expenses."
        )
    else:
        status = "shortfall"
        recommendation = (
            "Projected savings are well below the target. Revisit contributions, "
            "lifestyle assumptions, or additional retirement income."
        )

    return {
        "success": True,
        "status": status,
        "annual_rate": annual_rate,
        **projection.to_dict(),
        "summary": (
            f"Status: {status}. At age {projection.target_age} projected savings are "
            f"{common.dollars(projection.projected_savings)} against a target of "
            f"{common.dollars(projection.target_amount)} (gap {common.dollars(projection.gap)}, "
            f"assuming {common.percent(annual_rate)} returns). {recommendation}"
        ),
    }
