"""Tests for the profile readiness projection."""

from __future__ import annotations

import pytest

from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import IncomeFlow, IncomeFlowType
from retirement_advisor.engine.projection import project_profile


def test_projection_on_track(sample_profile) -> None:
    result = project_profile(sample_profile)

    assert result.target_age == 60
    assert result.target_amount == 1_500_000
    assert 1_600_000 <= result.projected_savings <= 1_700_000
    assert result.on_track is True
    assert result.gap == 0


def test_projection_reports_gap(sample_profile) -> None:
    result = project_profile(sample_profile.with_changes(expected_monthly_expenses=10000))

    assert result.target_amount == 3_000_000
    assert result.on_track is False
    assert result.gap == 3_000_000 - result.projected_savings


def test_projection_subtracts_income_flows(sample_profile) -> None:
    pension = IncomeFlow(
        id="flow_p",
        name="Pension",
        type=IncomeFlowType.PENSION,
        monthly_amount=1000,
        start_age=60,
    )

    result = project_profile(sample_profile.with_changes(income_flows=[pension]))

    assert result.target_amount == 1_200_000


def test_projection_target_never_negative(sample_profile) -> None:
    pension = IncomeFlow(id="flow_p", name="Pension", type=IncomeFlowType.PENSION, monthly_amount=9000, start_age=55)

    result = project_profile(sample_profile.with_changes(income_flows=[pension]))

    assert result.target_amount == 0
    assert result.on_track is True


def test_projection_requires_expenses(sample_profile) -> None:
    with pytest.raises(InvalidArgumentError):
        project_profile(sample_profile.with_changes(expected_monthly_expenses=None))
