"""Tests for the stateless calculation tools."""

from __future__ import annotations

from retirement_advisor.agents.tools import calculations, withdrawal_rate


def test_compound_growth_tool_reports_summary() -> None:
    result = calculations.calculate_compound_growth(principal=10000, monthly_contribution=0, annual_rate=0.0, years=5)

    assert result["future_value"] == 10000
    assert result["total_growth"] == 0
    assert result["summary"].startswith("After 5 years: $10,000")


def test_adjust_for_inflation_tool() -> None:
    result = calculations.adjust_for_inflation(future_amount=103000, years=1, inflation_rate=0.03)

    assert result["adjusted_amount"] == 100000
    assert result["original_amount"] == 103000


def test_retirement_target_tool() -> None:
    result = calculations.calculate_retirement_target(monthly_expenses=4000)

    assert result["target_savings"] == 1_200_000
    assert result["annual_expenses"] == 48000
    assert result["withdrawal_rate"] == 0.04


def test_project_retirement_age_tool_reachable_and_not() -> None:
    reachable = calculations.project_retirement_age(
        current_age=50,
        current_savings=1_500_000,
        monthly_contribution=1000,
        target_amount=1_000_000,
        annual_rate=0.07,
    )
    unreachable = calculations.project_retirement_age(
        current_age=60,
        current_savings=10000,
        monthly_contribution=100,
        target_amount=2_000_000,
        annual_rate=0.07,
        max_age=80,
    )

    assert reachable["reachable"] is True
    assert reachable["retirement_age"] == 50
    assert reachable["years_until_retirement"] == 0
    assert unreachable["reachable"] is False
    assert "age 80" in unreachable["summary"]


def test_suggest_withdrawal_rate_tool() -> None:
    result = withdrawal_rate.suggest_withdrawal_rate(retirement_years=22)

    assert result["standard_rate"] == 0.045
    assert result["conservative_rate"] == 0.04
    assert result["standard_rate_percent"] == "4.50%"


def test_target_with_swr_tool() -> None:
    result = withdrawal_rate.calculate_retirement_target_with_swr(monthly_expenses=5000, withdrawal_rate=0.05)

    assert result["success"] is True
    assert result["target_savings"] == 1_200_000
    assert result["multiplier"] == 20


def test_target_with_swr_tool_rejects_bad_rate() -> None:
    result = withdrawal_rate.calculate_retirement_target_with_swr(monthly_expenses=5000, withdrawal_rate=0)

    assert result["success"] is False
    assert "Withdrawal rate" in result["error"]


def test_compound_growth_tool_reports_out_of_range_horizon() -> None:
    result = calculations.calculate_compound_growth(
        principal=100000, monthly_contribution=500, annual_rate=0.07, years=100_000
    )

    assert result["success"] is False
    assert "too large" in result["error"]


def test_adjust_for_inflation_tool_rejects_total_deflation() -> None:
    result = calculations.adjust_for_inflation(future_amount=100000, years=5, inflation_rate=-1)

    assert result["success"] is False
    assert "greater than -1" in result["summary"]


def test_project_retirement_age_tool_rejects_impossible_rate() -> None:
    result = calculations.project_retirement_age(
        current_age=40,
        current_savings=100000,
        monthly_contribution=500,
        target_amount=10_000_000,
        annual_rate=-24,
    )

    assert result["success"] is False
