"""Tests for asset allocation validation, returns, and suggestions."""

from __future__ import annotations

import pytest

from retirement_advisor.engine.allocation import (
    allocation_for_profile,
    calculate_expected_return,
    describe_allocation_style,
    expected_return_for_profile,
    suggest_allocation_by_time_horizon,
    validate_asset_allocation,
)
from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import PRESET_ALLOCATIONS, AssetAllocation, RiskTolerance


def test_validate_accepts_exact_and_tolerated_sums() -> None:
    assert validate_asset_allocation(AssetAllocation(40, 20, 35, 5)).is_valid
    assert validate_asset_allocation(AssetAllocation(40, 20, 35, 5.005)).is_valid


def test_validate_rejects_wrong_sum_with_actual_total() -> None:
    result = validate_asset_allocation(AssetAllocation(40, 20, 30, 5))

    assert not result.is_valid
    assert result.error == "Allocation must sum to 100% (currently 95.0%)"


def test_validate_rejects_negative_component() -> None:
    result = validate_asset_allocation(AssetAllocation(60, 50, -10, 0))

    assert not result.is_valid
    assert result.error == "Allocation percentages cannot be negative"


def test_expected_return_weights_asset_classes() -> None:
    assert calculate_expected_return(AssetAllocation(100, 0, 0, 0)) == pytest.approx(0.10)
    assert calculate_expected_return(AssetAllocation(0, 0, 0, 100)) == pytest.approx(0.02)
    assert calculate_expected_return(AssetAllocation(40, 20, 35, 5)) == pytest.approx(0.071)


@pytest.mark.parametrize("preset", list(PRESET_ALLOCATIONS.values()))
def test_expected_return_stays_within_asset_class_bounds(preset: AssetAllocation) -> None:
    assert 0.02 <= calculate_expected_return(preset) <= 0.10


def test_expected_return_rejects_invalid_allocation() -> None:
    with pytest.raises(InvalidArgumentError, match="must sum to 100"):
        calculate_expected_return(AssetAllocation(50, 50, 50, 0))


@pytest.mark.parametrize(
    "us, intl, expected",
    [
        (60, 20, "very aggressive"),
        (59.9, 20, "aggressive"),
        (50, 15, "aggressive"),
        (30, 15, "balanced"),
        (20, 5, "conservative"),
        (19.5, 5, "very conservative"),
        (10, 5, "very conservative"),
    ],
)
def test_describe_allocation_style_bands_include_lower_bound(us: float, intl: float, expected: str) -> None:
    allocation = AssetAllocation(us, intl, 100 - us - intl, 0)
    assert describe_allocation_style(allocation) == expected


def test_suggest_allocation_for_ten_years() -> None:
    allocation = suggest_allocation_by_time_horizon(10)

    assert allocation == AssetAllocation(us_stocks=42, international_stocks=18, bonds=35, cash=5)


def test_suggest_allocation_clamps_long_horizons() -> None:
    allocation = suggest_allocation_by_time_horizon(40)

    assert allocation.stock_percentage == 90
    assert allocation.cash == 3
    assert allocation.bonds == 7


def test_suggest_allocation_clamps_short_horizons() -> None:
    allocation = suggest_allocation_by_time_horizon(0)

    assert allocation == AssetAllocation(us_stocks=28, international_stocks=12, bonds=50, cash=10)


def test_suggest_allocation_keeps_stock_rounding_drift() -> None:
    allocation = suggest_allocation_by_time_horizon(2.5)

    # 45% stocks splits into 31.5 and 13.5, each rounded up on its own.
    assert allocation.us_stocks == 32
    assert allocation.international_stocks == 14
    assert allocation.stock_percentage == 46
    assert allocation.cash == 10
    assert allocation.bonds == 44


def test_profile_allocation_prefers_custom(sample_profile) -> None:
    allocation, source = allocation_for_profile(sample_profile)
    assert source == "preset"
    assert allocation == PRESET_ALLOCATIONS[RiskTolerance.MODERATE]
    assert expected_return_for_profile(sample_profile) == 0.07

    custom = sample_profile.with_changes(asset_allocation=AssetAllocation(100, 0, 0, 0))
    allocation, source = allocation_for_profile(custom)
    assert source == "custom"
    assert expected_return_for_profile(custom) == pytest.approx(0.10)
