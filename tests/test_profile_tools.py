"""Tests for the profile, allocation, income flow, and projection tools."""

from __future__ import annotations

from retirement_advisor.agents.tools import asset_allocation, income_flows, profile, retirement
from retirement_advisor.agents.tools.profile_common import NO_PROFILE_ERROR
from retirement_advisor.engine.models import AssetAllocation, IncomeFlow, IncomeFlowType, UserProfile
from retirement_advisor.tools.lib.profile_store import ProfileStore


def test_load_and_check_without_profile(profile_store: ProfileStore) -> None:
    assert profile.load_user_profile()["found"] is False
    assert profile.check_profile_exists()["exists"] is False
    assert profile.delete_user_profile()["deleted"] is False


def test_save_user_profile_persists(profile_store: ProfileStore) -> None:
    result = profile.save_user_profile(
        age=45,
        target_retirement_age=62,
        marital_status="single",
        current_savings=300000,
        monthly_contribution=2000,
        risk_tolerance="aggressive",
        expected_monthly_expenses=6000,
    )

    assert result["success"] is True
    loaded = profile.load_user_profile()
    assert loaded["found"] is True
    assert loaded["profile"]["risk_tolerance"] == "aggressive"
    assert loaded["profile"]["saved_at"]
    assert profile.check_profile_exists()["exists"] is True


def test_save_user_profile_rejects_bad_values(profile_store: ProfileStore) -> None:
    bad_status = profile.save_user_profile(
        age=45,
        target_retirement_age=62,
        marital_status="complicated",
        current_savings=1,
        monthly_contribution=1,
        risk_tolerance="moderate",
    )
    bad_ages = profile.save_user_profile(
        age=45,
        target_retirement_age=40,
        marital_status="single",
        current_savings=1,
        monthly_contribution=1,
        risk_tolerance="moderate",
    )

    assert bad_status["success"] is False
    assert bad_ages["success"] is False
    assert not profile_store.exists()


def test_save_user_profile_leaves_unreadable_profile_untouched(profile_store: ProfileStore) -> None:
    profile_store.path.write_text('{"age": 50, "income_flows": ["oops"]', encoding="utf-8")
    original = profile_store.path.read_text(encoding="utf-8")

    result = profile.save_user_profile(
        age=45,
        target_retirement_age=62,
        marital_status="single",
        current_savings=300000,
        monthly_contribution=2000,
        risk_tolerance="moderate",
    )

    assert result["success"] is False
    assert "nothing was saved" in result["summary"]
    assert profile_store.path.read_text(encoding="utf-8") == original


def test_save_user_profile_keeps_allocation_and_flows(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    asset_allocation.set_asset_allocation(us_stocks=50, international_stocks=20, bonds=25, cash=5)
    income_flows.add_income_flow(
        name="Social Security", type="social_security", monthly_amount=2500, start_age=67, inflation_adjusted=True
    )

    profile.save_user_profile(
        age=43,
        target_retirement_age=60,
        marital_status="married",
        current_savings=300000,
        monthly_contribution=1500,
        risk_tolerance="moderate",
    )

    stored = profile_store.load().profile
    assert stored.age == 43
    assert stored.asset_allocation == AssetAllocation(50, 20, 25, 5)
    assert len(stored.income_flows) == 1


def test_delete_user_profile(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    assert profile.delete_user_profile()["deleted"] is True
    assert not profile_store.exists()


def test_set_asset_allocation_requires_valid_sum(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    result = asset_allocation.set_asset_allocation(us_stocks=50, international_stocks=20, bonds=20, cash=5)

    assert result["success"] is False
    assert "95.0%" in result["error"]
    assert profile_store.load().profile.asset_allocation is None


def test_set_asset_allocation_requires_profile(profile_store: ProfileStore) -> None:
    result = asset_allocation.set_asset_allocation(us_stocks=40, international_stocks=20, bonds=35, cash=5)

    assert result == {"success": False, "error": NO_PROFILE_ERROR, "summary": NO_PROFILE_ERROR}


def test_current_allocation_switches_between_preset_and_custom(
    profile_store: ProfileStore, saved_profile: UserProfile
) -> None:
    preset = asset_allocation.get_current_allocation()
    assert preset["source"] == "preset"
    assert preset["risk_tolerance"] == "moderate"
    assert preset["allocation"] == {"us_stocks": 40, "international_stocks": 20, "bonds": 35, "cash": 5}

    saved = asset_allocation.set_asset_allocation(us_stocks=70, international_stocks=20, bonds=10, cash=0)
    assert saved["success"] is True
    assert saved["style"] == "very aggressive"

    custom = asset_allocation.get_current_allocation()
    assert custom["source"] == "custom"

    cleared = asset_allocation.clear_custom_allocation()
    assert cleared["success"] is True
    assert asset_allocation.get_current_allocation()["source"] == "preset"


def test_calculate_allocation_return_tool() -> None:
    ok = asset_allocation.calculate_allocation_return(us_stocks=40, international_stocks=20, bonds=35, cash=5)
    bad = asset_allocation.calculate_allocation_return(us_stocks=-5, international_stocks=20, bonds=80, cash=5)

    assert ok["success"] is True
    assert ok["expected_return_percent"] == "7.1%"
    assert bad["success"] is False
    assert bad["error"] == "Allocation percentages cannot be negative"


def test_suggest_allocation_tool() -> None:
    result = asset_allocation.suggest_allocation(years_to_retirement=25)

    assert result["suggested_allocation"] == {"us_stocks": 63, "international_stocks": 27, "bonds": 7, "cash": 3}
    assert result["style"] == "very aggressive"
    assert "20+ years" in result["rationale"]


def test_show_preset_allocations_tool() -> None:
    result = asset_allocation.show_preset_allocations()

    assert set(result["presets"]) == {"conservative", "moderate", "aggressive"}
    assert result["asset_class_returns"]["us_stocks"] == "10% (historical average)"


def test_income_flow_lifecycle(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    assert income_flows.list_income_flows()["income_flows"] == []

    added = income_flows.add_income_flow(
        name="Pension", type="pension", monthly_amount=1000, start_age=60, inflation_adjusted=False, end_age=80
    )
    assert added["success"] is True
    flow_id = added["income_flow"]["id"]

    listed = income_flows.list_income_flows()
    assert [item["id"] for item in listed["income_flows"]] == [flow_id]
    assert f"[id: {flow_id}]" in listed["summary"]

    impact = income_flows.calculate_income_flow_impact(retirement_age=60)
    assert impact["has_income_flows"] is True
    assert impact["total_monthly_income"] == 1000
    assert impact["savings_reduction"] == 300000

    removed = income_flows.remove_income_flow(income_flow_id=flow_id)
    assert removed["success"] is True
    assert profile_store.load().profile.income_flows == []

    missing = income_flows.remove_income_flow(income_flow_id=flow_id)
    assert missing["success"] is False


def test_add_income_flow_validates_before_loading(profile_store: ProfileStore) -> None:
    result = income_flows.add_income_flow(
        name="Gig", type="crypto", monthly_amount=100, start_age=60, inflation_adjusted=False
    )

    assert result["success"] is False
    assert "Invalid income flow type" in result["error"]


def test_income_flow_impact_without_flows(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    result = income_flows.calculate_income_flow_impact(retirement_age=65)

    assert result["success"] is True
    assert result["has_income_flows"] is False


def test_income_flow_impact_reports_out_of_range_horizon(
    profile_store: ProfileStore, saved_profile: UserProfile
) -> None:
    pension = IncomeFlow(
        id="flow_pension",
        name="Pension",
        type=IncomeFlowType.PENSION,
        monthly_amount=1500,
        start_age=65,
        inflation_adjusted=False,
    )
    profile_store.save(saved_profile.with_changes(income_flows=[pension]))

    result = income_flows.calculate_income_flow_impact(retirement_age=65, life_expectancy=100_000)

    assert result["success"] is False
    assert "out of range" in result["error"]


def test_retirement_projection_tool(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    result = retirement.retirement_projection()

    assert result["success"] is True
    assert result["status"] == "on_track"
    assert result["target_amount"] == 1_500_000
    assert result["annual_rate"] == 0.07


def test_retirement_projection_shortfall(profile_store: ProfileStore, saved_profile: UserProfile) -> None:
    profile_store.save(saved_profile.with_changes(expected_monthly_expenses=20000))

    result = retirement.retirement_projection()

    assert result["status"] == "shortfall"
    assert result["gap"] > 0


def test_retirement_projection_without_profile(profile_store: ProfileStore) -> None:
    result = retirement.retirement_projection()

    assert result["success"] is False
    assert result["error"] == NO_PROFILE_ERROR
