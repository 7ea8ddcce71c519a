"""Shared fixtures for the advisor test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from retirement_advisor.engine.models import MaritalStatus, RiskTolerance, UserProfile
from retirement_advisor.tools.lib.profile_store import PROFILE_PATH_ENV, ProfileStore


@pytest.fixture()
def sample_profile() -> UserProfile:
    return UserProfile(
        age=42,
        target_retirement_age=60,
        marital_status=MaritalStatus.MARRIED,
        current_savings=280000,
        monthly_contribution=1500,
        risk_tolerance=RiskTolerance.MODERATE,
        expected_monthly_expenses=5000,
    )


@pytest.fixture()
def profile_store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ProfileStore:
    """A store under ``tmp_path`` that tools pick up through the environment."""

    path = tmp_path / "profile.json"
    monkeypatch.setenv(PROFILE_PATH_ENV, str(path))
    return ProfileStore(path)


@pytest.fixture()
def saved_profile(profile_store: ProfileStore, sample_profile: UserProfile) -> UserProfile:
    result = profile_store.save(sample_profile)
    assert result.success
    return sample_profile
