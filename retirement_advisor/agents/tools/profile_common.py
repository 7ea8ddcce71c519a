"""Shared helpers for tools that read or update the saved profile."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import UserProfile
from retirement_advisor.tools.lib.profile_store import ProfileStore


NO_PROFILE_ERROR = "No profile found. Please create a profile first."

logger = logging.getLogger(__name__)


def get_store() -> ProfileStore:
    """Return the store for the configured profile location."""

    return ProfileStore()


def load_existing_profile(store: Optional[ProfileStore] = None) -> Tuple[Optional[UserProfile], Optional[str]]:
    """Return ``(profile, None)`` or ``(None, error message)``.

    Store errors are passed through untranslated; a missing profile gets
    :data:`NO_PROFILE_ERROR`.
    """

    store = store or get_store()
    result = store.load()
    if result.error:
        return None, result.error
    if not result.found or result.profile is None:
        return None, NO_PROFILE_ERROR
    return result.profile, None


def save_updated_profile(profile: UserProfile, store: Optional[ProfileStore] = None) -> Optional[str]:
    """Persist ``profile``; return the store's error message on failure."""

    store = store or get_store()
    result = store.save(profile)
    if not result.success:
        return result.error or "Unknown error while saving profile"
    return None


def failure(error: str, summary: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": False, "error": error, "summary": summary or error}
    payload.update(extra)
    return payload


def invalid_argument(exc: InvalidArgumentError) -> Dict[str, Any]:
    logger.info("Rejected tool arguments: %s", exc)
    return failure(str(exc))


def percent(rate: float, digits: int = 1) -> str:
    return f"{rate * 100:.{digits}f}%"


def dollars(amount: float) -> str:
    return f"${amount:,.0f}"
