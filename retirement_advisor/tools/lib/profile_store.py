"""Local persistence for the single user profile."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from retirement_advisor.engine.errors import InvalidArgumentError
from retirement_advisor.engine.models import UserProfile


PROFILE_DIRNAME = ".retirement-planner"
PROFILE_FILENAME = "profile.json"
PROFILE_PATH_ENV = "RETIRE_PROFILE_PATH"

logger = logging.getLogger(__name__)


def default_profile_path() -> Path:
    """Return the profile location, honoring ``RETIRE_PROFILE_PATH``."""

    override = os.environ.get(PROFILE_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / PROFILE_DIRNAME / PROFILE_FILENAME


@dataclass
class LoadProfileResult:
    found: bool
    profile: Optional[UserProfile] = None
    error: Optional[str] = None


@dataclass
class SaveProfileResult:
    success: bool
    path: str
    error: Optional[str] = None


class ProfileStore:
    """Reads and writes one JSON profile document; the last write wins.

    Failures are reported on the returned result objects rather than raised.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path else default_profile_path()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> LoadProfileResult:
        if not self.path.exists():
            return LoadProfileResult(found=False)
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
            profile = UserProfile.from_dict(payload)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, InvalidArgumentError) as exc:
            logger.warning("Unable to load profile from %s: %s", self.path, exc)
            return LoadProfileResult(found=False, error=str(exc))
        return LoadProfileResult(found=True, profile=profile)

    def save(self, profile: UserProfile) -> SaveProfileResult:
        """Persist ``profile``, always stamping ``saved_at`` with the current time."""

        stamped = profile.with_changes(saved_at=datetime.now(timezone.utc).isoformat())
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(stamped.to_dict(), handle, indent=2)
                handle.write("\n")
        except OSError as exc:
            logger.error("Unable to save profile to %s: %s", self.path, exc)
            return SaveProfileResult(success=False, path=str(self.path), error=str(exc))
        logger.debug("Saved profile to %s", self.path)
        return SaveProfileResult(success=True, path=str(self.path))

    def delete(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.error("Unable to delete profile at %s: %s", self.path, exc)
            return False
        logger.debug("Deleted profile at %s", self.path)
        return True
