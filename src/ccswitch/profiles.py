"""Profile catalog: named Claude settings documents kept in one JSON file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ccswitch.config import BASE_URL_VAR, Paths, default_paths
from ccswitch.errors import ParseError
from ccswitch.storage import ensure_json_file, read_json, write_json

logger = logging.getLogger(__name__)

# Profile values are free-form settings objects; they are never validated.
Profiles = dict[str, Any]


class ProfileStore:
    """Read access to ~/.claude/profiles-settings.json.

    The file is re-read on every call. Writers replace the whole document, so
    two processes saving at once race and the last write wins.
    """

    def __init__(self, paths: Paths | None = None):
        self.paths = paths or default_paths()

    @property
    def settings_path(self) -> Path:
        return self.paths.profiles_file

    def ensure_file(self) -> None:
        ensure_json_file(self.settings_path, {})

    def get_profiles(self) -> Profiles:
        self.ensure_file()
        data = read_json(self.settings_path)
        if not isinstance(data, dict):
            raise ParseError(
                f"{self.settings_path} must contain a JSON object, "
                f"got {type(data).__name__}"
            )
        return data

    def list_keys(self) -> list[str]:
        return list(self.get_profiles().keys())

    def save_profiles(self, profiles: Profiles) -> None:
        """Replace the whole catalog."""
        write_json(self.settings_path, profiles)
        logger.debug("saved %d profile(s)", len(profiles))


def describe(profile: Any) -> str:
    """Short label for a profile: its description, base URL, or model."""
    if not isinstance(profile, dict):
        return ""
    env = profile.get("env")
    if profile.get("description"):
        return str(profile["description"])
    if isinstance(env, dict) and env.get(BASE_URL_VAR):
        return str(env[BASE_URL_VAR])
    if profile.get("model"):
        return str(profile["model"])
    return ""
