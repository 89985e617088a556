"""File locations and UI settings for ccswitch."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR_ENV = "CCS_CONFIG_DIR"

CLAUDE_DIR = Path.home() / ".claude"
PROFILES_FILENAME = "profiles-settings.json"
PROJECTS_FILENAME = "ccs-project.json"
SETTINGS_FILENAME = "settings.json"
PROVIDERS_FILENAME = "providers.json"

UI_HOST = "127.0.0.1"
UI_PORT = 3456

# Provider entry in providers.json that a switch keeps in step with the profile.
PROVIDER_NAME = "anthropic"
TOKEN_VAR = "ANTHROPIC_AUTH_TOKEN"
BASE_URL_VAR = "ANTHROPIC_BASE_URL"


@dataclass(frozen=True)
class Paths:
    """Every file ccswitch reads or writes, rooted at one directory."""

    base_dir: Path

    @property
    def profiles_file(self) -> Path:
        return self.base_dir / PROFILES_FILENAME

    @property
    def projects_file(self) -> Path:
        return self.base_dir / PROJECTS_FILENAME

    @property
    def settings_file(self) -> Path:
        return self.base_dir / SETTINGS_FILENAME

    @property
    def providers_file(self) -> Path:
        return self.base_dir / PROVIDERS_FILENAME

    @classmethod
    def from_dir(cls, base_dir: str | Path | None = None) -> Paths:
        """Build paths from an explicit directory, $CCS_CONFIG_DIR, or ~/.claude."""
        if base_dir is None:
            base_dir = os.environ.get(CONFIG_DIR_ENV) or CLAUDE_DIR
        return cls(Path(base_dir).expanduser().absolute())


def default_paths() -> Paths:
    return Paths.from_dir()
