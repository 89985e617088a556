"""Make a stored profile the assistant's active settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ccswitch.config import (
    BASE_URL_VAR,
    PROVIDER_NAME,
    TOKEN_VAR,
    Paths,
    default_paths,
)
from ccswitch.errors import NotFoundError, ParseError
from ccswitch.profiles import ProfileStore
from ccswitch.storage import read_json, write_json

logger = logging.getLogger(__name__)


@dataclass
class SwitchResult:
    key: str
    profile: Any
    providers_updated: bool = False


def switch_profile(key: str, paths: Paths | None = None) -> SwitchResult:
    """Overwrite settings.json with the profile stored under key.

    When the profile carries a token or base URL and providers.json already
    exists, the provider entry's base_url/api_key follow it. providers.json
    is never created here.
    """
    paths = paths or default_paths()
    profiles = ProfileStore(paths).get_profiles()
    if key not in profiles:
        raise NotFoundError(f"Profile '{key}' does not exist")

    profile = profiles[key]
    write_json(paths.settings_file, profile)
    logger.debug("switched %s to profile %s", paths.settings_file, key)

    updated = update_providers(profile, paths)
    return SwitchResult(key=key, profile=profile, providers_updated=updated)


def update_providers(profile: Any, paths: Paths) -> bool:
    """Copy the profile's credentials into providers.json. Returns True if written."""
    env = profile.get("env") if isinstance(profile, dict) else None
    if not isinstance(env, dict):
        return False

    base_url = env.get(BASE_URL_VAR)
    api_key = env.get(TOKEN_VAR)
    if not (base_url or api_key):
        return False

    providers_file = paths.providers_file
    if not providers_file.exists():
        logger.debug("%s not found, skipping provider update", providers_file)
        return False

    providers = read_json(providers_file)
    if not isinstance(providers, dict):
        raise ParseError(f"{providers_file} must contain a JSON object")

    previous = providers.get(PROVIDER_NAME)
    entry = dict(previous) if isinstance(previous, dict) else {}
    for name, value in (("base_url", base_url), ("api_key", api_key)):
        if value:
            entry[name] = value
    providers[PROVIDER_NAME] = entry

    write_json(providers_file, providers)
    return True
