"""Work out which stored profile the live settings.json corresponds to."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ccswitch.config import BASE_URL_VAR, TOKEN_VAR, Paths, default_paths
from ccswitch.profiles import ProfileStore
from ccswitch.storage import read_json

_MISSING = object()


def _canonical(doc: Any) -> str:
    return json.dumps(doc, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def _field(doc: Any, *keys: str) -> Any:
    """Walk nested objects, returning _MISSING as soon as a key is absent."""
    for key in keys:
        if not isinstance(doc, dict) or key not in doc:
            return _MISSING
        doc = doc[key]
    return doc


def is_exact_match(profile: Any, active: Any) -> bool:
    return _canonical(profile) == _canonical(active)


def is_credentials_match(profile: Any, active: Any) -> bool:
    """Compare token, base URL and model only.

    A field absent from both documents counts as equal. Profiles without an
    env object never match this way.
    """
    if not isinstance(_field(profile, "env"), dict):
        return False
    return (
        _field(profile, "env", TOKEN_VAR) == _field(active, "env", TOKEN_VAR)
        and _field(profile, "env", BASE_URL_VAR) == _field(active, "env", BASE_URL_VAR)
        and _field(profile, "model") == _field(active, "model")
    )


def resolve_active_profile(
    active: Any,
    profiles: dict[str, Any] | Iterable[tuple[str, Any]],
) -> str | None:
    """Return the key of the first profile matching active, or None.

    Profiles are scanned in catalog order. Each one is tried for an exact
    match first, then for a credentials match, and the first hit wins.
    """
    items = profiles.items() if isinstance(profiles, dict) else profiles
    for key, profile in items:
        if is_exact_match(profile, active) or is_credentials_match(profile, active):
            return key
    return None


def read_active_settings(path: Path) -> Any | None:
    """Parsed settings.json, or None if the assistant has none yet."""
    if not path.exists():
        return None
    return read_json(path)


@dataclass
class CurrentProfile:
    key: str | None
    settings: Any = field(default_factory=dict)
    exists: bool = True

    @property
    def matched(self) -> bool:
        return self.key is not None


def current_profile(paths: Paths | None = None) -> CurrentProfile:
    paths = paths or default_paths()
    active = read_active_settings(paths.settings_file)
    if active is None:
        return CurrentProfile(key=None, settings={}, exists=False)

    profiles = ProfileStore(paths).get_profiles()
    return CurrentProfile(key=resolve_active_profile(active, profiles), settings=active)


def mask_token(token: str) -> str:
    if len(token) <= 14:
        return "*" * len(token)
    return f"{token[:10]}...{token[-4:]}"
