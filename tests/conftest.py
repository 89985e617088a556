"""Shared test fixtures."""

import json

import pytest

from ccswitch.config import Paths
from ccswitch.profiles import ProfileStore
from ccswitch.projects import ProjectStore


@pytest.fixture
def paths(tmp_path):
    """Paths rooted in a temporary stand-in for ~/.claude."""
    return Paths.from_dir(tmp_path / ".claude")


@pytest.fixture
def profile_store(paths):
    return ProfileStore(paths)


@pytest.fixture
def project_store(paths):
    return ProjectStore(paths)


@pytest.fixture
def sample_profiles():
    """Return a sample profile catalog."""
    return {
        "work": {
            "description": "Company gateway",
            "env": {
                "ANTHROPIC_AUTH_TOKEN": "sk-work-0123456789abcdef",
                "ANTHROPIC_BASE_URL": "https://gateway.example.com",
            },
            "model": "opus",
        },
        "home": {"model": "sonnet"},
        "proxy": {
            "env": {
                "ANTHROPIC_AUTH_TOKEN": "sk-proxy-fedcba9876543210",
                "ANTHROPIC_BASE_URL": "https://proxy.example.org",
                "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": "1",
            },
            "permissions": {"allow": ["Bash(ls:*)"]},
        },
    }


@pytest.fixture
def write_json():
    """Write a JSON document the way ccswitch does."""

    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n")
        return path

    return _write


@pytest.fixture
def with_profiles(paths, sample_profiles, write_json):
    write_json(paths.profiles_file, sample_profiles)
    return sample_profiles
