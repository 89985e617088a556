"""Tests for switching the active profile."""

import json

import pytest

from ccswitch.errors import NotFoundError
from ccswitch.switch import switch_profile


def _read(path):
    return json.loads(path.read_text())


class TestSwitchProfile:
    def test_writes_profile_verbatim(self, paths, with_profiles):
        result = switch_profile("proxy", paths)
        assert result.key == "proxy"
        assert _read(paths.settings_file) == with_profiles["proxy"]

    def test_overwrites_existing_settings(self, paths, with_profiles, write_json):
        write_json(paths.settings_file, {"model": "old", "extra": True})
        switch_profile("home", paths)
        assert _read(paths.settings_file) == {"model": "sonnet"}

    def test_unknown_key(self, paths, with_profiles, write_json):
        write_json(paths.settings_file, {"model": "old"})
        with pytest.raises(NotFoundError):
            switch_profile("missing", paths)
        assert _read(paths.settings_file) == {"model": "old"}

    def test_example_without_env_skips_providers(self, paths, write_json):
        write_json(
            paths.profiles_file,
            {
                "work": {"model": "opus", "env": {"ANTHROPIC_BASE_URL": "https://a"}},
                "home": {"model": "sonnet"},
            },
        )
        providers = {"anthropic": {"base_url": "https://old", "api_key": "k"}}
        write_json(paths.providers_file, providers)

        result = switch_profile("home", paths)

        assert _read(paths.settings_file) == {"model": "sonnet"}
        assert result.providers_updated is False
        assert _read(paths.providers_file) == providers

    def test_updates_only_provider_credentials(self, paths, with_profiles, write_json):
        write_json(
            paths.providers_file,
            {
                "anthropic": {"base_url": "https://old", "api_key": "old-key", "timeout": 30},
                "openai": {"base_url": "https://api.openai.com", "api_key": "oa"},
                "default": "anthropic",
            },
        )

        result = switch_profile("work", paths)

        assert result.providers_updated is True
        assert _read(paths.providers_file) == {
            "anthropic": {
                "base_url": "https://gateway.example.com",
                "api_key": "sk-work-0123456789abcdef",
                "timeout": 30,
            },
            "openai": {"base_url": "https://api.openai.com", "api_key": "oa"},
            "default": "anthropic",
        }

    def test_keeps_stored_value_when_profile_omits_one(self, paths, write_json):
        write_json(paths.profiles_file, {"url-only": {"env": {"ANTHROPIC_BASE_URL": "https://new"}}})
        write_json(paths.providers_file, {"anthropic": {"base_url": "https://old", "api_key": "kept"}})

        switch_profile("url-only", paths)

        assert _read(paths.providers_file) == {
            "anthropic": {"base_url": "https://new", "api_key": "kept"}
        }

    def test_creates_provider_entry_when_missing(self, paths, with_profiles, write_json):
        write_json(paths.providers_file, {"openai": {"api_key": "oa"}})

        switch_profile("proxy", paths)

        providers = _read(paths.providers_file)
        assert providers["openai"] == {"api_key": "oa"}
        assert providers["anthropic"] == {
            "base_url": "https://proxy.example.org",
            "api_key": "sk-proxy-fedcba9876543210",
        }

    def test_missing_providers_file_is_skipped(self, paths, with_profiles):
        result = switch_profile("work", paths)
        assert result.providers_updated is False
        assert not paths.providers_file.exists()
