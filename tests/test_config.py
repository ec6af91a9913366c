"""Tests for environment-driven settings (nasadash/config.py)."""

import pytest

from nasadash.config import DEFAULT_TIMEOUT, DEMO_KEY, load_settings


class TestApiKey:

    def test_falls_back_to_demo_key(self):
        settings = load_settings({})
        assert settings.api_key == DEMO_KEY
        assert settings.uses_demo_key

    def test_blank_key_counts_as_unset(self):
        assert load_settings({"NASA_API_KEY": "   "}).api_key == DEMO_KEY

    def test_explicit_key(self):
        settings = load_settings({"NASA_API_KEY": " abc123 "})
        assert settings.api_key == "abc123"
        assert not settings.uses_demo_key


class TestOptions:

    def test_defaults(self):
        settings = load_settings({})
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.lang == "en"
        assert settings.log_level == "INFO"

    def test_overrides(self):
        settings = load_settings({
            "NASADASH_TIMEOUT": "2.5",
            "NASADASH_LANG": "KO",
            "NASADASH_LOG_LEVEL": "debug",
        })
        assert settings.timeout == 2.5
        assert settings.lang == "ko"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["soon", "-1", "0", ""])
    def test_bad_timeout_uses_default(self, raw):
        assert load_settings({"NASADASH_TIMEOUT": raw}).timeout == DEFAULT_TIMEOUT

    def test_unknown_language_uses_english(self):
        assert load_settings({"NASADASH_LANG": "fr"}).lang == "en"
