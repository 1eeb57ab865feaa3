# SPDX-License-Identifier: MIT
"""Unit tests for configuration management."""

import pytest

from creatify_mcp.config import (
    DEFAULT_BASE_URL,
    DEFAULT_HTTP_TIMEOUT,
    get_base_url,
    get_credentials,
    get_http_timeout,
    get_poll_settings,
)


@pytest.mark.unit
class TestGetCredentials:
    def test_reads_both_values(self, creatify_env):
        """Both credentials are read from the environment."""
        creds = get_credentials()

        assert creds.api_id == "test-api-id"
        assert creds.api_key == "test-api-key"

    def test_strips_whitespace(self, no_creatify_env, monkeypatch):
        """Surrounding whitespace is stripped."""
        monkeypatch.setenv("CREATIFY_API_ID", "  id  ")
        monkeypatch.setenv("CREATIFY_API_KEY", "key\n")

        creds = get_credentials()

        assert (creds.api_id, creds.api_key) == ("id", "key")

    def test_missing_both_names_both(self, no_creatify_env):
        """The error names both variables when both are missing."""
        with pytest.raises(RuntimeError, match="CREATIFY_API_ID and CREATIFY_API_KEY are not set"):
            get_credentials()

    def test_missing_key_only(self, no_creatify_env, monkeypatch):
        """Only the missing variable is named."""
        monkeypatch.setenv("CREATIFY_API_ID", "id")

        with pytest.raises(RuntimeError, match="CREATIFY_API_KEY is not set"):
            get_credentials()

    def test_whitespace_only_counts_as_missing(self, no_creatify_env, monkeypatch):
        """Blank values count as unset."""
        monkeypatch.setenv("CREATIFY_API_ID", "   ")
        monkeypatch.setenv("CREATIFY_API_KEY", "key")

        with pytest.raises(RuntimeError, match="CREATIFY_API_ID"):
            get_credentials()


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, no_creatify_env):
        """Defaults apply when nothing is set."""
        settings = get_poll_settings()

        assert settings.interval == 5.0
        assert settings.max_attempts == 120
        assert get_http_timeout() == DEFAULT_HTTP_TIMEOUT
        assert get_base_url() == DEFAULT_BASE_URL

    def test_overrides(self, no_creatify_env, monkeypatch):
        """Env values override every default."""
        monkeypatch.setenv("CREATIFY_POLL_INTERVAL", "0.5")
        monkeypatch.setenv("CREATIFY_POLL_MAX_ATTEMPTS", "10")
        monkeypatch.setenv("CREATIFY_HTTP_TIMEOUT", "30")
        monkeypatch.setenv("CREATIFY_API_BASE_URL", "https://staging.example.com/")

        settings = get_poll_settings()

        assert settings.interval == 0.5
        assert settings.max_attempts == 10
        assert get_http_timeout() == 30.0
        assert get_base_url() == "https://staging.example.com"

    def test_malformed_number_raises(self, no_creatify_env, monkeypatch):
        """Non-numeric settings are rejected."""
        monkeypatch.setenv("CREATIFY_POLL_MAX_ATTEMPTS", "lots")

        with pytest.raises(RuntimeError, match="CREATIFY_POLL_MAX_ATTEMPTS must be a number"):
            get_poll_settings()

    def test_negative_interval_raises(self, no_creatify_env, monkeypatch):
        """Negative intervals are rejected."""
        monkeypatch.setenv("CREATIFY_POLL_INTERVAL", "-1")

        with pytest.raises(RuntimeError, match="must not be negative"):
            get_poll_settings()

    def test_zero_attempts_raises(self, no_creatify_env, monkeypatch):
        """The attempt budget must be at least one."""
        monkeypatch.setenv("CREATIFY_POLL_MAX_ATTEMPTS", "0")

        with pytest.raises(RuntimeError, match="at least 1"):
            get_poll_settings()
