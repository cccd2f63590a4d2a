"""
Tests for settings, logging setup and error helpers.
"""
import logging

import pytest

from jira_api_client.config.logging_config import setup_logging
from jira_api_client.config.settings import DEFAULT_JIRA_URL, JiraSettings, get_jira_settings, get_settings
from jira_api_client.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    JiraAPIError,
    NetworkError,
    NotFoundError,
    PayloadError,
    RequestError,
    ServerError,
    error_for_status,
    handle_error,
)


class TestSettings:
    """Test reading settings from the environment."""

    def test_defaults(self):
        settings = get_jira_settings()
        assert settings.url == DEFAULT_JIRA_URL == "http://localhost:8081/"
        assert settings.login is None
        assert settings.api_token is None
        assert settings.timeout is None
        assert not settings.is_complete
        assert settings.missing() == ["JIRA_LOGIN", "JIRA_API_TOKEN"]

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("JIRA_URL", "https://jira.example.org/")
        monkeypatch.setenv("JIRA_LOGIN", "alice")
        monkeypatch.setenv("JIRA_API_TOKEN", "s3cret")
        monkeypatch.setenv("JIRA_TIMEOUT", "30")

        settings = get_jira_settings()

        assert settings == JiraSettings("https://jira.example.org/", "alice", "s3cret", 30.0)
        assert settings.is_complete
        assert settings.missing() == []

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("JIRA_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            get_jira_settings()

    def test_settings_are_immutable(self):
        settings = JiraSettings(login="alice")
        with pytest.raises(AttributeError):
            settings.login = "bob"

    def test_get_settings_hides_token(self, monkeypatch):
        monkeypatch.setenv("JIRA_API_TOKEN", "s3cret")
        assert get_settings()["jira"]["api_token"] == "***"

    def test_setup_logging_quiets_urllib3(self):
        setup_logging(logging.DEBUG)
        assert logging.getLogger("urllib3").level == logging.WARNING


class TestErrors:
    """Test the status code mapping and error messages."""

    @pytest.mark.parametrize("status_code", [200, 204, 301, 399])
    def test_success_statuses(self, status_code):
        assert error_for_status(status_code) is None

    @pytest.mark.parametrize("status_code, error_class", [
        (401, AuthenticationError),
        (403, AuthorizationError),
        (404, NotFoundError),
        (400, RequestError),
        (499, RequestError),
        (500, ServerError),
        (599, ServerError),
    ])
    def test_error_statuses(self, status_code, error_class):
        error = error_for_status(status_code, "body")
        assert type(error) is error_class
        assert isinstance(error, JiraAPIError)
        assert error.status_code == status_code
        assert error.response_text == "body"

    def test_handle_error(self):
        assert handle_error(ConfigurationError("no token")) == "Configuration error: no token"
        assert handle_error(NetworkError("refused")) == "Network error: refused"
        assert handle_error(PayloadError("bad body")) == "Invalid request body: bad body"
        assert handle_error(NotFoundError(status_code=404)) == "Jira API error (404): wrong path"
        assert handle_error(ValueError("odd")) == "Unexpected error: odd"
