from unittest.mock import patch

import pytest

from jira_api_client.core.jira_client import JiraClient
from jira_api_client.config.settings import ENV_VARS
from tests.helpers import BASE_URL, make_response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    return JiraClient(jira_url=BASE_URL, jira_login="alice", jira_api_token="s3cret")


@pytest.fixture
def mock_request():
    with patch("jira_api_client.core.jira_client.requests.request") as mocked:
        mocked.return_value = make_response(200, {})
        yield mocked
