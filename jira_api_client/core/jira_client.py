import base64
import logging
import math
import numbers
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote

import requests

from .cache import CachedValue
from ..config.settings import DEFAULT_JIRA_URL, JiraSettings, get_jira_settings
from ..utils.exceptions import (
    ConfigurationError, NetworkError, PayloadError, ResponseFormatError, error_for_status
)
from ..utils.formatters import format_started

logger = logging.getLogger(__name__)

API_PREFIX = "/rest/api/2"
DEFAULT_SEARCH_LIMIT = 100
ASSIGNABLE_USERS_LIMIT = 10000


class JiraClient:
    """Jira REST API v2 client.

    Every public method is a single HTTP request sent through :meth:`call`.
    Users, projects and issue types are fetched once per client and kept
    until the client is discarded.
    """

    def __init__(self, jira_url: str = DEFAULT_JIRA_URL, jira_login: Optional[str] = None,
                 jira_api_token: Optional[str] = None, timeout: Optional[float] = None):
        self.jira_url = jira_url or DEFAULT_JIRA_URL
        self.jira_login = jira_login
        self.jira_api_token = jira_api_token
        self.timeout = timeout
        self._users = CachedValue()
        self._projects = CachedValue()
        self._issuetypes = CachedValue()

    @classmethod
    def from_settings(cls, settings: Optional[JiraSettings] = None) -> "JiraClient":
        """Build a client from explicit settings or from the environment."""
        settings = settings or get_jira_settings()
        return cls(jira_url=settings.url, jira_login=settings.login,
                   jira_api_token=settings.api_token, timeout=settings.timeout)

    def _headers(self) -> Dict[str, str]:
        if not self.jira_login or not self.jira_api_token:
            raise ConfigurationError("Jira login and API token must be set before calling the API")
        credentials = base64.b64encode(
            f"{self.jira_login}:{self.jira_api_token}".encode()
        ).decode()
        return {
            "Authorization": f"Basic {credentials}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _url(self, path: str) -> str:
        return f"{self.jira_url.rstrip('/')}/{path.lstrip('/')}"

    def call(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """Send one request to Jira and return the decoded JSON body.

        Raises a ``JiraAPIError`` subclass for 4xx/5xx answers, ``NetworkError``
        when no answer arrives at all and ``ConfigurationError`` when the
        credentials are missing. An empty success body is returned as None.
        """
        headers = self._headers()
        url = self._url(path)
        logger.debug(f"Jira API request: {method} {url}")
        try:
            response = requests.request(method, url, headers=headers, json=body, timeout=self.timeout)
        except requests.exceptions.InvalidJSONError as e:
            logger.error(f"Jira API request body for {method} {path} is not JSON serializable: {e}")
            raise PayloadError(f"Cannot encode request body for {method} {path}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Jira API network error on {method} {path}: {e}")
            raise NetworkError(f"Could not reach Jira at {url}: {e}") from e

        error = error_for_status(response.status_code, response.text)
        if error is not None:
            logger.error(f"Jira API Error on {method} {path}: {response.status_code} {error}")
            raise error

        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Jira API returned non-JSON body on {method} {path}: {e}")
            raise ResponseFormatError(f"Expected JSON from {method} {path}") from e

    def get_myself(self) -> Dict[str, Any]:
        """Fetch the profile of the configured user."""
        return self.call(f"{API_PREFIX}/myself")

    def get_issue(self, issue_key: str) -> Dict[str, Any]:
        return self.call(f"{API_PREFIX}/issue/{issue_key}")

    def add_comment(self, issue_key: str, comment_body: str) -> Dict[str, Any]:
        return self.call(f"{API_PREFIX}/issue/{issue_key}/comment", "POST", {"body": comment_body})

    def delete_comment(self, issue_key: str, comment_id: str):
        return self.call(f"{API_PREFIX}/issue/{issue_key}/comment/{comment_id}", "DELETE")

    def edit_comment(self, issue_key: str, comment_id: str, comment_body: str) -> Dict[str, Any]:
        return self.call(f"{API_PREFIX}/issue/{issue_key}/comment/{comment_id}", "PUT",
                         {"body": comment_body})

    def get_users(self, project_key: str) -> List[Dict[str, Any]]:
        """Users assignable to issues.

        The first successful answer is reused for every later call, whatever
        project key is passed then.
        """
        def load():
            return self.call(f"{API_PREFIX}/user/assignable/search"
                             f"?project={quote(str(project_key))}&maxResults={ASSIGNABLE_USERS_LIMIT}")
        return self._users.get(load)

    def assign_issue(self, issue_key: str, user_name: str):
        return self.call(f"{API_PREFIX}/issue/{issue_key}/assignee", "PUT", {"name": user_name})

    def jql_search(self, jql: str, limit: Any = DEFAULT_SEARCH_LIMIT) -> List[Dict[str, Any]]:
        """Search issues with JQL and return the ``issues`` list."""
        if (not isinstance(limit, numbers.Real) or isinstance(limit, bool)
                or not math.isfinite(limit)):
            limit = DEFAULT_SEARCH_LIMIT
        result = self.call(f"{API_PREFIX}/search", "POST", {"jql": jql, "maxResults": int(limit)})
        return (result or {}).get("issues") or []

    def get_actions(self, issue_key: str) -> List[Tuple[str, str]]:
        """Available transitions as ``(id, name)`` pairs, in server order."""
        result = self.call(f"{API_PREFIX}/issue/{issue_key}/transitions")
        return [(t["id"], t["name"]) for t in (result or {}).get("transitions", [])]

    def do_action(self, issue_key: str, transition_id: str):
        """Move an issue through the given workflow transition."""
        return self.call(f"{API_PREFIX}/issue/{issue_key}/transitions", "POST",
                         {"transition": {"id": transition_id}})

    def get_worklog(self, issue_key: str, only_mine: bool = False) -> Dict[str, Any]:
        # only_mine is accepted for callers but the full worklog is always returned
        return self.call(f"{API_PREFIX}/issue/{issue_key}/worklog")

    def add_worklog(self, issue_key: str, comment: str, started: Union[str, datetime],
                    time_spent_seconds: int) -> Dict[str, Any]:
        if isinstance(started, datetime):
            started = format_started(started)
        return self.call(f"{API_PREFIX}/issue/{issue_key}/worklog", "POST", {
            "comment": comment,
            "started": started,
            "timeSpentSeconds": time_spent_seconds,
        })

    def get_projects(self) -> List[Dict[str, Any]]:
        return self._projects.get(lambda: self.call(f"{API_PREFIX}/project"))

    def get_issuetypes(self) -> List[Dict[str, Any]]:
        return self._issuetypes.get(lambda: self.call(f"{API_PREFIX}/issuetype"))

    def create_issue(self, project: Any, summary: str, description: str) -> Dict[str, Any]:
        """Create an issue. ``project`` is sent as given, e.g. ``{"key": "ABC"}``."""
        payload = {
            "fields": {
                "project": project,
                "summary": summary,
                "description": description,
            }
        }
        return self.call(f"{API_PREFIX}/issue/", "POST", payload)

    def update_issue(self, issue_id: str, summary: str, description: str):
        """Overwrite the summary and description of an issue."""
        payload = {
            "fields": {
                "description": description,
                "summary": summary,
            }
        }
        return self.call(f"{API_PREFIX}/issue/{issue_id}", "PUT", payload)
