"""
Jira API Client - A thin client for the Jira REST API.
"""

__version__ = "1.0.0"

from .core.jira_client import JiraClient
from .config.settings import JiraSettings
from .utils.exceptions import (
    JiraClientError,
    ConfigurationError,
    NetworkError,
    ResponseFormatError,
    PayloadError,
    JiraAPIError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RequestError,
    ServerError
)

__all__ = [
    'JiraClient',
    'JiraSettings',
    'JiraClientError',
    'ConfigurationError',
    'NetworkError',
    'ResponseFormatError',
    'PayloadError',
    'JiraAPIError',
    'AuthenticationError',
    'AuthorizationError',
    'NotFoundError',
    'RequestError',
    'ServerError'
]
