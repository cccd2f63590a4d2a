"""
Configuration for the Jira API client.
"""

from .settings import JiraSettings, get_jira_settings, get_settings, ENV_VARS, DEFAULT_JIRA_URL
from .logging_config import setup_logging

__all__ = [
    'JiraSettings',
    'get_jira_settings',
    'get_settings',
    'ENV_VARS',
    'DEFAULT_JIRA_URL',
    'setup_logging'
]
