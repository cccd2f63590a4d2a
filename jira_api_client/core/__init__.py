"""
Core functionality for the Jira API client.
"""

from .cache import CachedValue
from .jira_client import JiraClient

__all__ = ['CachedValue', 'JiraClient']
