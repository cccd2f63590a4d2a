"""
Utility functions for the Jira API client.
"""

from .formatters import (
    format_started,
    format_duration,
    format_issue_info,
    format_transitions,
    format_worklog
)
from .validators import validate_jira_url

__all__ = [
    'format_started',
    'format_duration',
    'format_issue_info',
    'format_transitions',
    'format_worklog',
    'validate_jira_url'
]
