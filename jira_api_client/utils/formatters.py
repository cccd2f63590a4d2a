"""
Formatting utilities for the Jira API client.
"""

from datetime import datetime, timezone
from typing import Dict, Any, List, Tuple

STARTED_FORMAT = "%Y-%m-%dT%H:%M:%S.000%z"


def format_started(started: datetime) -> str:
    """Render a datetime the way Jira expects a worklog ``started`` value."""
    if started.tzinfo is None:
        started = started.replace(tzinfo=timezone.utc)
    return started.strftime(STARTED_FORMAT)

def format_duration(seconds: int) -> str:
    """Format a number of seconds as Jira-style ``1h 30m``."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes = remainder // 60
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes or not hours:
        parts.append(f"{minutes}m")
    return " ".join(parts)

def format_issue_info(issue: Dict[str, Any]) -> str:
    """Format issue information for display."""
    fields = issue.get('fields', {})
    return f"""
Issue: {issue.get('key')}
Summary: {fields.get('summary', '')}
Status: {(fields.get('status') or {}).get('name', 'Unknown')}
Assignee: {(fields.get('assignee') or {}).get('displayName', 'Unassigned')}
Priority: {(fields.get('priority') or {}).get('name', 'Not set')}
"""

def format_transitions(transitions: List[Tuple[str, str]]) -> str:
    """One ``id: name`` line per available transition."""
    return "\n".join(f"{transition_id}: {name}" for transition_id, name in transitions)

def format_worklog(worklog: Dict[str, Any]) -> str:
    lines = []
    for entry in worklog.get('worklogs', []):
        author = (entry.get('author') or {}).get('displayName', 'Unknown')
        spent = format_duration(entry.get('timeSpentSeconds', 0))
        lines.append(f"{entry.get('started', '')}  {author}  {spent}  {entry.get('comment', '')}".rstrip())
    return "\n".join(lines)
