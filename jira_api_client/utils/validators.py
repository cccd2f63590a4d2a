"""
Validation utilities for the Jira API client.
"""

from urllib.parse import urlparse

def validate_jira_url(url: str) -> bool:
    """Check that the base URL is an absolute http(s) URL."""
    try:
        result = urlparse(url)
    except ValueError:
        return False
    return result.scheme in ['http', 'https'] and bool(result.netloc)
