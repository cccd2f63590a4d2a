import os
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from ..utils.exceptions import ConfigurationError

# Load environment variables
load_dotenv()

DEFAULT_JIRA_URL = "http://localhost:8081/"

# Environment variables
ENV_VARS = {
    "JIRA_URL": "JIRA_URL",
    "JIRA_LOGIN": "JIRA_LOGIN",
    "JIRA_API_TOKEN": "JIRA_API_TOKEN",
    "JIRA_TIMEOUT": "JIRA_TIMEOUT",
}


@dataclass(frozen=True)
class JiraSettings:
    url: str = DEFAULT_JIRA_URL
    login: Optional[str] = None
    api_token: Optional[str] = None
    timeout: Optional[float] = None  # None leaves the requests default in place

    @property
    def is_complete(self) -> bool:
        return bool(self.login and self.api_token)

    def missing(self):
        """Names of the environment variables still needed before a call."""
        missing_vars = []
        if not self.login:
            missing_vars.append(ENV_VARS["JIRA_LOGIN"])
        if not self.api_token:
            missing_vars.append(ENV_VARS["JIRA_API_TOKEN"])
        return missing_vars


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_VARS['JIRA_TIMEOUT']} must be a number, got {raw!r}")


def get_jira_settings() -> JiraSettings:
    """Read the Jira settings from the environment."""
    return JiraSettings(
        url=os.getenv(ENV_VARS["JIRA_URL"]) or DEFAULT_JIRA_URL,
        login=os.getenv(ENV_VARS["JIRA_LOGIN"]),
        api_token=os.getenv(ENV_VARS["JIRA_API_TOKEN"]),
        timeout=_parse_timeout(os.getenv(ENV_VARS["JIRA_TIMEOUT"])),
    )


def get_settings() -> Dict[str, Any]:
    """Get all settings as a dictionary."""
    settings = asdict(get_jira_settings())
    settings["api_token"] = "***" if settings["api_token"] else None
    return {"jira": settings}
