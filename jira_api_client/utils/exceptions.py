from typing import Optional


class JiraClientError(Exception):
    """Base exception for the Jira API client."""
    pass

class ConfigurationError(JiraClientError):
    """Raised when the login name or API token has not been configured."""
    pass

class NetworkError(JiraClientError):
    """Raised when the request never produced an HTTP status code."""
    pass

class ResponseFormatError(JiraClientError):
    """Raised when a successful response does not carry a JSON body."""
    pass

class PayloadError(JiraClientError):
    """Raised when a request body cannot be encoded as JSON."""
    pass

class JiraAPIError(JiraClientError):
    """Raised when Jira answers with an error status."""

    default_message = "Jira API error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None,
                 response_text: str = ""):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message or self.default_message)

class AuthenticationError(JiraAPIError):
    """HTTP 401."""
    default_message = "invalid credentials"

class AuthorizationError(JiraAPIError):
    """HTTP 403. Jira wants an interactive login (usually a captcha) first."""
    default_message = "must complete interactive login/captcha"

class NotFoundError(JiraAPIError):
    """HTTP 404."""
    default_message = "wrong path"

class RequestError(JiraAPIError):
    """Any other HTTP 4xx."""
    default_message = "invalid request"

class ServerError(JiraAPIError):
    """HTTP 5xx."""
    default_message = "Jira server error"


def error_for_status(status_code: int, response_text: str = "") -> Optional[JiraAPIError]:
    """Map an HTTP status code to the matching exception, or None on success."""
    if status_code < 400:
        return None
    if status_code == 401:
        error_class = AuthenticationError
    elif status_code == 403:
        error_class = AuthorizationError
    elif status_code == 404:
        error_class = NotFoundError
    elif status_code < 500:
        error_class = RequestError
    else:
        error_class = ServerError
    return error_class(status_code=status_code, response_text=response_text)


def handle_error(error: Exception) -> str:
    """Handle different types of errors and return appropriate messages."""
    if isinstance(error, ConfigurationError):
        return f"Configuration error: {str(error)}"
    elif isinstance(error, NetworkError):
        return f"Network error: {str(error)}"
    elif isinstance(error, ResponseFormatError):
        return f"Unexpected response: {str(error)}"
    elif isinstance(error, PayloadError):
        return f"Invalid request body: {str(error)}"
    elif isinstance(error, JiraAPIError):
        return f"Jira API error ({error.status_code}): {str(error)}"
    else:
        return f"Unexpected error: {str(error)}"
