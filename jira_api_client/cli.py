"""
Command-line interface for the Jira API client.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config.settings import get_jira_settings, get_settings, ENV_VARS
from .config.logging_config import setup_logging
from .core.jira_client import JiraClient
from .utils.exceptions import handle_error, ConfigurationError, JiraClientError
from .utils.formatters import format_issue_info, format_transitions, format_worklog
from .utils.validators import validate_jira_url

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="jira-api",
    help="Jira API Client - Call the Jira REST API from the command line",
    add_completion=False
)
console = Console()

def check_environment():
    """Check if all required environment variables are set."""
    settings = get_jira_settings()
    logger.debug(f"Settings: {get_settings()}")

    if not settings.is_complete:
        console.print("[red]Missing required environment variables:[/red]")
        for var in settings.missing():
            console.print(f"  - {var}")
        console.print("\n[yellow]Please create a .env file with these variables:[/yellow]")
        console.print(f"""
# Jira Configuration
{ENV_VARS["JIRA_URL"]}=http://your-jira-host:8080/
{ENV_VARS["JIRA_LOGIN"]}=your-login
{ENV_VARS["JIRA_API_TOKEN"]}=your-jira-api-token
        """)
        raise ConfigurationError("Missing required environment variables")
    if not validate_jira_url(settings.url):
        raise ConfigurationError(f"{ENV_VARS['JIRA_URL']} is not an http(s) URL: {settings.url}")
    return settings

def get_client() -> JiraClient:
    return JiraClient.from_settings(check_environment())

def fail(error: Exception):
    error_message = handle_error(error)
    logger.error(error_message)
    console.print(f"[red]{error_message}[/red]")
    raise typer.Exit(1)

@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug mode")
):
    """Call the Jira REST API."""
    setup_logging(logging.DEBUG if debug else logging.WARNING)
    if debug:
        logger.debug("Debug mode enabled")

@app.command()
def whoami():
    """Show the configured user."""
    try:
        me = get_client().get_myself()
    except JiraClientError as e:
        fail(e)
    console.print(f"{me.get('displayName')} ({me.get('name')})")

@app.command()
def issue(key: str = typer.Argument(..., help="Issue key, e.g. ABC-1")):
    """Show an issue."""
    try:
        data = get_client().get_issue(key)
    except JiraClientError as e:
        fail(e)
    console.print(format_issue_info(data))

@app.command()
def search(
    jql: str = typer.Argument(..., help="JQL query"),
    limit: int = typer.Option(100, "--limit", "-l", help="Maximum number of issues")
):
    """Search issues with JQL."""
    try:
        issues = get_client().jql_search(jql, limit=limit)
    except JiraClientError as e:
        fail(e)
    table = Table("Key", "Summary", "Status")
    for found in issues:
        fields = found.get("fields", {})
        table.add_row(found.get("key", ""), fields.get("summary", ""),
                      (fields.get("status") or {}).get("name", ""))
    console.print(table)

@app.command()
def transitions(key: str):
    """List the transitions available for an issue."""
    try:
        actions = get_client().get_actions(key)
    except JiraClientError as e:
        fail(e)
    console.print(format_transitions(actions))

@app.command()
def transition(key: str, transition_id: str):
    """Apply a transition to an issue."""
    try:
        get_client().do_action(key, transition_id)
    except JiraClientError as e:
        fail(e)
    console.print(f"[green]{key} moved through transition {transition_id}[/green]")

@app.command()
def comment(key: str, text: str):
    """Add a comment to an issue."""
    try:
        created = get_client().add_comment(key, text)
    except JiraClientError as e:
        fail(e)
    console.print(f"[green]Comment {(created or {}).get('id', '')} added to {key}[/green]")

@app.command()
def assign(key: str, name: str):
    """Assign an issue to a user name."""
    try:
        get_client().assign_issue(key, name)
    except JiraClientError as e:
        fail(e)
    console.print(f"[green]{key} assigned to {name}[/green]")

@app.command()
def projects():
    """List visible projects."""
    try:
        found = get_client().get_projects()
    except JiraClientError as e:
        fail(e)
    table = Table("Key", "Name")
    for project in found:
        table.add_row(project.get("key", ""), project.get("name", ""))
    console.print(table)

@app.command()
def issuetypes():
    """List issue types."""
    try:
        found = get_client().get_issuetypes()
    except JiraClientError as e:
        fail(e)
    table = Table("Id", "Name")
    for issue_type in found:
        table.add_row(str(issue_type.get("id", "")), issue_type.get("name", ""))
    console.print(table)

@app.command()
def worklog(key: str):
    """Show the worklog of an issue."""
    try:
        data = get_client().get_worklog(key)
    except JiraClientError as e:
        fail(e)
    console.print(format_worklog(data or {}))

@app.command("log-work")
def log_work(
    key: str,
    seconds: int,
    comment: Optional[str] = typer.Option("", "--comment", "-c", help="Worklog comment")
):
    """Log time spent on an issue, starting now."""
    try:
        get_client().add_worklog(key, comment, datetime.now(timezone.utc), seconds)
    except JiraClientError as e:
        fail(e)
    console.print(f"[green]Logged {seconds}s on {key}[/green]")

if __name__ == "__main__":
    app()
