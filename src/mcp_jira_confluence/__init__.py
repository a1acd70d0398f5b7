import asyncio
import os
import sys
from collections.abc import Callable
from typing import Any, NoReturn

import click
from dotenv import load_dotenv

__version__ = "1.0.0"

# Imported first so that every module logger is a ContextualLogger
from .logging_config import log_operation, setup_logger

logger = setup_logger()


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the Jira and Confluence commands."""
    options = [
        click.option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (can be used multiple times)",
        ),
        click.option(
            "--env-file",
            type=click.Path(exists=True, dir_okay=False),
            help="Path to .env file",
        ),
        click.option(
            "--log-dir",
            help="Directory to store log files",
        ),
        click.option(
            "--log-to-file/--no-log-to-file",
            default=False,
            help="Enable/disable file logging",
        ),
        click.option(
            "--read-only/--no-read-only",
            default=None,
            help="Hide and refuse tools that write to Jira or Confluence",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _configure(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    read_only: bool | None,
) -> None:
    """Set up logging and load the environment for a command."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(level=logging_level, log_to_file=log_to_file, log_dir=log_dir)

    if env_file:
        logger.info(f"Loading environment from file: {env_file}")
        load_dotenv(env_file)
    else:
        logger.debug("Attempting to load environment from default .env file")
        load_dotenv()

    if read_only is not None:
        os.environ["READ_ONLY_MODE"] = str(read_only).lower()


def _fail_startup(error: Exception) -> NoReturn:
    """Report a startup failure on stderr and exit before serving anything."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _serve(app: Any) -> None:
    """Serve ``app`` over stdio until the client disconnects."""
    from .servers.base import run_stdio

    try:
        asyncio.run(run_stdio(app))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"Error running server: {e}", exc_info=True)
        click.echo(f"Error starting the server: {e}", err=True)
        sys.exit(1)


@click.command(name="jira")
@common_options
@click.option("--jira-url", help="Jira instance URL (overrides JIRA_INSTANCE_URL)")
@click.option("--jira-username", help="Jira account email (overrides JIRA_USER_EMAIL)")
@click.option("--jira-token", help="Jira API token (overrides JIRA_API_KEY)")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates for Jira (default: verify)",
)
def jira_main(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    read_only: bool | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """Jira MCP adapter: JQL search, issue lookup and work logging over stdio."""
    _configure(verbose, env_file, log_dir, log_to_file, read_only)

    if jira_url:
        os.environ["JIRA_INSTANCE_URL"] = jira_url
    if jira_username:
        os.environ["JIRA_USER_EMAIL"] = jira_username
    if jira_token:
        os.environ["JIRA_API_KEY"] = jira_token
    if jira_ssl_verify is not None:
        os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()

    from .jira import JiraClient, JiraConfig
    from .servers.jira import create_jira_server

    try:
        config = JiraConfig.from_env()
    except ValueError as e:
        _fail_startup(e)

    with log_operation(logger, "jira_startup", app_version=__version__):
        app = create_jira_server(JiraClient(config))

    _serve(app)


@click.command(name="confluence")
@common_options
@click.option(
    "--confluence-base",
    help="Confluence REST API root, ending in /rest/api (overrides CONFLUENCE_BASE)",
)
@click.option(
    "--confluence-token",
    help="Confluence personal access token (overrides CONFLUENCE_PAT)",
)
@click.option(
    "--confluence-ssl-verify/--no-confluence-ssl-verify",
    default=None,
    help="Verify SSL certificates for Confluence (default: verify)",
)
def confluence_main(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    read_only: bool | None,
    confluence_base: str | None,
    confluence_token: str | None,
    confluence_ssl_verify: bool | None,
) -> None:
    """Confluence MCP adapter: CQL search, page lookup and page creation over stdio."""
    _configure(verbose, env_file, log_dir, log_to_file, read_only)

    if confluence_base:
        os.environ["CONFLUENCE_BASE"] = confluence_base
    if confluence_token:
        os.environ["CONFLUENCE_PAT"] = confluence_token
    if confluence_ssl_verify is not None:
        os.environ["CONFLUENCE_SSL_VERIFY"] = str(confluence_ssl_verify).lower()

    from .confluence import ConfluenceClient, ConfluenceConfig
    from .servers.confluence import create_confluence_server

    try:
        config = ConfluenceConfig.from_env()
    except ValueError as e:
        _fail_startup(e)

    with log_operation(logger, "confluence_startup", app_version=__version__):
        app = create_confluence_server(ConfluenceClient(config))

    _serve(app)


@click.group()
@click.version_option(__version__, prog_name="mcp-jira-confluence")
def main() -> None:
    """MCP adapters for Jira and Confluence."""


main.add_command(jira_main)
main.add_command(confluence_main)


__all__ = [
    "__version__",
    "confluence_main",
    "jira_main",
    "log_operation",
    "main",
    "setup_logger",
]
