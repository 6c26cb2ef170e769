import asyncio
import os

import click
from dotenv import load_dotenv

__version__ = "1.0.0"

from .logging_config import log_operation, setup_logger

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for HTTP transports",
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to for HTTP transports",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--confluence-url",
    help="Confluence site URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--confluence-username", help="Confluence username/email")
@click.option("--confluence-token", help="Confluence API token")
@click.option("--space-key", help="Space key searched by search_pages")
@click.option("--space-id", help="Destination space ID for create_page")
@click.option(
    "--timeout",
    type=float,
    help="Request timeout in seconds (0 disables the timeout)",
)
@click.option(
    "--confluence-ssl-verify/--no-confluence-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Disable the create_page and update_page tools",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    log_dir: str | None,
    log_to_file: bool,
    confluence_url: str | None,
    confluence_username: str | None,
    confluence_token: str | None,
    space_key: str | None,
    space_id: str | None,
    timeout: float | None,
    confluence_ssl_verify: bool,
    read_only: bool,
) -> None:
    """Confluence MCP Server - Confluence page tools for MCP clients.

    Exposes get_page, create_page, update_page, search_pages and get_pages.
    """
    logging_level = os.getenv("LOG_LEVEL", "INFO")
    if verbose >= 2:
        logging_level = "DEBUG"
    elif verbose == 1:
        logging_level = "INFO"

    setup_logger(
        name="mcp-confluence",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        if confluence_url:
            os.environ["CONFLUENCE_URL"] = confluence_url
        if confluence_username:
            os.environ["CONFLUENCE_USERNAME"] = confluence_username
        if confluence_token:
            os.environ["CONFLUENCE_API_TOKEN"] = confluence_token
        if space_key:
            os.environ["CONFLUENCE_SPACE_KEY"] = space_key
        if space_id:
            os.environ["CONFLUENCE_SPACE_ID"] = space_id
        if timeout is not None:
            os.environ["CONFLUENCE_TIMEOUT"] = str(timeout)
        if log_dir:
            os.environ["LOG_DIR"] = log_dir
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"
        if not confluence_ssl_verify:
            os.environ["CONFLUENCE_SSL_VERIFY"] = "false"

        from .servers import run_server

        logger.info(f"Starting MCP Confluence v{__version__} with {transport} transport")

    asyncio.run(run_server(transport=transport, port=port, host=host))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
