import json
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import get_logger, log_operation, setup_logger

logger = get_logger("youtrack-client")

from .exceptions import YouTrackClientError  # noqa: E402
from .models import Issue  # noqa: E402


@click.command()
@click.argument("target")
@click.option(
    "--project",
    is_flag=True,
    default=False,
    help="Treat TARGET as a project short name and list its issues",
)
@click.option("--filter", "filter_query", help="Search query used with --project")
@click.option(
    "--max-results",
    default=10,
    show_default=True,
    help="Maximum number of issues listed with --project",
)
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
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--youtrack-url",
    help="YouTrack URL (e.g., https://youtrack.example.com)",
)
@click.option("--youtrack-token", help="YouTrack permanent token")
@click.option(
    "--youtrack-ssl-verify/--no-youtrack-ssl-verify",
    default=True,
    help="Verify SSL certificates for YouTrack (default: verify)",
)
def main(
    target: str,
    project: bool,
    filter_query: str | None,
    max_results: int,
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    youtrack_url: str | None,
    youtrack_token: str | None,
    youtrack_ssl_verify: bool,
) -> None:
    """Fetch a YouTrack issue (or a project's issues) and print it as JSON."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="youtrack-client",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    if env_file:
        logger.info(f"Loading environment from file: {env_file}")
        load_dotenv(env_file)
    else:
        logger.debug("Attempting to load environment from default .env file")
        load_dotenv()

    if youtrack_url:
        os.environ["YOUTRACK_URL"] = youtrack_url
    if youtrack_token:
        os.environ["YOUTRACK_TOKEN"] = youtrack_token
    if log_dir:
        os.environ["LOG_DIR"] = log_dir
    os.environ["YOUTRACK_SSL_VERIFY"] = str(youtrack_ssl_verify).lower()

    from .youtrack import YouTrackFetcher

    try:
        with log_operation(logger, "fetch", target=target):
            fetcher = YouTrackFetcher()
            if project:
                issues = fetcher.get_issues_in_project(
                    target, filter_query=filter_query, max_results=max_results
                )
                output = [issue.to_simplified_dict() for issue in issues]
            else:
                output = fetcher.get_issue(target).to_simplified_dict()
    except (YouTrackClientError, ValueError, TypeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(output, indent=2, ensure_ascii=False))


__all__ = ["Issue", "main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
