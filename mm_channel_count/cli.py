import logging
from enum import Enum
from typing import Optional

import typer

from . import __version__
from .config import resolve_settings
from .exceptions import ConfigurationError, TeamLookupError, UserLookupError
from .report import build_report
from .utils import (
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    EXIT_CONFIG,
    EXIT_OK,
    EXIT_TEAM_LOOKUP,
    EXIT_USER_LOOKUP,
    PROGRAM_NAME,
    get_client,
    print_summary,
    setup_logging,
)
from .utils.const import ENV_SCHEME, ENV_TOKEN, ENV_URL, ENV_USER

app = typer.Typer(
    help="This utility is used to find how many channels a user is a member of.",
    add_completion=False,
)

logger = logging.getLogger(__name__)

MISSING_MESSAGES = {
    "url": "The Mattermost URL must be supplied either on the command line "
    f"or via the {ENV_URL} environment variable",
    "scheme": "The Mattermost HTTP scheme must be supplied either on the command line "
    f"or via the {ENV_SCHEME} environment variable",
    "token": "The Mattermost auth token must be supplied either on the command line "
    f"or via the {ENV_TOKEN} environment variable",
    "user": "A Mattermost username is required to use this utility, either on the command line "
    f"or via the {ENV_USER} environment variable",
}


class OutputFormat(str, Enum):
    text = "text"
    yaml = "yaml"


def version_callback(value: bool):
    if value:
        print(f"{PROGRAM_NAME} - Version: {__version__}\n")
        raise typer.Exit(code=EXIT_OK)


@app.command()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(
        None, "--url", help="The URL of the Mattermost instance (without the HTTP scheme)"
    ),
    port: Optional[str] = typer.Option(
        None, "--port", help=f"The TCP port used by Mattermost. [Default: {DEFAULT_PORT}]"
    ),
    scheme: Optional[str] = typer.Option(
        None, "--scheme", help=f"The HTTP scheme to be used (http/https). [Default: {DEFAULT_SCHEME}]"
    ),
    token: Optional[str] = typer.Option(
        None, "--token", help="The auth token used to connect to Mattermost"
    ),
    user: Optional[str] = typer.Option(
        None, "--user", help="The username of the Mattermost user"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", help="Output format for the summary"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
):
    """Count the channels a Mattermost user belongs to, per team."""
    settings = resolve_settings(url=url, port=port, scheme=scheme, token=token, user=user, debug=debug)
    setup_logging(settings.debug)

    logger.debug(settings.describe())

    logger.debug("Validating parameters")
    try:
        settings.validate()
    except ConfigurationError as e:
        for name in e.missing:
            logger.error(MISSING_MESSAGES[name])
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=EXIT_CONFIG)

    connection = settings.connection
    logger.debug(f"Full target for Mattermost: {connection.base_url}")

    with get_client(connection) as client:
        logger.info(f"Processing started - Version: {__version__}")

        try:
            mm_user, total_dm_channels = build_report(client, settings.user)
        except UserLookupError as e:
            logger.error(f"Failed to retrieve user from Mattermost: {e}")
            raise typer.Exit(code=EXIT_USER_LOOKUP)
        except TeamLookupError as e:
            logger.error(f"Failed to retrieve teams from Mattermost: {e}")
            raise typer.Exit(code=EXIT_TEAM_LOOKUP)

    print_summary(mm_user, total_dm_channels, output_format.value)


if __name__ == "__main__":
    app()
