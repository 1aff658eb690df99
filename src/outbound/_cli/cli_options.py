import json
import logging
from typing import Optional

import click

from .._config import load_options
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Dotenv file to read timeout settings from.",
)
def options(env_file: Optional[str]) -> None:
    """Show the timeouts transports will use, resolved from the environment."""
    try:
        resolved = load_options(env_file)
    except ConfigurationError as e:
        logger.debug(f"Failed to resolve options: {e}")
        click.echo(e.message, err=True)
        raise click.exceptions.Exit(1) from e

    click.echo(
        json.dumps(
            {
                "connect_timeout_millis": resolved.connect_timeout_millis,
                "read_timeout_millis": resolved.read_timeout_millis,
            },
            indent=2,
        )
    )
