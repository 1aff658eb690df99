import click

from .cli_options import options
from .cli_render import render


@click.group()
@click.version_option(package_name="outbound")
def cli() -> None:
    """Inspect outbound requests and transport options."""


cli.add_command(render)
cli.add_command(options)
