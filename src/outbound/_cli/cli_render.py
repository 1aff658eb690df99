from typing import Optional, Tuple

import click

from .._request import Request
from ..errors import NullOrMissingFieldError


def parse_header(value: str) -> Tuple[str, str]:
    """Split a ``Name: value`` argument into its name and value."""
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise click.BadParameter(
            f"'{value}' is not a header, expected 'Name: value'",
            param_hint="'--header'",
        )
    return name.strip(), header_value.strip()


@click.command()
@click.argument("method")
@click.argument("url")
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Header as 'Name: value'. Repeat a name to send several values.",
)
@click.option("--data", "-d", help="Request body.")
@click.option(
    "--charset",
    help="Charset of the body. Without it the body is treated as binary.",
)
def render(
    method: str,
    url: str,
    headers: Tuple[str, ...],
    data: Optional[str],
    charset: Optional[str],
) -> None:
    r"""Print the diagnostic rendering of a request.

    \b
    Examples:
        outbound render GET http://localhost/users -H "Accept: text/plain"
        outbound render POST http://localhost/users -d '{"name": "x"}' --charset utf-8
    """
    request = build_request(method, url, headers, data, charset)
    click.echo(request.render(), nl=False)


def build_request(
    method: str,
    url: str,
    headers: Tuple[str, ...],
    data: Optional[str],
    charset: Optional[str],
) -> Request:
    """Build the request described by the command line arguments."""
    header_map: dict[str, list[str]] = {}
    for raw in headers:
        name, value = parse_header(raw)
        header_map.setdefault(name, []).append(value)

    body = None
    if data is not None:
        try:
            body = data.encode(charset or "utf-8")
        except LookupError as e:
            raise click.BadParameter(str(e), param_hint="'--charset'") from e

    # charset is only set together with a body
    if body is None:
        charset = None

    try:
        return Request(method, url, header_map, body=body, charset=charset)
    except NullOrMissingFieldError as e:
        raise click.UsageError(e.message) from e
