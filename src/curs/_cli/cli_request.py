import json
import logging

import click
from dotenv import load_dotenv

from .._config import Config
from .._request import Request
from .._response import is_success
from ..models.errors import CursError
from ._parsing import parse_file, parse_header, parse_param

load_dotenv(override=True)


@click.command()
@click.argument("method")
@click.argument("url")
@click.option("--param", "-p", "params", multiple=True, help="Param as name=value")
@click.option(
    "--file", "-F", "files", multiple=True, help="File as name=path[;type=mime]"
)
@click.option(
    "--header", "-H", "headers", multiple=True, help="Header as 'Name: value'"
)
@click.option("--json", "json_body", help="JSON text sent as the request body")
@click.option("--data", help="Raw request body, sent verbatim")
@click.option("--verbose", "-v", is_flag=True, help="Log request details")
def cli(
    method: str,
    url: str,
    params: tuple[str, ...],
    files: tuple[str, ...],
    headers: tuple[str, ...],
    json_body: str | None,
    data: str | None,
    verbose: bool,
) -> None:
    """Send a METHOD request to URL and print the response body."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    request = Request(method, url)
    request.params(parse_param(p) for p in params)
    request.files(parse_file(f) for f in files)
    for name, value in (parse_header(h) for h in headers):
        request.header(name, value)

    if json_body is not None:
        try:
            request.json(json.loads(json_body))
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--json") from e
    if data is not None:
        request.override_body(data)

    try:
        response = request.send(config=Config.from_env())
    except CursError as e:
        click.echo(f"❌ {e.message}", err=True)
        raise click.exceptions.Exit(1) from e

    click.echo(response.text)
    if not is_success(response.status_code):
        click.echo(f"❌ Status {response.status_code}", err=True)
        raise click.exceptions.Exit(1)
