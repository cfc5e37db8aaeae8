"""Parsing of the repeatable ``curs`` command-line options."""

from pathlib import Path

import click

from .._encoding import FileUpload, Param


def parse_param(value: str) -> Param:
    name, sep, param_value = value.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected name=value, got '{value}'")
    return name, param_value


def parse_header(value: str) -> tuple[str, str]:
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise click.BadParameter(f"expected 'Name: value', got '{value}'")
    return name.strip(), header_value.strip()


def parse_file(value: str) -> FileUpload:
    """Parse ``name=path`` with an optional ``;type=mime`` suffix.

    Examples:
        >>> parse_file("avatar=shim.png;type=image/png").mime
        'image/png'
    """
    name, sep, rest = value.partition("=")
    if not sep or not name or not rest:
        raise click.BadParameter(f"expected name=path[;type=mime], got '{value}'")

    path, _, mime_part = rest.partition(";type=")
    return FileUpload(name=name, path=Path(path), mime=mime_part or None)
