from .cli_request import cli

__all__ = ["cli"]
