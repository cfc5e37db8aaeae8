from enum import Enum
from typing import Union


class Method(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


def normalize_method(method: Union[Method, str]) -> str:
    if isinstance(method, Method):
        return method.value
    return method.upper()


def is_query_method(method: str) -> bool:
    """GET and HEAD carry params in the query string, never in the body."""
    return method in (Method.GET.value, Method.HEAD.value)
