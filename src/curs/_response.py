from logging import getLogger
from typing import Type, TypeVar

from httpx import RequestError, Response, StreamError
from pydantic import TypeAdapter, ValidationError

from ._utils.constants import SUCCESS_STATUS_CODES
from .models.errors import DecodeError, NetworkError, StatusError

T = TypeVar("T")

logger = getLogger("curs")


def is_success(status_code: int) -> bool:
    """Whether a status code counts as success for JSON decoding.

    Only 200, 201 and 202 do; other 2xx codes such as 204 carry no JSON body to
    decode and are reported as ``StatusError``.
    """
    return status_code in SUCCESS_STATUS_CODES


def decode_success(response: Response, target: Type[T]) -> T:
    """Deserialize a successful JSON response into ``target``.

    ``target`` is anything pydantic can validate: a model, a dataclass, a
    builtin or a generic alias such as ``list[str]``.

    Raises:
        StatusError: The status code is not a success status. The response is
            attached, its body untouched.
        NetworkError: The body could not be read.
        DecodeError: The body is not valid JSON for ``target``.
    """
    if not is_success(response.status_code):
        logger.debug(f"Response status {response.status_code} is not a success")
        raise StatusError(response)

    try:
        response.read()
    except (RequestError, StreamError) as e:
        raise NetworkError(f"Failed to read response body: {e}") from e

    try:
        return TypeAdapter(target).validate_json(response.text)
    except ValidationError as e:
        raise DecodeError(response, e) from e
