"""application/x-www-form-urlencoded serialization for ordered params."""

from typing import Iterable, Tuple
from urllib.parse import urlencode

Param = Tuple[str, str]


def encode_params(params: Iterable[Param]) -> str:
    """Serialize params as ``name=value`` pairs joined by ``&``.

    Order and duplicate names are preserved. Spaces become ``+`` and reserved
    bytes are percent-encoded from their UTF-8 form, so the result can be used
    both as a query string and as a form body.

    Examples:
        >>> encode_params([("one", "value one"), ("one", "a&b")])
        'one=value+one&one=a%26b'
    """
    return urlencode(list(params))
