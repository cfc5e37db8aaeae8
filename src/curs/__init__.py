"""curs: curl for Python users.

Make your request, add params and files or a JSON body, and curs decides the
right body format and adds the headers it needs. Successful JSON responses
can then be decoded into any type pydantic understands.
"""

from ._config import Config
from ._encoding import FileUpload, MultipartBodyBuilder, Param, encode_params
from ._request import PreparedRequest, Request
from ._response import decode_success, is_success
from .models import CursError, DecodeError, Method, NetworkError, StatusError

__all__ = [
    "Config",
    "CursError",
    "DecodeError",
    "FileUpload",
    "Method",
    "MultipartBodyBuilder",
    "NetworkError",
    "Param",
    "PreparedRequest",
    "Request",
    "StatusError",
    "decode_success",
    "encode_params",
    "is_success",
]
