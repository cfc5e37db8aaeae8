from .errors import CursError, DecodeError, NetworkError, StatusError
from .method import Method

__all__ = [
    "CursError",
    "DecodeError",
    "Method",
    "NetworkError",
    "StatusError",
]
