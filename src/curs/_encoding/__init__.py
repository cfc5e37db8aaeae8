from ._multipart import FileUpload, MultipartBodyBuilder, generate_boundary
from ._params import Param, encode_params

__all__ = [
    "FileUpload",
    "MultipartBodyBuilder",
    "Param",
    "encode_params",
    "generate_boundary",
]
