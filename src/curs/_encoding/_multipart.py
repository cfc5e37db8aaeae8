"""multipart/form-data body assembly.

The whole body is built in memory before anything is sent. The boundary is a
random token without any collision check against the content, so a value that
happens to contain ``--<boundary>`` corrupts the body. Callers that care must
keep such values out of params and files.
"""

import mimetypes
import random
import string
from logging import getLogger
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel

from .._utils.constants import (
    CONTENT_TYPE_MULTIPART,
    CONTENT_TYPE_OCTET_STREAM,
    MULTIPART_BOUNDARY_LENGTH,
)
from ..models.errors import NetworkError
from ._params import Param

logger = getLogger(__name__)

_BOUNDARY_ALPHABET = string.ascii_letters + string.digits


class FileUpload(BaseModel):
    """A local file to post as a multipart part.

    ``name`` is the form field name. The file at ``path`` is read once, when the
    body is built; its basename becomes the part's filename.
    """

    name: str
    path: Path
    mime: Optional[str] = None

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def content_type(self) -> str:
        if self.mime:
            return self.mime
        guessed, _ = mimetypes.guess_type(str(self.path))
        return guessed or CONTENT_TYPE_OCTET_STREAM


def generate_boundary() -> str:
    return "".join(random.choices(_BOUNDARY_ALPHABET, k=MULTIPART_BOUNDARY_LENGTH))


class MultipartBodyBuilder:
    """Builds a multipart/form-data body out of params and files.

    ``Request`` delegates here whenever a body-bearing request has files; the
    builder is public because it is handy on its own.

    Examples:
        >>> builder = MultipartBodyBuilder().build([], [("one", "value_one")])
        >>> builder.body.endswith(f"--{builder.boundary}--".encode())
        True
    """

    def __init__(self) -> None:
        self.boundary = generate_boundary()
        self._body = bytearray()

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    @property
    def content_type(self) -> str:
        return f"{CONTENT_TYPE_MULTIPART}; boundary={self.boundary}"

    def _write(self, template: str, *values: object) -> None:
        self._body.extend(template.format(*values).encode("utf-8"))

    def build(
        self, files: Iterable[FileUpload], params: Iterable[Param]
    ) -> "MultipartBodyBuilder":
        """Write every param, then every file, then the closing boundary.

        Raises:
            NetworkError: A file could not be opened or read. Nothing of the
                partial body is kept usable; the request must not be sent.
        """
        for name, value in params:
            self._write("\r\n--{}\r\n", self.boundary)
            self._write('Content-Disposition: form-data; name="{}"', name)
            self._write("\r\n\r\n{}\r\n", value)

        for upload in files:
            self._write("\r\n--{}\r\n", self.boundary)
            self._write('Content-Disposition: form-data; name="{}"', upload.name)
            self._write('; filename="{}"', upload.filename)
            self._write("\r\nContent-Type: {}\r\n\r\n", upload.content_type)
            self._body.extend(_read_file(upload.path))
            self._write("\r\n\r\n")

        self._write("\r\n--{}--", self.boundary)

        logger.debug(
            f"Built multipart body: {len(self._body)} bytes, boundary {self.boundary}"
        )
        return self


def _read_file(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise NetworkError(f"Could not read file for upload '{path}': {e}") from e
