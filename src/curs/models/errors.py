from typing import Optional

from httpx import Response, ResponseNotRead


class CursError(Exception):
    """Base class for every failure raised while sending or decoding a request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NetworkError(CursError):
    """The request could not be produced or transmitted.

    Covers transport failures (connection, TLS, invalid URL, body read) as well
    as file read failures while assembling a multipart body.
    """


class StatusError(CursError):
    """A response arrived but its status code is not a success status.

    The full response is kept so callers can inspect headers and body.
    """

    def __init__(self, response: Response):
        self.response = response
        self.status_code = response.status_code
        self.method: Optional[str] = None
        self.url: Optional[str] = None
        try:
            request = response.request
        except RuntimeError:
            request = None
        if request is not None:
            self.method = request.method
            self.url = str(request.url)

        try:
            self.response_content = response.text
        except ResponseNotRead:
            self.response_content = ""

        target = f"{self.method} {self.url}" if self.method else "request"
        message = f"{target} failed with status code {self.status_code}"
        if self.response_content:
            message = f"{message}: {self.response_content[:200]}"
        super().__init__(message)


class DecodeError(CursError):
    """A success response whose body is not valid JSON for the requested type."""

    def __init__(self, response: Response, diagnostic: Exception):
        self.response = response
        self.diagnostic = diagnostic
        super().__init__(f"Failed to decode response body: {diagnostic}")
