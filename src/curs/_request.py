from dataclasses import dataclass
from logging import getLogger
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

from httpx import AsyncClient, Client, Headers, InvalidURL, RequestError, Response
from pydantic import TypeAdapter

from ._config import Config
from ._encoding import FileUpload, MultipartBodyBuilder, Param, encode_params
from ._response import decode_success
from ._utils import get_httpx_client_kwargs
from ._utils.constants import (
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from .models.errors import NetworkError
from .models.method import Method, is_query_method, normalize_method

T = TypeVar("T")

logger = getLogger("curs")

_json_adapter: TypeAdapter[Any] = TypeAdapter(Any)


@dataclass(frozen=True)
class PreparedRequest:
    """Transport-ready request: the body strategy has already been chosen."""

    method: str
    url: str
    headers: Headers
    body: Optional[bytes] = None


class Request:
    """The main entry point. Craft your request and send it.

    Params, files and headers accumulate through chained calls; ``send``
    decides the body format and adds any header it needs:

    - GET and HEAD put params in the query string and send no derived body;
    - a raw body set through ``json`` or ``override_body`` is sent verbatim;
    - otherwise params become a form body, or a multipart body when there are
      files.

    Example:
        ```python
        person = (
            Request(Method.POST, "https://example.com/people")
            .params([("one", "value_one"), ("two", "value_two")])
            .files([FileUpload(name="avatar", path=Path("avatar.png"))])
            .send_decoded(Person)
        )
        ```
    """

    def __init__(self, method: Union[Method, str], url: str) -> None:
        self.method = normalize_method(method)
        self.url = url
        self._params: list[Param] = []
        self._files: list[FileUpload] = []
        self.headers = Headers()
        self.raw_body: Optional[Union[str, bytes]] = None

    @property
    def params_list(self) -> list[Param]:
        return list(self._params)

    @property
    def files_list(self) -> list[FileUpload]:
        return list(self._files)

    def params(
        self, additional: Union[Iterable[Param], Mapping[str, str]]
    ) -> "Request":
        """Add params. This extends the existing params, it never replaces them."""
        if isinstance(additional, Mapping):
            additional = additional.items()
        self._params.extend((name, value) for name, value in additional)
        return self

    def files(self, additional: Iterable[FileUpload]) -> "Request":
        """Add files to upload. This extends the existing files."""
        self._files.extend(additional)
        return self

    def header(self, name: str, value: str) -> "Request":
        """Set a single header, replacing any previous value with the same name."""
        self.headers[name] = value
        return self

    def json(self, value: Any) -> "Request":
        """Use ``value`` serialized as JSON for the raw body.

        Sets ``Content-Type: application/json``. Params stay on the request but
        are no longer used for the body.
        """
        body = _json_adapter.dump_json(value, by_alias=True)
        self.override_body(body.decode("utf-8"))
        self.header(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
        return self

    def override_body(self, body: Union[str, bytes]) -> "Request":
        """Set a raw body, overriding anything derived from params.

        Make sure to set the content-type header to match the body.
        """
        self.raw_body = body
        return self

    def prepare(self) -> PreparedRequest:
        """Choose the body strategy and assemble the request without sending it.

        Raises:
            NetworkError: A file attached to a multipart body could not be read.
        """
        query = encode_params(self._params)
        query_method = is_query_method(self.method)

        url = self.url
        if query_method and self._params:
            url = _append_query(url, query)

        headers = self.headers.copy()
        body: Optional[bytes] = None

        if self.raw_body is not None:
            if self._files:
                logger.warning(
                    f"{len(self._files)} file(s) ignored: a raw body was set "
                    f"for {self.method} {self.url}"
                )
            body = (
                self.raw_body.encode("utf-8")
                if isinstance(self.raw_body, str)
                else self.raw_body
            )
            logger.debug("Body: raw")
        elif not query_method:
            if not self._files:
                headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_FORM_URLENCODED
                body = query.encode("ascii")
                logger.debug("Body: form-urlencoded")
            else:
                builder = MultipartBodyBuilder().build(self._files, self._params)
                headers[HEADER_CONTENT_TYPE] = builder.content_type
                body = builder.body
                logger.debug("Body: multipart")
        elif self._files:
            logger.warning(
                f"{len(self._files)} file(s) ignored: "
                f"{self.method} requests carry no body"
            )

        return PreparedRequest(method=self.method, url=url, headers=headers, body=body)

    def send(
        self, client: Optional[Client] = None, config: Optional[Config] = None
    ) -> Response:
        """Send the request and return the response, whatever its status.

        Without a ``client`` a short-lived one is built from ``config`` (or
        ``Config.from_env()``) and closed once the response has been read. That
        client asks for JSON with ``Accept: application/json`` by default.

        Raises:
            NetworkError: The body could not be assembled or the transport
                failed. No request is sent when assembly fails.
        """
        prepared = self.prepare()
        logger.debug(f"Request: {prepared.method} {prepared.url}")
        logger.debug(f"HEADERS: {prepared.headers}")

        if client is not None:
            return _dispatch(client, prepared)

        config = config or Config.from_env()
        with Client(**get_httpx_client_kwargs(config)) as own_client:
            own_client.headers[HEADER_ACCEPT] = CONTENT_TYPE_JSON
            own_client.headers[HEADER_USER_AGENT] = config.user_agent
            return _dispatch(own_client, prepared)

    async def send_async(
        self, client: Optional[AsyncClient] = None, config: Optional[Config] = None
    ) -> Response:
        """Asynchronous variant of ``send``. File reads still block."""
        prepared = self.prepare()
        logger.debug(f"Request: {prepared.method} {prepared.url}")
        logger.debug(f"HEADERS: {prepared.headers}")

        if client is not None:
            return await _dispatch_async(client, prepared)

        config = config or Config.from_env()
        async with AsyncClient(**get_httpx_client_kwargs(config)) as own_client:
            own_client.headers[HEADER_ACCEPT] = CONTENT_TYPE_JSON
            own_client.headers[HEADER_USER_AGENT] = config.user_agent
            return await _dispatch_async(own_client, prepared)

    def send_decoded(
        self,
        target: Type[T],
        client: Optional[Client] = None,
        config: Optional[Config] = None,
    ) -> T:
        """Send, then decode a success response as JSON into ``target``."""
        return decode_success(self.send(client, config), target)

    async def send_decoded_async(
        self,
        target: Type[T],
        client: Optional[AsyncClient] = None,
        config: Optional[Config] = None,
    ) -> T:
        return decode_success(await self.send_async(client, config), target)


def _append_query(url: str, query: str) -> str:
    """Add ``query`` to the query component of ``url``, ahead of any fragment."""
    base, hash_mark, fragment = url.partition("#")
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{query}{hash_mark}{fragment}"

def _dispatch(client: Client, prepared: PreparedRequest) -> Response:
    try:
        return client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.body,
        )
    except (RequestError, InvalidURL) as e:
        raise NetworkError(f"{prepared.method} {prepared.url} failed: {e}") from e


async def _dispatch_async(client: AsyncClient, prepared: PreparedRequest) -> Response:
    try:
        return await client.request(
            prepared.method,
            prepared.url,
            headers=prepared.headers,
            content=prepared.body,
        )
    except (RequestError, InvalidURL) as e:
        raise NetworkError(f"{prepared.method} {prepared.url} failed: {e}") from e
