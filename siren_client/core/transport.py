"""HTTP transport boundary.

The client never talks to the network itself. It hands a URL and a
RequestOptions to a Transport and reacts to the TransportResponse it gets
back. Any async callable with that shape can be injected (a test double,
a wrapper adding auth headers, a different HTTP library).

AiohttpTransport is the transport used when none is injected. It reads the
whole body before releasing the connection and returns an HttpResponse, so
the response stays inspectable after the request is done (for example from
an UnsupportedContentTypeError).

Timeouts, TLS, proxies and connection pooling belong here, not in the
client. Errors raised by aiohttp propagate unchanged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

from ..client_config.schema import ClientConfig

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestOptions:
    """Description of one request: method, headers and an optional body."""

    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | bytes | None = None


class TransportResponse(Protocol):
    """What the client needs from a completed HTTP exchange.

    A response may also expose ``url``, the URL it was served from after any
    redirects. Hrefs in the document are resolved against it when present.
    """

    @property
    def status(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    async def read(self) -> bytes: ...

    async def text(self) -> str: ...

    async def json(self) -> Any: ...


class Transport(Protocol):
    """An async fetch-like callable."""

    async def __call__(self, url: str, options: RequestOptions) -> TransportResponse: ...


@dataclass
class HttpResponse:
    """A fully-read HTTP response.

    Headers are stored case-insensitively whatever mapping was passed in.
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str | None = None

    def __post_init__(self) -> None:
        self.headers = CIMultiDictProxy(CIMultiDict(self.headers))

    async def read(self) -> bytes:
        return self.body

    async def text(self) -> str:
        return self.body.decode("utf-8")

    async def json(self) -> Any:
        return json.loads(self.body)


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Look up a header case-insensitively.

    Works with multidicts and with plain dicts returned by custom transports.
    """
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


class AiohttpTransport:
    """Default transport backed by an aiohttp.ClientSession.

    The session is created lazily on the first request, so the transport can
    be constructed outside a running event loop. A session passed in by the
    caller is used as-is and never closed here.
    """

    def __init__(self, config: ClientConfig | None = None, session: aiohttp.ClientSession | None = None):
        """Initialize transport.

        Args:
            config: Client configuration (timeout, TLS verification)
            session: Existing session to reuse (optional)
        """
        self.config = config or ClientConfig()
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def __call__(self, url: str, options: RequestOptions) -> HttpResponse:
        """Perform the request and read the whole body."""
        session = self._get_session()
        _LOGGER.debug("HTTP %s %s", options.method, url)

        async with session.request(
            options.method,
            url,
            headers=dict(options.headers),
            data=options.body,
            ssl=self.config.verify_ssl,
        ) as response:
            body = await response.read()
            _LOGGER.debug("HTTP %s %s -> %d (%d bytes)", options.method, url, response.status, len(body))
            return HttpResponse(
                status=response.status,
                headers=response.headers,
                body=body,
                url=str(response.url),
            )

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
