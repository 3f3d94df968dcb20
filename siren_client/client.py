"""Siren API client.

The client combines an injected transport with the response dispatcher:

    async with SirenClient() as client:
        order = await client.get("http://api.x.io/orders/42")
        next_order = await order.find_link("next").fetch()
        await order.actions["add-item"].submit({"productCode": "X1", "quantity": 2})

The client keeps no per-request state and no cache, so one instance can be
shared by concurrent tasks. Retries are left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import TracebackType

from .client_config.schema import ClientConfig
from .core.dispatch import dispatch_response
from .core.resource import Resource
from .core.transport import AiohttpTransport, RequestOptions, Transport

_LOGGER = logging.getLogger(__name__)


class SirenClient:
    """Fetches Siren documents and maps them to navigable Resources."""

    def __init__(self, transport: Transport | None = None, config: ClientConfig | None = None):
        """Initialize client.

        Args:
            transport: Async fetch-like callable (defaults to an AiohttpTransport)
            config: Client configuration (defaults to ClientConfig())
        """
        self.config = config or ClientConfig()
        self._owns_transport = transport is None
        self.transport: Transport = transport or AiohttpTransport(self.config)

    async def get(self, url: str) -> Resource:
        """GET the resource at url."""
        return await self.submit(url, RequestOptions(method="GET"))

    async def submit(self, url: str, options: RequestOptions | None = None) -> Resource:
        """Send a request and map the response.

        Args:
            url: Absolute URL to request
            options: Method, headers and body (defaults to a plain GET)

        Returns:
            The Resource built from the response.

        Raises:
            ProblemError: The server answered with a problem document.
            UnsupportedContentTypeError: The server answered with something else than Siren.
            InvalidDocumentError: The Siren body could not be decoded.
            UrlResolutionError: An href in the document could not be resolved.
        """
        options = self._prepare(options or RequestOptions())
        _LOGGER.debug("Submitting %s %s", options.method, url)
        response = await self.transport(url, options)
        return await dispatch_response(self, url, options, response)

    def _prepare(self, options: RequestOptions) -> RequestOptions:
        headers = self.config.default_headers()
        for name, value in options.headers.items():
            headers[name.lower()] = value
        return replace(options, method=options.method.upper(), headers=headers)

    async def close(self) -> None:
        """Close the default transport. Injected transports are left alone."""
        if self._owns_transport and isinstance(self.transport, AiohttpTransport):
            await self.transport.close()

    async def __aenter__(self) -> SirenClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


def new_client(transport: Transport | None = None, config: ClientConfig | None = None) -> SirenClient:
    """Construct a client for a Siren API.

    Args:
        transport: Optional fetch-like callable used for every request
        config: Optional client configuration

    Returns:
        The SirenClient to use.
    """
    return SirenClient(transport=transport, config=config)
