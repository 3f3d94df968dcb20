"""Decide what a completed HTTP exchange means.

Dispatch is keyed on the media type of the content-type header:

    application/vnd.siren+json  -> build a Resource
    application/problem+json    -> raise ProblemError
    (absent)                    -> empty Resource for 204 or HEAD,
                                   UnsupportedContentTypeError otherwise
    anything else               -> UnsupportedContentTypeError

Parameters after ";" are ignored and the comparison is case-insensitive.
The body is only read once the media type is known to be JSON-based.
A 204 or HEAD response is never read: it is mapped as the document ``{}``.
Hrefs resolve against the URL the response was served from when the
transport reports one (``response.url``), so redirects move the base.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from multidict import CIMultiDict, CIMultiDictProxy

from ..const import HTTP_NO_CONTENT, PROBLEM_MEDIA_TYPE, SIREN_MEDIA_TYPE
from .builder import build_resource
from .documents import parse_document
from .exceptions import InvalidDocumentError, ProblemError, UnsupportedContentTypeError
from .problem import parse_problem
from .resource import Resource
from .transport import RequestOptions, TransportResponse, get_header

if TYPE_CHECKING:
    from ..client import SirenClient

_LOGGER = logging.getLogger(__name__)


def response_url(response: TransportResponse, requested: str) -> str:
    """Return the URL the response was served from, falling back to the requested one.

    Transports that follow redirects report the final URL as ``response.url``.
    """
    final_url = getattr(response, "url", None)
    return str(final_url) if final_url else requested


def snapshot_headers(headers: Mapping[str, str]) -> CIMultiDictProxy[str]:
    """Copy response headers into a read-only, case-insensitive mapping."""
    return CIMultiDictProxy(CIMultiDict(headers))


def media_type(content_type: str | None) -> str | None:
    """Return the lower-cased media type of a content-type header, or None if empty."""
    if not content_type:
        return None
    value = content_type.split(";", 1)[0].strip().lower()
    return value or None


def is_empty_response(status: int, method: str) -> bool:
    """Return True if the exchange cannot carry a body (204 No Content or HEAD)."""
    return status == HTTP_NO_CONTENT or method.upper() == "HEAD"


async def read_json(response: TransportResponse, url: str, allow_empty: bool = False) -> Any:
    """Read and decode a JSON body.

    Raises:
        InvalidDocumentError: If the body is empty (unless allowed) or not JSON.
    """
    body = await response.read()
    if not body or not body.strip():
        if allow_empty:
            return {}
        raise InvalidDocumentError("Empty response body", url=url, status_code=response.status)
    try:
        return json.loads(body)
    except ValueError as e:
        raise InvalidDocumentError(f"Response body is not valid JSON: {e}", url=url, status_code=response.status) from e


async def dispatch_response(
    client: SirenClient | None,
    url: str,
    options: RequestOptions,
    response: TransportResponse,
) -> Resource:
    """Map a completed exchange to a Resource, or raise the matching error.

    Args:
        client: Client the resulting links and actions are bound to
        url: URL that was requested. Hrefs are resolved against the URL the
            response was served from, which differs after a redirect
        options: The request that was sent
        response: The transport's response

    Raises:
        ProblemError: The server returned a problem document.
        UnsupportedContentTypeError: The response is neither Siren, a problem,
            nor an empty 204/HEAD response.
        InvalidDocumentError: The body could not be decoded or mapped.
    """
    content_type = get_header(response.headers, "content-type")
    kind = media_type(content_type)
    empty = is_empty_response(response.status, options.method)
    base_url = response_url(response, url)

    if kind == SIREN_MEDIA_TYPE:
        data = {} if empty else await read_json(response, base_url)
        document = parse_document(data, url=base_url, status=response.status)
        headers = snapshot_headers(response.headers)
        return build_resource(client, base_url, document, status=response.status, headers=headers)

    if kind == PROBLEM_MEDIA_TYPE:
        data = await read_json(response, url, allow_empty=True)
        problem = parse_problem(data, http_status=response.status)
        _LOGGER.warning(
            "Problem response from %s %s: %s (status %s)",
            options.method,
            url,
            problem.title or problem.type,
            problem.status,
        )
        raise ProblemError(problem)

    if kind is None and empty:
        _LOGGER.debug("Empty %d response from %s %s", response.status, options.method, url)
        headers = snapshot_headers(response.headers)
        return build_resource(client, base_url, parse_document({}), status=response.status, headers=headers)

    _LOGGER.warning(
        "Unsupported content type %r from %s %s (status %d)",
        content_type,
        options.method,
        url,
        response.status,
    )
    raise UnsupportedContentTypeError(response, content_type)
