"""Client runtime for Siren hypermedia APIs.

Turns application/vnd.siren+json documents into navigable Resources whose
links can be fetched and whose actions can be submitted.
"""

from .client import SirenClient, new_client
from .client_config import ClientConfig, async_load_client_config, load_client_config
from .const import VERSION
from .core.exceptions import (
    InvalidDocumentError,
    ProblemError,
    UnsupportedContentTypeError,
    UnsupportedEncodingError,
    UrlResolutionError,
)
from .core.problem import Problem
from .core.resource import Action, EmbeddedLink, EmbeddedRepresentation, Field, Link, Resource
from .core.transport import AiohttpTransport, HttpResponse, RequestOptions, Transport, TransportResponse

__version__ = VERSION

__all__ = [
    "Action",
    "AiohttpTransport",
    "ClientConfig",
    "EmbeddedLink",
    "EmbeddedRepresentation",
    "Field",
    "HttpResponse",
    "InvalidDocumentError",
    "Link",
    "Problem",
    "ProblemError",
    "RequestOptions",
    "Resource",
    "SirenClient",
    "Transport",
    "TransportResponse",
    "UnsupportedContentTypeError",
    "UnsupportedEncodingError",
    "UrlResolutionError",
    "async_load_client_config",
    "load_client_config",
    "new_client",
]
