"""Exceptions for the Siren client.

These exceptions are raised while fetching and mapping Siren documents.
None of them are retried by the client; transport errors (aiohttp or
whatever the injected transport raises) propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .problem import Problem
    from .transport import TransportResponse


class UnsupportedContentTypeError(Exception):
    """Error to indicate the server answered with something that is not Siren.

    Raised when the content type is unrecognised, or when it is absent on a
    response that cannot be treated as empty (anything but 204 or HEAD).

    Attributes:
        response: The raw transport response, body unread
        content_type: The content type header as received (None if absent)
    """

    def __init__(self, response: TransportResponse, content_type: str | None = None):
        """Initialize error with the offending response."""
        super().__init__("Unsupported content type")
        self.response = response
        self.content_type = content_type

    @property
    def status(self) -> int:
        """HTTP status code of the offending response."""
        return self.response.status

    def __str__(self) -> str:
        """Format error with context."""
        parts = [super().__str__()]
        parts.append(f"content_type={self.content_type!r}")
        parts.append(f"status={self.response.status}")
        return " | ".join(parts)


class ProblemError(Exception):
    """Error raised when the server returns an application/problem+json document.

    Attributes:
        problem: The parsed Problem
    """

    def __init__(self, problem: Problem):
        """Initialize error from a parsed problem."""
        super().__init__(problem.title or problem.type)
        self.problem = problem

    def __str__(self) -> str:
        """Format error with context."""
        parts = [super().__str__()]
        parts.append(f"type={self.problem.type}")
        if self.problem.status is not None:
            parts.append(f"status={self.problem.status}")
        if self.problem.detail:
            parts.append(f"detail={self.problem.detail}")
        return " | ".join(parts)


class UrlResolutionError(ValueError):
    """Error raised when an href cannot be resolved against its base URL.

    Aborts graph construction for the document being parsed.

    Attributes:
        reference: The href that failed to resolve
        base: The base URL it was resolved against
    """

    def __init__(self, message: str, reference: Any = None, base: str | None = None):
        """Initialize error with the reference and base involved."""
        super().__init__(message)
        self.reference = reference
        self.base = base

    def __str__(self) -> str:
        """Format error with context."""
        parts = [super().__str__()]
        parts.append(f"reference={self.reference!r}")
        parts.append(f"base={self.base!r}")
        return " | ".join(parts)


class UnsupportedEncodingError(ValueError):
    """Error raised when an action declares an encoding we cannot produce.

    Only application/json and application/x-www-form-urlencoded bodies are
    supported; read-only methods never need an encoding.
    """

    def __init__(self, encoding: str):
        """Initialize error with the declared encoding."""
        super().__init__(f"Unsupported action encoding: {encoding}")
        self.encoding = encoding


class InvalidDocumentError(Exception):
    """Error raised when a response body cannot be mapped.

    Covers bodies that are not valid JSON, JSON that is not an object, and
    objects missing members the Siren format requires (an action without a
    name, a link without an href).

    Attributes:
        url: The URL the document was fetched from
        status_code: HTTP status code of the response
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize error with context.

        Args:
            message: Human-readable error description
            url: The URL the document was fetched from
            status_code: HTTP status code if available
        """
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        """Format error with context."""
        parts = [super().__str__()]
        if self.url:
            parts.append(f"url={self.url}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        return " | ".join(parts)
