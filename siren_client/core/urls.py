"""Resolution of Siren hrefs against the URL of the document they came from."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit

from .exceptions import UrlResolutionError


def resolve_url(reference: str, base: str) -> str:
    """Resolve a possibly-relative href against a base URL (RFC 3986).

    Absolute references are returned unchanged. Path-relative, root-relative,
    query-only and fragment-only references are resolved against base.

    Args:
        reference: The href as found in the document
        base: Absolute URL of the document being parsed

    Returns:
        Absolute URL.

    Raises:
        UrlResolutionError: If base is not absolute or either value is malformed.
    """
    if not isinstance(reference, str):
        raise UrlResolutionError("href is not a string", reference, base)

    try:
        base_parts = urlsplit(base)
        if not base_parts.scheme or not base_parts.netloc:
            raise UrlResolutionError("Base URL is not absolute", reference, base)

        resolved = urljoin(base, reference.strip())
        # urljoin is lazy about the netloc; force a parse so a broken
        # IPv6 literal or port in the result is reported here.
        resolved_parts = urlsplit(resolved)
        _ = resolved_parts.port
    except ValueError as e:
        if isinstance(e, UrlResolutionError):
            raise
        raise UrlResolutionError(f"Malformed URL: {e}", reference, base) from e

    if not resolved_parts.scheme:
        raise UrlResolutionError("Resolved URL is not absolute", reference, base)

    return resolved
