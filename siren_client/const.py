"""Constants for the Siren client."""

from __future__ import annotations

VERSION = "0.4.0"

# Media types
SIREN_MEDIA_TYPE = "application/vnd.siren+json"
PROBLEM_MEDIA_TYPE = "application/problem+json"
JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

# Wire-format defaults
DEFAULT_ACTION_METHOD = "GET"
DEFAULT_ACTION_TYPE = FORM_MEDIA_TYPE
DEFAULT_FIELD_TYPE = "text"

# Problem details defaults (RFC 7807)
DEFAULT_PROBLEM_TYPE = "about:blank"
PROBLEM_MEMBERS = frozenset({"type", "title", "status", "detail", "instance"})

# Methods whose payload is sent as query parameters
READ_ONLY_METHODS = frozenset({"GET", "HEAD"})

HTTP_NO_CONTENT = 204

# Transport defaults
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = f"siren-client/{VERSION}"
DEFAULT_ACCEPT = (SIREN_MEDIA_TYPE, PROBLEM_MEDIA_TYPE)
