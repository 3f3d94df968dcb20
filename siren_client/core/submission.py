"""Turn an action and a payload into a concrete HTTP request.

Rules, in order:

    1. GET and HEAD send the payload as query parameters appended to the
       action href. No body, no content-type.
    2. Other methods encode the payload as the action's declared type:
       - application/json -> JSON body
       - application/x-www-form-urlencoded -> form body
    3. Any other declared type is rejected with UnsupportedEncodingError.

build_action_request is pure: it needs no client and performs no I/O.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlencode, urlsplit, urlunsplit

from ..const import FORM_MEDIA_TYPE, JSON_MEDIA_TYPE, READ_ONLY_METHODS
from .exceptions import UnsupportedEncodingError
from .transport import RequestOptions

Scalar = str | int | float | bool | None
Payload = Mapping[str, Scalar]


@dataclass(frozen=True)
class ActionTarget:
    """Where and how an action is submitted."""

    url: str
    method: str
    encoding: str


@dataclass(frozen=True)
class ActionRequest:
    """The request an action submission resolves to."""

    url: str
    options: RequestOptions


def _format_scalar(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _form_pairs(payload: Payload) -> list[tuple[str, str]]:
    return [(name, _format_scalar(value)) for name, value in payload.items()]


def _media_type(encoding: str) -> str:
    return encoding.split(";", 1)[0].strip().lower()


def append_query(url: str, payload: Payload) -> str:
    """Append payload values to the query string of url.

    The existing query is kept byte for byte; encoded pairs follow it after "&".
    """
    if not payload:
        return url
    parts = urlsplit(url)
    encoded = urlencode(_form_pairs(payload))
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=query))


def build_action_request(target: ActionTarget, payload: Payload) -> ActionRequest:
    """Derive method, URL, headers and body for an action submission.

    Args:
        target: Resolved href, method and encoding of the action
        payload: Mapping of field name to scalar value

    Returns:
        ActionRequest ready for SirenClient.submit.

    Raises:
        UnsupportedEncodingError: For a body-carrying method with an encoding
            other than JSON or form-urlencoded.
    """
    method = target.method.upper()

    if method in READ_ONLY_METHODS:
        return ActionRequest(
            url=append_query(target.url, payload),
            options=RequestOptions(method=method),
        )

    media_type = _media_type(target.encoding)
    if media_type == JSON_MEDIA_TYPE:
        body = json.dumps(dict(payload))
    elif media_type == FORM_MEDIA_TYPE:
        body = urlencode(_form_pairs(payload))
    else:
        raise UnsupportedEncodingError(target.encoding)

    return ActionRequest(
        url=target.url,
        options=RequestOptions(method=method, headers={"content-type": media_type}, body=body),
    )
