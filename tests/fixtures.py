"""Test fixture utilities.

Provides a recording fake transport that stands in for a Siren server, plus
helpers building the responses it returns. Tests import these with
``from tests.fixtures import ...``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from siren_client.const import PROBLEM_MEDIA_TYPE, SIREN_MEDIA_TYPE
from siren_client.core.transport import HttpResponse, RequestOptions

URL_BASE = "http://api.x.io"

# The order example from the Siren README, with relative hrefs.
ORDER_DOCUMENT: dict[str, Any] = {
    "class": ["order"],
    "properties": {"orderNumber": 42, "itemCount": 3, "status": "pending"},
    "entities": [
        {
            "class": ["items", "collection"],
            "rel": ["http://x.io/rels/order-items"],
            "href": "/orders/42/items",
        },
        {
            "class": ["info", "customer"],
            "rel": ["http://x.io/rels/customer"],
            "properties": {"customerId": "pj123", "name": "Peter Joseph"},
            "links": [{"rel": ["self"], "href": "/customers/pj123"}],
        },
    ],
    "actions": [
        {
            "name": "add-item",
            "title": "Add Item",
            "method": "POST",
            "href": "/orders/42/items",
            "type": "application/x-www-form-urlencoded",
            "fields": [
                {"name": "orderNumber", "type": "hidden", "value": "42"},
                {"name": "productCode", "type": "text"},
                {"name": "quantity", "type": "number"},
            ],
        }
    ],
    "links": [
        {"rel": ["self"], "href": "/orders/42"},
        {"rel": ["previous"], "href": "/orders/41"},
        {"rel": ["next"], "href": "/orders/43"},
    ],
}


@dataclass
class RecordedRequest:
    """A request seen by FakeTransport."""

    url: str
    options: RequestOptions


class FakeTransport:
    """Transport answering from a fixed routing table and recording every call.

    Routes are keyed by (METHOD, absolute URL including query). An unknown
    route raises AssertionError, which propagates like any transport error.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], HttpResponse] = {}
        self.requests: list[RecordedRequest] = []

    def add(self, method: str, url: str, response: HttpResponse) -> None:
        self.routes[(method.upper(), url)] = response

    async def __call__(self, url: str, options: RequestOptions) -> HttpResponse:
        self.requests.append(RecordedRequest(url=url, options=options))
        key = (options.method, url)
        if key not in self.routes:
            raise AssertionError(f"Unexpected request: {options.method} {url}")
        return self.routes[key]

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]


def siren_reply(body: dict[str, Any], status: int = 200, headers: dict[str, str] | None = None) -> HttpResponse:
    """Build a Siren response."""
    return HttpResponse(
        status=status,
        headers={"Content-Type": SIREN_MEDIA_TYPE, **(headers or {})},
        body=json.dumps(body).encode("utf-8"),
    )


def problem_reply(body: dict[str, Any], status: int) -> HttpResponse:
    """Build a problem+json response."""
    return HttpResponse(
        status=status,
        headers={"Content-Type": PROBLEM_MEDIA_TYPE},
        body=json.dumps(body).encode("utf-8"),
    )


def empty_reply(status: int = 204, headers: dict[str, str] | None = None) -> HttpResponse:
    """Build a response without body (and without content type unless given)."""
    return HttpResponse(status=status, headers=headers or {}, body=b"")
