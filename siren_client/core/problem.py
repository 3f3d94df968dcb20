"""Problem details (RFC 7807) returned as application/problem+json."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..const import DEFAULT_PROBLEM_TYPE, PROBLEM_MEMBERS


@dataclass(frozen=True)
class Problem:
    """A parsed problem document.

    Attributes:
        type: Problem type URI ("about:blank" when the server omits it)
        title: Short human-readable summary
        status: Status from the body, or the HTTP status when absent
        detail: Explanation specific to this occurrence
        instance: URI identifying this occurrence
        extra: Every other member of the body
    """

    type: str = DEFAULT_PROBLEM_TYPE
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


def parse_problem(data: Any, http_status: int | None = None) -> Problem:
    """Build a Problem from a decoded problem+json body.

    A body that is not a JSON object is treated as empty, so the result
    still carries the HTTP status.
    """
    if not isinstance(data, dict):
        data = {}

    status = data.get("status")
    if status is None:
        status = http_status

    return Problem(
        type=data.get("type") or DEFAULT_PROBLEM_TYPE,
        title=data.get("title"),
        status=status,
        detail=data.get("detail"),
        instance=data.get("instance"),
        extra={key: value for key, value in data.items() if key not in PROBLEM_MEMBERS},
    )
