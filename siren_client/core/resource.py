"""Navigable resource graph built from a Siren document.

Every node is an immutable snapshot of one HTTP exchange. Links and actions
keep a reference to the client that built them, so following a link or
submitting an action issues a new request and returns a new Resource.
Nothing is fetched until the caller asks for it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..const import DEFAULT_ACTION_METHOD, DEFAULT_ACTION_TYPE, DEFAULT_FIELD_TYPE
from .capabilities import ClassMatcher, RelMatcher
from .submission import ActionTarget, Payload, build_action_request

if TYPE_CHECKING:
    from ..client import SirenClient


def _require_client(client: SirenClient | None, what: str) -> SirenClient:
    if client is None:
        raise RuntimeError(f"{what} is not bound to a client")
    return client


@dataclass(frozen=True)
class Field(ClassMatcher):
    """An input of an action."""

    name: str
    input_type: str = DEFAULT_FIELD_TYPE
    value: Any = None
    title: str | None = None
    classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Link(ClassMatcher, RelMatcher):
    """A navigational link or an embedded link, with an absolute href."""

    href: str
    rel: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    title: str | None = None
    media_type: str | None = None
    client: SirenClient | None = field(default=None, repr=False, compare=False)

    async def fetch(self) -> Resource:
        """GET the linked resource."""
        return await _require_client(self.client, "Link").get(self.href)


# Embedded links and navigational links share one shape.
EmbeddedLink = Link


@dataclass(frozen=True)
class Action(ClassMatcher):
    """A state transition the server offers, with its resolved target."""

    name: str
    href: str
    method: str = DEFAULT_ACTION_METHOD
    encoding: str = DEFAULT_ACTION_TYPE
    title: str | None = None
    classes: tuple[str, ...] = ()
    fields: Mapping[str, Field] = field(default_factory=dict)
    client: SirenClient | None = field(default=None, repr=False, compare=False)

    @property
    def target(self) -> ActionTarget:
        return ActionTarget(url=self.href, method=self.method, encoding=self.encoding)

    async def submit(self, payload: Payload | None = None) -> Resource:
        """Submit the action with the given field values.

        Args:
            payload: Mapping of field name to scalar value

        Returns:
            The Resource the server answers with.
        """
        client = _require_client(self.client, f"Action {self.name!r}")
        request = build_action_request(self.target, payload or {})
        return await client.submit(request.url, request.options)


@dataclass(frozen=True)
class Entity(ClassMatcher):
    """Members shared by top-level resources and embedded representations."""

    title: str | None = None
    properties: Any = None
    classes: tuple[str, ...] = ()
    entity_links: tuple[Link, ...] = ()
    entity_representations: tuple[EmbeddedRepresentation, ...] = ()
    links: tuple[Link, ...] = ()
    actions: Mapping[str, Action] = field(default_factory=dict)

    def find_link(self, rel: str) -> Link | None:
        """Return the first navigational link with the given rel."""
        return next((link for link in self.links if link.has_rel(rel)), None)

    def find_entity_link(self, rel: str) -> Link | None:
        """Return the first embedded link with the given rel."""
        return next((link for link in self.entity_links if link.has_rel(rel)), None)

    def find_representation(self, rel: str) -> EmbeddedRepresentation | None:
        """Return the first embedded representation with the given rel."""
        return next((entity for entity in self.entity_representations if entity.has_rel(rel)), None)


@dataclass(frozen=True)
class EmbeddedRepresentation(Entity, RelMatcher):
    """A sub-entity carrying its own state."""

    rel: tuple[str, ...] = ()


@dataclass(frozen=True)
class Resource(Entity):
    """A top-level resource, with the status and headers of its response.

    status and headers are None for resources built without an HTTP exchange.
    """

    status: int | None = None
    headers: Mapping[str, str] | None = field(default=None, compare=False)
