"""Map a parsed Siren document onto the navigable resource graph.

For the document and, recursively, every embedded representation:

    1. Split sub-entities into embedded links and embedded representations,
       each keeping the relative order of the original list.
    2. Wrap embedded links; recurse into embedded representations.
    3. Wrap navigational links.
    4. Key actions by name. A later action with the same name replaces an
       earlier one.
    5. Assemble the node with its classes (and rels for representations).

Every href is resolved against the URL of the fetched document. Embedded
representations have no address of their own, so the base never shifts
while recursing. Nesting depth is not limited.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from .documents import (
    SirenAction,
    SirenEmbeddedLink,
    SirenEmbeddedRepresentation,
    SirenEntity,
    SirenField,
    SirenResponse,
)
from .resource import Action, EmbeddedRepresentation, Field, Link, Resource
from .urls import resolve_url

if TYPE_CHECKING:
    from ..client import SirenClient

_LOGGER = logging.getLogger(__name__)


def wrap_link(client: SirenClient | None, base_url: str, link: SirenEmbeddedLink) -> Link:
    """Wrap a wire link, resolving its href."""
    return Link(
        href=resolve_url(link.href, base_url),
        rel=tuple(link.rel),
        classes=tuple(link.classes),
        title=link.title,
        media_type=link.type,
        client=client,
    )


def wrap_field(field: SirenField) -> Field:
    return Field(
        name=field.name,
        input_type=field.type,
        value=field.value,
        title=field.title,
        classes=tuple(field.classes),
    )


def wrap_action(client: SirenClient | None, base_url: str, action: SirenAction) -> Action:
    """Wrap a wire action, resolving its href and keying its fields by name."""
    return Action(
        name=action.name,
        href=resolve_url(action.href, base_url),
        method=action.method,
        encoding=action.type,
        title=action.title,
        classes=tuple(action.classes),
        fields=MappingProxyType({field.name: wrap_field(field) for field in action.fields}),
        client=client,
    )


def _wrap_actions(client: SirenClient | None, base_url: str, actions: list[SirenAction]) -> Mapping[str, Action]:
    wrapped: dict[str, Action] = {}
    for action in actions:
        if action.name in wrapped:
            _LOGGER.debug("Duplicate action name %r, keeping the last one", action.name)
        wrapped[action.name] = wrap_action(client, base_url, action)
    return MappingProxyType(wrapped)


def _entity_members(client: SirenClient | None, base_url: str, entity: SirenEntity) -> dict:
    entity_links = [
        wrap_link(client, base_url, sub) for sub in entity.entities if isinstance(sub, SirenEmbeddedLink)
    ]
    entity_representations = [
        build_representation(client, base_url, sub)
        for sub in entity.entities
        if isinstance(sub, SirenEmbeddedRepresentation)
    ]
    return {
        "title": entity.title,
        "properties": entity.properties,
        "classes": tuple(entity.classes),
        "entity_links": tuple(entity_links),
        "entity_representations": tuple(entity_representations),
        "links": tuple(wrap_link(client, base_url, link) for link in entity.links),
        "actions": _wrap_actions(client, base_url, entity.actions),
    }


def build_representation(
    client: SirenClient | None,
    base_url: str,
    entity: SirenEmbeddedRepresentation,
) -> EmbeddedRepresentation:
    """Build an embedded representation, recursing into its own sub-entities."""
    return EmbeddedRepresentation(rel=tuple(entity.rel), **_entity_members(client, base_url, entity))


def build_resource(
    client: SirenClient | None,
    base_url: str,
    document: SirenResponse,
    status: int | None = None,
    headers: Mapping[str, str] | None = None,
) -> Resource:
    """Build the navigable Resource for a top-level document.

    Args:
        client: Client used when links are fetched or actions submitted
        base_url: URL the document was fetched from
        document: Parsed Siren document
        status: HTTP status of the exchange (None when built offline)
        headers: HTTP headers of the exchange

    Returns:
        Resource snapshot of the document.

    Raises:
        UrlResolutionError: If any href cannot be resolved against base_url.
    """
    resource = Resource(status=status, headers=headers, **_entity_members(client, base_url, document))
    _LOGGER.debug(
        "Built resource for %s: %d links, %d entity links, %d representations, %d actions",
        base_url,
        len(resource.links),
        len(resource.entity_links),
        len(resource.entity_representations),
        len(resource.actions),
    )
    return resource
