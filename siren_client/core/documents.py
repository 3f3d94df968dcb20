"""Pydantic models for the Siren wire format.

These models mirror the JSON a Siren server sends. Optional members are
filled with their Siren defaults here and nowhere else, so everything
downstream works with complete values:

    - absent (or null) class / rel / entities / links / actions / fields -> []
    - action method -> "GET"
    - action type -> "application/x-www-form-urlencoded"
    - field type -> "text"

Sub-entities are a tagged union. An entity carrying ``href`` is an embedded
link; anything else is an embedded representation. The check is made once,
by the ``entity_kind`` discriminator, before any other member is read.

Validating documents against the Siren schema is not a goal: unknown
members are ignored and only what the mapping needs is required.
"""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
)

from ..const import DEFAULT_ACTION_METHOD, DEFAULT_ACTION_TYPE, DEFAULT_FIELD_TYPE
from .exceptions import InvalidDocumentError

ENTITY_LINK = "link"
ENTITY_REPRESENTATION = "representation"


def _empty_if_none(value: Any) -> Any:
    return [] if value is None else value


def _or_default(default: str) -> BeforeValidator:
    return BeforeValidator(lambda value: default if value is None else value)


TagList = Annotated[list[str], BeforeValidator(_empty_if_none)]


class SirenModel(BaseModel):
    """Base for all wire models: immutable, accepts ``class`` or ``classes``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class SirenField(SirenModel):
    """A field within an action."""

    name: str
    type: Annotated[str, _or_default(DEFAULT_FIELD_TYPE)] = DEFAULT_FIELD_TYPE
    value: Any = None
    title: str | None = None
    classes: TagList = Field(default_factory=list, alias="class")


class SirenAction(SirenModel):
    """An action that can be performed on an entity."""

    name: str
    href: str
    method: Annotated[str, _or_default(DEFAULT_ACTION_METHOD)] = DEFAULT_ACTION_METHOD
    type: Annotated[str, _or_default(DEFAULT_ACTION_TYPE)] = DEFAULT_ACTION_TYPE
    title: str | None = None
    classes: TagList = Field(default_factory=list, alias="class")
    fields: Annotated[list[SirenField], BeforeValidator(_empty_if_none)] = Field(default_factory=list)


class SirenEmbeddedLink(SirenModel):
    """A navigational link, or a sub-entity that is only a link."""

    href: str
    type: str | None = None
    rel: TagList = Field(default_factory=list)
    classes: TagList = Field(default_factory=list, alias="class")
    title: str | None = None


class SirenEntity(SirenModel):
    """Members shared by top-level documents and embedded representations."""

    title: str | None = None
    properties: Any = None
    classes: TagList = Field(default_factory=list, alias="class")
    entities: Annotated[list[EmbeddedEntity], BeforeValidator(_empty_if_none)] = Field(default_factory=list)
    links: Annotated[list[SirenEmbeddedLink], BeforeValidator(_empty_if_none)] = Field(default_factory=list)
    actions: Annotated[list[SirenAction], BeforeValidator(_empty_if_none)] = Field(default_factory=list)


class SirenResponse(SirenEntity):
    """A top-level Siren document."""


class SirenEmbeddedRepresentation(SirenEntity):
    """A sub-entity carrying its own state, structured like a top-level document."""

    rel: TagList = Field(default_factory=list)


def entity_kind(value: Any) -> str:
    """Classify a sub-entity as an embedded link or an embedded representation.

    Presence of ``href`` is authoritative: an entity with an href is a link
    even if representation-only members are present too.
    """
    if isinstance(value, dict):
        return ENTITY_LINK if "href" in value else ENTITY_REPRESENTATION
    if isinstance(value, SirenEmbeddedLink):
        return ENTITY_LINK
    return ENTITY_REPRESENTATION


EmbeddedEntity = Annotated[
    Union[
        Annotated[SirenEmbeddedLink, Tag(ENTITY_LINK)],
        Annotated[SirenEmbeddedRepresentation, Tag(ENTITY_REPRESENTATION)],
    ],
    Discriminator(entity_kind),
]

SirenEntity.model_rebuild()
SirenResponse.model_rebuild()
SirenEmbeddedRepresentation.model_rebuild()

_ENTITY_ADAPTER: TypeAdapter[SirenEmbeddedLink | SirenEmbeddedRepresentation] = TypeAdapter(EmbeddedEntity)


def classify_entity(raw: Any) -> SirenEmbeddedLink | SirenEmbeddedRepresentation:
    """Parse a raw sub-entity into its link or representation model."""
    return _ENTITY_ADAPTER.validate_python(raw)


def parse_document(data: Any, url: str | None = None, status: int | None = None) -> SirenResponse:
    """Parse a decoded JSON body into a SirenResponse.

    Args:
        data: Decoded JSON body
        url: URL the document came from (for error context)
        status: HTTP status of the response (for error context)

    Raises:
        InvalidDocumentError: If the body is not an object or misses required members.
    """
    if not isinstance(data, dict):
        raise InvalidDocumentError(
            f"Siren document must be a JSON object, got {type(data).__name__}",
            url=url,
            status_code=status,
        )
    try:
        return SirenResponse.model_validate(data)
    except ValidationError as e:
        raise InvalidDocumentError(f"Invalid Siren document: {e}", url=url, status_code=status) from e
