"""Class and rel matching shared by resources, links, actions and fields.

Siren attaches two kinds of string tags to its elements: ``class`` (the
semantic type) and ``rel`` (the link relation). Both are matched the same
way; order and duplicates carry no meaning.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable


def has_value(tags: Collection[str], tag: str) -> bool:
    """Return True if tag is one of tags."""
    return tag in tags


def has_all_values(tags: Collection[str], query: Iterable[str]) -> bool:
    """Return True if every query value is in tags (True for an empty query)."""
    return all(value in tags for value in query)


def has_any_value(tags: Collection[str], query: Iterable[str]) -> bool:
    """Return True if at least one query value is in tags (False for an empty query)."""
    return any(value in tags for value in query)


class ClassMatcher:
    """Mixin adding class predicates to an object with a ``classes`` attribute."""

    classes: tuple[str, ...]

    def has_class(self, name: str) -> bool:
        return has_value(self.classes, name)

    def has_all_classes(self, names: Iterable[str]) -> bool:
        return has_all_values(self.classes, names)

    def has_any_class(self, names: Iterable[str]) -> bool:
        return has_any_value(self.classes, names)


class RelMatcher:
    """Mixin adding rel predicates to an object with a ``rel`` attribute."""

    rel: tuple[str, ...]

    def has_rel(self, rel: str) -> bool:
        return has_value(self.rel, rel)

    def has_all_rels(self, rels: Iterable[str]) -> bool:
        return has_all_values(self.rel, rels)

    def has_any_rel(self, rels: Iterable[str]) -> bool:
        return has_any_value(self.rel, rels)
