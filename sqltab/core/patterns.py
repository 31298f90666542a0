"""Completion patterns: what the dispatcher hands to a provider.

Each pattern is an immutable value tagged with a :class:`ProviderKind`; the
session looks the kind up in the provider registry instead of branching on
the pattern type.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union


class ProviderKind(Enum):
    CONSTANT = "constant"
    LIST = "list"
    QUERY = "query"
    SCHEMA_QUERY = "schema_query"
    FILENAMES = "filenames"


@dataclass(frozen=True)
class SchemaQueryDescriptor:
    """Catalog lookup for objects that live in a schema.

    source_relation: relation to scan, with alias, e.g. ``pg_catalog.pg_class c``
    selection_condition: extra restriction on the relation, or None
    visibility_condition: true for objects reachable through the search path
    namespace_join_column: column joined to the namespace key
    result_expression: quoted name returned for unqualified candidates
    qualified_result_expression: name used after ``schema.``; None means
        ``result_expression``
    """
    source_relation: str
    selection_condition: Optional[str]
    visibility_condition: str
    namespace_join_column: str
    result_expression: str
    qualified_result_expression: Optional[str] = None

    @property
    def qualified_result(self) -> str:
        return self.qualified_result_expression or self.result_expression


@dataclass(frozen=True)
class Constant:
    text: str
    kind: ClassVar[ProviderKind] = ProviderKind.CONSTANT


@dataclass(frozen=True)
class StaticList:
    items: Tuple[str, ...]
    kind: ClassVar[ProviderKind] = ProviderKind.LIST

    def __init__(self, *items: str):
        object.__setattr__(self, "items", tuple(items))


@dataclass(frozen=True)
class SimpleQuery:
    """Query template with ``{length}``, ``{text}``, ``{info}`` and ``{info2}`` slots."""
    template: str
    params: Tuple[str, ...] = field(default=())
    kind: ClassVar[ProviderKind] = ProviderKind.QUERY

    def __post_init__(self):
        if len(self.params) > 2:
            raise ValueError("SimpleQuery takes at most two auxiliary parameters")


@dataclass(frozen=True)
class SchemaQuery:
    descriptor: SchemaQueryDescriptor
    extra_sql: Optional[str] = None
    kind: ClassVar[ProviderKind] = ProviderKind.SCHEMA_QUERY


@dataclass(frozen=True)
class Filenames:
    kind: ClassVar[ProviderKind] = ProviderKind.FILENAMES


Pattern = Union[Constant, StaticList, SimpleQuery, SchemaQuery, Filenames]
PATTERN_TYPES = (Constant, StaticList, SimpleQuery, SchemaQuery, Filenames)

# Offers nothing but still counts as an answer, so the front end does not
# fall back to its own default completion.
EMPTY = Constant("")

__all__ = [
    'ProviderKind', 'SchemaQueryDescriptor', 'Constant', 'StaticList', 'SimpleQuery',
    'SchemaQuery', 'Filenames', 'Pattern', 'PATTERN_TYPES', 'EMPTY'
]
