"""Catalog naming conventions used when assembling completion queries."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from sqltab.core.patterns import SchemaQueryDescriptor
from sqltab.utils.constants import DEFAULT_MAX_RECORDS, DEFAULT_SYSTEM_SCHEMA, DEFAULT_SYSTEM_PREFIX


@dataclass(frozen=True)
class CatalogDialect:
    """Names of the catalog objects and functions the schema query relies on.

    The defaults describe the PostgreSQL system catalogs. Tests and other
    engines can point the same query shape at their own tables, and
    ``descriptors`` swaps individual lookups for engine-specific ones.
    An empty ``quote_ident`` leaves names unquoted.
    """
    namespace_relation: str = "pg_catalog.pg_namespace"
    namespace_alias: str = "n"
    namespace_name: str = "nspname"
    namespace_key: str = "oid"
    quote_ident: str = "pg_catalog.quote_ident"
    count_function: str = "pg_catalog.count"
    length_function: str = "pg_catalog.length"
    qualifier: str = "."
    # relation whose objects are filtered out of the system schema
    system_relation: str = "pg_catalog.pg_class c"
    system_namespace_column: str = "c.relnamespace"
    system_schema: str = DEFAULT_SYSTEM_SCHEMA
    system_prefix: str = DEFAULT_SYSTEM_PREFIX
    max_records: int = DEFAULT_MAX_RECORDS
    escape_backslashes: bool = False
    descriptors: Optional[Mapping[SchemaQueryDescriptor, SchemaQueryDescriptor]] = field(
        default=None, compare=False)

    def quoted(self, expression: str) -> str:
        if not self.quote_ident:
            return expression
        return f"{self.quote_ident}({expression})"

    def descriptor_for(self, descriptor: SchemaQueryDescriptor) -> SchemaQueryDescriptor:
        if not self.descriptors:
            return descriptor
        return self.descriptors.get(descriptor, descriptor)

    def with_options(self, **changes) -> "CatalogDialect":
        return replace(self, **changes)

    @classmethod
    def from_config(cls, cfg=None, base: Optional["CatalogDialect"] = None) -> "CatalogDialect":
        """Apply values from a :class:`Config` to ``base`` (the PostgreSQL dialect by default)."""
        if cfg is None:
            from sqltab.utils.config import config as cfg
        return replace(
            base or cls(),
            system_schema=cfg.get("system_schema", DEFAULT_SYSTEM_SCHEMA),
            system_prefix=cfg.get("system_prefix", DEFAULT_SYSTEM_PREFIX),
            max_records=cfg.max_records(),
            escape_backslashes=bool(cfg.get("escape_backslashes", False)),
        )


POSTGRES = CatalogDialect()

__all__ = ['CatalogDialect', 'POSTGRES']
