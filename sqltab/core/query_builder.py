"""Assembly of schema-qualified completion queries.

The query has three branches joined by UNION:

1. unqualified names visible on the search path;
2. ``schema.`` prefixes, only while several schemas still match the text;
3. ``schema.name`` forms, only once exactly one schema matches.

Every piece of user text goes through :func:`escape_literal`.
"""
from __future__ import annotations
from typing import Optional

from sqltab.core.dialect import CatalogDialect, POSTGRES
from sqltab.core.patterns import SchemaQueryDescriptor
from sqltab.core.sql_engine import escape_literal


def _unqualified(descriptor: SchemaQueryDescriptor, text: str, e_text: str, d: CatalogDialect) -> str:
    parts = [f"SELECT {descriptor.result_expression} FROM {descriptor.source_relation} WHERE "]
    if descriptor.selection_condition:
        parts.append(f"{descriptor.selection_condition} AND ")
    parts.append(f"substring({descriptor.result_expression},1,{len(text)})='{e_text}'")
    parts.append(f" AND {descriptor.visibility_condition}")
    # keep system catalogs out of the way unless asked for
    if descriptor.source_relation == d.system_relation and not text.startswith(d.system_prefix):
        e_schema = escape_literal(d.system_schema, d.escape_backslashes)
        parts.append(
            f" AND {d.system_namespace_column} <> (SELECT {d.namespace_key} FROM"
            f" {d.namespace_relation} WHERE {d.namespace_name} = '{e_schema}')"
        )
    return "".join(parts)


def _schema_match_count(text: str, e_text: str, d: CatalogDialect, alias: str = "") -> str:
    """Condition comparing a namespace's ``name.`` prefix with the typed text."""
    name = f"{alias}{d.namespace_name}"
    q = d.qualifier
    return (
        f"substring({d.quoted(name)} || '{q}',1,{len(text)}) ="
        f" substring('{e_text}',1,{d.length_function}({d.quoted(name)})+1)"
    )


def _schema_names(text: str, e_text: str, d: CatalogDialect) -> str:
    n = f"{d.namespace_alias}."
    q = d.qualifier
    return (
        f"SELECT {d.quoted(n + d.namespace_name)} || '{q}' "
        f"FROM {d.namespace_relation} {d.namespace_alias} "
        f"WHERE substring({d.quoted(n + d.namespace_name)} || '{q}',1,{len(text)})='{e_text}'"
        f" AND (SELECT {d.count_function}(*)"
        f" FROM {d.namespace_relation}"
        f" WHERE {_schema_match_count(text, e_text, d)}) > 1"
    )


def _qualified(descriptor: SchemaQueryDescriptor, text: str, e_text: str, d: CatalogDialect) -> str:
    n = f"{d.namespace_alias}."
    q = d.qualifier
    qualified = f"{d.quoted(n + d.namespace_name)} || '{q}' || {descriptor.qualified_result}"
    parts = [
        f"SELECT {qualified} "
        f"FROM {descriptor.source_relation}, {d.namespace_relation} {d.namespace_alias} "
        f"WHERE {descriptor.namespace_join_column} = {n}{d.namespace_key} AND "
    ]
    if descriptor.selection_condition:
        parts.append(f"{descriptor.selection_condition} AND ")
    parts.append(f"substring({qualified},1,{len(text)})='{e_text}'")
    parts.append(f" AND {_schema_match_count(text, e_text, d, alias=n)}")
    parts.append(
        f" AND (SELECT {d.count_function}(*)"
        f" FROM {d.namespace_relation}"
        f" WHERE {_schema_match_count(text, e_text, d)}) = 1"
    )
    return "".join(parts)


def build_schema_query(descriptor: SchemaQueryDescriptor, text: str,
                       extra_sql: Optional[str] = None,
                       dialect: CatalogDialect = POSTGRES) -> str:
    """Build the candidate query for ``descriptor`` and the typed ``text``.

    ``extra_sql`` is appended as is, typically ``UNION SELECT 'KEYWORD'``
    branches. The row cap is added by the caller.
    """
    descriptor = dialect.descriptor_for(descriptor)
    e_text = escape_literal(text, dialect.escape_backslashes)
    query = "\nUNION\n".join([
        _unqualified(descriptor, text, e_text, dialect),
        _schema_names(text, e_text, dialect),
        _qualified(descriptor, text, e_text, dialect),
    ])
    if extra_sql:
        query += f"\n{extra_sql}"
    return query


__all__ = ['build_schema_query']
