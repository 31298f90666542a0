"""Catalog lookups used by the completion rules (PostgreSQL, with DuckDB stand-ins).

Simple query templates take ``{length}`` (length of the typed text) and
``{text}`` (the typed text, escaped). Some also take ``{info}`` and
``{info2}``, escaped values picked from previous words. Lookups that only
need a previous word compare ``{length}`` with the length of ``{text}`` so
the typed word does not filter them.
"""
from __future__ import annotations
from typing import NamedTuple, Optional

from sqltab.core.dialect import CatalogDialect
from sqltab.core.patterns import Pattern, SchemaQuery, SchemaQueryDescriptor, SimpleQuery


# --- schema-qualified lookups --------------------------------------------------

AGGREGATES = SchemaQueryDescriptor(
    "pg_catalog.pg_proc p",
    "p.proisagg",
    "pg_catalog.pg_function_is_visible(p.oid)",
    "p.pronamespace",
    "pg_catalog.quote_ident(p.proname)",
)

DATATYPES = SchemaQueryDescriptor(
    "pg_catalog.pg_type t",
    # no relation row types (except composites) and no array types
    "(t.typrelid = 0 "
    " OR (SELECT c.relkind = 'c' FROM pg_catalog.pg_class c WHERE c.oid = t.typrelid)) "
    "AND t.typname !~ '^_'",
    "pg_catalog.pg_type_is_visible(t.oid)",
    "t.typnamespace",
    "pg_catalog.format_type(t.oid, NULL)",
    "pg_catalog.quote_ident(t.typname)",
)

DOMAINS = SchemaQueryDescriptor(
    "pg_catalog.pg_type t",
    "t.typtype = 'd'",
    "pg_catalog.pg_type_is_visible(t.oid)",
    "t.typnamespace",
    "pg_catalog.quote_ident(t.typname)",
)

FUNCTIONS = SchemaQueryDescriptor(
    "pg_catalog.pg_proc p",
    None,
    "pg_catalog.pg_function_is_visible(p.oid)",
    "p.pronamespace",
    "pg_catalog.quote_ident(p.proname)",
)


def _relations(selection: Optional[str]) -> SchemaQueryDescriptor:
    return SchemaQueryDescriptor(
        "pg_catalog.pg_class c",
        selection,
        "pg_catalog.pg_table_is_visible(c.oid)",
        "c.relnamespace",
        "pg_catalog.quote_ident(c.relname)",
    )


def _writable(trigger_bit: int) -> str:
    # plain tables, or views with an INSTEAD trigger for the operation
    return (
        "(c.relkind = 'r' OR (c.relkind = 'v' AND c.relhastriggers AND EXISTS "
        "(SELECT 1 FROM pg_catalog.pg_trigger t WHERE t.tgrelid = c.oid "
        f"AND t.tgtype & (1 << {trigger_bit}) <> 0)))"
    )


INDEXES = _relations("c.relkind IN ('i')")
SEQUENCES = _relations("c.relkind IN ('S')")
FOREIGN_TABLES = _relations("c.relkind IN ('f')")
TABLES = _relations("c.relkind IN ('r')")
INSERTABLES = _relations(_writable(2))
DELETABLES = _relations(_writable(3))
UPDATABLES = _relations(_writable(4))
RELATIONS = _relations(None)
TSVF = _relations("c.relkind IN ('r', 'S', 'v', 'f')")
VIEWS = _relations("c.relkind IN ('v')")


# --- DuckDB equivalents of the relation lookups ---------------------------------

# one row per object of the current database, kinds named as in pg_class.relkind
_DUCKDB_OBJECTS = (
    "(SELECT schema_oid, schema_name, table_name AS name, 'r' AS kind FROM duckdb_tables()"
    " WHERE database_name = current_database()"
    " UNION ALL SELECT schema_oid, schema_name, view_name, 'v' FROM duckdb_views()"
    " WHERE database_name = current_database() AND NOT internal"
    " UNION ALL SELECT schema_oid, schema_name, index_name, 'i' FROM duckdb_indexes()"
    " WHERE database_name = current_database()"
    " UNION ALL SELECT schema_oid, schema_name, sequence_name, 'S' FROM duckdb_sequences()"
    " WHERE database_name = current_database()) c"
)


def _duckdb_objects(selection: Optional[str]) -> SchemaQueryDescriptor:
    return SchemaQueryDescriptor(
        _DUCKDB_OBJECTS, selection, "c.schema_name = current_schema()", "c.schema_oid", "c.name")


_DUCKDB_TABLES = _duckdb_objects("c.kind = 'r'")

# DuckDB views are read-only, so only tables take INSERT, UPDATE and DELETE
DUCKDB = CatalogDialect(
    namespace_relation=(
        "(SELECT oid, schema_name FROM duckdb_schemas()"
        " WHERE database_name = current_database())"
    ),
    namespace_name="schema_name",
    namespace_key="oid",
    quote_ident="",
    count_function="count",
    length_function="length",
    system_relation="",
    system_namespace_column="",
    descriptors={
        RELATIONS: _duckdb_objects(None),
        TABLES: _DUCKDB_TABLES,
        INSERTABLES: _DUCKDB_TABLES,
        DELETABLES: _DUCKDB_TABLES,
        UPDATABLES: _DUCKDB_TABLES,
        VIEWS: _duckdb_objects("c.kind = 'v'"),
        INDEXES: _duckdb_objects("c.kind = 'i'"),
        SEQUENCES: _duckdb_objects("c.kind = 'S'"),
        TSVF: _duckdb_objects("c.kind IN ('r', 'S', 'v')"),
    },
)


# --- simple query templates ---------------------------------------------------

ATTRIBUTES = (
    "SELECT pg_catalog.quote_ident(attname) "
    "  FROM pg_catalog.pg_attribute a, pg_catalog.pg_class c "
    " WHERE c.oid = a.attrelid "
    "   AND a.attnum > 0 "
    "   AND NOT a.attisdropped "
    "   AND substring(pg_catalog.quote_ident(attname),1,{length})='{text}' "
    "   AND (pg_catalog.quote_ident(relname)='{info}' "
    "        OR '\"' || relname || '\"'='{info}') "
    "   AND pg_catalog.pg_table_is_visible(c.oid)"
)

ATTRIBUTES_WITH_SCHEMA = (
    "SELECT pg_catalog.quote_ident(attname) "
    "  FROM pg_catalog.pg_attribute a, pg_catalog.pg_class c, pg_catalog.pg_namespace n "
    " WHERE c.oid = a.attrelid "
    "   AND n.oid = c.relnamespace "
    "   AND a.attnum > 0 "
    "   AND NOT a.attisdropped "
    "   AND substring(pg_catalog.quote_ident(attname),1,{length})='{text}' "
    "   AND (pg_catalog.quote_ident(relname)='{info}' "
    "        OR '\"' || relname || '\"' ='{info}') "
    "   AND (pg_catalog.quote_ident(nspname)='{info2}' "
    "        OR '\"' || nspname || '\"' ='{info2}') "
)

TEMPLATE_DATABASES = (
    "SELECT pg_catalog.quote_ident(datname) FROM pg_catalog.pg_database "
    " WHERE substring(pg_catalog.quote_ident(datname),1,{length})='{text}' AND datistemplate"
)

DATABASES = (
    "SELECT pg_catalog.quote_ident(datname) FROM pg_catalog.pg_database "
    " WHERE substring(pg_catalog.quote_ident(datname),1,{length})='{text}'"
)

TABLESPACES = (
    "SELECT pg_catalog.quote_ident(spcname) FROM pg_catalog.pg_tablespace "
    " WHERE substring(pg_catalog.quote_ident(spcname),1,{length})='{text}'"
)

ENCODINGS = (
    " SELECT DISTINCT pg_catalog.pg_encoding_to_char(conforencoding) "
    "   FROM pg_catalog.pg_conversion "
    "  WHERE substring(pg_catalog.pg_encoding_to_char(conforencoding),1,{length})=UPPER('{text}')"
)

LANGUAGES = (
    "SELECT pg_catalog.quote_ident(lanname) "
    "  FROM pg_catalog.pg_language "
    " WHERE lanname != 'internal' "
    "   AND substring(pg_catalog.quote_ident(lanname),1,{length})='{text}'"
)

SCHEMAS = (
    "SELECT pg_catalog.quote_ident(nspname) FROM pg_catalog.pg_namespace "
    " WHERE substring(pg_catalog.quote_ident(nspname),1,{length})='{text}'"
)

SET_VARS = (
    "SELECT name FROM "
    " (SELECT pg_catalog.lower(name) AS name FROM pg_catalog.pg_settings "
    "  WHERE context IN ('user', 'superuser') "
    "  UNION ALL SELECT 'constraints' "
    "  UNION ALL SELECT 'transaction' "
    "  UNION ALL SELECT 'session' "
    "  UNION ALL SELECT 'role' "
    "  UNION ALL SELECT 'tablespace' "
    "  UNION ALL SELECT 'all') ss "
    " WHERE substring(name,1,{length})='{text}'"
)

SHOW_VARS = (
    "SELECT name FROM "
    " (SELECT pg_catalog.lower(name) AS name FROM pg_catalog.pg_settings "
    "  UNION ALL SELECT 'session authorization' "
    "  UNION ALL SELECT 'all') ss "
    " WHERE substring(name,1,{length})='{text}'"
)

ROLES = (
    " SELECT pg_catalog.quote_ident(rolname) "
    "   FROM pg_catalog.pg_roles "
    "  WHERE substring(pg_catalog.quote_ident(rolname),1,{length})='{text}'"
)

GRANT_ROLES = ROLES + " UNION ALL SELECT 'PUBLIC'"

INDEX_OF_TABLE = (
    "SELECT pg_catalog.quote_ident(c2.relname) "
    "  FROM pg_catalog.pg_class c1, pg_catalog.pg_class c2, pg_catalog.pg_index i"
    " WHERE c1.oid=i.indrelid and i.indexrelid=c2.oid"
    "       and ({length} = pg_catalog.length('{text}'))"
    "       and pg_catalog.quote_ident(c1.relname)='{info}'"
    "       and pg_catalog.pg_table_is_visible(c2.oid)"
)

TABLES_FOR_TRIGGER = (
    "SELECT pg_catalog.quote_ident(relname) "
    "  FROM pg_catalog.pg_class"
    " WHERE ({length} = pg_catalog.length('{text}'))"
    "   AND oid IN "
    "       (SELECT tgrelid FROM pg_catalog.pg_trigger "
    "         WHERE pg_catalog.quote_ident(tgname)='{info}')"
)

TS_CONFIGURATIONS = (
    "SELECT pg_catalog.quote_ident(cfgname) FROM pg_catalog.pg_ts_config "
    " WHERE substring(pg_catalog.quote_ident(cfgname),1,{length})='{text}'"
)

TS_DICTIONARIES = (
    "SELECT pg_catalog.quote_ident(dictname) FROM pg_catalog.pg_ts_dict "
    " WHERE substring(pg_catalog.quote_ident(dictname),1,{length})='{text}'"
)

TS_PARSERS = (
    "SELECT pg_catalog.quote_ident(prsname) FROM pg_catalog.pg_ts_parser "
    " WHERE substring(pg_catalog.quote_ident(prsname),1,{length})='{text}'"
)

TS_TEMPLATES = (
    "SELECT pg_catalog.quote_ident(tmplname) FROM pg_catalog.pg_ts_template "
    " WHERE substring(pg_catalog.quote_ident(tmplname),1,{length})='{text}'"
)

FDWS = (
    " SELECT pg_catalog.quote_ident(fdwname) "
    "   FROM pg_catalog.pg_foreign_data_wrapper "
    "  WHERE substring(pg_catalog.quote_ident(fdwname),1,{length})='{text}'"
)

SERVERS = (
    " SELECT pg_catalog.quote_ident(srvname) "
    "   FROM pg_catalog.pg_foreign_server "
    "  WHERE substring(pg_catalog.quote_ident(srvname),1,{length})='{text}'"
)

USER_MAPPINGS = (
    " SELECT pg_catalog.quote_ident(usename) "
    "   FROM pg_catalog.pg_user_mappings "
    "  WHERE substring(pg_catalog.quote_ident(usename),1,{length})='{text}'"
)

ACCESS_METHODS = (
    " SELECT pg_catalog.quote_ident(amname) "
    "   FROM pg_catalog.pg_am "
    "  WHERE substring(pg_catalog.quote_ident(amname),1,{length})='{text}'"
)

# argument lists of the function named in {info}
ARGUMENTS = (
    " SELECT pg_catalog.oidvectortypes(proargtypes)||')' "
    "   FROM pg_catalog.pg_proc "
    "  WHERE proname='{info}'"
)

EXTENSIONS = (
    " SELECT pg_catalog.quote_ident(extname) "
    "   FROM pg_catalog.pg_extension "
    "  WHERE substring(pg_catalog.quote_ident(extname),1,{length})='{text}'"
)

AVAILABLE_EXTENSIONS = (
    " SELECT pg_catalog.quote_ident(name) "
    "   FROM pg_catalog.pg_available_extensions "
    "  WHERE substring(pg_catalog.quote_ident(name),1,{length})='{text}' AND installed_version IS NULL"
)

PREPARED_STATEMENTS = (
    " SELECT pg_catalog.quote_ident(name) "
    "   FROM pg_catalog.pg_prepared_statements "
    "  WHERE substring(pg_catalog.quote_ident(name),1,{length})='{text}'"
)

COLLATIONS = (
    "SELECT pg_catalog.quote_ident(collname) FROM pg_catalog.pg_collation "
    "WHERE collencoding IN (-1, pg_catalog.pg_char_to_encoding(pg_catalog.getdatabaseencoding())) "
    "AND substring(pg_catalog.quote_ident(collname),1,{length})='{text}'"
)

CONVERSIONS = (
    "SELECT pg_catalog.quote_ident(conname) FROM pg_catalog.pg_conversion "
    "WHERE substring(pg_catalog.quote_ident(conname),1,{length})='{text}'"
)

RULE_NAMES = (
    "SELECT pg_catalog.quote_ident(rulename) FROM pg_catalog.pg_rules "
    "WHERE substring(pg_catalog.quote_ident(rulename),1,{length})='{text}'"
)

TRIGGER_NAMES = (
    "SELECT pg_catalog.quote_ident(tgname) FROM pg_catalog.pg_trigger "
    "WHERE substring(pg_catalog.quote_ident(tgname),1,{length})='{text}'"
)

LISTENING_CHANNELS = (
    "SELECT pg_catalog.quote_ident(channel) "
    "FROM pg_catalog.pg_listening_channels() AS channel "
    "WHERE substring(pg_catalog.quote_ident(channel),1,{length})='{text}'"
)


# --- things that follow CREATE / DROP -------------------------------------------

NO_CREATE = 1 << 0
NO_DROP = 1 << 1
NO_SHOW = NO_CREATE | NO_DROP


class Thing(NamedTuple):
    name: str
    pattern: Optional[Pattern] = None
    flags: int = 0


WORDS_AFTER_CREATE = (
    Thing("AGGREGATE", SchemaQuery(AGGREGATES)),
    Thing("CAST"),
    Thing("COLLATION", SimpleQuery(COLLATIONS)),
    Thing("CONFIGURATION", SimpleQuery(TS_CONFIGURATIONS), NO_SHOW),
    Thing("CONVERSION", SimpleQuery(CONVERSIONS)),
    Thing("DATABASE", SimpleQuery(DATABASES)),
    Thing("DICTIONARY", SimpleQuery(TS_DICTIONARIES), NO_SHOW),
    Thing("DOMAIN", SchemaQuery(DOMAINS)),
    Thing("EXTENSION", SimpleQuery(EXTENSIONS)),
    Thing("FOREIGN DATA WRAPPER"),
    Thing("FOREIGN TABLE"),
    Thing("FUNCTION", SchemaQuery(FUNCTIONS)),
    Thing("GROUP", SimpleQuery(ROLES)),
    Thing("LANGUAGE", SimpleQuery(LANGUAGES)),
    Thing("INDEX", SchemaQuery(INDEXES)),
    Thing("OPERATOR"),
    Thing("OWNED", None, NO_CREATE),
    Thing("PARSER", SimpleQuery(TS_PARSERS), NO_SHOW),
    Thing("ROLE", SimpleQuery(ROLES)),
    Thing("RULE", SimpleQuery(RULE_NAMES)),
    Thing("SCHEMA", SimpleQuery(SCHEMAS)),
    Thing("SEQUENCE", SchemaQuery(SEQUENCES)),
    Thing("SERVER", SimpleQuery(SERVERS)),
    Thing("TABLE", SchemaQuery(TABLES)),
    Thing("TABLESPACE", SimpleQuery(TABLESPACES)),
    Thing("TEMP", None, NO_DROP),
    Thing("TEMPLATE", SimpleQuery(TS_TEMPLATES), NO_SHOW),
    Thing("TEXT SEARCH"),
    Thing("TRIGGER", SimpleQuery(TRIGGER_NAMES)),
    Thing("TYPE", SchemaQuery(DATATYPES)),
    Thing("UNIQUE", None, NO_DROP),
    Thing("UNLOGGED", None, NO_DROP),
    Thing("USER", SimpleQuery(ROLES)),
    Thing("USER MAPPING FOR"),
    Thing("VIEW", SchemaQuery(VIEWS)),
)


def thing_names(excluded: int):
    """Names from WORDS_AFTER_CREATE whose flags do not intersect ``excluded``."""
    return tuple(thing.name for thing in WORDS_AFTER_CREATE if not thing.flags & excluded)


def thing_for(word: str) -> Optional[Thing]:
    wanted = word.lower()
    for thing in WORDS_AFTER_CREATE:
        if thing.name.lower() == wanted:
            return thing
    return None
