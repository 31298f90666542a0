"""The completion rule table.

Rules are tried top to bottom and the first one whose predicate holds picks
the pattern. Order matters: several rules are only correct because a more
specific rule above them already claimed the input.
"""
from __future__ import annotations
from typing import Optional

from sqltab.core import catalog
from sqltab.core.dispatcher import (
    DispatchContext, Rule, always, attributes, both, branch, char_at, either, ends_with,
    exact, match, not_, query_about, starts_with, variables,
)
from sqltab.core.patterns import Constant, Filenames, Pattern, SchemaQuery, SimpleQuery, StaticList

SQL_COMMANDS = (
    "ABORT", "ALTER", "ANALYZE", "BEGIN", "CHECKPOINT", "CLOSE", "CLUSTER",
    "COMMENT", "COMMIT", "COPY", "CREATE", "DEALLOCATE", "DECLARE",
    "DELETE FROM", "DISCARD", "DO", "DROP", "END", "EXECUTE", "EXPLAIN", "FETCH",
    "GRANT", "INSERT", "LISTEN", "LOAD", "LOCK", "MOVE", "NOTIFY", "PREPARE",
    "REASSIGN", "REINDEX", "RELEASE", "RESET", "REVOKE", "ROLLBACK",
    "SAVEPOINT", "SECURITY LABEL", "SELECT", "SET", "SHOW", "START",
    "TABLE", "TRUNCATE", "UNLISTEN", "UPDATE", "VACUUM", "VALUES", "WITH",
)

BACKSLASH_COMMANDS = (
    "\\a", "\\connect", "\\conninfo", "\\C", "\\cd", "\\copy", "\\copyright",
    "\\d", "\\da", "\\db", "\\dc", "\\dC", "\\dd", "\\dD", "\\des", "\\det", "\\deu", "\\dew", "\\df",
    "\\dF", "\\dFd", "\\dFp", "\\dFt", "\\dg", "\\di", "\\dl", "\\dL",
    "\\dn", "\\do", "\\dp", "\\drds", "\\ds", "\\dS", "\\dt", "\\dT", "\\dv", "\\du",
    "\\e", "\\echo", "\\ef", "\\encoding",
    "\\f", "\\g", "\\h", "\\help", "\\H", "\\i", "\\ir", "\\l",
    "\\lo_import", "\\lo_export", "\\lo_list", "\\lo_unlink",
    "\\o", "\\p", "\\password", "\\prompt", "\\pset", "\\q", "\\qecho", "\\r",
    "\\set", "\\sf", "\\t", "\\T",
    "\\timing", "\\unset", "\\x", "\\w", "\\z", "\\!",
)

FILENAME_COMMANDS = (
    "\\cd", "\\e", "\\edit", "\\g", "\\i", "\\include", "\\ir", "\\include_relative",
    "\\o", "\\out", "\\s", "\\w", "\\write",
)

CREATE_THINGS = StaticList(*catalog.thing_names(catalog.NO_CREATE))
DROP_THINGS = StaticList(*catalog.thing_names(catalog.NO_DROP))

AGGREGATES = SchemaQuery(catalog.AGGREGATES)
DATATYPES = SchemaQuery(catalog.DATATYPES)
DOMAINS = SchemaQuery(catalog.DOMAINS)
FUNCTIONS = SchemaQuery(catalog.FUNCTIONS)
INDEXES = SchemaQuery(catalog.INDEXES)
SEQUENCES = SchemaQuery(catalog.SEQUENCES)
FOREIGN_TABLES = SchemaQuery(catalog.FOREIGN_TABLES)
TABLES = SchemaQuery(catalog.TABLES)
INSERTABLES = SchemaQuery(catalog.INSERTABLES)
DELETABLES = SchemaQuery(catalog.DELETABLES)
UPDATABLES = SchemaQuery(catalog.UPDATABLES)
RELATIONS = SchemaQuery(catalog.RELATIONS)
TSVF = SchemaQuery(catalog.TSVF)
VIEWS = SchemaQuery(catalog.VIEWS)

ROLES = SimpleQuery(catalog.ROLES)
DATABASES = SimpleQuery(catalog.DATABASES)
TABLESPACES = SimpleQuery(catalog.TABLESPACES)

TEXT_SEARCH_OBJECTS = StaticList("CONFIGURATION", "DICTIONARY", "PARSER", "TEMPLATE")
OWNER_RENAME_SCHEMA = StaticList("OWNER TO", "RENAME TO", "SET SCHEMA")
EXPLAINABLE = ("SELECT", "INSERT", "DELETE", "UPDATE", "DECLARE")

TABLE_STORAGE_OPTIONS = StaticList(
    "autovacuum_analyze_scale_factor",
    "autovacuum_analyze_threshold",
    "autovacuum_enabled",
    "autovacuum_freeze_max_age",
    "autovacuum_freeze_min_age",
    "autovacuum_freeze_table_age",
    "autovacuum_vacuum_cost_delay",
    "autovacuum_vacuum_cost_limit",
    "autovacuum_vacuum_scale_factor",
    "autovacuum_vacuum_threshold",
    "fillfactor",
    "toast.autovacuum_enabled",
    "toast.autovacuum_freeze_max_age",
    "toast.autovacuum_freeze_min_age",
    "toast.autovacuum_freeze_table_age",
    "toast.autovacuum_vacuum_cost_delay",
    "toast.autovacuum_vacuum_cost_limit",
    "toast.autovacuum_vacuum_scale_factor",
    "toast.autovacuum_vacuum_threshold",
)

_altered_column = either(
    match(w3="ALTER", w2="COLUMN"),
    match(w4="TABLE", w2="ALTER"),
)


def _column_alter(w1):
    """ALTER TABLE ... ALTER [COLUMN] <col> followed by ``w1``."""
    return either(
        match(w4="ALTER", w3="COLUMN", w1=w1),
        match(w5="TABLE", w3="ALTER", w1=w1),
    )


def _column_alter_set(w1):
    return either(
        match(w5="ALTER", w4="COLUMN", w2="SET", w1=w1),
        match(w4="ALTER", w2="SET", w1=w1),
    )


_ROLE_KINDS = ("ROLE", "GROUP", "USER")
_TXN_START = ("SET", "BEGIN", "START")


RULES = (
    Rule("backslash_command", match(text=starts_with("\\")), StaticList(*BACKSLASH_COMMANDS)),
    Rule("variable_interpolation",
         match(text=lambda t: t.startswith(":") and not t.startswith("::")),
         branch(
             (match(text=starts_with(":'")), variables(":'", "'")),
             (match(text=starts_with(':"')), variables(':"', '"')),
             (always, variables(":", "")),
         )),
    Rule("first_word", match(w1=""), StaticList(*SQL_COMMANDS)),

    # CREATE / DROP
    Rule("create", match(w1="CREATE"), CREATE_THINGS),
    Rule("drop", match(w1="DROP", w2=""), DROP_THINGS),

    # ALTER
    Rule("alter", match(w1="ALTER", w3=not_("TABLE")), StaticList(
        "AGGREGATE", "COLLATION", "CONVERSION", "DATABASE", "DEFAULT PRIVILEGES", "DOMAIN",
        "EXTENSION", "FOREIGN DATA WRAPPER", "FOREIGN TABLE", "FUNCTION",
        "GROUP", "INDEX", "LANGUAGE", "LARGE OBJECT", "OPERATOR",
        "ROLE", "SCHEMA", "SERVER", "SEQUENCE", "TABLE",
        "TABLESPACE", "TEXT SEARCH", "TRIGGER", "TYPE",
        "USER", "USER MAPPING FOR", "VIEW")),
    Rule("alter_function_name", match(w3="ALTER", w2=("AGGREGATE", "FUNCTION")), Constant("(")),
    Rule("alter_function_args", match(w4="ALTER", w3=("AGGREGATE", "FUNCTION")),
         branch(
             (match(w1=ends_with(")")), OWNER_RENAME_SCHEMA),
             (always, query_about(catalog.ARGUMENTS, 2)),
         )),
    Rule("alter_schema", match(w3="ALTER", w2="SCHEMA"), StaticList("OWNER TO", "RENAME TO")),
    Rule("alter_collation", match(w3="ALTER", w2="COLLATION"), OWNER_RENAME_SCHEMA),
    Rule("alter_conversion", match(w3="ALTER", w2="CONVERSION"), OWNER_RENAME_SCHEMA),
    Rule("alter_database", match(w3="ALTER", w2="DATABASE"),
         StaticList("RESET", "SET", "OWNER TO", "RENAME TO", "CONNECTION LIMIT")),
    Rule("alter_extension", match(w3="ALTER", w2="EXTENSION"),
         StaticList("ADD", "DROP", "UPDATE", "SET SCHEMA")),
    Rule("alter_foreign", match(w2="ALTER", w1="FOREIGN"), StaticList("DATA WRAPPER", "TABLE")),
    Rule("alter_fdw", match(w5="ALTER", w4="FOREIGN", w3="DATA", w2="WRAPPER"),
         StaticList("HANDLER", "VALIDATOR", "OPTIONS", "OWNER TO")),
    Rule("alter_foreign_table", match(w4="ALTER", w3="FOREIGN", w2="TABLE"),
         StaticList("ALTER", "DROP", "RENAME", "OWNER TO", "SET SCHEMA")),
    Rule("alter_index", match(w3="ALTER", w2="INDEX"),
         StaticList("OWNER TO", "RENAME TO", "SET", "RESET")),
    Rule("alter_index_set", match(w4="ALTER", w3="INDEX", w1="SET"), StaticList("(", "TABLESPACE")),
    Rule("alter_index_reset", match(w4="ALTER", w3="INDEX", w1="RESET"), Constant("(")),
    Rule("alter_index_options", match(w5="ALTER", w4="INDEX", w2=("SET", "RESET"), w1="("),
         StaticList("fillfactor", "fastupdate")),
    Rule("alter_language", match(w3="ALTER", w2="LANGUAGE"), StaticList("OWNER TO", "RENAME TO")),
    Rule("alter_large_object", match(w4="ALTER", w3="LARGE", w2="OBJECT"), StaticList("OWNER TO")),
    Rule("alter_role",
         both(match(w3="ALTER", w2=("USER", "ROLE")),
              lambda ctx: not (ctx.word(2).upper() == "USER" and ctx.word(1).upper() == "MAPPING")),
         StaticList(
             "CONNECTION LIMIT", "CREATEDB", "CREATEROLE", "CREATEUSER",
             "ENCRYPTED", "INHERIT", "LOGIN", "NOCREATEDB", "NOCREATEROLE",
             "NOCREATEUSER", "NOINHERIT", "NOLOGIN", "NOREPLICATION",
             "NOSUPERUSER", "RENAME TO", "REPLICATION", "RESET", "SET",
             "SUPERUSER", "UNENCRYPTED", "VALID UNTIL")),
    Rule("alter_role_password", match(w4="ALTER", w3=("ROLE", "USER"), w1=("ENCRYPTED", "UNENCRYPTED")),
         Constant("PASSWORD")),
    Rule("alter_default_privileges", match(w3="ALTER", w2="DEFAULT", w1="PRIVILEGES"),
         StaticList("FOR ROLE", "FOR USER", "IN SCHEMA")),
    Rule("alter_default_privileges_for", match(w4="ALTER", w3="DEFAULT", w2="PRIVILEGES", w1="FOR"),
         StaticList("ROLE", "USER")),
    Rule("alter_default_privileges_rest", match(w5="DEFAULT", w4="PRIVILEGES", w3=("FOR", "IN")),
         StaticList("GRANT", "REVOKE")),
    Rule("alter_domain", match(w3="ALTER", w2="DOMAIN"), StaticList("ADD", "DROP", "OWNER TO", "SET")),
    Rule("alter_domain_drop", match(w4="ALTER", w3="DOMAIN", w1="DROP"),
         StaticList("CONSTRAINT", "DEFAULT", "NOT NULL")),
    Rule("alter_domain_set", match(w4="ALTER", w3="DOMAIN", w1="SET"),
         StaticList("DEFAULT", "NOT NULL", "SCHEMA")),
    Rule("alter_sequence", match(w3="ALTER", w2="SEQUENCE"), StaticList(
        "INCREMENT", "MINVALUE", "MAXVALUE", "RESTART", "NO", "CACHE", "CYCLE",
        "SET SCHEMA", "OWNED BY", "OWNER TO", "RENAME TO")),
    Rule("alter_sequence_no", match(w4="ALTER", w3="SEQUENCE", w1="NO"),
         StaticList("MINVALUE", "MAXVALUE", "CYCLE")),
    Rule("alter_server", match(w3="ALTER", w2="SERVER"), StaticList("VERSION", "OPTIONS", "OWNER TO")),
    Rule("alter_view", match(w3="ALTER", w2="VIEW"),
         StaticList("ALTER COLUMN", "OWNER TO", "RENAME TO", "SET SCHEMA")),
    Rule("alter_trigger", match(w3="ALTER", w2="TRIGGER"), Constant("ON")),
    Rule("alter_trigger_on", match(w4="ALTER", w3="TRIGGER"),
         query_about(catalog.TABLES_FOR_TRIGGER, 2)),
    # shadowed by alter_trigger_on
    Rule("alter_trigger_on_table", match(w4="ALTER", w3="TRIGGER", w1="ON"), TABLES),
    Rule("alter_trigger_rename", match(w4="TRIGGER", w2="ON"), Constant("RENAME TO")),

    # ALTER TABLE
    Rule("alter_table", match(w3="ALTER", w2="TABLE"), StaticList(
        "ADD", "ALTER", "CLUSTER ON", "DISABLE", "DROP", "ENABLE", "INHERIT",
        "NO INHERIT", "RENAME", "RESET", "OWNER TO", "SET",
        "VALIDATE CONSTRAINT")),
    Rule("alter_table_enable", match(w4="ALTER", w3="TABLE", w1="ENABLE"),
         StaticList("ALWAYS", "REPLICA", "RULE", "TRIGGER")),
    Rule("alter_table_enable_mode", match(w4="TABLE", w2="ENABLE", w1=("REPLICA", "ALWAYS")),
         StaticList("RULE", "TRIGGER")),
    Rule("alter_table_disable", match(w4="ALTER", w3="TABLE", w1="DISABLE"),
         StaticList("RULE", "TRIGGER")),
    Rule("table_alter_column", match(w3="TABLE", w1=("ALTER", "RENAME")),
         attributes(2, " UNION SELECT 'COLUMN'")),
    Rule("table_alter_column_name", match(w4="TABLE", w2=("ALTER", "RENAME"), w1="COLUMN"),
         attributes(3)),
    Rule("table_rename_to", match(w4="TABLE", w2="RENAME", w1=not_("TO")), Constant("TO")),
    Rule("table_rename_column_to", match(w5="TABLE", w3="RENAME", w2="COLUMN", w1=not_("TO")),
         Constant("TO")),
    Rule("table_drop", match(w3="TABLE", w1="DROP"), StaticList("COLUMN", "CONSTRAINT")),
    Rule("table_drop_column", match(w4="TABLE", w2="DROP", w1="COLUMN"), attributes(3)),
    Rule("column_alter", _altered_column, StaticList("TYPE", "SET", "RESET", "DROP")),
    Rule("column_alter_set", _column_alter("SET"),
         StaticList("(", "DEFAULT", "NOT NULL", "STATISTICS", "STORAGE")),
    Rule("column_alter_set_options", _column_alter_set("("),
         StaticList("n_distinct", "n_distinct_inherited")),
    Rule("column_alter_set_storage", _column_alter_set("STORAGE"),
         StaticList("PLAIN", "EXTERNAL", "EXTENDED", "MAIN")),
    Rule("column_alter_drop", _column_alter("DROP"), StaticList("DEFAULT", "NOT NULL")),
    Rule("table_cluster", match(w3="TABLE", w1="CLUSTER"), Constant("ON")),
    Rule("table_cluster_on", match(w4="TABLE", w2="CLUSTER", w1="ON"),
         query_about(catalog.INDEX_OF_TABLE, 3)),
    Rule("table_set", match(w3="TABLE", w1="SET"), StaticList("(", "WITHOUT", "TABLESPACE", "SCHEMA")),
    Rule("table_set_tablespace", match(w4="TABLE", w2="SET", w1="TABLESPACE"), TABLESPACES),
    Rule("table_set_without", match(w4="TABLE", w2="SET", w1="WITHOUT"), StaticList("CLUSTER", "OIDS")),
    Rule("table_reset", match(w3="TABLE", w1="RESET"), Constant("(")),
    Rule("table_storage_options", match(w4="TABLE", w2=("SET", "RESET"), w1="("), TABLE_STORAGE_OPTIONS),

    Rule("alter_tablespace", match(w3="ALTER", w2="TABLESPACE"),
         StaticList("RENAME TO", "OWNER TO", "SET", "RESET")),
    Rule("alter_tablespace_set", match(w4="ALTER", w3="TABLESPACE", w1=("SET", "RESET")), Constant("(")),
    Rule("alter_tablespace_options", match(w5="ALTER", w4="TABLESPACE", w2=("SET", "RESET"), w1="("),
         StaticList("seq_page_cost", "random_page_cost")),
    Rule("alter_text_search", match(w3="ALTER", w2="TEXT", w1="SEARCH"), TEXT_SEARCH_OBJECTS),
    Rule("alter_text_search_template",
         match(w5="ALTER", w4="TEXT", w3="SEARCH", w2=("TEMPLATE", "PARSER")),
         StaticList("RENAME TO", "SET SCHEMA")),
    Rule("alter_text_search_dictionary", match(w5="ALTER", w4="TEXT", w3="SEARCH", w2="DICTIONARY"),
         OWNER_RENAME_SCHEMA),
    Rule("alter_text_search_configuration",
         match(w5="ALTER", w4="TEXT", w3="SEARCH", w2="CONFIGURATION"),
         StaticList("ADD MAPPING FOR", "ALTER MAPPING", "DROP MAPPING FOR", "OWNER TO",
                    "RENAME TO", "SET SCHEMA")),
    Rule("alter_type", match(w3="ALTER", w2="TYPE"), StaticList(
        "ADD ATTRIBUTE", "ADD VALUE", "ALTER ATTRIBUTE", "DROP ATTRIBUTE",
        "OWNER TO", "RENAME", "SET SCHEMA")),
    Rule("alter_type_add", match(w4="ALTER", w3="TYPE", w1="ADD"), StaticList("ATTRIBUTE", "VALUE")),
    Rule("alter_type_rename", match(w4="ALTER", w3="TYPE", w1="RENAME"), StaticList("ATTRIBUTE", "TO")),
    Rule("alter_type_rename_attribute", match(w5="TYPE", w3="RENAME", w2="ATTRIBUTE"), Constant("TO")),
    Rule("type_attribute", match(w4="TYPE", w2=("ALTER", "DROP", "RENAME"), w1="ATTRIBUTE"),
         attributes(3)),
    Rule("alter_attribute", match(w3="ALTER", w2="ATTRIBUTE"), Constant("TYPE")),
    Rule("alter_group", match(w3="ALTER", w2="GROUP"), StaticList("ADD USER", "DROP USER", "RENAME TO")),
    Rule("alter_group_add", match(w4="ALTER", w3="GROUP", w1=("ADD", "DROP")), Constant("USER")),
    Rule("group_add_user", match(w4="GROUP", w2=("ADD", "DROP"), w1="USER"), ROLES),

    # transactions
    Rule("begin", match(w1=("BEGIN", "END", "ABORT")), StaticList("WORK", "TRANSACTION")),
    Rule("commit", match(w1="COMMIT"), StaticList("WORK", "TRANSACTION", "PREPARED")),
    Rule("release", match(w1="RELEASE"), Constant("SAVEPOINT")),
    Rule("rollback", match(w1="ROLLBACK"), StaticList("WORK", "TRANSACTION", "TO SAVEPOINT", "PREPARED")),

    # CLUSTER
    Rule("cluster", match(w1="CLUSTER", w2=not_("WITHOUT")), TABLES),
    Rule("cluster_table", match(w2="CLUSTER", w1=not_("ON")), Constant("USING")),
    Rule("cluster_using", match(w3="CLUSTER", w1="USING"), query_about(catalog.INDEX_OF_TABLE, 2)),

    # COMMENT
    Rule("comment", match(w1="COMMENT"), Constant("ON")),
    Rule("comment_on", match(w2="COMMENT", w1="ON"), StaticList(
        "CAST", "COLLATION", "CONVERSION", "DATABASE", "EXTENSION",
        "FOREIGN DATA WRAPPER", "FOREIGN TABLE",
        "SERVER", "INDEX", "LANGUAGE", "RULE", "SCHEMA", "SEQUENCE",
        "TABLE", "TYPE", "VIEW", "COLUMN", "AGGREGATE", "FUNCTION",
        "OPERATOR", "TRIGGER", "CONSTRAINT", "DOMAIN", "LARGE OBJECT",
        "TABLESPACE", "TEXT SEARCH", "ROLE")),
    Rule("comment_on_foreign", match(w3="COMMENT", w2="ON", w1="FOREIGN"), StaticList("DATA WRAPPER", "TABLE")),
    Rule("comment_on_text_search", match(w4="COMMENT", w3="ON", w2="TEXT", w1="SEARCH"), TEXT_SEARCH_OBJECTS),
    Rule("comment_is", either(
        match(w4="COMMENT", w3="ON"),
        match(w5="COMMENT", w4="ON"),
        match(w6="COMMENT", w5="ON"),
    ), Constant("IS")),

    # COPY
    Rule("copy", either(match(w1=("COPY", "\\copy")), match(w2="COPY", w1="BINARY")), TABLES),
    Rule("copy_direction", match(w2=("COPY", "\\copy", "BINARY")), StaticList("FROM", "TO")),
    Rule("copy_file", match(w3=("COPY", "\\copy", "BINARY"), w1=("FROM", "TO")), Filenames()),
    Rule("copy_options", match(w4=("COPY", "\\copy", "BINARY"), w2=("FROM", "TO")),
         StaticList("BINARY", "OIDS", "DELIMITER", "NULL", "CSV", "ENCODING")),
    Rule("copy_csv", match(w3=("FROM", "TO"), w1="CSV"),
         StaticList("HEADER", "QUOTE", "ESCAPE", "FORCE QUOTE", "FORCE NOT NULL")),

    # CREATE DATABASE / EXTENSION / FOREIGN
    Rule("create_database", match(w3="CREATE", w2="DATABASE"),
         StaticList("OWNER", "TEMPLATE", "ENCODING", "TABLESPACE", "CONNECTION LIMIT")),
    Rule("create_database_template", match(w4="CREATE", w3="DATABASE", w1="TEMPLATE"),
         SimpleQuery(catalog.TEMPLATE_DATABASES)),
    Rule("create_extension", match(w2="CREATE", w1="EXTENSION"), SimpleQuery(catalog.AVAILABLE_EXTENSIONS)),
    Rule("create_extension_name", match(w3="CREATE", w2="EXTENSION"), Constant("WITH SCHEMA")),
    Rule("create_foreign", match(w2="CREATE", w1="FOREIGN"), StaticList("DATA WRAPPER", "TABLE")),
    Rule("create_fdw", match(w5="CREATE", w4="FOREIGN", w3="DATA", w2="WRAPPER"),
         StaticList("HANDLER", "VALIDATOR")),

    # CREATE INDEX
    Rule("create_unique", match(w2="CREATE", w1="UNIQUE"), Constant("INDEX")),
    Rule("create_index", match(w2=("CREATE", "UNIQUE"), w1="INDEX"),
         SchemaQuery(catalog.INDEXES, " UNION SELECT 'ON' UNION SELECT 'CONCURRENTLY'")),
    Rule("index_on", either(match(w3="INDEX", w1="ON"), match(w2=("INDEX", "CONCURRENTLY"), w1="ON")),
         TABLES),
    Rule("index_concurrently", either(match(w3="INDEX", w1="CONCURRENTLY"),
                                      match(w2="INDEX", w1="CONCURRENTLY")), Constant("ON")),
    Rule("create_index_name", match(w3=("CREATE", "UNIQUE"), w2="INDEX"), StaticList("CONCURRENTLY", "ON")),
    Rule("index_on_table", either(match(w4="INDEX", w2="ON"), match(w3=("INDEX", "CONCURRENTLY"), w2="ON")),
         StaticList("(", "USING")),
    Rule("index_columns", either(match(w5="INDEX", w3="ON", w1="("),
                                 match(w4=("INDEX", "CONCURRENTLY"), w3="ON", w1="(")),
         attributes(2)),
    Rule("index_using_columns", match(w5="ON", w3="USING", w1="("), attributes(4)),
    Rule("using", match(w1="USING"), SimpleQuery(catalog.ACCESS_METHODS)),
    Rule("index_using_method", match(w4="ON", w2="USING"), Constant("(")),

    # CREATE RULE
    Rule("create_rule", match(w3="CREATE", w2="RULE"), Constant("AS")),
    Rule("create_rule_as", match(w4="CREATE", w3="RULE", w1="AS"), Constant("ON")),
    Rule("rule_event", match(w4="RULE", w2="AS", w1="ON"), StaticList("SELECT", "UPDATE", "INSERT", "DELETE")),
    Rule("rule_event_to", match(w3="AS", w2="ON", w1=char_at(4, 5, upper="T")), Constant("TO")),
    Rule("rule_event_table", match(w4="AS", w3="ON", w1="TO"), TABLES),

    Rule("create_server", match(w3="CREATE", w2="SERVER"),
         StaticList("TYPE", "VERSION", "FOREIGN DATA WRAPPER")),
    Rule("create_temp", match(w2="CREATE", w1=("TEMP", "TEMPORARY")), StaticList("SEQUENCE", "TABLE", "VIEW")),
    Rule("create_unlogged", match(w2="CREATE", w1="UNLOGGED"), Constant("TABLE")),
    Rule("create_tablespace", match(w3="CREATE", w2="TABLESPACE"), StaticList("OWNER", "LOCATION")),
    Rule("create_tablespace_owner", match(w5="CREATE", w4="TABLESPACE", w2="OWNER"), Constant("LOCATION")),
    Rule("create_text_search", match(w3="CREATE", w2="TEXT", w1="SEARCH"), TEXT_SEARCH_OBJECTS),
    Rule("text_search_configuration", match(w4="TEXT", w3="SEARCH", w2="CONFIGURATION"), Constant("(")),

    # CREATE TRIGGER
    Rule("create_trigger", match(w3="CREATE", w2="TRIGGER"), StaticList("BEFORE", "AFTER", "INSTEAD OF")),
    Rule("create_trigger_timing", match(w4="CREATE", w3="TRIGGER", w1=("BEFORE", "AFTER")),
         StaticList("INSERT", "DELETE", "UPDATE", "TRUNCATE")),
    Rule("create_trigger_instead_of", match(w5="CREATE", w4="TRIGGER", w2="INSTEAD", w1="OF"),
         StaticList("INSERT", "DELETE", "UPDATE")),
    Rule("create_trigger_event", either(
        match(w5="CREATE", w4="TRIGGER", w2=("BEFORE", "AFTER")),
        match(w5="TRIGGER", w3="INSTEAD", w2="OF"),
    ), StaticList("ON", "OR")),
    Rule("create_trigger_on", match(w5="TRIGGER", w3=("BEFORE", "AFTER"), w1="ON"), TABLES),
    Rule("create_trigger_instead_on", match(w4="INSTEAD", w3="OF", w1="ON"), VIEWS),
    Rule("trigger_execute", match(w1="EXECUTE", w2=lambda word: word != ""), Constant("PROCEDURE")),

    # CREATE ROLE / USER / GROUP
    Rule("create_role",
         both(match(w3="CREATE", w2=_ROLE_KINDS),
              lambda ctx: not (ctx.word(2).upper() == "USER" and ctx.word(1).upper() == "MAPPING")),
         StaticList(
             "ADMIN", "CONNECTION LIMIT", "CREATEDB", "CREATEROLE", "CREATEUSER",
             "ENCRYPTED", "IN", "INHERIT", "LOGIN", "NOCREATEDB",
             "NOCREATEROLE", "NOCREATEUSER", "NOINHERIT", "NOLOGIN",
             "NOREPLICATION", "NOSUPERUSER", "REPLICATION", "ROLE",
             "SUPERUSER", "SYSID", "UNENCRYPTED", "VALID UNTIL")),
    Rule("create_role_password", match(w4="CREATE", w3=_ROLE_KINDS, w1=("ENCRYPTED", "UNENCRYPTED")),
         Constant("PASSWORD")),
    Rule("create_role_in", match(w4="CREATE", w3=_ROLE_KINDS, w1="IN"), StaticList("GROUP", "ROLE")),

    Rule("create_view", match(w3="CREATE", w2="VIEW"), Constant("AS")),
    Rule("create_view_as", match(w4="CREATE", w3="VIEW", w1="AS"), Constant("SELECT")),

    # DECLARE / DELETE / DISCARD / DO
    Rule("declare", match(w2="DECLARE"), StaticList("BINARY", "INSENSITIVE", "SCROLL", "NO SCROLL", "CURSOR")),
    Rule("cursor", match(w1="CURSOR"), StaticList("WITH HOLD", "WITHOUT HOLD", "FOR")),
    Rule("delete", match(w1="DELETE", w2=not_(("ON", "GRANT", "BEFORE", "AFTER"))), Constant("FROM")),
    Rule("delete_from", match(w2="DELETE", w1="FROM"), DELETABLES),
    Rule("delete_from_table", match(w3="DELETE", w2="FROM"), StaticList("USING", "WHERE", "SET")),
    Rule("discard", match(w1="DISCARD"), StaticList("ALL", "PLANS", "TEMP")),
    Rule("do", match(w1="DO"), StaticList("LANGUAGE")),

    # DROP (not as the first word)
    Rule("drop_aggregate", match(w3="DROP", w2="AGGREGATE"), Constant("(")),
    Rule("drop_cascade", either(
        match(w3="DROP", w2=("COLLATION", "CONVERSION", "DOMAIN", "EXTENSION", "FUNCTION", "INDEX",
                             "LANGUAGE", "SCHEMA", "SEQUENCE", "SERVER", "TABLE", "TYPE", "VIEW")),
        match(w4="DROP", w3="AGGREGATE", w1=ends_with(")")),
        match(w5="DROP", w4="FOREIGN", w3="DATA", w2="WRAPPER"),
        match(w5="DROP", w4="TEXT", w3="SEARCH", w2=("CONFIGURATION", "DICTIONARY", "PARSER", "TEMPLATE")),
    ), branch(
        (match(w3="DROP", w2="FUNCTION"), Constant("(")),
        (always, StaticList("CASCADE", "RESTRICT")),
    )),
    Rule("drop_foreign", match(w2="DROP", w1="FOREIGN"), StaticList("DATA WRAPPER", "TABLE")),
    Rule("drop_function_args", match(w4="DROP", w3=("AGGREGATE", "FUNCTION"), w1="("),
         query_about(catalog.ARGUMENTS, 2)),
    Rule("drop_owned", match(w2="DROP", w1="OWNED"), Constant("BY")),
    Rule("drop_owned_by", match(w3="DROP", w2="OWNED", w1="BY"), ROLES),
    Rule("drop_text_search", match(w3="DROP", w2="TEXT", w1="SEARCH"), TEXT_SEARCH_OBJECTS),

    # EXECUTE / EXPLAIN / FETCH
    Rule("execute", match(w1="EXECUTE", w2=""), SimpleQuery(catalog.PREPARED_STATEMENTS)),
    Rule("explain", match(w1="EXPLAIN"), StaticList(*EXPLAINABLE, "ANALYZE", "VERBOSE")),
    Rule("explain_analyze", match(w2="EXPLAIN", w1="ANALYZE"), StaticList(*EXPLAINABLE, "VERBOSE")),
    Rule("explain_verbose", either(match(w2="EXPLAIN", w1="VERBOSE"),
                                   match(w3="EXPLAIN", w2="ANALYZE", w1="VERBOSE")),
         StaticList(*EXPLAINABLE)),
    Rule("fetch", match(w1=("FETCH", "MOVE")), StaticList("ABSOLUTE", "BACKWARD", "FORWARD", "RELATIVE")),
    Rule("fetch_direction", match(w2=("FETCH", "MOVE")), StaticList("ALL", "NEXT", "PRIOR")),
    Rule("fetch_count", match(w3=("FETCH", "MOVE")), StaticList("FROM", "IN")),

    Rule("foreign_data_wrapper", match(w4=not_("CREATE"), w3="FOREIGN", w2="DATA", w1="WRAPPER"),
         SimpleQuery(catalog.FDWS)),
    Rule("foreign_table", match(w3=not_("CREATE"), w2="FOREIGN", w1="TABLE"), FOREIGN_TABLES),

    # GRANT / REVOKE
    Rule("grant", match(w1=("GRANT", "REVOKE")), StaticList(
        "SELECT", "INSERT", "UPDATE", "DELETE", "TRUNCATE", "REFERENCES",
        "TRIGGER", "CREATE", "CONNECT", "TEMPORARY", "EXECUTE", "USAGE",
        "ALL")),
    Rule("grant_privilege", match(w2=("GRANT", "REVOKE")), Constant("ON")),
    Rule("grant_on", match(w3=("GRANT", "REVOKE"), w1="ON"), SchemaQuery(
        catalog.TSVF,
        " UNION SELECT 'DATABASE'"
        " UNION SELECT 'DOMAIN'"
        " UNION SELECT 'FOREIGN DATA WRAPPER'"
        " UNION SELECT 'FOREIGN SERVER'"
        " UNION SELECT 'FUNCTION'"
        " UNION SELECT 'LANGUAGE'"
        " UNION SELECT 'LARGE OBJECT'"
        " UNION SELECT 'SCHEMA'"
        " UNION SELECT 'TABLESPACE'"
        " UNION SELECT 'TYPE'")),
    Rule("grant_on_foreign", match(w4=("GRANT", "REVOKE"), w2="ON", w1="FOREIGN"),
         StaticList("DATA WRAPPER", "SERVER")),
    Rule("grant_on_object", match(w4=("GRANT", "REVOKE"), w2="ON"), branch(
        (match(w1="DATABASE"), DATABASES),
        (match(w1="DOMAIN"), DOMAINS),
        (match(w1="FUNCTION"), FUNCTIONS),
        (match(w1="LANGUAGE"), SimpleQuery(catalog.LANGUAGES)),
        (match(w1="SCHEMA"), SimpleQuery(catalog.SCHEMAS)),
        (match(w1="TABLESPACE"), TABLESPACES),
        (match(w1="TYPE"), DATATYPES),
        (match(w4="GRANT"), Constant("TO")),
        (always, Constant("FROM")),
    )),
    Rule("grant_to", match(w5="GRANT", w3="ON"), branch(
        (match(w1="TO"), SimpleQuery(catalog.GRANT_ROLES)),
        (always, Constant("TO")),
    )),
    Rule("revoke_from", match(w5="REVOKE", w3="ON"), branch(
        (match(w1="FROM"), SimpleQuery(catalog.GRANT_ROLES)),
        (always, Constant("FROM")),
    )),

    Rule("group_by", match(w3="FROM", w1="GROUP"), Constant("BY")),

    # INSERT
    Rule("insert", match(w1="INSERT"), Constant("INTO")),
    Rule("insert_into", match(w2="INSERT", w1="INTO"), INSERTABLES),
    Rule("insert_columns", match(w4="INSERT", w3="INTO", w1="("), attributes(2)),
    Rule("insert_into_table", match(w3="INSERT", w2="INTO"),
         StaticList("(", "DEFAULT VALUES", "SELECT", "TABLE", "VALUES")),
    Rule("insert_after_columns", match(w4="INSERT", w3="INTO", w1=ends_with(")")),
         StaticList("SELECT", "TABLE", "VALUES")),
    Rule("values", match(w1="VALUES", w2=not_("DEFAULT")), Constant("(")),

    # LOCK
    Rule("lock", match(w1="LOCK"), SchemaQuery(catalog.TABLES, " UNION SELECT 'TABLE'")),
    Rule("lock_table", match(w2="LOCK", w1="TABLE"), TABLES),
    Rule("lock_in", either(match(w2="LOCK", w1=not_("TABLE")), match(w3="LOCK", w2="TABLE")),
         Constant("IN")),
    Rule("lock_mode", either(match(w3="LOCK", w1="IN"), match(w4="LOCK", w3="TABLE", w1="IN")),
         StaticList(
             "ACCESS SHARE MODE",
             "ROW SHARE MODE", "ROW EXCLUSIVE MODE",
             "SHARE UPDATE EXCLUSIVE MODE", "SHARE MODE",
             "SHARE ROW EXCLUSIVE MODE",
             "EXCLUSIVE MODE", "ACCESS EXCLUSIVE MODE")),

    Rule("notify", match(w1="NOTIFY"), SimpleQuery(catalog.LISTENING_CHANNELS)),
    Rule("options", match(w1="OPTIONS"), Constant("(")),
    Rule("owner_to", match(w2="OWNER", w1="TO"), ROLES),
    Rule("order", match(w3="FROM", w1="ORDER"), Constant("BY")),
    Rule("order_by", match(w4="FROM", w2="ORDER", w1="BY"), attributes(3)),
    Rule("prepare_as", match(w3="PREPARE", w1="AS"), StaticList("SELECT", "UPDATE", "INSERT", "DELETE")),

    # REASSIGN OWNED BY x TO y
    Rule("reassign", match(w1="REASSIGN"), Constant("OWNED")),
    Rule("reassign_owned", match(w2="REASSIGN", w1="OWNED"), Constant("BY")),
    Rule("reassign_owned_by", match(w3="REASSIGN", w2="OWNED", w1="BY"), ROLES),
    Rule("reassign_to", match(w4="REASSIGN", w3="OWNED", w2="BY"), Constant("TO")),
    Rule("reassign_to_role", match(w5="REASSIGN", w4="OWNED", w3="BY", w1="TO"), ROLES),

    Rule("reindex", match(w1="REINDEX"), StaticList("TABLE", "INDEX", "SYSTEM", "DATABASE")),
    Rule("reindex_target", match(w2="REINDEX"), branch(
        (match(w1="TABLE"), TABLES),
        (match(w1="INDEX"), INDEXES),
        (match(w1=("SYSTEM", "DATABASE")), DATABASES),
    )),

    # SECURITY LABEL
    Rule("security", match(w1="SECURITY"), Constant("LABEL")),
    Rule("security_label", match(w2="SECURITY", w1="LABEL"), StaticList("ON", "FOR")),
    Rule("security_label_for", match(w4="SECURITY", w3="LABEL", w2="FOR"), Constant("ON")),
    Rule("security_label_on", either(
        match(w3="SECURITY", w2="LABEL", w1="ON"),
        match(w5="SECURITY", w4="LABEL", w3="FOR", w1="ON"),
    ), StaticList(
        "LANGUAGE", "SCHEMA", "SEQUENCE", "TABLE", "TYPE", "VIEW", "COLUMN",
        "AGGREGATE", "FUNCTION", "DOMAIN", "LARGE OBJECT")),
    Rule("security_label_is", match(w5="SECURITY", w4="LABEL", w3="ON"), Constant("IS")),

    # SET / RESET / SHOW
    Rule("set", either(match(w1="SET", w3=not_("UPDATE")), match(w1="RESET")),
         SimpleQuery(catalog.SET_VARS)),
    Rule("show", match(w1="SHOW"), SimpleQuery(catalog.SHOW_VARS)),
    Rule("transaction_characteristics", either(
        match(w2="SET", w1="TRANSACTION"),
        match(w2="START", w1="TRANSACTION"),
        match(w2="BEGIN", w1="WORK"),
        match(w2="BEGIN", w1="TRANSACTION"),
        match(w4="SESSION", w3="CHARACTERISTICS", w2="AS", w1="TRANSACTION"),
    ), StaticList("ISOLATION LEVEL", "READ")),
    Rule("isolation", both(
        either(match(w3=_TXN_START), match(w4="CHARACTERISTICS", w3="AS")),
        match(w2=("TRANSACTION", "WORK"), w1="ISOLATION"),
    ), Constant("LEVEL")),
    Rule("isolation_level", match(w4=_TXN_START + ("AS",), w3=("TRANSACTION", "WORK"),
                                  w2="ISOLATION", w1="LEVEL"),
         StaticList("READ", "REPEATABLE", "SERIALIZABLE")),
    Rule("isolation_read", match(w4=("TRANSACTION", "WORK"), w3="ISOLATION", w2="LEVEL", w1="READ"),
         StaticList("UNCOMMITTED", "COMMITTED")),
    Rule("isolation_repeatable", match(w4=("TRANSACTION", "WORK"), w3="ISOLATION", w2="LEVEL",
                                       w1="REPEATABLE"), Constant("READ")),
    Rule("transaction_read", match(w3=_TXN_START + ("AS",), w2=("TRANSACTION", "WORK"), w1="READ"),
         StaticList("ONLY", "WRITE")),
    Rule("set_constraints", match(w3="SET", w2="CONSTRAINTS"), StaticList("DEFERRED", "IMMEDIATE")),
    Rule("set_role", match(w2="SET", w1="ROLE"), ROLES),
    Rule("set_session", match(w2="SET", w1="SESSION"),
         StaticList("AUTHORIZATION", "CHARACTERISTICS AS TRANSACTION")),
    Rule("set_session_authorization", match(w3="SET", w2="SESSION", w1="AUTHORIZATION"),
         SimpleQuery(catalog.ROLES + " UNION SELECT 'DEFAULT'")),
    Rule("reset_session", match(w2="RESET", w1="SESSION"), Constant("AUTHORIZATION")),
    Rule("set_variable", match(w2="SET", w4=not_(("UPDATE", "DOMAIN")),
                               w1=lambda word: word.upper() not in ("TABLESPACE", "SCHEMA")
                               and not word.endswith(")")),
         Constant("TO")),
    Rule("set_value", either(match(w3="SET", w1="TO"), match(w3="SET", w1=exact("="))),
         branch(
             (match(w2="DateStyle"), StaticList(
                 "ISO", "SQL", "Postgres", "German",
                 "YMD", "DMY", "MDY",
                 "US", "European", "NonEuropean",
                 "DEFAULT")),
             (match(w2="IntervalStyle"),
              StaticList("postgres", "postgres_verbose", "sql_standard", "iso_8601")),
             (match(w2="GEQO"), StaticList("ON", "OFF", "DEFAULT")),
             (always, StaticList("DEFAULT")),
         )),

    Rule("start", match(w1="START"), Constant("TRANSACTION")),
    Rule("table", match(w1="TABLE", w2=""), RELATIONS),
    Rule("truncate", match(w1="TRUNCATE"), TABLES),
    Rule("unlisten", match(w1="UNLISTEN"), SimpleQuery(catalog.LISTENING_CHANNELS + " UNION SELECT '*'")),

    # UPDATE
    Rule("update", match(w1="UPDATE"), UPDATABLES),
    Rule("update_table", match(w2="UPDATE"), Constant("SET")),
    Rule("set_columns", match(w1="SET"), attributes(2)),
    Rule("update_set_column", match(w4="UPDATE", w2="SET"), Constant("=")),

    # USER MAPPING
    Rule("user_mapping", match(w3=("ALTER", "CREATE", "DROP"), w2="USER", w1="MAPPING"), Constant("FOR")),
    Rule("create_user_mapping_for", match(w4="CREATE", w3="USER", w2="MAPPING", w1="FOR"), SimpleQuery(
        catalog.ROLES
        + " UNION SELECT 'CURRENT_USER'"
        " UNION SELECT 'PUBLIC'"
        " UNION SELECT 'USER'")),
    Rule("alter_user_mapping_for", match(w4=("ALTER", "DROP"), w3="USER", w2="MAPPING", w1="FOR"),
         SimpleQuery(catalog.USER_MAPPINGS)),
    Rule("user_mapping_server", match(w5=("CREATE", "ALTER", "DROP"), w4="USER", w3="MAPPING", w2="FOR"),
         Constant("SERVER")),

    # VACUUM [FULL | FREEZE] [VERBOSE] [ANALYZE] [table]
    Rule("vacuum", match(w1="VACUUM"), SchemaQuery(
        catalog.TABLES,
        " UNION SELECT 'FULL'"
        " UNION SELECT 'FREEZE'"
        " UNION SELECT 'ANALYZE'"
        " UNION SELECT 'VERBOSE'")),
    Rule("vacuum_full", match(w2="VACUUM", w1=("FULL", "FREEZE")),
         SchemaQuery(catalog.TABLES, " UNION SELECT 'ANALYZE' UNION SELECT 'VERBOSE'")),
    Rule("vacuum_full_analyze", match(w3="VACUUM", w2=("FULL", "FREEZE"), w1="ANALYZE"),
         SchemaQuery(catalog.TABLES, " UNION SELECT 'VERBOSE'")),
    Rule("vacuum_full_verbose", match(w3="VACUUM", w2=("FULL", "FREEZE"), w1="VERBOSE"),
         SchemaQuery(catalog.TABLES, " UNION SELECT 'ANALYZE'")),
    Rule("vacuum_verbose", match(w2="VACUUM", w1="VERBOSE"),
         SchemaQuery(catalog.TABLES, " UNION SELECT 'ANALYZE'")),
    Rule("vacuum_analyze", match(w2="VACUUM", w1="ANALYZE"),
         SchemaQuery(catalog.TABLES, " UNION SELECT 'VERBOSE'")),
    Rule("analyze_verbose", either(match(w2="VERBOSE", w1="ANALYZE"), match(w2="ANALYZE", w1="VERBOSE")),
         TABLES),

    Rule("with", match(w1="WITH"), Constant("RECURSIVE")),
    Rule("analyze", match(w1="ANALYZE"), TABLES),
    Rule("where", match(w1="WHERE"), attributes(2)),
    Rule("from", match(w1="FROM", w3=not_(("COPY", "\\copy"))), TSVF),
    Rule("join", match(w1="JOIN"), TSVF),

    # backslash commands; compared case-sensitively
    Rule("connect", match(w1=exact("\\connect", "\\c")), DATABASES),
    Rule("describe_aggregates", match(w1=starts_with("\\da")), AGGREGATES),
    Rule("describe_tablespaces", match(w1=starts_with("\\db")), TABLESPACES),
    Rule("describe_domains", match(w1=starts_with("\\dD")), DOMAINS),
    Rule("describe_servers", match(w1=starts_with("\\des")), SimpleQuery(catalog.SERVERS)),
    Rule("describe_user_mappings", match(w1=starts_with("\\deu")), SimpleQuery(catalog.USER_MAPPINGS)),
    Rule("describe_fdws", match(w1=starts_with("\\dew")), SimpleQuery(catalog.FDWS)),
    Rule("describe_functions", match(w1=starts_with("\\df")), FUNCTIONS),
    Rule("describe_ts_dictionaries", match(w1=starts_with("\\dFd")), SimpleQuery(catalog.TS_DICTIONARIES)),
    Rule("describe_ts_parsers", match(w1=starts_with("\\dFp")), SimpleQuery(catalog.TS_PARSERS)),
    Rule("describe_ts_templates", match(w1=starts_with("\\dFt")), SimpleQuery(catalog.TS_TEMPLATES)),
    Rule("describe_ts_configurations", match(w1=starts_with("\\dF")), SimpleQuery(catalog.TS_CONFIGURATIONS)),
    Rule("describe_indexes", match(w1=starts_with("\\di")), INDEXES),
    Rule("describe_languages", match(w1=starts_with("\\dL")), SimpleQuery(catalog.LANGUAGES)),
    Rule("describe_schemas", match(w1=starts_with("\\dn")), SimpleQuery(catalog.SCHEMAS)),
    Rule("describe_privileges", either(match(w1=starts_with("\\dp")), match(w1=starts_with("\\z"))), TSVF),
    Rule("describe_sequences", match(w1=starts_with("\\ds")), SEQUENCES),
    Rule("describe_tables", match(w1=starts_with("\\dt")), TABLES),
    Rule("describe_types", match(w1=starts_with("\\dT")), DATATYPES),
    Rule("describe_roles", either(match(w1=starts_with("\\du")), match(w1=starts_with("\\dg"))), ROLES),
    Rule("describe_views", match(w1=starts_with("\\dv")), VIEWS),
    Rule("describe", match(w1=starts_with("\\d")), RELATIONS),
    Rule("edit_function", match(w1=exact("\\ef")), FUNCTIONS),
    Rule("encoding", match(w1=exact("\\encoding")), SimpleQuery(catalog.ENCODINGS)),
    Rule("help", match(w1=exact("\\h", "\\help")), StaticList(*SQL_COMMANDS)),
    Rule("password", match(w1=exact("\\password")), ROLES),
    Rule("pset", match(w1=exact("\\pset")), StaticList(
        "format", "border", "expanded",
        "null", "fieldsep", "tuples_only", "title", "tableattr",
        "linestyle", "pager", "recordsep")),
    Rule("pset_value", match(w2=exact("\\pset")), branch(
        (match(w1=exact("format")),
         StaticList("unaligned", "aligned", "wrapped", "html", "latex", "troff-ms")),
        (match(w1=exact("linestyle")), StaticList("ascii", "old-ascii", "unicode")),
    )),
    Rule("set_variable_name", match(w1=exact("\\set")), variables("", "")),
    Rule("show_function", match(w1=exact("\\sf", "\\sf+")), FUNCTIONS),
    Rule("filename", match(w1=exact(*FILENAME_COMMANDS)), Filenames()),
)


def words_after_create_fallback(ctx: DispatchContext) -> Optional[Pattern]:
    """Objects of the kind named by the previous word, e.g. ``... TABLE <tab>``."""
    thing = catalog.thing_for(ctx.word(1))
    if thing is None:
        return None
    return thing.pattern


__all__ = [
    'SQL_COMMANDS', 'BACKSLASH_COMMANDS', 'FILENAME_COMMANDS', 'CREATE_THINGS', 'DROP_THINGS',
    'RULES', 'words_after_create_fallback'
]
