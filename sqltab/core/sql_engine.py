"""SQL text helpers and the catalog data source used by completion."""
from __future__ import annotations
from typing import Any, List, Mapping, Optional, Sequence
import re
import logging

logger = logging.getLogger(__name__)

# quoted runs (kept as they are, even when unterminated) or a variable reference
_VARIABLE_RE = re.compile(
    r"('(?:[^']|'')*(?:'|\Z)|\"(?:[^\"]|\"\")*(?:\"|\Z))"
    r"|(?<!:):(?:'([A-Za-z_]\w*)'|\"([A-Za-z_]\w*)\"|([A-Za-z_]\w*))"
)


def escape_literal(value: str, escape_backslashes: bool = False) -> str:
    """Escape text for use between single quotes in a SQL literal."""
    if escape_backslashes:
        value = value.replace("\\", "\\\\")
    return value.replace("'", "''")


def quote_literal(value: str, escape_backslashes: bool = False) -> str:
    return "'" + escape_literal(value, escape_backslashes) + "'"


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def fill_template(template: str, text: str, params: Sequence[str] = (),
                  escape_backslashes: bool = False) -> str:
    """Substitute the typed text and auxiliary parameters into a query template.

    ``{length}`` is the unescaped length of ``text``; ``{text}``, ``{info}``
    and ``{info2}`` are escaped for use inside single quotes.
    """
    info = params[0] if len(params) > 0 else ""
    info2 = params[1] if len(params) > 1 else ""
    return template.format(
        length=len(text),
        text=escape_literal(text, escape_backslashes),
        info=escape_literal(info, escape_backslashes),
        info2=escape_literal(info2, escape_backslashes),
    )


def apply_limit(sql: str, limit: Optional[int]) -> str:
    if limit is None:
        return sql
    return f"{sql}\nLIMIT {limit}"


def interpolate_variables(sql: str, variables: Optional[Mapping[str, str]]) -> str:
    """Replace ``:name``, ``:'name'`` and ``:"name"`` with shell variable values.

    ``:name`` inserts the raw value, ``:'name'`` a quoted literal and
    ``:"name"`` a quoted identifier. Unknown names and ``::`` casts are left
    alone, and so is anything inside quoted literals or identifiers.
    """
    if not variables:
        return sql

    def repl(m: re.Match) -> str:
        quoted, literal, ident, raw = m.groups()
        if quoted:
            return quoted
        name = literal or ident or raw
        value = variables.get(name)
        if value is None:
            return m.group(0)
        if literal:
            return quote_literal(value)
        if ident:
            return quote_identifier(value)
        return value

    return _VARIABLE_RE.sub(repl, sql)


class CatalogSource:
    """Runs completion queries on a borrowed connection.

    Accepts anything with ``execute()`` returning a cursor-like object
    (DuckDB, sqlite3, psycopg) or a DB-API connection with ``cursor()``.
    Failures are logged and reported as ``None``.
    """

    def __init__(self, connection: Any = None):
        self.connection = connection

    @property
    def available(self) -> bool:
        return self.connection is not None

    def fetch_column(self, sql: str) -> Optional[List[str]]:
        """Run ``sql`` and return its first column as text, or None on failure."""
        if not sql or self.connection is None:
            return None
        cursor = None
        owned = False
        try:
            if hasattr(self.connection, "execute"):
                cursor = self.connection.execute(sql)
            else:
                cursor = self.connection.cursor()
                owned = True
                cursor.execute(sql)
            if cursor is None or getattr(cursor, "description", None) is None:
                logger.debug("Completion query returned no rows:\n%s", sql)
                return None
            rows = cursor.fetchall()
        except Exception as e:
            logger.debug("Completion query failed: %s\nQuery was:\n%s", e, sql)
            return None
        finally:
            if owned and cursor is not None:
                try:
                    cursor.close()
                except Exception as e:
                    logger.debug("Closing completion cursor failed: %s", e)
        values = [str(row[0]) for row in rows if row and row[0] is not None]
        logger.debug("Completion query returned %d rows", len(values))
        return values


__all__ = [
    'escape_literal', 'quote_literal', 'quote_identifier', 'fill_template',
    'apply_limit', 'interpolate_variables', 'CatalogSource'
]
