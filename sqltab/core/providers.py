"""Candidate providers: one per pattern kind.

A provider is created for one completion request and asked for candidates
one at a time through :meth:`next`. Query-backed providers execute their
query on the first call and stream the cached rows afterwards.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Iterator, List, Optional, Type
import logging
import os

from sqltab.core.dialect import CatalogDialect, POSTGRES
from sqltab.core.patterns import Pattern, ProviderKind
from sqltab.core.query_builder import build_schema_query
from sqltab.core.sql_engine import CatalogSource, apply_limit, fill_template

logger = logging.getLogger(__name__)


class QueryState(Enum):
    NOT_STARTED = "not_started"
    STREAMING = "streaming"
    EXHAUSTED = "exhausted"


class Provider:
    """Base provider; subclasses implement :meth:`next`."""

    def __init__(self, pattern: Pattern, text: str, source: Optional[CatalogSource] = None,
                 dialect: CatalogDialect = POSTGRES):
        self.pattern = pattern
        self.text = text
        self.source = source or CatalogSource()
        self.dialect = dialect

    def next(self) -> Optional[str]:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self.next()
            if item is None:
                return
            yield item


class ConstantProvider(Provider):
    """Yields the constant once, whatever was typed."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._done = False

    def next(self) -> Optional[str]:
        if self._done:
            return None
        self._done = True
        return self.pattern.text or None


class ListProvider(Provider):
    """Prefix match over a static list.

    The first pass is case-sensitive. Only if it matched nothing is the list
    scanned again ignoring case.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.index = 0
        self.matches = 0
        self.case_sensitive = True

    def next(self) -> Optional[str]:
        items = self.pattern.items
        while True:
            while self.index < len(items):
                item = items[self.index]
                self.index += 1
                if self.case_sensitive:
                    if item.startswith(self.text):
                        self.matches += 1
                        return item
                elif item.lower().startswith(self.text.lower()):
                    return item
            if self.case_sensitive and self.matches == 0:
                self.case_sensitive = False
                self.index = 0
                continue
            return None


class QueryProvider(Provider):
    """Runs one catalog query, then streams rows matching the typed prefix."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.state = QueryState.NOT_STARTED
        self._rows: Optional[List[str]] = None
        self._index = 0

    def build_query(self) -> str:
        raise NotImplementedError

    def _execute(self) -> None:
        sql = apply_limit(self.build_query(), self.dialect.max_records)
        self._rows = self.source.fetch_column(sql)
        self._index = 0
        self.state = QueryState.EXHAUSTED if self._rows is None else QueryState.STREAMING

    def next(self) -> Optional[str]:
        if self.state is QueryState.NOT_STARTED:
            self._execute()
        if self.state is QueryState.STREAMING:
            prefix = self.text.lower()
            while self._index < len(self._rows):
                item = self._rows[self._index]
                self._index += 1
                if item.lower().startswith(prefix):
                    return item
            self.close()
        return None

    def close(self) -> None:
        self._rows = None
        self.state = QueryState.EXHAUSTED


class SimpleQueryProvider(QueryProvider):
    def build_query(self) -> str:
        return fill_template(self.pattern.template, self.text, self.pattern.params,
                             self.dialect.escape_backslashes)


class SchemaQueryProvider(QueryProvider):
    def build_query(self) -> str:
        return build_schema_query(self.pattern.descriptor, self.text,
                                  self.pattern.extra_sql, self.dialect)


class FilenameProvider(Provider):
    """Entries of the directory named by the typed text; directories end in ``/``."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._entries: Optional[Iterator[str]] = None

    def _scan(self) -> Iterator[str]:
        text = os.path.expanduser(self.text)
        directory, prefix = os.path.split(text)
        typed_dir = self.text[:len(self.text) - len(prefix)]
        try:
            names = sorted(os.listdir(directory or "."))
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory or ".", e)
            return
        for name in names:
            if not name.startswith(prefix):
                continue
            if name.startswith(".") and not prefix.startswith("."):
                continue
            suffix = "/" if os.path.isdir(os.path.join(directory or ".", name)) else ""
            yield f"{typed_dir}{name}{suffix}"

    def next(self) -> Optional[str]:
        if self._entries is None:
            self._entries = self._scan()
        return next(self._entries, None)

    def close(self) -> None:
        self._entries = iter(())


PROVIDERS: Dict[ProviderKind, Type[Provider]] = {
    ProviderKind.CONSTANT: ConstantProvider,
    ProviderKind.LIST: ListProvider,
    ProviderKind.QUERY: SimpleQueryProvider,
    ProviderKind.SCHEMA_QUERY: SchemaQueryProvider,
    ProviderKind.FILENAMES: FilenameProvider,
}


def provider_for(pattern: Pattern, text: str, source: Optional[CatalogSource] = None,
                 dialect: CatalogDialect = POSTGRES) -> Provider:
    """Instantiate the provider registered for the pattern's kind."""
    return PROVIDERS[pattern.kind](pattern, text, source, dialect)


__all__ = [
    'QueryState', 'Provider', 'ConstantProvider', 'ListProvider', 'QueryProvider',
    'SimpleQueryProvider', 'SchemaQueryProvider', 'FilenameProvider', 'PROVIDERS',
    'provider_for'
]
