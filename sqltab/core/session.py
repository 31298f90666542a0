"""Pull-based completion sessions.

A :class:`CompletionSession` wraps the provider picked for one keystroke and
owns whatever it cached. :class:`Completer` is the entry point for front
ends: it tokenizes the buffer, dispatches, and drives the session either as
a generator or through the readline ``(text, state)`` protocol.
"""
from __future__ import annotations
from typing import Any, Iterator, List, MutableMapping, Optional
import logging

from sqltab.core.dialect import CatalogDialect, POSTGRES
from sqltab.core.dispatcher import dispatch
from sqltab.core.patterns import EMPTY, Pattern
from sqltab.core.providers import provider_for
from sqltab.core.sql_engine import CatalogSource
from sqltab.core.tokenizer import current_word, previous_words

logger = logging.getLogger(__name__)


class CompletionSession:
    """Candidates for one prefix, pulled one at a time."""

    def __init__(self, pattern: Pattern, text: str, source: Optional[CatalogSource] = None,
                 dialect: CatalogDialect = POSTGRES):
        self.pattern = pattern
        self.text = text
        self.provider = provider_for(pattern, text, source, dialect)
        self.closed = False

    @property
    def append_character(self) -> str:
        # EMPTY must not make the front end insert a separator
        return "" if self.pattern == EMPTY else " "

    def next(self) -> Optional[str]:
        if self.closed:
            return None
        return self.provider.next()

    def close(self) -> None:
        if not self.closed:
            self.provider.close()
            self.closed = True

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self.next()
            if item is None:
                return
            yield item

    def __enter__(self) -> "CompletionSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Completer:
    """Completion front door used by the shell and the CLI.

    ``source`` may be a :class:`CatalogSource` or a bare connection.
    ``variables`` is the shell's variable mapping; it is read at every request,
    so the shell can keep mutating it.
    """

    def __init__(self, source: Any = None, variables: Optional[MutableMapping[str, str]] = None,
                 dialect: Optional[CatalogDialect] = None):
        if not isinstance(source, CatalogSource):
            source = CatalogSource(source)
        self.source = source
        self.variables = variables if variables is not None else {}
        self.dialect = dialect or POSTGRES
        self.append_character = " "
        self._session: Optional[CompletionSession] = None

    def start(self, buffer: str, cursor: Optional[int] = None) -> CompletionSession:
        """Tokenize and dispatch; return a fresh session for the word at the cursor."""
        _, text = current_word(buffer, cursor)
        words = previous_words(buffer, cursor)
        kind, pattern = dispatch(text, words, self.variables)
        logger.debug("Completing %r after %r with %s", text, words, kind.value)
        session = CompletionSession(pattern, text, self.source, self.dialect)
        self.append_character = session.append_character
        return session

    def complete(self, buffer: str, cursor: Optional[int] = None) -> Iterator[str]:
        session = self.start(buffer, cursor)
        try:
            while True:
                item = session.next()
                if item is None:
                    return
                yield item
        finally:
            session.close()

    def candidates(self, buffer: str, cursor: Optional[int] = None) -> List[str]:
        return list(self.complete(buffer, cursor))

    def complete_state(self, buffer: str, cursor: Optional[int], state: int) -> Optional[str]:
        """readline protocol: ``state == 0`` starts over, later calls continue."""
        if state == 0:
            self.reset()
            self._session = self.start(buffer, cursor)
        if self._session is None:
            return None
        item = self._session.next()
        if item is None:
            self.reset()
        return item

    def reset(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None


__all__ = ['CompletionSession', 'Completer']
