#!/usr/bin/env python
"""Tests for completion sessions and the Completer front door."""
import unittest

import duckdb

from sqltab.core.patterns import EMPTY, StaticList
from sqltab.core.providers import QueryState
from sqltab.core.session import Completer, CompletionSession
from sqltab.core.sql_engine import CatalogSource


class FakeSource(CatalogSource):

    def __init__(self, rows):
        super().__init__(connection=object())
        self.rows = rows
        self.calls = 0

    def fetch_column(self, sql):
        self.calls += 1
        return list(self.rows)


class RecordingCompleter(Completer):
    """Keeps every session it starts so tests can inspect them."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sessions = []

    def start(self, buffer, cursor=None):
        session = super().start(buffer, cursor)
        self.sessions.append(session)
        return session


class CompletionSessionTests(unittest.TestCase):

    def test_iterates_candidates(self):
        session = CompletionSession(StaticList("BEGIN", "BY"), "B")
        self.assertEqual(list(session), ["BEGIN", "BY"])

    def test_context_manager_closes(self):
        with CompletionSession(StaticList("A", "AB"), "A") as session:
            self.assertEqual(session.next(), "A")
        self.assertTrue(session.closed)
        self.assertIsNone(session.next())

    def test_append_character(self):
        self.assertEqual(CompletionSession(EMPTY, "").append_character, "")
        self.assertEqual(CompletionSession(StaticList("A"), "").append_character, " ")


class CompleterTests(unittest.TestCase):

    def test_without_connection(self):
        completer = Completer()
        self.assertEqual(completer.candidates("SEL"), ["SELECT"])
        self.assertEqual(completer.candidates("sel"), ["SELECT"])
        self.assertEqual(completer.candidates("SELECT * FROM or"), [])

    def test_wraps_bare_connection(self):
        con = duckdb.connect()
        try:
            completer = Completer(con)
            self.assertIsInstance(completer.source, CatalogSource)
            self.assertIs(completer.source.connection, con)
        finally:
            con.close()

    def test_repeat_gives_same_set(self):
        completer = Completer()
        first = completer.candidates("DE")
        self.assertEqual(first, ["DEALLOCATE", "DECLARE", "DELETE FROM"])
        self.assertEqual(completer.candidates("DE"), first)

    def test_query_candidates(self):
        source = FakeSource(["orders", "order_items", "customers"])
        completer = Completer(source)
        self.assertEqual(completer.candidates("SELECT * FROM or"), ["orders", "order_items"])
        self.assertEqual(source.calls, 1)

    def test_cursor_inside_buffer(self):
        completer = Completer()
        self.assertEqual(completer.candidates("INS orders", 3), ["INSERT"])

    def test_variables_are_read_per_request(self):
        variables = {}
        completer = Completer(variables=variables)
        self.assertEqual(completer.candidates(":my"), [])
        variables["my_var"] = "1"
        self.assertEqual(completer.candidates(":my"), [":my_var"])

    def test_append_character_follows_pattern(self):
        completer = Completer()
        completer.candidates("SELECT foo bar ")
        self.assertEqual(completer.append_character, "")
        completer.candidates("SEL")
        self.assertEqual(completer.append_character, " ")

    def test_abandoned_generator_closes_session(self):
        completer = RecordingCompleter(FakeSource(["orders", "order_items"]))
        gen = completer.complete("SELECT * FROM or")
        self.assertEqual(next(gen), "orders")
        gen.close()
        session = completer.sessions[-1]
        self.assertTrue(session.closed)
        self.assertIs(session.provider.state, QueryState.EXHAUSTED)


class CompleteStateTests(unittest.TestCase):

    def drain(self, completer, buffer):
        out = []
        state = 0
        while True:
            item = completer.complete_state(buffer, None, state)
            if item is None:
                return out
            out.append(item)
            state += 1

    def test_protocol(self):
        completer = Completer()
        self.assertEqual(self.drain(completer, "DE"), ["DEALLOCATE", "DECLARE", "DELETE FROM"])
        # state 0 starts over
        self.assertEqual(completer.complete_state("DE", None, 0), "DEALLOCATE")

    def test_one_query_per_request(self):
        source = FakeSource(["orders", "order_items"])
        completer = Completer(source)
        self.assertEqual(self.drain(completer, "SELECT * FROM or"), ["orders", "order_items"])
        self.assertEqual(source.calls, 1)
        self.assertEqual(self.drain(completer, "SELECT * FROM or"), ["orders", "order_items"])
        self.assertEqual(source.calls, 2)

    def test_restart_closes_previous_session(self):
        completer = RecordingCompleter(FakeSource(["orders", "order_items"]))
        completer.complete_state("SELECT * FROM or", None, 0)
        first = completer.sessions[-1]
        completer.complete_state("SEL", None, 0)
        self.assertTrue(first.closed)

    def test_continuation_without_start(self):
        self.assertIsNone(Completer().complete_state("SEL", None, 3))


if __name__ == "__main__":
    unittest.main()
