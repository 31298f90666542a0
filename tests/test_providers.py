#!/usr/bin/env python
"""Tests for candidate providers and the catalog data source."""
import os
import shutil
import tempfile
import unittest

import duckdb

from sqltab.core.dialect import CatalogDialect
from sqltab.core.patterns import EMPTY, Constant, Filenames, SimpleQuery, StaticList
from sqltab.core.providers import (
    ConstantProvider, FilenameProvider, ListProvider, QueryState, SimpleQueryProvider, provider_for,
)
from sqltab.core.sql_engine import CatalogSource


class FakeSource(CatalogSource):
    """Returns canned rows and records every query it is asked to run."""

    def __init__(self, rows=None):
        super().__init__(connection=object())
        self.rows = rows
        self.queries = []

    def fetch_column(self, sql):
        self.queries.append(sql)
        return None if self.rows is None else list(self.rows)


class ConstantProviderTests(unittest.TestCase):

    def test_yields_once_regardless_of_text(self):
        self.assertEqual(list(provider_for(Constant("ON"), "xyz")), ["ON"])

    def test_empty_yields_nothing(self):
        p = provider_for(EMPTY, "")
        self.assertIsInstance(p, ConstantProvider)
        self.assertIsNone(p.next())


class ListProviderTests(unittest.TestCase):

    def test_case_sensitive_pass(self):
        p = provider_for(StaticList("SELECT", "SET", "SHOW"), "SE")
        self.assertIsInstance(p, ListProvider)
        self.assertEqual(list(p), ["SELECT", "SET"])

    def test_case_insensitive_fallback(self):
        self.assertEqual(list(provider_for(StaticList("SELECT", "SET", "SHOW"), "se")),
                         ["SELECT", "SET"])

    def test_no_fallback_when_exact_case_matched(self):
        self.assertEqual(list(provider_for(StaticList("SELECT", "select", "SET"), "se")),
                         ["select"])

    def test_nothing_matches(self):
        p = provider_for(StaticList("a", "b"), "z")
        self.assertIsNone(p.next())
        self.assertIsNone(p.next())


class QueryProviderTests(unittest.TestCase):

    TEMPLATE = "SELECT name FROM t WHERE substring(name,1,{length})='{text}'"

    def test_query_text_and_row_cap(self):
        source = FakeSource([])
        p = provider_for(SimpleQuery(self.TEMPLATE), "o'b", source)
        self.assertIsInstance(p, SimpleQueryProvider)
        self.assertIsNone(p.next())
        self.assertEqual(len(source.queries), 1)
        sql = source.queries[0]
        self.assertIn("substring(name,1,3)='o''b'", sql)
        self.assertTrue(sql.endswith("\nLIMIT 1000"))

    def test_configured_row_cap(self):
        source = FakeSource([])
        dialect = CatalogDialect().with_options(max_records=25)
        provider_for(SimpleQuery(self.TEMPLATE), "", source, dialect).next()
        self.assertTrue(source.queries[0].endswith("\nLIMIT 25"))

    def test_auxiliary_parameters_are_escaped(self):
        source = FakeSource([])
        template = "SELECT a FROM t WHERE x='{info}' AND y='{info2}'"
        provider_for(SimpleQuery(template, ("it's", "b")), "", source).next()
        self.assertIn("x='it''s' AND y='b'", source.queries[0])

    def test_state_machine_and_filtering(self):
        source = FakeSource(["orders", "Owners", "customers"])
        p = provider_for(SimpleQuery(self.TEMPLATE), "o", source)
        self.assertIs(p.state, QueryState.NOT_STARTED)
        self.assertEqual(p.next(), "orders")
        self.assertIs(p.state, QueryState.STREAMING)
        self.assertEqual(p.next(), "Owners")
        self.assertIsNone(p.next())
        self.assertIs(p.state, QueryState.EXHAUSTED)
        self.assertIsNone(p.next())
        self.assertEqual(len(source.queries), 1)

    def test_failed_query_is_exhausted(self):
        source = FakeSource(None)
        p = provider_for(SimpleQuery(self.TEMPLATE), "", source)
        self.assertIsNone(p.next())
        self.assertIs(p.state, QueryState.EXHAUSTED)

    def test_close_releases_rows(self):
        p = provider_for(SimpleQuery(self.TEMPLATE), "", FakeSource(["a", "b"]))
        self.assertEqual(p.next(), "a")
        p.close()
        self.assertIs(p.state, QueryState.EXHAUSTED)
        self.assertIsNone(p.next())

    def test_without_connection(self):
        self.assertIsNone(provider_for(SimpleQuery(self.TEMPLATE), "", CatalogSource()).next())


class CatalogSourceTests(unittest.TestCase):

    def setUp(self):
        self.con = duckdb.connect()
        self.con.execute("CREATE TABLE t (name VARCHAR)")
        self.con.execute("INSERT INTO t VALUES ('orders'), (NULL), ('customers')")

    def tearDown(self):
        self.con.close()

    def test_first_column_as_text(self):
        rows = CatalogSource(self.con).fetch_column("SELECT name, 1 FROM t ORDER BY name")
        self.assertEqual(rows, ["customers", "orders"])

    def test_failure_returns_none(self):
        self.assertIsNone(CatalogSource(self.con).fetch_column("SELECT nope FROM missing"))

    def test_missing_connection(self):
        source = CatalogSource()
        self.assertFalse(source.available)
        self.assertIsNone(source.fetch_column("SELECT 1"))


class FilenameProviderTests(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        open(os.path.join(self.tmp, "alpha.sql"), "w").close()
        open(os.path.join(self.tmp, ".hidden"), "w").close()
        os.mkdir(os.path.join(self.tmp, "alpine"))

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def test_prefix_match_marks_directories(self):
        p = provider_for(Filenames(), os.path.join(self.tmp, "al"))
        self.assertIsInstance(p, FilenameProvider)
        self.assertEqual(list(p), [os.path.join(self.tmp, "alpha.sql"),
                                   os.path.join(self.tmp, "alpine") + "/"])

    def test_hidden_files_need_a_dot(self):
        listed = list(provider_for(Filenames(), self.tmp + os.sep))
        self.assertNotIn(os.path.join(self.tmp, ".hidden"), listed)
        dotted = list(provider_for(Filenames(), os.path.join(self.tmp, ".")))
        self.assertEqual(dotted, [os.path.join(self.tmp, ".hidden")])

    def test_missing_directory(self):
        self.assertIsNone(provider_for(Filenames(), os.path.join(self.tmp, "nope", "x")).next())


if __name__ == "__main__":
    unittest.main()
