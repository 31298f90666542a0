#!/usr/bin/env python3
"""Test SQL text helpers: variable interpolation and query templates."""
import unittest

from sqltab.core.sql_engine import (
    apply_limit, escape_literal, fill_template, interpolate_variables, quote_identifier,
)


class TestVariableInterpolation(unittest.TestCase):
    """Test case for shell variable interpolation."""

    def test_raw_value(self):
        sql = "SELECT * FROM :tbl"
        self.assertEqual(interpolate_variables(sql, {"tbl": "orders"}), "SELECT * FROM orders")

    def test_literal_escapes_quotes(self):
        sql = "SELECT * FROM t WHERE name = :'name'"
        self.assertEqual(interpolate_variables(sql, {"name": "O'Brien"}),
                         "SELECT * FROM t WHERE name = 'O''Brien'")

    def test_identifier(self):
        sql = 'SELECT :"col" FROM t'
        self.assertEqual(interpolate_variables(sql, {"col": 'odd"name'}), 'SELECT "odd""name" FROM t')

    def test_sql_injection_prevention(self):
        sql = "SELECT * FROM t WHERE name = :'name'"
        self.assertEqual(interpolate_variables(sql, {"name": "'; DROP TABLE users; --"}),
                         "SELECT * FROM t WHERE name = '''; DROP TABLE users; --'")

    def test_unknown_variable_left_alone(self):
        sql = "SELECT :missing, :'missing'"
        self.assertEqual(interpolate_variables(sql, {"other": "x"}), sql)

    def test_casts_are_not_variables(self):
        sql = "SELECT 1::text"
        self.assertEqual(interpolate_variables(sql, {"text": "boom"}), sql)

    def test_quoted_text_left_alone(self):
        self.assertEqual(interpolate_variables("SELECT 'a:b', :b", {"b": "X"}), "SELECT 'a:b', X")
        self.assertEqual(interpolate_variables("SELECT 'it''s :b' AS \":b\"", {"b": "X"}),
                         "SELECT 'it''s :b' AS \":b\"")

    def test_unterminated_quote_swallows_rest(self):
        self.assertEqual(interpolate_variables("SELECT 'oops :b", {"b": "X"}), "SELECT 'oops :b")

    def test_no_variables(self):
        self.assertEqual(interpolate_variables("SELECT :a", None), "SELECT :a")
        self.assertEqual(interpolate_variables("SELECT :a", {}), "SELECT :a")


class TestTemplates(unittest.TestCase):

    def test_fill_template(self):
        template = "WHERE substring(n,1,{length})='{text}' AND r='{info}' AND s='{info2}'"
        self.assertEqual(fill_template(template, "ab", ("x'y", "z")),
                         "WHERE substring(n,1,2)='ab' AND r='x''y' AND s='z'")

    def test_length_is_unescaped(self):
        self.assertEqual(fill_template("{length}:{text}", "a'b"), "3:a''b")

    def test_missing_params_are_empty(self):
        self.assertEqual(fill_template("'{info}','{info2}'", ""), "'',''")

    def test_backslash_escaping(self):
        self.assertEqual(escape_literal("a\\b'c"), "a\\b''c")
        self.assertEqual(escape_literal("a\\b'c", escape_backslashes=True), "a\\\\b''c")

    def test_apply_limit(self):
        self.assertEqual(apply_limit("SELECT 1", 10), "SELECT 1\nLIMIT 10")
        self.assertEqual(apply_limit("SELECT 1", None), "SELECT 1")

    def test_quote_identifier(self):
        self.assertEqual(quote_identifier("a b"), '"a b"')


if __name__ == "__main__":
    unittest.main()
