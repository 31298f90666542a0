#!/usr/bin/env python
"""Tests for the sqltab command line."""
import io
import logging
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

import duckdb

from sqltab.cli.main import _parse_vars, build_parser, main
from sqltab.utils.config import config


class CliTests(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def run_main(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            with self.assertRaises(SystemExit) as cm:
                main(argv)
        return cm.exception.code, buf.getvalue()

    def test_complete(self):
        code, out = self.run_main(["complete", "SEL"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["SELECT"])

    def test_complete_with_variables(self):
        code, out = self.run_main(["complete", ":my", "--var", "my_var=1", "--var", "other=2"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [":my_var"])

    def test_complete_with_cursor(self):
        code, out = self.run_main(["complete", "INS orders", "--cursor", "3"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["INSERT"])

    def test_bad_cursor(self):
        code, _ = self.run_main(["complete", "SEL", "--cursor", "99"])
        self.assertEqual(code, 2)

    def test_bad_max_records(self):
        code, _ = self.run_main(["complete", "SEL", "--max-records", "0"])
        self.assertEqual(code, 2)

    def test_words(self):
        code, out = self.run_main(["words", "SELECT * FROM t", "--count", "3"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["w1: FROM", "w2: *", "w3: SELECT"])

    def test_config_get(self):
        code, out = self.run_main(["config", "--get", "system_schema"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("system_schema = "))

    def test_config_set_needs_value(self):
        code, _ = self.run_main(["config", "--set", "max_records"])
        self.assertEqual(code, 2)

    def test_command_required(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args([])

    def test_invalid_configured_log_level(self):
        with mock.patch.dict(config.settings, {"log_level": "verbose"}):
            code, out = self.run_main(["complete", "SEL"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")

    def test_log_level_flag_wins_over_config(self):
        with mock.patch.dict(config.settings, {"log_level": "verbose"}):
            code, out = self.run_main(["complete", "SEL", "--log-level", "ERROR"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["SELECT"])

    def test_missing_database(self):
        tmp = tempfile.mkdtemp()
        try:
            missing = os.path.join(tmp, "absent.duckdb")
            with mock.patch("sqltab.cli.main.logging.error") as log_error:
                code, _ = self.run_main(["complete", "SEL", "--database", missing])
        finally:
            shutil.rmtree(tmp)
        self.assertEqual(code, 1)
        self.assertIn("Cannot open database", log_error.call_args[0][0])
        self.assertNotIn("exc_info", log_error.call_args[1])

    def test_complete_table_names_from_database(self):
        tmp = tempfile.mkdtemp()
        try:
            path = os.path.join(tmp, "shop.duckdb")
            con = duckdb.connect(path)
            con.execute("CREATE TABLE orders (id INTEGER)")
            con.close()
            code, out = self.run_main(["complete", "DROP TABLE or", "--database", path])
        finally:
            shutil.rmtree(tmp)
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["orders"])


class ParseVarsTests(unittest.TestCase):

    def test_malformed_entries_are_skipped(self):
        with self.assertLogs("sqltab.cli.main", level="WARNING"):
            parsed = _parse_vars(["a=1", "novalue", "1x=2", "b=x=y"])
        self.assertEqual(parsed, {"a": "1", "b": "x=y"})


if __name__ == "__main__":
    unittest.main()
