#!/usr/bin/env python
"""Tests for configuration, the catalog dialect and logging setup."""
import json
import logging
import os
import shutil
import tempfile
import unittest

from sqltab.core.dialect import CatalogDialect, POSTGRES
from sqltab.core.errors import (
    ConfigError, DataSourceError, ErrorCategory, SqlTabException, UserInputError,
)
from sqltab.utils.config import Config, DEFAULT_CONFIG
from sqltab.utils.logging_setup import configure_logging


class ConfigTests(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp, "config.json")

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def test_defaults(self):
        cfg = Config(self.path, environ={})
        self.assertEqual(cfg.settings, DEFAULT_CONFIG)
        self.assertEqual(cfg.max_records(), 1000)

    def test_environment_overrides(self):
        cfg = Config(self.path, environ={"SQLTAB_MAX_RECORDS": "50", "SQLTAB_SYSTEM_PREFIX": "sys_"})
        self.assertEqual(cfg.max_records(), 50)
        self.assertEqual(cfg.get("system_prefix"), "sys_")

    def test_invalid_max_records(self):
        for bad in ("0", "-3", "lots"):
            cfg = Config(self.path, environ={"SQLTAB_MAX_RECORDS": bad})
            with self.assertRaises(ConfigError):
                cfg.max_records()

    def test_log_level(self):
        self.assertEqual(Config(self.path, environ={}).log_level(), "WARNING")
        self.assertEqual(Config(self.path, environ={"SQLTAB_LOG_LEVEL": "debug"}).log_level(), "DEBUG")
        with self.assertRaises(ConfigError):
            Config(self.path, environ={"SQLTAB_LOG_LEVEL": "verbose"}).log_level()

    def test_save_and_reload(self):
        cfg = Config(self.path, environ={})
        cfg.set("escape_backslashes", True)
        cfg.save()
        with open(self.path) as f:
            self.assertTrue(json.load(f)["escape_backslashes"])
        self.assertTrue(Config(self.path, environ={}).get("escape_backslashes"))

    def test_broken_file_keeps_defaults(self):
        with open(self.path, "w") as f:
            f.write("{not json")
        with self.assertLogs("sqltab.utils.config", level="WARNING"):
            cfg = Config(self.path, environ={})
        self.assertEqual(cfg.get("max_records"), 1000)


class DialectTests(unittest.TestCase):

    def test_from_config(self):
        tmp = tempfile.mkdtemp()
        try:
            cfg = Config(os.path.join(tmp, "c.json"),
                         environ={"SQLTAB_MAX_RECORDS": "7", "SQLTAB_SYSTEM_PREFIX": "sys_"})
            dialect = CatalogDialect.from_config(cfg)
        finally:
            shutil.rmtree(tmp)
        self.assertEqual(dialect.max_records, 7)
        self.assertEqual(dialect.system_prefix, "sys_")
        self.assertEqual(dialect.namespace_relation, POSTGRES.namespace_relation)

    def test_with_options_copies(self):
        changed = POSTGRES.with_options(max_records=5)
        self.assertEqual(changed.max_records, 5)
        self.assertEqual(POSTGRES.max_records, 1000)
        self.assertEqual(POSTGRES.quoted("x"), "pg_catalog.quote_ident(x)")


class ErrorTests(unittest.TestCase):

    def test_categories(self):
        self.assertIs(ConfigError("x").category, ErrorCategory.CONFIG)
        self.assertIs(UserInputError("x").category, ErrorCategory.USER_INPUT)
        self.assertIs(DataSourceError("x").category, ErrorCategory.DATA_SOURCE)
        self.assertIs(SqlTabException("x").category, ErrorCategory.INTERNAL)
        self.assertIs(SqlTabException("x", category=ErrorCategory.DATA_SOURCE).category,
                      ErrorCategory.DATA_SOURCE)


class LoggingTests(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def test_invalid_level(self):
        with self.assertRaises(ValueError):
            configure_logging("LOUD")

    def test_level_applied(self):
        configure_logging("debug")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        self.assertEqual(logging.getLogger("duckdb").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
