#!/usr/bin/env python3
"""Tests for readline completion in the shell."""
import unittest

from sqltab.cli import repl as repl_mod
from sqltab.cli.repl import Shell, _completer


class _FakeReadline:
    def __init__(self, buf):
        self._buf = buf

    def get_line_buffer(self):
        return self._buf


def _collect(line: str):
    """Drive the completer through the readline protocol for ``line``."""
    repl_mod.readline = _FakeReadline(line)  # type: ignore
    out = []
    state = 0
    while True:
        item = _completer(line, state)
        if item is None:
            return out
        out.append(item)
        state += 1


class TestCommandCompletion(unittest.TestCase):
    """Test completion through the readline hook."""

    def setUp(self):
        self._saved_readline = repl_mod.readline
        self.sess = Shell()
        repl_mod._GLOBAL_SESS = self.sess

    def tearDown(self):
        repl_mod.readline = self._saved_readline
        repl_mod._GLOBAL_SESS = None
        self.sess.close()

    def test_sql_keywords(self):
        self.assertEqual(_collect("SEL"), ["SELECT"])
        self.assertIn("DELETE FROM", _collect("DEL"))

    def test_backslash_commands_keep_backslash(self):
        completions = _collect("\\ti")
        self.assertEqual(completions, ["\\timing"])
        for item in _collect("\\"):
            self.assertTrue(item.startswith("\\"), f"Completion {item} should start with backslash")

    def test_shell_variables(self):
        self.sess.meta("set", ["my_var", "1"])
        self.assertEqual(_collect(":my"), [":my_var"])

    def test_no_session(self):
        repl_mod._GLOBAL_SESS = None
        repl_mod.readline = _FakeReadline("SEL")  # type: ignore
        self.assertIsNone(_completer("SEL", 0))

    def test_text_used_without_readline(self):
        repl_mod.readline = None
        self.assertEqual(_completer("SEL", 0), "SELECT")


if __name__ == "__main__":
    unittest.main()
