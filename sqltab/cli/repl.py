r"""Interactive psql-like shell over DuckDB with context-sensitive tab completion.
Commands (prefix with backslash):
  \? / \help               Show this help
  \q / \quit               Exit
  \set [name [value ...]]  List variables, or set one (values are concatenated)
  \unset name              Remove a variable
  \echo [text ...]         Print text (variables are interpolated)
  \timing [on|off]         Show / toggle per-query timing
SQL is buffered until a line ends with ';' (or a blank line is entered).
Variables are interpolated into SQL as :name, :'name' (literal) and :"name"
(identifier).
Environment overrides (read at startup if set):
  SQLTAB_MAX_RECORDS, SQLTAB_SYSTEM_PREFIX, SQLTAB_LOG_LEVEL, SQLTAB_TIMING=1
"""
from __future__ import annotations
from typing import Dict, List, Optional
import os
import time
import shlex
import logging
import duckdb
import pandas as pd

from sqltab.core.catalog import DUCKDB
from sqltab.core.dialect import CatalogDialect
from sqltab.core.errors import DataSourceError
from sqltab.core.session import Completer
from sqltab.core.sql_engine import interpolate_variables
from sqltab.utils.config import config
from sqltab.utils.constants import WORD_BREAKS, ENV_TIMING

try:
    import readline  # type: ignore
except Exception:  # pragma: no cover
    readline = None
# Attempt gnureadline fallback if readline missing
if readline is None:
    try:  # pragma: no cover
        import gnureadline as readline  # type: ignore
    except Exception:  # pragma: no cover
        readline = None

logger = logging.getLogger(__name__)

PROMPT = "sqltab> "
MORE_PROMPT = "... > "

SMART_QUOTE_MAP = {
    '“': '"',
    '”': '"',
    '‘': "'",
    '’': "'",
}

# Global shell for tab completion
_GLOBAL_SESS = None


class Shell:
    """Shell state: the DuckDB connection, variables and display options."""

    def __init__(self, database: Optional[str] = None, cfg=None):
        self.cfg = cfg or config
        self.database = database or ":memory:"
        try:
            self.con = duckdb.connect(self.database)
        except duckdb.Error as e:
            raise DataSourceError(f"Cannot open database {self.database}: {e}")
        self.variables: Dict[str, str] = {}
        self.timing = False
        self.max_col_width = 50
        self.last_query: Optional[str] = None
        self.completer = Completer(self.con, self.variables, CatalogDialect.from_config(self.cfg, DUCKDB))

    def close(self) -> None:
        self.completer.reset()
        try:
            self.con.close()
        except Exception as e:
            logger.debug("Closing connection failed: %s", e)

    def meta(self, cmd: str, args: List[str]) -> bool:
        """Run a backslash command. Returns False when the shell should exit."""
        if cmd in ('q', 'quit'):
            return False
        if cmd in ('?', 'help'):
            print(__doc__ or 'No help available.')
        elif cmd == 'set':
            if not args:
                for name, value in sorted(self.variables.items()):
                    print(f"{name} = '{value}'")
            elif not args[0].isidentifier():
                print(f"\\set: invalid variable name: \"{args[0]}\"")
            else:
                self.variables[args[0]] = ''.join(args[1:])
        elif cmd == 'unset':
            if not args:
                print('\\unset: missing required argument')
            else:
                self.variables.pop(args[0], None)
        elif cmd == 'echo':
            print(' '.join(args))
        elif cmd == 'timing':
            if args:
                self.timing = args[0].lower() in ('on', '1', 'true')
            else:
                self.timing = not self.timing
            print(f"Timing is {'on' if self.timing else 'off'}.")
        else:
            print(f"Invalid command \\{cmd}. Try \\? for help.")
        return True

    def run_query(self, sql: str) -> None:
        if not sql:
            return
        sql = interpolate_variables(_normalize_smart_quotes(sql), self.variables)
        start_t = time.time()
        try:
            df = self.con.execute(sql).fetchdf()
            self.last_query = sql
            if len(df.columns) == 0:
                print('OK')
            else:
                for line in format_table(df, self.max_col_width):
                    print(line)
            if self.timing:
                print(f"Time: {(time.time()-start_t)*1000:.1f} ms")
        except Exception as e:
            print(f"Error: {e}")


def format_table(df: pd.DataFrame, max_col_width: int = 50) -> List[str]:
    """Render ``df`` as psql-style aligned text, ending with the row count."""
    display_cols = [str(c) for c in df.columns]
    raw_cells = {}
    for orig_col, disp_col in zip(df.columns, display_cols):
        col_values = [disp_col]
        for v in df[orig_col].tolist():
            col_values.append('' if pd.isna(v) else str(v))
        raw_cells[disp_col] = col_values
    widths = {dc: min(max(len(x) for x in cells), max_col_width) for dc, cells in raw_cells.items()}
    lines = [
        ' | '.join(dc[:widths[dc]].ljust(widths[dc]) for dc in display_cols),
        '-+-'.join('-'*widths[dc] for dc in display_cols),
    ]
    for i in range(len(df)):
        parts = []
        for dc in display_cols:
            sval = raw_cells[dc][i + 1]
            if len(sval) > widths[dc]:
                sval = sval[: widths[dc]-1] + '…'
            parts.append(sval.ljust(widths[dc]))
        lines.append(' | '.join(parts).rstrip())
    lines.append(f"({len(df)} row{'s' if len(df)!=1 else ''})")
    return lines


def _normalize_smart_quotes(s: str) -> str:
    return ''.join(SMART_QUOTE_MAP.get(ch, ch) for ch in s)


def _safe_split(cmd: str) -> List[str]:
    norm = _normalize_smart_quotes(cmd.strip())
    try:
        return shlex.split(norm)
    except ValueError:
        # Unbalanced quotes: best effort
        return norm.split()


def _completer(text: str, state: int) -> Optional[str]:
    """readline hook: delegate to the shell's completion engine."""
    sess = _GLOBAL_SESS
    if sess is None:
        return None
    line_buffer = text or ''
    cursor = None
    if readline:
        try:
            line_buffer = readline.get_line_buffer()
        except Exception:
            line_buffer = text or ''
        try:
            cursor = readline.get_endidx()
        except Exception:
            cursor = None
    if line_buffer is None:
        line_buffer = text or ''
    try:
        return sess.completer.complete_state(line_buffer, cursor, state)
    except Exception as e:  # pragma: no cover
        logger.debug("Completion failed: %s", e)
        return None


def _setup_readline(history_file: Optional[str]) -> None:
    if not readline:
        return
    try:
        readline.set_completer(_completer)
        readline.set_completer_delims(WORD_BREAKS)
        # libedit (macOS default) needs a different binding than GNU readline
        docstr = getattr(readline, '__doc__', '') or ''
        if 'libedit' in docstr.lower():
            readline.parse_and_bind('bind ^I rl_complete')
        else:
            readline.parse_and_bind('tab: complete')
        if history_file and os.path.exists(history_file):
            readline.read_history_file(history_file)
    except Exception as e:  # pragma: no cover
        logger.debug("readline setup failed: %s", e)


def start_repl(database: Optional[str] = None) -> None:
    """Run the interactive loop until \\q or end of input."""
    global _GLOBAL_SESS
    sess = Shell(database)
    if os.getenv(ENV_TIMING) == '1':
        sess.timing = True
    _GLOBAL_SESS = sess
    history_file = config.get('history_file')
    if history_file:
        history_file = os.path.expanduser(history_file)
    _setup_readline(history_file)

    buffer: List[str] = []

    def flush_query() -> Optional[str]:
        if not buffer:
            return None
        sql = "\n".join(buffer).strip()
        buffer.clear()
        return sql

    try:
        while True:
            try:
                prompt = PROMPT if not buffer else MORE_PROMPT
                try:
                    line = input(prompt)
                except EOFError:
                    print()  # newline on Ctrl-D
                    break
                line = line.rstrip('\n')
                if not buffer and line.startswith('\\'):
                    parts = _safe_split(interpolate_variables(line[1:], sess.variables))
                    if not parts:
                        continue
                    cmd, *args = parts
                    if not sess.meta(cmd, args):
                        break
                    continue
                if line.endswith(';'):
                    content = line[:-1].rstrip()
                    if content:
                        buffer.append(content)
                    sql_to_run = flush_query()
                    if sql_to_run:
                        sess.run_query(sql_to_run)
                elif line.strip():
                    buffer.append(line)
                else:  # blank line flushes any accumulated SQL
                    sql_to_run = flush_query()
                    if sql_to_run:
                        sess.run_query(sql_to_run)
            except KeyboardInterrupt:
                if buffer:
                    buffer.clear()
                    print('^C (cleared buffer)')
                else:
                    print('^C')
                continue
    finally:
        if readline and history_file:
            try:
                readline.write_history_file(history_file)
            except Exception as e:  # pragma: no cover
                logger.debug("Could not write history: %s", e)
        sess.close()
        _GLOBAL_SESS = None
