"""CLI entry for sqltab with subcommands.

Subcommands:
  repl      Start the interactive shell (optional DuckDB database path)
  complete  Print completion candidates for a buffer
  words     Print the words the completer sees before the cursor
  config    View or update configuration
"""
from __future__ import annotations
import argparse
import sys
import logging
from typing import Dict, List, Optional

import duckdb

from sqltab import __version__
from sqltab.cli.repl import start_repl
from sqltab.core.catalog import DUCKDB
from sqltab.core.dialect import CatalogDialect
from sqltab.core.errors import ConfigError, DataSourceError, UserInputError
from sqltab.core.session import Completer
from sqltab.core.tokenizer import previous_words
from sqltab.utils.config import config
from sqltab.utils.constants import CONTEXT_WORDS, LOG_LEVELS
from sqltab.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

BANNER = f"sqltab {__version__} (DuckDB {duckdb.__version__})\nType \\? for help, \\q to quit."


# --- Helpers shared across subcommands ---

def _parse_vars(var_list: List[str]) -> Dict[str, str]:
    variables: Dict[str, str] = {}
    for item in var_list:
        if '=' not in item:
            logger.warning("Ignoring malformed --var '%s' (expected k=v)", item)
            continue
        k, v = item.split('=', 1)
        k = k.strip()
        if not k.isidentifier():
            logger.warning("Variable name '%s' is not a valid identifier; skipping", k)
            continue
        variables[k] = v
    return variables


def _check_cursor(buffer: str, cursor: Optional[int]) -> None:
    if cursor is not None and not 0 <= cursor <= len(buffer):
        raise UserInputError(f"--cursor must be between 0 and {len(buffer)}, got {cursor}")


# --- Subcommand handlers ---

def cmd_repl(args: argparse.Namespace) -> int:
    if not args.no_banner:
        print(BANNER)
    start_repl(database=args.database)
    return 0


def cmd_complete(args: argparse.Namespace) -> int:
    _check_cursor(args.buffer, args.cursor)
    dialect = CatalogDialect.from_config(config, DUCKDB if args.database else None)
    if args.max_records is not None:
        if args.max_records <= 0:
            raise UserInputError(f"--max-records must be positive, got {args.max_records}")
        dialect = dialect.with_options(max_records=args.max_records)
    con = None
    if args.database:
        try:
            con = duckdb.connect(args.database, read_only=True)
        except duckdb.Error as e:
            raise DataSourceError(f"Cannot open database {args.database}: {e}")
    try:
        completer = Completer(con, _parse_vars(args.var), dialect)
        for candidate in completer.complete(args.buffer, args.cursor):
            print(candidate)
    finally:
        if con is not None:
            con.close()
    return 0


def cmd_words(args: argparse.Namespace) -> int:
    _check_cursor(args.buffer, args.cursor)
    for i, word in enumerate(previous_words(args.buffer, args.cursor, args.count), start=1):
        print(f"w{i}: {word}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle configuration commands."""
    if args.list:
        for key, value in config.settings.items():
            print(f"{key} = {value}")
    elif args.get:
        value = config.get(args.get)
        print(f"{args.get} = {value}")
    elif args.set:
        if args.value is None:
            raise UserInputError("--set requires --value")
        # Convert value to appropriate type
        value = args.value
        if value.lower() == 'true':
            value = True
        elif value.lower() == 'false':
            value = False
        elif value.lower() == 'none':
            value = None
        elif value.isdigit():
            value = int(value)

        config.set(args.set, value)
        config.save()
        print(f"Set {args.set} = {value}")
    else:
        print(f"Configuration file: {config.config_file}")

    return 0


# --- Parser construction ---

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='sqltab', description='Context-sensitive SQL tab completion')
    p.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    sub = p.add_subparsers(dest='command', required=True)

    # repl
    repl_p = sub.add_parser('repl', help='Start interactive shell')
    repl_p.add_argument('database', nargs='?', help='DuckDB database file (default: in-memory)')
    repl_p.add_argument('--no-banner', action='store_true', help='Suppress banner on start')
    repl_p.add_argument('--log-level', choices=LOG_LEVELS,
                        help='Log level (default: log_level from config)')

    # complete
    comp_p = sub.add_parser('complete', help='Print completion candidates for a buffer')
    comp_p.add_argument('buffer', help='Line buffer, e.g. "SELECT * FROM "')
    comp_p.add_argument('--cursor', type=int, help='Cursor offset (default: end of buffer)')
    comp_p.add_argument('--database', help='DuckDB database file to query for catalog names')
    comp_p.add_argument('--var', action='append', default=[], metavar='k=v',
                        help='Shell variable visible to :name completion (repeatable)')
    comp_p.add_argument('--max-records', type=int, help='Row cap for catalog queries')
    comp_p.add_argument('--log-level', choices=LOG_LEVELS,
                        help='Log level (default: log_level from config)')

    # words
    words_p = sub.add_parser('words', help='Show the previous words seen by the completer')
    words_p.add_argument('buffer', help='Line buffer')
    words_p.add_argument('--cursor', type=int, help='Cursor offset (default: end of buffer)')
    words_p.add_argument('--count', type=int, default=CONTEXT_WORDS, help='Number of words to show')
    words_p.add_argument('--log-level', choices=LOG_LEVELS,
                        help='Log level (default: log_level from config)')

    # config management
    config_p = sub.add_parser('config', help='View or update configuration')
    config_p.add_argument('--list', action='store_true', help='List all configuration values')
    config_p.add_argument('--get', metavar='KEY', help='Get specific configuration value')
    config_p.add_argument('--set', metavar='KEY', help='Set configuration value')
    config_p.add_argument('--value', help='Value to set (used with --set)')
    config_p.add_argument('--log-level', choices=LOG_LEVELS,
                        help='Log level (default: log_level from config)')

    return p


# --- Main entry ---

def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level or config.log_level())

        if args.command == 'repl':
            code = cmd_repl(args)
        elif args.command == 'complete':
            code = cmd_complete(args)
        elif args.command == 'words':
            code = cmd_words(args)
        elif args.command == 'config':
            code = cmd_config(args)
        else:
            parser.error('Unknown command')
            return
        sys.exit(code)
    except (UserInputError, ConfigError) as e:
        logging.error(f"{e}")
        sys.exit(2)
    except DataSourceError as e:
        logging.error(f"{e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation interrupted by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Unhandled error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
