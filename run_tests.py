#!/usr/bin/env python3
"""
Run all tests for the sqltab package.

This script discovers and runs all tests in the project using pytest.
"""
import sys
import subprocess
import os
import argparse

REQUIRED = ('duckdb', 'pandas')


def ensure_dependencies():
    """Ensure duckdb and pandas are importable; try install once; on failure show diagnostics."""
    import importlib
    missing = []
    for name in REQUIRED:
        try:
            importlib.import_module(name)
        except ImportError:
            missing.append(name)
    if not missing:
        return
    print(f"[ensure_dependencies] missing {', '.join(missing)}; attempting installation...")
    print(f"Python executable: {sys.executable}")
    subprocess.run([sys.executable, '-m', 'pip', 'install', *missing], check=False)
    for name in missing:
        try:
            importlib.import_module(name)
        except ImportError:
            print(f"[ensure_dependencies] FAILED to import {name} after install attempt.")
            print("sys.path: \n" + "\n".join(sys.path))
            print(f"Suggest: activate correct venv or run: python -m pip install {name}")
            raise


def run_tests(verbose=False, coverage=False, specific_test=None):
    """Run all tests using pytest."""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

    ensure_dependencies()

    import pytest
    args = []
    if verbose:
        args.append('-v')
    if coverage:
        args.extend(['--cov=sqltab', '--cov-report=term', '--cov-report=html'])
    if specific_test:
        args.append(specific_test)
    print("Running tests with pytest args:", ' '.join(args) if args else '(none)')
    return pytest.main(args)


def main():
    """Parse arguments and run tests."""
    parser = argparse.ArgumentParser(description="Run sqltab package tests")
    parser.add_argument("-v", "--verbose", action="store_true", help="Increase verbosity")
    parser.add_argument("--coverage", action="store_true", help="Generate test coverage report")
    parser.add_argument("test", nargs="?", help="Specific test file or directory to run")
    args = parser.parse_args()

    return run_tests(verbose=args.verbose, coverage=args.coverage, specific_test=args.test)


if __name__ == "__main__":
    sys.exit(main())
