"""Main entry point for the sqltab CLI."""
from sqltab.cli.main import main

if __name__ == "__main__":
    main()
