"""Constants used throughout the sqltab package."""

# Characters that end a word for both the line editor and the context scanner
WORD_BREAKS = "\t\n@$><=;|&{() "

# Number of previous words the dispatcher can look at
CONTEXT_WORDS = 6

# Catalog query defaults
DEFAULT_MAX_RECORDS = 1000
DEFAULT_SYSTEM_SCHEMA = "pg_catalog"
DEFAULT_SYSTEM_PREFIX = "pg_"

# Environment overrides read by the config layer
ENV_MAX_RECORDS = "SQLTAB_MAX_RECORDS"
ENV_SYSTEM_PREFIX = "SQLTAB_SYSTEM_PREFIX"
ENV_LOG_LEVEL = "SQLTAB_LOG_LEVEL"
ENV_TIMING = "SQLTAB_TIMING"

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
