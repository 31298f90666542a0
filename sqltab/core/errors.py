# Error taxonomy. Completion itself never raises these to the line editor.
from __future__ import annotations
from enum import Enum, auto

class ErrorCategory(Enum):
    USER_INPUT = auto()
    DATA_SOURCE = auto()
    CONFIG = auto()
    INTERNAL = auto()

class SqlTabException(Exception):
    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str, *, category: ErrorCategory | None = None):
        super().__init__(message)
        if category:
            self.category = category

class DataSourceError(SqlTabException):
    category = ErrorCategory.DATA_SOURCE

class UserInputError(SqlTabException):
    category = ErrorCategory.USER_INPUT

class ConfigError(SqlTabException):
    category = ErrorCategory.CONFIG

__all__ = [
    'ErrorCategory','SqlTabException','DataSourceError','UserInputError','ConfigError'
]
