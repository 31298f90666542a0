"""Completion engine: tokenizer, rule dispatch, providers and sessions."""
from sqltab.core.session import Completer, CompletionSession

__all__ = ['Completer', 'CompletionSession']
