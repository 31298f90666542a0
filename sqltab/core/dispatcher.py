"""Rule-table driver for context-sensitive completion.

A rule pairs a predicate over the :class:`DispatchContext` with an action.
Actions are either a ready :mod:`pattern <sqltab.core.patterns>` or a
callable that builds one from the context (for rules that reuse a previous
word as a query parameter). Rules are tried in order and the first predicate
that holds decides the result.

Word positions are 1-based: ``w1`` is the word just left of the one being
typed, ``w6`` the sixth word back.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, NamedTuple, Optional, Sequence, Tuple, Union
import logging

from sqltab.core import catalog
from sqltab.core.patterns import (
    EMPTY, PATTERN_TYPES, Pattern, ProviderKind, SimpleQuery, StaticList,
)
from sqltab.core.tokenizer import split_qualified_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchContext:
    text: str
    words: Tuple[str, ...]
    variables: Mapping[str, str] = field(default_factory=dict)

    def word(self, position: int) -> str:
        """Return the word ``position`` places back (1-based), or ''."""
        if 1 <= position <= len(self.words):
            return self.words[position - 1]
        return ""


Predicate = Callable[[DispatchContext], bool]
Action = Union[Pattern, Callable[[DispatchContext], Optional[Pattern]]]
WordTest = Union[str, Tuple[str, ...], Callable[[str], bool]]


class Rule(NamedTuple):
    name: str
    when: Predicate
    then: Action


# --- word tests -------------------------------------------------------------

def _word_test(test: WordTest) -> Callable[[str], bool]:
    if isinstance(test, str):
        wanted = test.lower()
        return lambda word: word.lower() == wanted
    if isinstance(test, tuple):
        options = {t.lower() for t in test}
        return lambda word: word.lower() in options
    return test


def not_(test: WordTest) -> Callable[[str], bool]:
    inner = _word_test(test)
    return lambda word: not inner(word)


def exact(*options: str) -> Callable[[str], bool]:
    """Case-sensitive equality with any of ``options``."""
    return lambda word: word in options


def starts_with(prefix: str) -> Callable[[str], bool]:
    """Case-sensitive prefix test."""
    return lambda word: word.startswith(prefix)


def ends_with(suffix: str) -> Callable[[str], bool]:
    return lambda word: word.endswith(suffix)


def char_at(*positions: int, upper: str) -> Callable[[str], bool]:
    """True if any of the given character positions holds ``upper`` (case-insensitive)."""
    def test(word: str) -> bool:
        return any(len(word) > p and word[p].upper() == upper for p in positions)
    return test


# --- predicates ---------------------------------------------------------------

def match(text: Optional[WordTest] = None, **words: WordTest) -> Predicate:
    """Predicate over the typed text and previous words.

    ``match(w2="ALTER", w1=("SET", "RESET"))`` holds when the second word back
    is ALTER and the previous word is SET or RESET, compared case-insensitively.
    Pass :func:`exact`, :func:`starts_with` and friends for other comparisons.
    """
    checks = []
    for key, test in words.items():
        if not (key.startswith("w") and key[1:].isdigit()):
            raise TypeError(f"unknown word position: {key}")
        checks.append((int(key[1:]), _word_test(test)))
    text_check = _word_test(text) if text is not None else None

    def predicate(ctx: DispatchContext) -> bool:
        if text_check is not None and not text_check(ctx.text):
            return False
        return all(check(ctx.word(pos)) for pos, check in checks)
    return predicate


def either(*predicates: Predicate) -> Predicate:
    return lambda ctx: any(p(ctx) for p in predicates)


def both(*predicates: Predicate) -> Predicate:
    return lambda ctx: all(p(ctx) for p in predicates)


def always(ctx: DispatchContext) -> bool:
    return True


# --- actions ----------------------------------------------------------------

def query_about(template: str, info: int, info2: Optional[int] = None) -> Callable[[DispatchContext], Pattern]:
    """SimpleQuery whose auxiliary parameters are previous words."""
    def build(ctx: DispatchContext) -> Pattern:
        params = (ctx.word(info),) if info2 is None else (ctx.word(info), ctx.word(info2))
        return SimpleQuery(template, params)
    return build


def attributes(relation_word: int, addon: str = "") -> Callable[[DispatchContext], Pattern]:
    """Column names of the relation named by a previous word, qualified or not."""
    def build(ctx: DispatchContext) -> Pattern:
        schema, table = split_qualified_name(ctx.word(relation_word))
        if schema is None:
            return SimpleQuery(catalog.ATTRIBUTES + addon, (table,))
        return SimpleQuery(catalog.ATTRIBUTES_WITH_SCHEMA + addon, (table, schema))
    return build


def variables(prefix: str = "", suffix: str = "") -> Callable[[DispatchContext], Pattern]:
    """Shell variable names wrapped in ``prefix``/``suffix``."""
    def build(ctx: DispatchContext) -> Pattern:
        return StaticList(*(f"{prefix}{name}{suffix}" for name in ctx.variables))
    return build


def branch(*cases: Tuple[Predicate, Action]) -> Callable[[DispatchContext], Optional[Pattern]]:
    """Pick among sub-cases once the outer rule has matched; None when none apply."""
    def build(ctx: DispatchContext) -> Optional[Pattern]:
        for predicate, action in cases:
            if predicate(ctx):
                return resolve(action, ctx)
        return None
    return build


def resolve(action: Action, ctx: DispatchContext) -> Optional[Pattern]:
    if isinstance(action, PATTERN_TYPES):
        return action
    return action(ctx)


# --- engine -------------------------------------------------------------------

def dispatch_with(rules: Sequence[Rule], fallback: Callable[[DispatchContext], Optional[Pattern]],
                  text: str, words: Iterable[str],
                  variables: Optional[Mapping[str, str]] = None) -> Tuple[ProviderKind, Pattern]:
    ctx = DispatchContext(text, tuple(words), variables or {})
    for rule in rules:
        if rule.when(ctx):
            pattern = resolve(rule.then, ctx) or EMPTY
            logger.debug("Rule %s matched (%s)", rule.name, pattern.kind.value)
            return pattern.kind, pattern
    pattern = fallback(ctx) or EMPTY
    logger.debug("No rule matched; fallback gave %s", pattern.kind.value)
    return pattern.kind, pattern


def dispatch(text: str, words: Iterable[str],
             variables: Optional[Mapping[str, str]] = None) -> Tuple[ProviderKind, Pattern]:
    """Choose the completion pattern for ``text`` given the previous words."""
    from sqltab.core.rules import RULES, words_after_create_fallback
    return dispatch_with(RULES, words_after_create_fallback, text, words, variables)


__all__ = [
    'DispatchContext', 'Rule', 'not_', 'exact', 'starts_with', 'ends_with', 'char_at',
    'match', 'either', 'both', 'always', 'query_about', 'attributes', 'variables',
    'branch', 'resolve', 'dispatch_with', 'dispatch'
]
