"""Left-context scanning of the line buffer.

The scanner walks backwards from the cursor and recovers the words that
precede the one being typed. It is a heuristic, not a SQL lexer: double
quotes group a word, a parenthesized list such as ``(a, b)`` is one word, and
anything else odd simply yields short or empty words.
"""
from __future__ import annotations
from typing import Optional, Tuple

from sqltab.utils.constants import WORD_BREAKS, CONTEXT_WORDS


def _clamp(buffer: str, cursor: Optional[int]) -> int:
    if cursor is None:
        return len(buffer)
    return max(0, min(cursor, len(buffer)))


def current_word(buffer: str, cursor: Optional[int] = None) -> Tuple[int, str]:
    """Return ``(start, text)`` for the unfinished word ending at the cursor."""
    point = _clamp(buffer, cursor)
    start = point
    while start > 0 and buffer[start - 1] not in WORD_BREAKS:
        start -= 1
    return start, buffer[start:point]


def previous_words(buffer: str, cursor: Optional[int] = None, count: int = CONTEXT_WORDS) -> Tuple[str, ...]:
    """Return the ``count`` words before the word under the cursor.

    Index 0 is the nearest word. Missing words are returned as ``""``.
    """
    point = _clamp(buffer, cursor)

    # skip back over the word being typed
    i = point - 1
    while i >= 0 and buffer[i] not in WORD_BREAKS:
        i -= 1
    point = i

    words = []
    for _ in range(count):
        end = point
        while end >= 0 and buffer[end].isspace():
            end -= 1
        if end < 0:
            point = end
            words.append("")
            continue

        in_quotes = False
        depth = 0
        start = end
        while start > 0:
            ch = buffer[start]
            if ch == '"':
                in_quotes = not in_quotes
                # an opening quote right after a break starts the word
                if not in_quotes and depth == 0 and buffer[start - 1] in WORD_BREAKS:
                    break
            elif not in_quotes:
                if ch == ')':
                    depth += 1
                elif ch == '(':
                    depth -= 1
                    if depth <= 0:
                        break
                elif depth == 0 and buffer[start - 1] in WORD_BREAKS:
                    break
            start -= 1

        point = start - 1
        words.append(buffer[start:end + 1])
    return tuple(words)


def split_qualified_name(name: str) -> Tuple[Optional[str], str]:
    """Split ``schema.relation`` on the first dot outside double quotes.

    Quotes are kept. Returns ``(None, name)`` when there is no qualifier or
    nothing follows the dot.
    """
    dots = []
    in_quotes = False
    for idx, ch in enumerate(name):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == '.' and not in_quotes:
            dots.append(idx)
    if not dots:
        return None, name
    end = dots[1] if len(dots) > 1 else len(name)
    schema, relation = name[:dots[0]], name[dots[0] + 1:end]
    if not schema or not relation:
        return None, name
    return schema, relation


__all__ = ['current_word', 'previous_words', 'split_qualified_name']
