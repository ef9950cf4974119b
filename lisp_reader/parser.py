"""Recursive-descent reader for nested list expressions.

Tokenizing and parsing are fused: each reader looks at one character of
lookahead on the shared Cursor and consumes exactly one value.
"""

import logging
from typing import Optional

from .cursor import Cursor
from .errors import EmptyInput, InvalidCharacter, NotANumber, UnexpectedEndOfInput
from .types import List, Number, ReaderConfig, Str, Symbol, Value

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


def is_symbol_char(ch: str, config: ReaderConfig) -> bool:
    return ch.isalnum() or ch in config.symbol_chars


def skip_whitespace(cursor: Cursor) -> None:
    whitespace = cursor.config.whitespace
    while not cursor.at_end() and cursor.current() in whitespace:
        cursor.advance()


def read_number(cursor: Cursor) -> Number:
    start = cursor.position
    value = 0
    # Accumulate numerically; int(str) is capped at a few thousand digits.
    while not cursor.at_end() and cursor.current() in DIGITS:
        value = value * 10 + DIGITS.index(cursor.current())
        cursor.advance()
    if cursor.position == start:
        literal = "" if cursor.at_end() else cursor.current()
        raise NotANumber(literal, start)
    return Number(value)


def read_symbol(cursor: Cursor) -> Symbol:
    start = cursor.position
    buf = ""
    # End of input terminates a symbol normally.
    while not cursor.at_end() and is_symbol_char(cursor.current(), cursor.config):
        buf += cursor.current()
        cursor.advance()
    if not buf:
        raise InvalidCharacter(cursor.current(), start)
    return Symbol(buf)


def read_string(cursor: Cursor) -> Str:
    start = cursor.position
    if cursor.current() != '"':
        raise InvalidCharacter(cursor.current(), start)
    cursor.advance()
    buf = ""
    while True:
        if cursor.at_end():
            raise UnexpectedEndOfInput("unterminated string", start)
        ch = cursor.current()
        if ch == '"':
            break
        buf += ch
        cursor.advance()
    cursor.advance()
    return Str(buf)


def read_list(cursor: Cursor) -> List:
    start = cursor.position
    if cursor.current() != "(":
        raise InvalidCharacter(cursor.current(), start)
    cursor.advance()
    items: list[Value] = []
    while True:
        # Whitespace before the closing paren belongs to no element.
        skip_whitespace(cursor)
        if cursor.at_end():
            raise UnexpectedEndOfInput("unterminated (", start)
        if cursor.current() == ")":
            break
        items.append(read_expression(cursor))
    cursor.advance()
    return List(items)


def read_expression(cursor: Cursor) -> Value:
    """Read exactly one value, skipping leading whitespace."""
    skip_whitespace(cursor)
    ch = cursor.current()
    if ch == "(":
        return read_list(cursor)
    if ch == '"':
        return read_string(cursor)
    if ch in DIGITS:
        return read_number(cursor)
    if is_symbol_char(ch, cursor.config):
        return read_symbol(cursor)
    raise InvalidCharacter(ch, cursor.position)


def parse_all(text: str, config: Optional[ReaderConfig] = None) -> list[Value]:
    """Parse every top-level expression in `text`, in order.

    Raises a ReaderError subclass on the first malformed construct;
    no partial result is returned.
    """
    if len(text) == 0:
        raise EmptyInput()
    cursor = Cursor(text, config)
    values: list[Value] = []
    while True:
        skip_whitespace(cursor)
        if cursor.at_end():
            break
        values.append(read_expression(cursor))
    logger.debug("parsed %d top-level values from %d characters", len(values), len(text))
    return values
