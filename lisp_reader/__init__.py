from .parser import parse_all, read_expression
from .cursor import Cursor
from .errors import ReaderError, EmptyInput, UnexpectedEndOfInput, InvalidCharacter, NotANumber
from .types import Symbol, Str, Number, Boolean, List, Value, ReaderConfig, DEFAULT_CONFIG

__all__ = [
    "parse_all", "read_expression", "Cursor",
    "ReaderError", "EmptyInput", "UnexpectedEndOfInput", "InvalidCharacter", "NotANumber",
    "Symbol", "Str", "Number", "Boolean", "List", "Value", "ReaderConfig", "DEFAULT_CONFIG",
]
