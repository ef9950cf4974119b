"""Reader errors. Every failure aborts the whole parse."""

from typing import Optional


class ReaderError(SyntaxError):
    """Base class for malformed input.

    `position` is the codepoint index where the failure was detected,
    or None when no position applies.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        # The traceback formatter prints SyntaxError.msg, so the position goes there.
        if position is not None:
            super().__init__(f"{message} at position {position}")
        else:
            super().__init__(message)
        self.message = message
        self.position = position


class EmptyInput(ReaderError):
    def __init__(self):
        super().__init__("empty input")


class UnexpectedEndOfInput(ReaderError):
    def __init__(self, message: str = "unexpected EOF", position: Optional[int] = None):
        super().__init__(message, position)


class InvalidCharacter(ReaderError):
    char: str

    def __init__(self, char: str, position: Optional[int] = None):
        super().__init__(f"invalid character {char!r}", position)
        self.char = char


class NotANumber(ReaderError):
    literal: str

    def __init__(self, literal: str, position: Optional[int] = None):
        super().__init__(f"not a number: {literal!r}", position)
        self.literal = literal
