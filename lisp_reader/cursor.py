"""Position-tracking view over the source text shared by all readers."""

from typing import Optional

from .errors import UnexpectedEndOfInput
from .types import DEFAULT_CONFIG, ReaderConfig


class Cursor:
    __slots__ = ("text", "position", "config")

    def __init__(self, text: str, config: Optional[ReaderConfig] = None):
        self.text = text
        self.position = 0
        self.config = config or DEFAULT_CONFIG

    def at_end(self) -> bool:
        return self.position == len(self.text)

    def current(self) -> str:
        if self.at_end():
            raise UnexpectedEndOfInput(position=self.position)
        return self.text[self.position]

    def advance(self) -> None:
        if self.at_end():
            raise UnexpectedEndOfInput(position=self.position)
        self.position += 1

    def __repr__(self):
        return f"Cursor(position={self.position}, length={len(self.text)})"
