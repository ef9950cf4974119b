from dataclasses import dataclass, field
from typing import Union

# Parsed value tree: Symbol | Str | Number | Boolean | List
# Frozen dataclasses compare structurally, so equal trees are equal.


@dataclass(frozen=True)
class Symbol:
    text: str


@dataclass(frozen=True)
class Str:
    text: str


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Boolean:
    # No surface syntax produces this yet.
    flag: bool


@dataclass(frozen=True)
class List:
    items: tuple["Value", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


Value = Union[Symbol, Str, Number, Boolean, List]


@dataclass(frozen=True)
class ReaderConfig:
    whitespace: str = " \r\n"
    symbol_chars: str = "+-/*"


DEFAULT_CONFIG = ReaderConfig()
