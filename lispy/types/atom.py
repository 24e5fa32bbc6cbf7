"""Atomic values of the language: numbers, symbols, booleans and nil."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Number:
    """A double-precision number. Integer literals are stored as floats too."""

    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self):
        return "true" if self.value else "false"


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class NilType:
    """The empty list and list terminator. There is exactly one instance."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "NIL"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()

Atom = Union[Number, Symbol, Boolean, NilType]
ATOM_TYPES = (Number, Symbol, Boolean, NilType)


def is_atom(value) -> bool:
    return isinstance(value, ATOM_TYPES)
