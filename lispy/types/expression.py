"""Expression tree for lispy: atoms, cons cells, closures and the void marker.

A proper list is a right-chain of Pair cells whose final cdr is Nil. The helpers
at the bottom of this module are the only code that walks that chain, and they
walk it iteratively so that long lists do not grow the Python stack.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO
from typing import Callable, Iterable, Iterator, Union

from lispy.errors import LispyStructureError, LispyTypeError
from lispy.types.atom import ATOM_TYPES, Boolean, Nil, NilType, Number, Symbol


class Pair:
    """A single cons cell."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: Expression, cdr: Expression):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other):
        if not isinstance(other, Pair):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            depth = 0
            node: Expression = self
            while isinstance(node, Pair):
                buffer.write("(")
                buffer.write(str(node.car))
                buffer.write(",")
                depth += 1
                node = node.cdr
            buffer.write(str(node))
            buffer.write(")" * depth)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Pair {self}>"


class Closure(ABC):
    """A callable value. Calling it with an evaluated argument list yields an Expression.

    Abstract: Builtin and Lambda supply `__call__`.
    """

    __slots__ = ("name",)

    def __init__(self, name: str | None = None):
        self.name = name

    @abstractmethod
    def __call__(self, args: Expression) -> Expression:
        ...

    def __str__(self):
        return "Lambda"


class Builtin(Closure):
    """A Closure backed by a native Python function."""

    __slots__ = ("fn",)

    def __init__(self, name: str, fn: Callable[[Expression], Expression]):
        super().__init__(name)
        self.fn = fn

    def __call__(self, args: Expression) -> Expression:
        return self.fn(args)

    def __repr__(self):
        return f"<builtin {self.name}>"


class EmptyType:
    """Void result of forms evaluated only for their side effect."""

    _instance: EmptyType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Empty"
    def __str__(self): return "Void"


Empty = EmptyType()

Expression = Union[Number, Symbol, Boolean, NilType, Pair, Closure, EmptyType]


# -------------------------------
# List primitives
# -------------------------------
def cons(first: Expression, second: Expression) -> Pair:
    return Pair(first, second)


def car(expr: Expression) -> Expression:
    """Head of a cons. An atom is its own car, so (car nil) is nil."""
    if isinstance(expr, Pair):
        return expr.car
    if isinstance(expr, ATOM_TYPES):
        return expr
    raise LispyTypeError(f"car called with non list: {expr}")


def cdr(expr: Expression) -> Expression:
    if isinstance(expr, Pair):
        return expr.cdr
    if expr is Nil:
        return Nil
    raise LispyTypeError(f"cdr called with non list: {expr}")


def append(lst: Expression, item: Expression) -> Expression:
    """Return a new list with `item` placed after the last element of `lst`.

    The cells of `lst` are copied; `lst` itself is left untouched. Appending to a
    non-nil atom conses the item in front of it.
    """
    heads = []
    node = lst
    while isinstance(node, Pair):
        heads.append(node.car)
        node = node.cdr
    if not isinstance(node, ATOM_TYPES):
        raise LispyStructureError(f"Cannot append past {node}")
    result: Expression = Pair(item, node)
    for head in reversed(heads):
        result = Pair(head, result)
    return result


def make_list(items: Iterable[Expression], tail: Expression = Nil) -> Expression:
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(expr: Expression) -> Iterator[Expression]:
    node = expr
    while isinstance(node, Pair):
        yield node.car
        node = node.cdr
    if node is not Nil:
        raise LispyStructureError(f"Expected a proper list, found tail {node}")


def to_list(expr: Expression) -> list[Expression]:
    return list(iter_list(expr))


def is_true(value: Expression) -> bool:
    # Only false and nil are false; 0 is true.
    if isinstance(value, Boolean):
        return value.value
    return value is not Nil
