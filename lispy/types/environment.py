"""Runtime environment for lispy.

An Environment maps Symbols to evaluated Expressions and links to an optional
`outer` frame. The root frame holds the builtins; every procedure call creates a
child of the frame its closure captured, which gives lexical scoping.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from lispy.errors import LispyArityError, LispyTypeError, LispyUnboundSymbol
from lispy.types.atom import Symbol
from lispy.types.expression import Expression, to_list


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise LispyTypeError(f"Cannot bind {name} as a symbol")


class Environment:
    """Hierarchical mapping from Symbols to lispy values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Expression] = {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Expression:
        """Look up the value bound to `name` in this frame or any outer one.

        Raises LispyUnboundSymbol if no frame in the chain binds it.
        """
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            raise LispyUnboundSymbol(f"Could not find {symbol} in the environment")
        return env.vars[symbol]

    def set(self, name: Symbol | str, value: Expression) -> None:
        """Bind `name` in this frame only. Outer frames are never modified."""
        self.vars[_as_symbol(name)] = value

    def update(self, mapping: Mapping[Symbol | str, Expression]) -> None:
        """Bulk-bind a mapping of names to values in the current frame."""
        for name, value in mapping.items():
            self.set(name, value)

    def bind_parameters(self, params: Expression, args: Expression) -> Environment:
        """Bind each parameter symbol to the matching argument in this frame.

        Both lists must be proper and of equal length; a count mismatch raises
        LispyArityError.
        """
        names = to_list(params)
        values = to_list(args)
        for name in names:
            if not isinstance(name, Symbol):
                raise LispyTypeError(f"Parameter {name} is not a symbol")
        if len(names) != len(values):
            raise LispyArityError(
                f"Expected {len(names)} argument(s) for ({' '.join(map(str, names))}), got {len(values)}"
            )
        for name, value in zip(names, values):
            self.vars[name] = value
        return self

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    frames.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
