"""Procedure application for lispy.

Both builtins and user lambdas are Closures taking one evaluated argument list,
so application reduces to a type check and a call.
"""

from lispy.errors import LispyTypeError
from lispy.types.expression import Closure, Expression


def apply(fn: Expression, args: Expression) -> Expression:
    """Call `fn` with the already-evaluated argument list `args`."""
    if isinstance(fn, Closure):
        return fn(args)
    raise LispyTypeError(f"Tried to call a non lambda: {fn}")
