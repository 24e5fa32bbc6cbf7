"""Core tree-walking evaluator for lispy."""

from __future__ import annotations

from lispy.errors import LispyTypeError
from lispy.evaluation.apply import apply
from lispy.evaluation.special_forms import SPECIAL_FORMS
from lispy.types.atom import Boolean, NilType, Number, Symbol
from lispy.types.environment import Environment
from lispy.types.expression import Closure, EmptyType, Expression, Pair, iter_list, make_list, to_list


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` in `env` and return the resulting Expression."""
    match expr:
        case Symbol():
            return env.get(expr)

        case Number() | Boolean() | NilType():
            return expr

        case Pair(car=head, cdr=tail):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](to_list(tail), env, evaluate)

            fn = evaluate(head, env)
            if not isinstance(fn, Closure):
                raise LispyTypeError(f"Tried to call a non lambda: {fn}")
            args = make_list(evaluate(arg, env) for arg in iter_list(tail))
            return apply(fn, args)

        case Closure() | EmptyType():
            raise LispyTypeError(f"{expr} is not an evaluable expression")

    raise LispyTypeError(f"Unknown expression type: {type(expr).__name__}")
