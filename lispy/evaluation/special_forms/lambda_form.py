from lispy import EvaluatorFn
from lispy.errors import LispyArityError, LispyTypeError
from lispy.types.atom import Symbol
from lispy.types.environment import Environment
from lispy.types.expression import Expression, iter_list
from lispy.types.lambda_fn import Lambda


def lambda_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # (lambda (params) body...) allows zero or more body forms, evaluated in
    # order. With no body forms, invoking the function yields nil.
    if not tail:
        raise LispyArityError("lambda requires at least a parameter list")

    params = tail[0]
    for param in iter_list(params):
        if not isinstance(param, Symbol):
            raise LispyTypeError(f"lambda parameter {param} is not a symbol")

    # Captures the defining env, not the caller's: lexical scoping.
    return Lambda(params, tail[1:], env, evaluate_fn)
