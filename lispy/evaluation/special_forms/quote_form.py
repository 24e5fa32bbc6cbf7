from lispy import EvaluatorFn
from lispy.errors import LispyArityError
from lispy.types.environment import Environment
from lispy.types.expression import Expression


def quote_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    if len(tail) != 1:
        raise LispyArityError("Quote expects exactly 1 argument")
    return tail[0]
