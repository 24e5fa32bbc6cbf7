from lispy import EvaluatorFn
from lispy.errors import LispyArityError
from lispy.types.atom import Nil
from lispy.types.environment import Environment
from lispy.types.expression import Expression, is_true


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(tail) not in (2, 3):
        raise LispyArityError("if requires a condition, a then-expression and an optional else-expression")

    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
