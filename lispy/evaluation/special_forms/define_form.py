import logging

from lispy import EvaluatorFn
from lispy.errors import LispyArityError, LispyTypeError
from lispy.types.atom import Symbol
from lispy.types.environment import Environment
from lispy.types.expression import Empty, Expression
from lispy.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (define name value)
    Binds in the current frame only and yields Empty.
    """
    if len(tail) != 2:
        raise LispyArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispyTypeError(f"Cannot define {name} as a symbol")

    value = evaluate_fn(val_expr, env)
    if isinstance(value, Lambda) and value.name is None:
        value.name = str(name)
    env.set(name, value)
    logger.debug("define %s = %s", name, value)
    return Empty
