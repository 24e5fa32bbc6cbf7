from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from lispy.builtins import standard_env
from lispy.config import get_log_level, get_recursion_limit
from lispy.errors import LispyRecursionError
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import TokenStream, parse, tokenize
from lispy.types.environment import Environment
from lispy.types.expression import Empty, Expression

logger = logging.getLogger(__name__)


@contextmanager
def recursion_guard() -> Iterator[None]:
    """Raise the host recursion limit to the configured value and report
    overflow as LispyRecursionError.

    The limit is process-wide and is only ever raised, never lowered.
    """
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)
    try:
        yield
    except RecursionError as exc:
        raise LispyRecursionError("Maximum recursion depth exceeded during evaluation") from exc


def run(source: str, env: Environment | None = None) -> Expression:
    """Parse exactly one expression from `source` and evaluate it.

    A fresh root environment is used when `env` is not given.
    """
    if env is None:
        env = standard_env()
    expr = parse(source)
    with recursion_guard():
        return evaluate(expr, env)


class Interpreter:
    """
    Owns a root environment and evaluates source text against it.
    Definitions persist across calls to `eval`.

    Construction applies LISPY_LOG_LEVEL to the `lispy` logger, which is
    shared by every interpreter in the process.
    """
    def __init__(self, env: Environment | None = None):
        self.env = env if env is not None else standard_env()
        logging.getLogger("lispy").setLevel(get_log_level())

    def eval(self, source: str) -> Expression:
        """Evaluate every top-level form in `source`; return the last value."""
        result: Expression = Empty
        stream = TokenStream(tokenize(source))
        with recursion_guard():
            for expr in stream.parse_all():
                result = evaluate(expr, self.env)
                logger.debug("%s => %s", expr, result)
        return result
