# Core type aliases for the lispy data model.
# Code and data share one representation: the Expression union defined in
# lispy.types.expression (atoms, Pair cons cells, Closures and Empty).
#
# EvaluatorFn is the signature of the evaluator handed to special forms and
# lambdas, which keeps those modules free of an import cycle with the evaluator.

import logging
from typing import Any, Callable

EvaluatorFn = Callable[[Any, Any], Any]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from lispy.errors import (  # noqa: E402
    LispyArityError,
    LispyError,
    LispyRecursionError,
    LispyStructureError,
    LispySyntaxError,
    LispyTypeError,
    LispyUnboundSymbol,
)
from lispy.evaluation.evaluator import evaluate  # noqa: E402
from lispy.interpreter import Interpreter, run  # noqa: E402
from lispy.reader.parser import parse, parse_all, tokenize  # noqa: E402
from lispy.builtins import standard_env  # noqa: E402
