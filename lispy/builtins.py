from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from lispy.errors import LispyArityError, LispyTypeError
from lispy.evaluation.apply import apply
from lispy.types.atom import Boolean, Nil, NilType, Number
from lispy.types.environment import Environment
from lispy.types.expression import (
    Builtin,
    Closure,
    Expression,
    Pair,
    append,
    car,
    cdr,
    iter_list,
    make_list,
    to_list,
)

NumericOp = Callable[[float, float], float]


# -------------------------------
# Argument helpers
# -------------------------------
def number_value(expr: Expression) -> float:
    match expr:
        case Number(value=value):
            return value
        case Boolean(value=flag):
            return 1.0 if flag else 0.0
    raise LispyTypeError(f"Could not cast {expr} to a number")


def unpack(args: Expression, name: str, count: int) -> list[Expression]:
    values = to_list(args)
    if len(values) != count:
        raise LispyArityError(f"{name} requires exactly {count} argument(s), got {len(values)}")
    return values


def divide(a: float, b: float) -> float:
    # IEEE semantics rather than ZeroDivisionError.
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def round_half_away(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


# -------------------------------
# Arithmetic
# -------------------------------
def float_reducer(name: str, op: NumericOp) -> Callable[[Expression], Expression]:
    """Left-fold `op` over the arguments, seeded with the first one."""
    def reducer(args: Expression) -> Expression:
        values = to_list(args)
        if not values:
            raise LispyArityError(f"{name} requires at least 1 argument")
        return Number(reduce(op, map(number_value, values)))
    return reducer


def extremum(name: str, pick: NumericOp) -> Callable[[Expression], Expression]:
    """Like float_reducer, but a single list argument is reduced element-wise."""
    def reducer(args: Expression) -> Expression:
        values = to_list(args)
        if len(values) == 1 and isinstance(values[0], (Pair, NilType)):
            values = to_list(values[0])
        if not values:
            raise LispyArityError(f"{name} requires at least 1 argument")
        return Number(reduce(pick, map(number_value, values)))
    return reducer


def absolute(args: Expression) -> Expression:
    (x,) = unpack(args, "abs", 1)
    return Number(abs(number_value(x)))


def round_builtin(args: Expression) -> Expression:
    (x,) = unpack(args, "round", 1)
    return Number(round_half_away(number_value(x)))


# -------------------------------
# Comparison
# -------------------------------
def comparison(name: str, op: Callable[[float, float], bool]) -> Callable[[Expression], Expression]:
    """Binary comparison on the first two arguments; any further ones are ignored."""
    def compare(args: Expression) -> Expression:
        values = to_list(args)
        if len(values) < 2:
            raise LispyArityError(f"{name} requires 2 arguments")
        return Boolean(op(number_value(values[0]), number_value(values[1])))
    return compare


# -------------------------------
# List operations
# -------------------------------
def car_builtin(args: Expression) -> Expression:
    (lst,) = unpack(args, "car", 1)
    return car(lst)


def cdr_builtin(args: Expression) -> Expression:
    (lst,) = unpack(args, "cdr", 1)
    return cdr(lst)


def cons_builtin(args: Expression) -> Expression:
    head, tail = unpack(args, "cons", 2)
    return Pair(head, tail)


def append_builtin(args: Expression) -> Expression:
    lst, item = unpack(args, "append", 2)
    return append(lst, item)


def list_builtin(args: Expression) -> Expression:
    return args


def map_builtin(args: Expression) -> Expression:
    fn, lst = unpack(args, "map", 2)
    if not isinstance(fn, Closure):
        raise LispyTypeError(f"Expected lambda in call to map, got {fn}")
    return make_list([apply(fn, make_list([item])) for item in iter_list(lst)])


def is_null(args: Expression) -> Expression:
    (value,) = unpack(args, "null?", 1)
    return Boolean(value is Nil)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Expression], Expression]] = {
    "+": float_reducer("+", operator.add),
    "-": float_reducer("-", operator.sub),
    "*": float_reducer("*", operator.mul),
    "/": float_reducer("/", divide),
    "max": extremum("max", lambda a, b: a if a > b else b),
    "min": extremum("min", lambda a, b: a if a < b else b),
    ">": comparison(">", operator.gt),
    "<": comparison("<", operator.lt),
    ">=": comparison(">=", operator.ge),
    "<=": comparison("<=", operator.le),
    "=": comparison("=", operator.eq),
    "car": car_builtin,
    "cdr": cdr_builtin,
    "abs": absolute,
    "round": round_builtin,
    "cons": cons_builtin,
    "append": append_builtin,
    "map": map_builtin,
    "list": list_builtin,
    "null?": is_null,
}


def register(env: Environment) -> None:
    env.update({name: Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.set("pi", Number(math.pi))


def standard_env() -> Environment:
    """A fresh root environment holding every builtin."""
    env = Environment()
    register(env)
    return env
