"""User-defined procedures produced by the `lambda` special form."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from lispy.types.atom import Nil
from lispy.types.environment import Environment
from lispy.types.expression import Closure, Expression, iter_list


class Lambda(Closure):
    """A first-class lambda with formal parameters, body forms and closure env.

    The closure holds a strong reference to `env`. A recursive definition stores
    the Lambda inside the very frame it captures; Python's cycle collector
    reclaims such frames once nothing else refers to them.
    """

    __slots__ = ("params", "body", "env", "evaluate_fn")

    def __init__(
        self,
        params: Expression,
        body: list[Expression],
        env: Environment,
        evaluate_fn: Callable[[Expression, Environment], Expression],
        name: str | None = None,
    ):
        super().__init__(name)
        self.params = params
        self.body = body
        self.env = env
        self.evaluate_fn = evaluate_fn

    def extend_env(self, args: Expression) -> Environment:
        """Return a fresh frame, chained to the captured env, with params bound to `args`."""
        return Environment(outer=self.env).bind_parameters(self.params, args)

    def __call__(self, args: Expression) -> Expression:
        local_env = self.extend_env(args)
        result: Expression = Nil
        for form in self.body:
            result = self.evaluate_fn(form, local_env)
        return result

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ")
            if self.name:
                buffer.write(f" {self.name}")
            buffer.write(" (")
            buffer.write(" ".join(str(p) for p in iter_list(self.params)))
            buffer.write(") ")
            buffer.write(" ".join(str(form) for form in self.body))
            buffer.write(")")
            return buffer.getvalue()
