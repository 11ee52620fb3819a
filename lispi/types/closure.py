"""Closure representation and argument binding for lispi."""

from __future__ import annotations

from io import StringIO

from lispi import SExpression, LispValue
from lispi.errors import LispiArityError
from lispi.types.environment import Environment
from lispi.types.symbol import Symbol


class Closure:
    """A first-class function: parameters, body, and the environment it closes over."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fn (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind(self, args: list[LispValue], what: str = "function") -> Environment:
        """Return a fresh child of the captured environment with params bound to `args`."""
        if len(args) != len(self.params):
            raise LispiArityError(
                f"Wrong number of arguments to {what}, expected {len(self.params)}, got {len(args)}"
            )
        local_env = self.env.child()
        for name, value in zip(self.params, args):
            local_env.define(name, value)
        return local_env
