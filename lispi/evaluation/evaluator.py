"""Core evaluator and trampoline for the lispi interpreter.

Implements special-form dispatch and tail-call aware application. The closure
whose body is currently in tail position is threaded through `evaluate0` as
`tail_fn`; a call (or recur) made in that position returns a TailCall instead
of recursing, and the nearest non-tail application loops on it.
"""

from __future__ import annotations

from lispi import SExpression, LispValue
from lispi.errors import LispiInvalidExpression
from lispi.types.closure import Closure
from lispi.types.environment import Environment
from lispi.types.symbol import Symbol
from lispi.types.tail_call import TailCall
from lispi.evaluation.apply import apply
from lispi.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a top-level expression in `env` and return its value.

    Nothing is in tail position at top level, so the result is never a TailCall.
    """
    return evaluate0(expr, env, None)


def evaluate0(
    expr: SExpression,
    env: Environment,
    tail_fn: Closure | None = None,
) -> LispValue | TailCall:
    """
    Single evaluation step. Returns a value, or a TailCall when `tail_fn`
    is set and the expression ends in a closure application or recur.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            raise LispiInvalidExpression("Can't evaluate empty list")

        case [Symbol() as head, *operands] if head in SPECIAL_FORMS:
            # Operands are handed over unevaluated
            return SPECIAL_FORMS[head](operands, env, evaluate0, tail_fn)

        case [operator, *operands]:
            fn = evaluate0(operator, env)
            args = [evaluate0(arg, env) for arg in operands]
            return apply(fn, args, env, evaluate0, tail_fn)

    # --- Atoms return as-is ---
    return expr
