"""Application engine for lispi.

Closures bind their parameters in a fresh child of the captured environment.
In tail position the bound body is handed back as a TailCall; otherwise it is
run here, looping for as long as the body keeps producing TailCalls, so tail
calls and recur iterations never deepen the Python stack.

Built-ins are plain Python callables invoked as fn(env, args).
"""

from __future__ import annotations

from typing import Callable

from lispi import LispValue, EvaluatorFn
from lispi.errors import LispiTypeError
from lispi.printer import to_lisp_string
from lispi.types.closure import Closure
from lispi.types.environment import Environment
from lispi.types.tail_call import TailCall


def run_body(fn: Closure, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate `fn.body` in `env`, bouncing TailCalls until a value appears."""
    result = evaluate_fn(fn.body, env, fn)
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, result.fn)
    return result


def apply(
    head: Closure | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail_fn: Closure | None = None,
) -> LispValue | TailCall:
    """Apply either a Closure or a Python callable to already evaluated `args`."""
    if isinstance(head, Closure):
        new_env = head.bind(args)
        if tail_fn is not None:
            return TailCall(head, new_env)
        return run_body(head, new_env, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise LispiTypeError(f"Value {to_lisp_string(head)} is not a function")
