from lispi import EvaluatorFn
from lispi import SExpression
from lispi.errors import LispiRecurOutsideFunction
from lispi.types.closure import Closure
from lispi.types.environment import Environment
from lispi.types.tail_call import TailCall


def recur_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail_fn: Closure | None = None,
) -> TailCall:
    """
    (recur arg1 arg2 ...)
    Restarts the enclosing function body with fresh parameter bindings. The
    arguments see the current bindings; the new frame replaces the current one.
    """
    if tail_fn is None:
        raise LispiRecurOutsideFunction("recur is only allowed in tail position of a function body")

    args = [evaluate_fn(arg, env) for arg in tail]
    return TailCall(tail_fn, tail_fn.bind(args, "recur"))
