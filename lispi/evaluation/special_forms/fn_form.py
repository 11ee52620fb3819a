from lispi.errors import LispiArityError, LispiInvalidExpression, LispiInvalidSymbol
from lispi.types.closure import Closure

from lispi import EvaluatorFn
from lispi import SExpression, LispValue
from lispi.types.environment import Environment
from lispi.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: Closure | None = None,
) -> LispValue:
    # (fn (arg1 arg2 ...) body); the body is not evaluated here.
    if len(tail) != 2:
        raise LispiArityError("'fn' has form (fn (arg1 arg2 ...) body)")

    params, body = tail
    if not isinstance(params, list):
        raise LispiInvalidExpression(f"'fn' parameters must be a list, got: {params!r}")

    for param in params:
        if not isinstance(param, Symbol):
            raise LispiInvalidSymbol(f"Function arguments must be symbols, got {param!r}")
    if len(set(params)) != len(params):
        raise LispiInvalidExpression(f"Duplicate parameter names in {[str(p) for p in params]}")

    return Closure(params, body, env)
