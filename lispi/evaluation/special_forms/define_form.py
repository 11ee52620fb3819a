from lispi import EvaluatorFn
from lispi import SExpression, LispValue
from lispi.errors import LispiArityError, LispiInvalidSymbol
from lispi.types.closure import Closure
from lispi.types.environment import Environment
from lispi.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: Closure | None = None,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise LispiArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispiInvalidSymbol(f"'def' first argument must be a symbol, got: {name!r}")

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
