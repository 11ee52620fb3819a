from lispi import EvaluatorFn
from lispi import SExpression, LispValue
from lispi.errors import LispiArityError
from lispi.types.closure import Closure
from lispi.types.nil import Nil, is_truthy
from lispi.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail_fn: Closure | None = None,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise LispiArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)

    # Whichever branch runs inherits the tail position of the if itself.
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, tail_fn)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env, tail_fn)
    else:
        return Nil
