from __future__ import annotations

from lispi import SExpression, LispValue, EvaluatorFn
from lispi.errors import LispiArityError, LispiTypeError
from lispi.modules.module_loader import read_module
from lispi.reader.parser import read
from lispi.types.closure import Closure
from lispi.types.environment import Environment
from lispi.types.nil import Nil


def import_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: Closure | None = None,
) -> LispValue:
    """
    Usage:
        (import "path/to/file.lisp")

    Every top-level form of the file runs in the importer's current
    environment, so its defs become visible there. Returns the value of the
    last form, or nil for an empty file.
    """
    if len(tail) != 1:
        raise LispiArityError("Import form expects 1 path argument")

    filename = evaluate_fn(tail[0], env)
    if not isinstance(filename, str):
        raise LispiTypeError(f"Expected string as argument to 'import', got: {filename!r}")

    # Read everything first: a syntax error anywhere means nothing runs.
    exprs = read(read_module(filename))

    result = Nil
    for expr in exprs:
        result = evaluate_fn(expr, env)
    return result
