from __future__ import annotations
import logging
from pathlib import Path

from lispi import SExpression, LispValue
from lispi.errors import LispiImportError, LispiStackExhausted
from lispi.reader.parser import read
from lispi.types.nil import Nil
from lispi.types.environment import Environment
from lispi.builtin.env_builtin import register
from lispi.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating lispi code.
    Owns the single global Environment, which persists across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read top-level expression in the global environment."""
        try:
            return evaluate(expr, self.env)
        except RecursionError as e:
            raise LispiStackExhausted("Stack exhausted: recursion too deep (use recur for loops)") from e

    def eval_prelude(self, code: str) -> None:
        for expr in read(code):
            self.evaluate(expr)

    def eval(self, code: str) -> LispValue:
        # The whole text is read before anything runs
        results: list[LispValue] = [self.evaluate(expr) for expr in read(code)]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

    def eval_file(self, path: str | Path) -> LispValue:
        """Run a script; the first error aborts the rest of the file."""
        try:
            code = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise LispiImportError(f"Can't read file {path}, error: {e}") from e
        exprs = read(code)
        logger.debug("running %d top-level forms from %s", len(exprs), path)
        result: LispValue = Nil
        for expr in exprs:
            result = self.evaluate(expr)
        return result
