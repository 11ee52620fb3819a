# Core type aliases for lispi's data model.
# Code (forms) is plain Python: lists for forms, Symbol for names, int/float/
# bool/str for literals. Runtime lists are persistent Cons cells ending in Nil.
#
# Naming guidance:
# - SExpression: use in reader code and special forms for unevaluated forms.
# - LispValue:   use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]
