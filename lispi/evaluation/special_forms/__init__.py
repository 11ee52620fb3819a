"""Registry of special forms for the lispi evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Each handler is called as handler(operands, env, evaluate_fn, tail_fn) with the
operands left unevaluated. The evaluator consults this table before looking the
head symbol up, so special forms cannot be shadowed by def.
"""

from lispi.types.symbol import Symbol
from lispi.evaluation.special_forms.if_form import if_form
from lispi.evaluation.special_forms.define_form import define_form
from lispi.evaluation.special_forms.fn_form import fn_form
from lispi.evaluation.special_forms.import_form import import_form
from lispi.evaluation.special_forms.recur_form import recur_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("def"): define_form,
    Symbol("fn"): fn_form,
    Symbol("import"): import_form,
    Symbol("recur"): recur_form,
}
