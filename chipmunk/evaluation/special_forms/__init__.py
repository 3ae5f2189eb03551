"""Registry of special forms for the Chipmunk evaluator.

Maps head symbol names to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary function
application, so these names cannot be shadowed by definitions.

Handlers are called as `handler(tail, env, evaluate_fn, depth)`.
"""

from chipmunk.evaluation.special_forms.quote_forms import quote_form
from chipmunk.evaluation.special_forms.lambda_form import lambda_form
from chipmunk.evaluation.special_forms.list_form import list_form
from chipmunk.evaluation.special_forms.define_form import define_form
from chipmunk.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "lambda": lambda_form,
    "list": list_form,
    "define": define_form,
    "if": if_form,
}
