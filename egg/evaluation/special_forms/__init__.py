"""Registry of special forms for the Egg evaluator.

Maps reserved identifier names to handler functions that receive their
argument expressions unevaluated. The evaluator consults this table before
ordinary function application, whenever the operator of an application is a
bare identifier.
"""

from egg.evaluation.special_forms.if_form import if_form
from egg.evaluation.special_forms.while_form import while_form
from egg.evaluation.special_forms.do_form import do_form
from egg.evaluation.special_forms.define_form import define_form
from egg.evaluation.special_forms.fun_form import fun_form

SPECIAL_FORMS = {
    "if": if_form,
    "while": while_form,
    "do": do_form,
    "define": define_form,
    "fun": fun_form,
}
