"""Untyped λ-calculus: parsing, normal-order beta reduction, and compilation to the SKI and Iota combinator bases.

Basic program flow:
    1. Parser: produces a λ-term AST with a recursive-descent parser (see skilc/pure/lexical.py)
    2. Reduction: normal-order beta reduction with capture-avoiding substitution (see skilc/pure/reduction.py)
    3. Compilation: bracket abstraction to SKI, then SKI <-> Iota (see skilc/combinator/)
"""

from skilc.combinator.bracket import to_combinators
from skilc.combinator.codec import iota_to_lambda, iota_to_ski, ski_to_iota, ski_to_lambda
from skilc.lang.error import FreeVariableError, GenericException, ParseError, UntranslatedAbstractionError
from skilc.pure.lexical import Abstraction, Application, LambdaTerm, Variable, parse
from skilc.pure.reduction import beta_reduce, beta_step, substitute


def render(term):
    """Returns λ-term, SKI term or Iota term term in calculus notation."""
    return str(term)
