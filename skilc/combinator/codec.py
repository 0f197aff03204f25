"""Conversions between combinator bases, and from combinators back to λ-terms.

SKI -> Iota and Iota -> SKI are both total but not inverse: iota_to_ski expands every ι, including those that came
from ski_to_iota, so a round trip gives back a larger but equivalent term.
"""

from skilc.combinator import iota, ski
from skilc.pure.lexical import Abstraction, Application, Variable


def _ski_lambdas():
    x, y, z = Variable("x"), Variable("y"), Variable("z")
    return {
        ski.S: Abstraction("x", Abstraction("y", Abstraction("z", Application(Application(x, z), Application(y, z))))),
        ski.K: Abstraction("x", Abstraction("y", x)),
        ski.I: Abstraction("x", x),
    }


SKI_LAMBDAS = _ski_lambdas()


def _iota_expansions():
    i = iota.Iota()
    return {
        ski.I: iota.Apply(i, i),
        ski.K: iota.Apply(i, iota.Apply(i, iota.Apply(i, i))),
        ski.S: iota.Apply(i, iota.Apply(i, iota.Apply(i, iota.Apply(i, i)))),
    }


SKI_IOTAS = _iota_expansions()

# ι = λf f S K = S (S I (K S)) (K K)
IOTA_SKI = ski.Apply(ski.Apply(ski.S(), ski.Apply(ski.Apply(ski.S(), ski.I()), ski.Apply(ski.K(), ski.S()))),
                     ski.Apply(ski.K(), ski.K()))


def ski_to_lambda(term):
    """Returns the λ-term with the same meaning as SKI term term."""
    if isinstance(term, ski.Apply):
        return Application(ski_to_lambda(term.left), ski_to_lambda(term.right))
    return SKI_LAMBDAS[type(term)]


def ski_to_iota(term):
    """Rewrites SKI term term with ι only."""
    if isinstance(term, ski.Apply):
        return iota.Apply(ski_to_iota(term.left), ski_to_iota(term.right))
    return SKI_IOTAS[type(term)]


def iota_to_ski(term):
    """Rewrites Iota term term with S, K and I."""
    if isinstance(term, iota.Apply):
        return ski.Apply(iota_to_ski(term.left), iota_to_ski(term.right))
    if isinstance(term, iota.Iota):
        return IOTA_SKI
    raise TypeError(f"expected IotaTerm, got '{type(term).__name__}'")


def iota_to_lambda(term):
    """Returns the λ-term with the same meaning as Iota term term."""
    return ski_to_lambda(iota_to_ski(term))
