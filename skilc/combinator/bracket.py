"""Bracket abstraction: compiles λ-terms into SKI combinator terms.

Compilation goes through an intermediate representation that can hold variables, abstractions and combinators at the
same time, so that partially translated trees can be handled like any other:

    1. lift: λ-term -> intermediate term (Var, App, Lam)
    2. translate: eliminate every Lam, innermost first, with the rules

        T[λx e]         = K T[e]                    if x is not free in e
        T[λx x]         = I
        T[λx e x]       = T[e]                      if x is not free in e
        T[λx e1 e2]     = S T[λx e1] T[λx e2]
        T[λx λy e]      = T[λx T[λy e]]

    3. project: intermediate term -> SKI term. A Var left at this point was free in the original term.

Source: https://en.wikipedia.org/wiki/Combinatory_logic#Completeness_of_the_S-K_basis
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass

from skilc.combinator import ski
from skilc.lang.error import FreeVariableError, UntranslatedAbstractionError
from skilc.pure.lexical import Abstraction, Application, Variable


class IntermediateTerm(ABC):
    """Superclass of the terms bracket abstraction works on: Var, App, Lam and Comb."""

    @abstractmethod
    def contains(self, var):
        """Whether or not var occurs free in this term."""

    def is_var(self, var):
        """Whether or not this term is exactly the variable var."""
        return False


@dataclass(frozen=True)
class Var(IntermediateTerm):
    name: str

    def contains(self, var):
        return self.name == var

    def is_var(self, var):
        return self.name == var


@dataclass(frozen=True)
class App(IntermediateTerm):
    left: IntermediateTerm
    right: IntermediateTerm

    def contains(self, var):
        return self.left.contains(var) or self.right.contains(var)


@dataclass(frozen=True)
class Lam(IntermediateTerm):
    parameter: str
    body: IntermediateTerm

    def contains(self, var):
        return self.parameter != var and self.body.contains(var)


@dataclass(frozen=True)
class Comb(IntermediateTerm):
    """One of the S, K or I combinators."""
    symbol: str

    SYMBOLS = {"S": ski.S, "K": ski.K, "I": ski.I}

    def __post_init__(self):
        assert self.symbol in Comb.SYMBOLS, f"unknown combinator '{self.symbol}'"

    def contains(self, var):
        return False


S, K, I = Comb("S"), Comb("K"), Comb("I")


def lift(term):
    """Embeds λ-term term into the intermediate representation."""
    if isinstance(term, Variable):
        return Var(term.name)
    if isinstance(term, Application):
        return App(lift(term.function), lift(term.argument))
    if isinstance(term, Abstraction):
        return Lam(term.parameter, lift(term.body))
    raise TypeError(f"expected LambdaTerm, got '{type(term).__name__}'")


def translate(term):
    """Eliminates every abstraction in term. Free variables are left in place."""
    if isinstance(term, App):
        return App(translate(term.left), translate(term.right))

    if not isinstance(term, Lam):
        return term  # Var or Comb

    var, body = term.parameter, term.body

    if not body.contains(var):
        return App(K, translate(body))

    if isinstance(body, Var):
        return I  # body contains var, so body is var

    if isinstance(body, App):
        if body.right.is_var(var) and not body.left.contains(var):
            return translate(body.left)  # eta
        return App(App(S, translate(Lam(var, body.left))), translate(Lam(var, body.right)))

    if isinstance(body, Lam):
        return translate(Lam(var, translate(body)))

    raise UntranslatedAbstractionError(term)


def project(term):
    """Converts a fully translated intermediate term to an SKI term."""
    if isinstance(term, App):
        return ski.Apply(project(term.left), project(term.right))
    if isinstance(term, Comb):
        return Comb.SYMBOLS[term.symbol]()
    if isinstance(term, Var):
        raise FreeVariableError(term.name)
    raise UntranslatedAbstractionError(term)


def to_combinators(term):
    """Compiles closed λ-term term to an equivalent SKI term. Raises FreeVariableError if term is open."""
    return project(translate(lift(term)))
