"""SKI combinator terms. They contain no variables: the only way to build one from a λ-term is bracket abstraction,
which refuses open terms.
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass

from skilc.pure.lexical import Application, Variable


class SKITerm(ABC):
    """Superclass of S, K, I and applications of them."""

    @abstractmethod
    def display_lambda(self):
        """Returns a λ-term that prints like this term, with S, K and I as free variables. For display only: see
        codec.ski_to_lambda for the λ-term with the same meaning.
        """

    def __str__(self):
        return str(self.display_lambda())


@dataclass(frozen=True)
class Apply(SKITerm):
    left: SKITerm
    right: SKITerm

    def display_lambda(self):
        return Application(self.left.display_lambda(), self.right.display_lambda())


@dataclass(frozen=True)
class S(SKITerm):
    """S x y z = x z (y z)"""

    def display_lambda(self):
        return Variable("S")


@dataclass(frozen=True)
class K(SKITerm):
    """K x y = x"""

    def display_lambda(self):
        return Variable("K")


@dataclass(frozen=True)
class I(SKITerm):
    """I x = x"""

    def display_lambda(self):
        return Variable("I")
