"""Iota combinator terms: a single combinator ι = λf f S K, and applications of it.

Besides calculus notation, terms can be written in prefix notation, where '*' is application and 'i' is ι:

```
ι ι           = *ii
ι (ι (ι ι))   = *i*i*ii
```

Source: https://en.wikipedia.org/wiki/Iota_and_Jot
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass

from skilc.pure.lexical import Application, Variable


class IotaTerm(ABC):
    """Superclass of ι and applications of it."""

    @abstractmethod
    def display_lambda(self):
        """Returns a λ-term that prints like this term, with ι as a free variable."""

    @abstractmethod
    def prefix(self):
        """Returns this term in prefix notation."""

    def __str__(self):
        return str(self.display_lambda())


@dataclass(frozen=True)
class Apply(IotaTerm):
    left: IotaTerm
    right: IotaTerm

    def display_lambda(self):
        return Application(self.left.display_lambda(), self.right.display_lambda())

    def prefix(self):
        return f"*{self.left.prefix()}{self.right.prefix()}"


@dataclass(frozen=True)
class Iota(IotaTerm):

    def display_lambda(self):
        return Variable("ι")

    def prefix(self):
        return "i"
