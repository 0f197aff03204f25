"""Normal-order beta reduction of pure lambda calculus terms.

Substitution is capture-avoiding: when a bound variable would capture a free variable of the substituted term, the
bound variable is renamed by appending primes (x -> x' -> x'' ...) until the name is unused. No global counter or
symbol table is needed, only the free variables of the terms involved.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from skilc.pure.lexical import Abstraction, Application, Variable


def fresh_name(name, used):
    """Returns name with as many primes appended as needed for it not to be in used."""
    new_name = name + "'"
    while new_name in used:
        new_name += "'"
    return new_name


def substitute(term, parameter, replacement):
    """Returns term with every free occurrence of parameter replaced by replacement."""
    if isinstance(term, Variable):
        return replacement if term.name == parameter else term

    if isinstance(term, Application):
        return Application(substitute(term.function, parameter, replacement),
                           substitute(term.argument, parameter, replacement))

    if isinstance(term, Abstraction):
        if term.parameter == parameter:
            return term  # parameter is shadowed

        var, body = term.parameter, term.body
        if replacement.contains(var):
            # alpha conversion
            new_var = fresh_name(var, replacement.free_variables() | body.free_variables())
            body = substitute(body, var, Variable(new_var))
            var = new_var

        return Abstraction(var, substitute(body, parameter, replacement))

    raise TypeError(f"expected LambdaTerm, got '{type(term).__name__}'")


def beta_step(term):
    """Performs the leftmost outermost beta reduction in term. Returns the new term and whether or not a reduction was
    performed: if not, term is in beta normal form and is returned as is.
    """
    if isinstance(term, Variable):
        return term, False

    if isinstance(term, Abstraction):
        body, reduced = beta_step(term.body)
        return (Abstraction(term.parameter, body), True) if reduced else (term, False)

    if isinstance(term, Application):
        function, argument = term.function, term.argument
        if isinstance(function, Abstraction):
            return substitute(function.body, function.parameter, argument), True

        function, reduced = beta_step(function)
        if reduced:
            return Application(function, argument), True

        argument, reduced = beta_step(argument)
        if reduced:
            return Application(function, argument), True
        return term, False

    raise TypeError(f"expected LambdaTerm, got '{type(term).__name__}'")


def beta_reduce(term, limit):
    """Performs beta_step up to limit times. Returns the resulting term and the number of reductions performed, which
    is only equal to limit if no normal form was found within limit steps.
    """
    for step in range(limit):
        term, reduced = beta_step(term)
        if not reduced:
            return term, step
    return term, limit


class NormalOrderReducer:
    """Keeps track of a term being reduced step by step. Used by Session instead of bare beta_reduce."""
    DEFAULT_LIMIT = 1000

    def __init__(self, tree):
        self.tree = tree
        self.steps = 0  # total reductions performed on self.tree

    @property
    def reduced(self):
        """Whether or not self.tree is in beta normal form."""
        return not beta_step(self.tree)[1]

    def beta_reduce(self, limit=None):
        """In-place normal-order beta reduction of self.tree. Returns the number of reductions performed."""
        if limit is None:
            limit = NormalOrderReducer.DEFAULT_LIMIT

        self.tree, steps = beta_reduce(self.tree, limit)
        self.steps += steps
        return steps

    def __repr__(self):
        return f"{type(self).__name__}({self.tree!r})"

    def __str__(self):
        return str(self.tree)
