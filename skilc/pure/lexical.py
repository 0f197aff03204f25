"""Pure lambda calculus abstract syntax tree, token generator and parser.

The `pure` directory contains pure lambda calculus AST generation, parsing and reduction- the combinator bases live in
`combinator`.

Formally, pure lambda calculus can be defined as

```
<expr> ::= <atom>+                      ; "application"
                                        ; - associating by left: a b c d = (((a b) c) d)
<atom> ::= <ident>                      ; "variable"
                                        ; - any run of characters except whitespace, '(', ')', '\' and 'λ'
         | "(" <expr> ")"
         | ("λ" | "\") <ident> <expr>   ; "abstraction"
                                        ; - abstraction bodies are greedy: λx x y = λx (x y) != (λx x) y
```

There is no '.' between the bound variable and the body: whitespace ends the identifier. Note that applications and
abstractions are the only non-terminals in lambda calculus.

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         https://opendsa-server.cs.vt.edu/ODSA/Books/PL/html/Syntax.html
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass

from skilc.lang.error import ParseError


class LambdaTerm(ABC):
    """Represents a valid λ-term: variable, abstraction, or application. Terms are immutable: every transformation
    builds a new tree.
    """

    @abstractmethod
    def free_variables(self):
        """Returns the set of names occurring free in this term."""

    @abstractmethod
    def contains(self, var):
        """Whether or not var occurs free in this term. Cheaper than `var in self.free_variables()`."""

    @abstractmethod
    def alpha_equals(self, other, mapping=None, other_mapping=None):
        """Whether or not two LambdaTerms are alpha-equivalent. mapping maps each bound name of self to a stack of
        the names bound at the same positions in other; other_mapping is the same from the perspective of other.
        """

    @abstractmethod
    def render(self, tail=True):
        """Returns this term in calculus notation. tail is False when something follows this term on the same
        level, in which case an abstraction must be parenthesized so that its body does not swallow it.
        """

    def __str__(self):
        return self.render()


@dataclass(frozen=True)
class Variable(LambdaTerm):
    """Variable in lambda calculus: character(s) that represent abstractions."""
    name: str

    def free_variables(self):
        return {self.name}

    def contains(self, var):
        return self.name == var

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Variable):
            return False

        bound = mapping.get(self.name)
        other_bound = other_mapping.get(other.name)
        if bound or other_bound:
            return bool(bound) and bool(other_bound) and bound[-1] == other.name and other_bound[-1] == self.name
        return self.name == other.name  # both free

    def render(self, tail=True):
        return self.name


@dataclass(frozen=True)
class Application(LambdaTerm):
    """Application of one λ-term to another."""
    function: LambdaTerm
    argument: LambdaTerm

    def free_variables(self):
        return self.function.free_variables() | self.argument.free_variables()

    def contains(self, var):
        return self.function.contains(var) or self.argument.contains(var)

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Application):
            return False

        return (self.function.alpha_equals(other.function, mapping, other_mapping)
                and self.argument.alpha_equals(other.argument, mapping, other_mapping))

    def render(self, tail=True):
        function = self.function.render(tail=False)
        if isinstance(self.argument, Application):
            return f"{function} ({self.argument.render()})"
        return f"{function} {self.argument.render(tail)}"


@dataclass(frozen=True)
class Abstraction(LambdaTerm):
    """Abstraction: the basic datatype in lambda calculus."""
    parameter: str
    body: LambdaTerm

    def free_variables(self):
        return self.body.free_variables() - {self.parameter}

    def contains(self, var):
        return self.parameter != var and self.body.contains(var)

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Abstraction):
            return False

        mapping.setdefault(self.parameter, []).append(other.parameter)
        other_mapping.setdefault(other.parameter, []).append(self.parameter)
        try:
            return self.body.alpha_equals(other.body, mapping, other_mapping)
        finally:
            mapping[self.parameter].pop()
            other_mapping[other.parameter].pop()

    def render(self, tail=True):
        expr = f"λ{self.parameter} {self.body.render()}"
        return expr if tail else f"({expr})"


class Lexer:
    """Splits text into tokens on demand, one token of lookahead."""
    IDENT = "Ident"
    LPAREN = "LParen"
    RPAREN = "RParen"
    LAMBDA = "Lambda"
    EOF = "EOF"

    TOKENS = {"(": LPAREN, ")": RPAREN, "\\": LAMBDA, "λ": LAMBDA}
    BEGINS_EXPR = (IDENT, LPAREN, LAMBDA)

    def __init__(self, expr):
        self.expr = expr
        self.pos = 0
        self._skip_whitespace()

    def _skip_whitespace(self):
        while self.pos < len(self.expr) and self.expr[self.pos].isspace():
            self.pos += 1

    def peek(self):
        """Returns the kind of the next token without consuming it."""
        if self.pos >= len(self.expr):
            return Lexer.EOF
        return Lexer.TOKENS.get(self.expr[self.pos], Lexer.IDENT)

    def consume(self):
        """Consumes the next token. Returns the identifier's text for Ident tokens, None for everything else."""
        kind = self.peek()
        if kind == Lexer.EOF:
            return None

        start = self.pos
        if kind == Lexer.IDENT:
            while self.pos < len(self.expr):
                char = self.expr[self.pos]
                if char in Lexer.TOKENS or char.isspace():
                    break
                self.pos += 1
        else:
            self.pos += 1

        token = self.expr[start:self.pos]
        self._skip_whitespace()
        return token if kind == Lexer.IDENT else None

    def error(self, expected):
        """Returns a ParseError for the current position."""
        return ParseError(expected, self.peek(), self.expr, self.pos)


def parse_atom(lexer):
    """atom := IDENT | '(' expr ')' | ('\\' | 'λ') IDENT expr"""
    kind = lexer.peek()

    if kind == Lexer.IDENT:
        return Variable(lexer.consume())

    elif kind == Lexer.LPAREN:
        lexer.consume()
        result = parse_expr(lexer)
        if lexer.peek() != Lexer.RPAREN:
            raise lexer.error(Lexer.RPAREN)
        lexer.consume()
        return result

    elif kind == Lexer.LAMBDA:
        lexer.consume()
        if lexer.peek() != Lexer.IDENT:
            raise lexer.error(f"{Lexer.IDENT} after {Lexer.LAMBDA}")
        parameter = lexer.consume()
        return Abstraction(parameter, parse_expr(lexer))

    raise lexer.error("expression")


def parse_expr(lexer):
    """expr := atom+, left-associative."""
    tree = parse_atom(lexer)
    while lexer.peek() in Lexer.BEGINS_EXPR:
        tree = Application(tree, parse_atom(lexer))
    return tree


def parse(expr):
    """Converts expr to a LambdaTerm, raises ParseError if expr is not valid λ-term grammar."""
    lexer = Lexer(expr)
    tree = parse_expr(lexer)
    if lexer.peek() != Lexer.EOF:
        raise lexer.error(Lexer.EOF)
    return tree
