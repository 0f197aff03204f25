"""Session control for skilc. Keeps the current working term and implements the commands of the interactive shell and
of file mode on top of it.

In `set` and `load`, the name '%' refers to the current working term: `set (λx x) %` applies the identity to it.
"""

from skilc.combinator.bracket import to_combinators
from skilc.combinator.codec import ski_to_iota, ski_to_lambda
from skilc.lang.error import GenericException
from skilc.pure.lexical import parse
from skilc.pure.reduction import NormalOrderReducer, substitute


class Session:
    """Governs a skilc session: the working term and the error handler that reports on it."""
    SH_FILE = "<in>"  # command-line interpreter filename
    CURRENT = "%"     # name that stands for the working term
    COMMENT = ";;"

    def __init__(self, error_handler, cmd_line):
        self.error_handler = error_handler
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.working = None  # NormalOrderReducer of the current term, if any

        if self.cmd_line:
            self.error_handler.fatal = False
            self.error_handler.register_file(Session.SH_FILE)

    @staticmethod
    def preprocess(text):
        """Strips comments and surrounding whitespace from every line of text."""
        lines = []
        for line in text.splitlines():
            if Session.COMMENT in line:
                line = line[:line.index(Session.COMMENT)]  # get rid of comments
            lines.append(line.strip())
        return " ".join(line for line in lines if line)

    @property
    def term(self):
        """The working term. Raises a GenericException if there is none."""
        if self.working is None:
            raise GenericException("no expression", diagnosis=False)
        return self.working.tree

    def set(self, expr):
        """Parses expr and makes it the working term, with '%' replaced by the previous working term."""
        tree = parse(expr)
        if self.working is not None:
            tree = substitute(tree, Session.CURRENT, self.working.tree)

        self.working = NormalOrderReducer(tree)
        return tree

    def load(self, path):
        """Same as set, with the contents of the file at path."""
        self.error_handler.register_file(path)
        try:
            with open(path, "r", encoding="utf-8") as file:
                text = file.read()
        except OSError:
            raise GenericException("'{}' could not be opened", path, diagnosis=False)

        expr = Session.preprocess(text)
        self.error_handler.register_line(path, expr, 1)
        tree = self.set(expr)
        self.error_handler.remove_line(path)
        return tree

    def beta(self, times=1):
        """Performs up to times beta reductions on the working term. Returns the number of reductions performed."""
        self.term  # raises if no expression
        return self.working.beta_reduce(times)

    def run(self, limit=None):
        """Reduces the working term until normal form, warning if limit steps are not enough."""
        if limit is None:
            limit = NormalOrderReducer.DEFAULT_LIMIT

        steps = self.beta(limit)
        if steps == limit and not self.working.reduced:
            self.error_handler.warn("'{}' has no beta normal form within {} steps", [str(self.term), limit],
                                    diagnosis=False)
        return self.term

    def ski(self):
        """Compiles the working term to SKI combinators."""
        return to_combinators(self.term)

    def iota(self):
        """Compiles the working term to the Iota combinator."""
        return ski_to_iota(self.ski())

    def as_lambda(self):
        """Compiles the working term to SKI combinators and expands them back into a λ-term."""
        return ski_to_lambda(self.ski())
