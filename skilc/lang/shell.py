"""Handles interactive/command-line mode for skilc. Uses cmd as backend."""

import cmd

from skilc.lang.error import GenericException
from skilc.lang.session import Session


class Shell(cmd.Cmd):
    """Lambda calculus and combinator shell."""
    intro = ("Lambda calculus to combinators :: Python backend\n"
             "Type '?' or 'help' for more information. '%' refers to the current expression.")
    prompt = "lc> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def precmd(self, line):
        """Registers line so that errors can point to it."""
        self.line_num += 1
        self.sess.error_handler.register_line(Session.SH_FILE, line, self.line_num)
        return line

    def postcmd(self, stop, line):
        self.sess.error_handler.remove_line(Session.SH_FILE)
        return stop

    def default(self, line):
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            raise GenericException("unrecognized command '{}'", line.split()[0], diagnosis=False)

    def do_set(self, arg):
        """set EXPR: makes EXPR the current expression."""
        with self.sess.error_handler:
            self.sess.set(arg)

    def do_load(self, arg):
        """load FILE: makes the contents of FILE the current expression."""
        with self.sess.error_handler:
            self.sess.load(arg.strip())

    def do_beta(self, arg):
        """beta [TIMES]: performs up to TIMES (default 1) beta reductions on the current expression."""
        with self.sess.error_handler:
            try:
                times = int(arg) if arg.strip() else 1
                assert times >= 0
            except (AssertionError, ValueError):
                raise GenericException("invalid number '{}'", arg.strip(), diagnosis=False)

            steps = self.sess.beta(times)
            print(f"reduced {steps} {'time' if steps == 1 else 'times'}")

    def do_print(self, arg):
        """print: prints the current expression."""
        with self.sess.error_handler:
            print(self.sess.term)

    def do_ski(self, arg):
        """ski: prints the current expression compiled to S, K and I."""
        with self.sess.error_handler:
            print(self.sess.ski())

    def do_iota(self, arg):
        """iota: prints the current expression compiled to ι, in calculus and prefix notation."""
        with self.sess.error_handler:
            term = self.sess.iota()
            print(term)
            print(term.prefix())

    def do_lambda(self, arg):
        """lambda: prints the current expression compiled to S, K and I, written back as a λ-term."""
        with self.sess.error_handler:
            print(self.sess.as_lambda())

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_quit(arg)

    def do_quit(self, arg):
        """Exits interpreter."""
        return True

    do_exit = do_quit
