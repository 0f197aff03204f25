"""Loads a λ-term from a file and reduces or compiles it, or runs the interactive shell. Also uses error handling context
manager. Called from the skilc console script.
"""

import argparse

from skilc.lang.error import ErrorHandler
from skilc.lang.session import Session
from skilc.lang.shell import Shell
from skilc.pure.reduction import NormalOrderReducer


def build_parser():
    parser = argparse.ArgumentParser(prog="skilc", description="λ-calculus reducer and SKI/Iota compiler")
    parser.add_argument("file", help="file to load and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--limit", type=int, default=NormalOrderReducer.DEFAULT_LIMIT,
                        help="maximum number of beta reductions (default: %(default)s)")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--ski", action="store_true", help="print the term compiled to S, K and I")
    output.add_argument("--iota", action="store_true", help="print the term compiled to ι, in prefix notation")
    return parser


def main(argv=None):
    """Runs skilc. Called from skilc console script."""
    args = build_parser().parse_args(argv)

    with ErrorHandler() as error_handler:
        if args.file is None:
            Shell(Session(error_handler, cmd_line=True)).cmdloop()
            return

        sess = Session(error_handler, cmd_line=False)
        sess.load(args.file)

        if args.ski:
            print(sess.ski())
        elif args.iota:
            print(sess.iota().prefix())
        else:
            print(sess.run(args.limit))


if __name__ == "__main__":
    main()
