"""minilisp interpreter: runs .lisp files or an interactive shell. Called from the minilisp console script.

Basic program flow:
    1. Tokenizer: pads parentheses with whitespace and splits the source into tokens (see minilisp/core/lexical.py)
    2. Parser: recursively builds an expression tree from the tokens, one top-level expression at a time
    3. Evaluator: walks the tree against the default environment, calling built-in native functions
       (see minilisp/core/evaluator.py)

Errors from any stage surface as LispErrors and are displayed by the error handling context manager.
"""

import argparse

from minilisp.lang.error import ErrorHandler
from minilisp.lang.session import Session
from minilisp.lang.shell import Shell


def main(argv=None):
    """Runs minilisp interpreter. Called from minilisp console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="minilisp")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--tokens", help="print the tokens of every statement", action="store_true")
        parser.add_argument("--tree", help="print the parsed tree of every expression", action="store_true")
        args = parser.parse_args(argv)

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, show_tokens=args.tokens, show_tree=args.tree)
            sess.run()

        else:
            sess = Session(error_handler, Session.SH_FILE, cmd_line=True, show_tokens=args.tokens, show_tree=args.tree)
            Shell(sess).cmdloop()


if __name__ == "__main__":
    main()
