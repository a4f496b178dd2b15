"""Runs intlang programs from a file, from a string, or in command-line mode. Everything runs inside the error
handling context manager, which is the only place the process exits with an error status. Called from the intlang
console script.
"""

import argparse
import sys

from intlang.lang.error import ErrorHandler
from intlang.lang.session import Session
from intlang.lang.shell import Shell


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="intlang", description="Interpreter for a tiny integer language.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-c", "--command", help="program text to run instead of a file")
    parser.add_argument("--no-color", action="store_true", help="do not color diagnostics")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs intlang interpreter. Returns 0 on completion; errors exit with status 1."""
    args = parse_args(argv)

    with ErrorHandler(color=not args.no_color) as error_handler:
        if args.command is not None:
            Session(error_handler, source=args.command).run()

        elif args.file is not None:
            Session(error_handler, args.file).run()

        else:
            Shell(Session(error_handler, cmd_line=True)).cmdloop()

    return 1 if error_handler.failed else 0


if __name__ == "__main__":
    sys.exit(main())
