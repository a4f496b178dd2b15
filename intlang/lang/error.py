"""Error handling for the intlang language. Every fatal condition is a LangError raised at the point of violation; the
ErrorHandler context manager is the single place where errors are reported and the run is terminated. If another type
of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class LangError(Exception):
    """Base intlang error. msg is shown verbatim after the line prefix; line is 1-based (None if unknown)."""

    def __init__(self, msg, line=None, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.line = line
        self.internal = internal

    def __str__(self):
        return self.msg


class LexicalError(LangError):
    """Unrecognized character in source text."""


class ParseError(LangError):
    """Token found does not match what the grammar expects at that point."""


class UndefinedVariable(LangError):
    """Identifier used in an expression without a prior declaration."""


class DuplicateDeclaration(LangError):
    """Name declared twice in the same run."""


class UseBeforeInit(LangError):
    """Entry exists but was never marked defined."""


class DivisionByZero(LangError):
    """Divisor evaluated to zero."""


class NumericOverflow(LangError):
    """Literal or arithmetic result outside the signed 32-bit range."""


class ErrorHandler:
    """Context manager that reports intlang errors as a single diagnostic line and, if fatal, exits the process."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, stream=None, color=True):
        self.fatal = fatal
        self.stream = stream
        self.color = color
        self.errors = 0
        self.traceback = {}

    @property
    def _stream(self):
        return self.stream if self.stream is not None else sys.stderr

    def _colored(self, text, color):
        if not self.color:
            return text
        return colored(text, color, attrs=["bold"])

    def register_line(self, path, line_num):
        """Registers the line of the statement currently executing in path. Used for errors that carry no line."""
        self.traceback[path] = line_num

    def remove_line(self, path):
        """Removes path from traceback. Should be called after a successful run."""
        self.traceback.pop(path, None)

    def _last_line(self):
        for line_num in reversed(list(self.traceback.values())):
            if line_num is not None:
                return line_num
        return None

    def format(self, error):
        """Returns the diagnostic line for error: 'Error at line <N>: <message>'."""
        line = error.line if error.line is not None else self._last_line()

        prefix = "Error"
        if error.internal:
            prefix = "[internal] " + prefix

        if line is None:
            return f"{self._colored(prefix, ErrorHandler.ERROR)}: {error.msg}"
        return f"{self._colored(prefix, ErrorHandler.ERROR)} at line {line}: {error.msg}"

    def warn(self, msg):
        """Prints a non-fatal warning."""
        print(f"{self._colored('Warning', ErrorHandler.WARNING)}: {msg}", file=self._stream)

    def throw(self, error):
        """Reports error, a LangError. Exits with status 1 if fatal, otherwise resets traceback and returns."""
        self.errors += 1
        print(self.format(error), file=self._stream)

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    @property
    def failed(self):
        """Whether or not any error has been thrown through this handler."""
        return self.errors > 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False

        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LangError("Keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(LangError("Expression nested too deeply"))
        elif issubclass(exc_type, LangError):
            self.throw(exc_val)
        else:
            self.throw(LangError(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
