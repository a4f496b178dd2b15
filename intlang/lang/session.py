"""Session control for intlang. A Session owns everything one run needs (symbol table, output, queued source) so that
separate runs never share state, either in file interpretation mode or command-line mode.
"""

import sys

from intlang.lang.error import LangError
from intlang.lang.lexical import Lexer
from intlang.lang.parser import Parser
from intlang.lang.symbols import SymbolTable


class Session:
    """Governs an intlang run: a single program file, a source string, or a sequence of shell inputs."""
    SH_FILE = "<in>"       # command-line interpreter filename
    CMD_FILE = "<string>"  # filename used for -c programs

    def __init__(self, error_handler, path=None, source=None, out=None, cmd_line=False):
        self.error_handler = error_handler

        self.path = path if path is not None else (Session.SH_FILE if cmd_line else Session.CMD_FILE)
        self.out = out            # stream print statements write to (stdout if None)
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.symbols = SymbolTable()
        self.results = []  # every printed value, in program order
        self.to_exec = []  # queued (source, first line num) chunks

        if self.cmd_line:
            self.error_handler.fatal = False

        if path is not None:
            try:
                with open(path, "r", encoding="latin-1") as file:
                    self.add(file.read())
            except OSError:
                raise LangError(f"'{path}' could not be opened")

        elif source is not None:
            self.add(source)

    def add(self, source, line_num=1):
        """Queues source, whose first line is line_num. Nothing is executed until run is called."""
        self.to_exec.append((source, line_num))

    def emit(self, value):
        """Writes a printed value immediately so output survives a later error."""
        self.results.append(value)
        print(value, file=self.out if self.out is not None else sys.stdout)

    def run(self):
        """Runs queued source statement by statement. Raises the first LangError encountered; chunks after a failing
        one are dropped. Returns True if everything ran to completion.
        """
        chunks, self.to_exec = self.to_exec, []
        for source, line_num in chunks:
            parser = Parser(Lexer(source, line_num), self.symbols, self.emit)
            parser.program(lambda line: self.error_handler.register_line(self.path, line))

        self.error_handler.remove_line(self.path)
        return True

