"""Handles interactive/command-line mode for the intlang interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """intlang interpreter shell."""
    intro = "intlang interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self._tmp_line_num = 0
        self.line_num = 0

    def onecmd(self, line):
        """While a statement is pending, every line is part of it. 'EOF' is still end of input: cmd.Cmd sends it on
        Ctrl-D.
        """
        if self._tmp_line and line != "EOF":
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Executes intlang statements once the buffered input ends with ';'."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if not self._tmp_line:
                self._tmp_line_num = self.line_num
            self._tmp_line += line + "\n"

            if not self._tmp_line.rstrip().endswith(";"):
                self.prompt = self.secondary_prompt
                return

            source, self._tmp_line = self._tmp_line, ""
            self.prompt = self._tmp_prompt

            self.sess.add(source, self._tmp_line_num)
            self.sess.run()

    def do_print(self, arg):
        """print(EXPRESSION);  -- prints the value of EXPRESSION."""
        self.default(f"print {arg}")

    def do_int(self, arg):
        """int NAME = EXPRESSION;  -- binds NAME to the value of EXPRESSION. Names cannot be rebound."""
        self.default(f"int {arg}")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the intlang interpreter!\n\n"
              "intlang has two statements: 'int NAME = EXPRESSION;' binds a name to an integer\n"
              "once and for all, and 'print(EXPRESSION);' prints a value. Expressions use\n"
              "+ - * / and parentheses over integer literals and declared names.\n\n"
              "Try it out by typing 'int x = 6 * 7;', then 'print(x);'. Statements may span\n"
              "several lines: input runs once it ends with ';'.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        self.line_num += 1
        if self._tmp_line:
            self._tmp_line += "\n"
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        if self._tmp_line.strip():
            self.sess.error_handler.warn("discarding incomplete statement")
        return True
