"""Handles interactive/command-line mode for minilisp interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """minilisp interpreter shell."""
    intro = "minilisp interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continutations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary minilisp statement."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = self.sess.preprocess_line(f"{self._tmp_line} {line}", self.line_num, False)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt
            if not line:
                return

            self.sess.add(line, self.line_num)
            self.sess.run()

            if self.sess.results:
                print(self.sess.pop())
                self.sess.results.clear()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the minilisp interpreter!\n\n"
              "Expressions are written as S-expressions: a number, a symbol, or a parenthesized\n"
              "list. A list is a call: its first element must be a function, the rest are its\n"
              "arguments. Numbers are floats, and '+' and '-' are built in.\n\n"
              "Try it out by typing '(+ 1 2)'. This will print 3.0. Next, try typing\n"
              "'(- 10 (+ 1 2))', which will print 7.0.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
