"""Session control for minilisp. Drives the tokenize -> parse -> evaluate pipeline over statements coming either from a
file or from the command line, against one environment that lives as long as the session.
"""

from minilisp.core.evaluator import build_default_environment, evaluate
from minilisp.core.lexical import parse_all, tokenize
from minilisp.lang.error import LispError


class Session:
    """Governs a minilisp session: queued expressions, their results, and the environment they run in."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";"

    def __init__(self, error_handler, path, cmd_line, show_tokens=False, show_tree=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path                # used for error messages
        self.cmd_line = cmd_line        # whether or not in command-line mode
        self.show_tokens = show_tokens  # print token lists as statements are added
        self.show_tree = show_tree      # print parsed expression trees as statements are added

        self.env = build_default_environment()
        self.to_exec = []   # list of (line num, line, expression) waiting to be evaluated
        self.results = []

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise LispError(f"'{path}' could not be opened", diagnosis=False)

            for line, line_num in exprs:
                self.add(line, line_num)

        elif not cmd_line:
            raise LispError(f"'{Session.SH_FILE}' is a reserved filename")

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's statements as (line, line num) pairs), but add_to_prev will indicate whether a line continuation
        is necessary. Returns updated value of line and add_to_prev.
        """
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]  # get rid of comments

        line = line.strip()
        if exprs is not None:
            if add_to_prev and exprs:
                prev, prev_num = exprs.pop()
                line = f"{prev} {line}".strip()
                exprs.append((line, prev_num))
            elif line:
                exprs.append((line, line_num))

        return line, line.count("(") > line.count(")")

    def add(self, line, line_num):
        """Parses every expression in line and queues them. Evaluation is delayed until run is called."""
        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised

        tokens = tokenize(line)
        if self.show_tokens:
            print(tokens)

        for expr in parse_all(tokens):
            if self.show_tree:
                print(expr.display())
            self.to_exec.append((line_num, line, expr))

        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Evaluates this session's queued expressions in order, appending each value to results. Will raise any errors
        that are encountered.
        """
        while self.to_exec:
            line_num, line, expr = self.to_exec.pop(0)
            self.error_handler.register_line(self.path, line, line_num)

            try:
                value = evaluate(expr, self.env)
            except (LispError, RecursionError):
                self.to_exec.clear()  # later expressions never run after a failure
                raise

            self.results.append(value)
            if not self.cmd_line:
                print(value)  # in command-line mode, Shell prints results

            self.error_handler.remove_line(self.path)

    def pop(self):
        """Removes and returns the latest result."""
        return self.results.pop()
