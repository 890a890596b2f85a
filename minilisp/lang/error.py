"""Error handling for minilisp. Only LispErrors should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class LispError(Exception):
    """The single error kind of minilisp: a human-readable reason. expr, if given, is the offending token and is only
    used to underline it in the source line when the error is displayed.
    """

    def __init__(self, reason, expr=None, diagnosis=True, internal=False):
        super().__init__(reason)

        self.reason = reason
        self.expr = expr if expr is not None else ""
        self.diagnosis = diagnosis
        self.internal = internal

    def __eq__(self, other):
        return isinstance(other, LispError) and other.reason == self.reason

    def __hash__(self):
        return hash(self.reason)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print minilisp errors."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error, line):
        """Returns line with the first occurrence of error.expr highlighted and underlined, or None if error.expr
        cannot be found in line.
        """
        start = line.find(error.expr)
        if start == -1:
            return None
        end = start + len(error.expr)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a LispError, and self.traceback must be a dict of
        file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        last_line = None
        for file, (line, line_num) in self.traceback.items():
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                last_line = line

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.reason
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis and last_line:
            diagnosis = ErrorHandler.diagnose(error, last_line)
            if diagnosis:
                print(diagnosis)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # no need if error is fatal

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LispError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(LispError("maximum recursion depth exceeded"))
        elif exc_type is LispError:
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LispError(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
