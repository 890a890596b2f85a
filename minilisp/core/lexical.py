"""Tokenization and recursive-descent parsing of minilisp source text.

Tokens are plain strings, classified by content only: "(", ")", or an atom. Parsing works on the token list and hands
back whatever tokens it did not consume, so a caller decides whether leftovers are more expressions or an error.
"""

from minilisp.core.expr import List, Number, Symbol
from minilisp.lang.error import LispError


def tokenize(text):
    """Splits text into tokens. Parentheses are always tokens of their own: "(+1 2)" -> ["(", "+1", "2", ")"]."""
    return text.replace("(", " ( ").replace(")", " ) ").split()


def parse(tokens):
    """Parses the first expression in tokens. Returns (expression, remaining tokens)."""
    if not tokens:
        raise LispError("empty input")

    token, rest = tokens[0], tokens[1:]
    if token == "(":
        return read_list(rest)
    elif token == ")":
        raise LispError("unexpected )", ")")
    return read_atom(token), rest


def read_list(tokens):
    """Reads list elements up to and including the closing ")". tokens must start just after the opening "("."""
    elements = []
    while tokens:
        if tokens[0] == ")":
            return List(elements), tokens[1:]

        expr, tokens = parse(tokens)
        elements.append(expr)

    raise LispError("could not parse list")


def read_atom(token):
    """Number if token reads as a float, Symbol otherwise."""
    if "_" not in token:  # float() accepts digit separators, minilisp does not
        try:
            return Number(float(token))
        except ValueError:
            pass
    return Symbol(token)


def parse_all(tokens):
    """Parses every expression in tokens, in order."""
    exprs = []
    while tokens:
        expr, tokens = parse(tokens)
        exprs.append(expr)
    return exprs
