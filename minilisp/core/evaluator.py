"""Tree-walking evaluation of minilisp expressions and the built-in native functions."""

from minilisp.core.env import Environment
from minilisp.core.expr import List, NativeFunction, Number, Symbol
from minilisp.lang.error import LispError


def evaluate(expr, env):
    """Reduces expr to a value against env. Numbers and NativeFunctions evaluate to themselves, Symbols to their
    binding, and Lists are function calls. Raises LispError on the first failure.
    """
    if isinstance(expr, (Number, NativeFunction)):
        return expr

    elif isinstance(expr, Symbol):
        value = env.lookup(expr.name)
        if value is None:
            raise LispError(f"unbound symbol: {expr.name}", expr.name)
        return value

    elif isinstance(expr, List):
        if len(expr) == 0:
            raise LispError("empty list", "()")

        func = evaluate(expr[0], env)
        if not isinstance(func, NativeFunction):
            raise LispError("not a function", str(expr[0]))

        args = [evaluate_argument(arg, env) for arg in expr[1:]]
        return func(args)

    raise LispError(f"cannot evaluate '{expr!r}'", internal=True)


def evaluate_argument(arg, env):
    """Evaluates arg in argument position. An unbound Symbol is passed to the function as is, so that built-ins
    reject it with their own reason: (+ 1 foo) fails with "+ expects numbers".
    """
    if isinstance(arg, Symbol) and env.lookup(arg.name) is None:
        return arg
    return evaluate(arg, env)


def builtin_add(args):
    if not all(isinstance(arg, Number) for arg in args):
        raise LispError("+ expects numbers")

    total = 0.0
    for arg in args:
        total += arg.value
    return Number(total)


def builtin_sub(args):
    if not args or not all(isinstance(arg, Number) for arg in args):
        raise LispError("- expects numbers")

    first, *others = args
    result = first.value
    for arg in others:
        result -= arg.value
    return Number(result)


BUILTINS = {
    "+": builtin_add,
    "-": builtin_sub,
}


def build_default_environment():
    """Returns the root Environment, with every built-in bound to its symbol."""
    return Environment({name: NativeFunction(name, func) for name, func in BUILTINS.items()})
