"""Symbol bindings for evaluation."""


class Environment:
    """A scope in a singly-linked scope chain. Bindings are fixed once the Environment is built; parent is the enclosing
    scope, if any. Only the root (default) Environment is ever built by the interpreter, so lookups never reach a
    parent today, but the chain is honoured for nested scopes.
    """

    def __init__(self, bindings=None, parent=None):
        self._bindings = dict(bindings) if bindings else {}
        self.parent = parent

    @property
    def bindings(self):
        return dict(self._bindings)

    def lookup(self, name):
        """Returns the Expression bound to name in this scope or the nearest enclosing one, None if unbound."""
        env = self
        while env is not None:
            if name in env._bindings:
                return env._bindings[name]
            env = env.parent
        return None

    def __contains__(self, name):
        return self.lookup(name) is not None

    def __repr__(self):
        return f"Environment(bindings={sorted(self._bindings)}, parent={self.parent!r})"
