"""Expression tree shared by the parser and the evaluator.

```
<expression> ::= <number>             ; double-precision float
               | <symbol>             ; any token that is not a number
               | "(" <expression>* ")"
```

NativeFunctions cannot be written in source: they only exist as values bound in an Environment. All Expressions are
immutable, evaluation only ever builds new ones.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Expression(ABC):
    """Superclass of every minilisp value: Number, Symbol, List, or NativeFunction."""

    @property
    def _cls(self):
        return type(self).__name__

    @abstractmethod
    def __str__(self):
        """Source representation of this expression."""

    def display(self, indents=0):
        """Recursively displays the expression tree with readable format.

        Format:
        List(nodes=[
            Symbol(name='+'),
            Number(value=1.0)
        ])
        """
        return f"{'    ' * indents}{self!r}"


@dataclass(frozen=True)
class Number(Expression):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Symbol(Expression):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class List(Expression):
    elements: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    def __str__(self):
        return "(" + " ".join(str(element) for element in self.elements) + ")"

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, idx):
        return self.elements[idx]

    def display(self, indents=0):
        if not self.elements:
            return f"{'    ' * indents}{self._cls}(nodes=[])"

        result = f"{'    ' * indents}{self._cls}(nodes=["
        for element in self.elements:
            result += "\n" + element.display(indents + 1) + ","
        return result[:-1] + f"\n{'    ' * indents}])"


@dataclass(frozen=True, eq=False)
class NativeFunction(Expression):
    """Function implemented in Python. func takes a list of evaluated argument Expressions and returns an Expression,
    raising LispError on failure. Only equal to itself.
    """
    name: str
    func: object = field(repr=False)

    def __call__(self, args):
        return self.func(args)

    def __str__(self):
        return f"<native {self.name}>"
