"""Expression and statement forms of the SIMPLE language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from small_step_simple.core.errors import TypeMismatch

if TYPE_CHECKING:
    from small_step_simple.core.environment import Environment


class Expression:
    """Base class for expressions and statements."""

    def is_reducible(self) -> bool:
        """True until the expression is a final value or do-nothing."""
        return not isinstance(self, (Number, Boolean, DoNothing))

    def scalar_value(self) -> int:
        """Integer view of a terminal value; booleans map to 1 and 0."""
        match self:
            case Number(value):
                return value
            case Boolean(value):
                return 1 if value else 0
            case _:
                raise TypeMismatch("a number or boolean", self)

    def reduce(self, environment: Environment) -> tuple[Expression, Environment]:
        """Rewrite one step against the environment."""
        from small_step_simple.eval.rules import reduce

        return reduce(self, environment)

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"«{self}»"


@dataclass(frozen=True, repr=False)
class Number(Expression):
    """Integer literal."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, repr=False)
class Boolean(Expression):
    """Boolean literal."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, repr=False)
class Variable(Expression):
    """Reference to a name bound in the environment."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, repr=False)
class Add(Expression):
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} + {self.right}"


@dataclass(frozen=True, repr=False)
class Multiply(Expression):
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} * {self.right}"


@dataclass(frozen=True, repr=False)
class LessThan(Expression):
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} < {self.right}"


@dataclass(frozen=True, repr=False)
class DoNothing(Expression):
    """Finished statement."""

    def __str__(self) -> str:
        return "do-nothing"


@dataclass(frozen=True, repr=False)
class Assign(Expression):
    """Assignment statement: name = value."""

    name: str
    value: Expression

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"


@dataclass(frozen=True, repr=False)
class Sequence(Expression):
    """Two statements run left to right."""

    first: Expression
    second: Expression

    def __str__(self) -> str:
        return f"{self.first}; {self.second}"


@dataclass(frozen=True, repr=False)
class IfElse(Expression):
    condition: Expression
    consequence: Expression
    alternative: Expression

    def __str__(self) -> str:
        return f"if ({self.condition}) {{ {self.consequence} }} else {{ {self.alternative} }}"


@dataclass(frozen=True, repr=False)
class While(Expression):
    """Loop; each reduction unrolls it once into an IfElse."""

    condition: Expression
    body: Expression

    def __str__(self) -> str:
        return f"while ({self.condition}) {{ {self.body} }}"


# Terminal values an environment may hold
Value = Number | Boolean
