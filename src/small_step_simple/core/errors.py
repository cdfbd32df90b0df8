"""Error types raised while reducing SIMPLE programs."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from small_step_simple.core.ast import Expression


class SimpleError(Exception):
    """Base class for evaluation errors."""


class UnboundVariable(SimpleError):
    """Variable not found in the environment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unbound variable: {name}")


class TypeMismatch(SimpleError):
    """Expression has the wrong shape for the operation applied to it."""

    def __init__(self, expected: str, actual: Expression):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected}, but got {actual!r}")


class ContractViolation(SimpleError):
    """Caller broke a precondition, e.g. reducing a terminal value."""


class StepLimitExceeded(SimpleError):
    """Bounded driver ran out of steps before the program halted."""

    def __init__(self, limit: int, expression: Expression):
        self.limit = limit
        self.expression = expression
        super().__init__(f"Program still reducible after {limit} steps: {expression}")
