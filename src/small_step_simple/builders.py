"""Shorthand constructors for building SIMPLE programs by hand.

Anywhere an expression is expected a Python ``int`` or ``bool`` may be given
instead; it is lifted to ``Number`` or ``Boolean``::

    sequence(
        assign("x", 3),
        assign("res", add(add(38, variable("x")), variable("y"))),
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import reduce as fold

from small_step_simple.core.ast import (
    Add,
    Assign,
    Boolean,
    DoNothing,
    Expression,
    IfElse,
    LessThan,
    Multiply,
    Number,
    Sequence,
    Variable,
    While,
)
from small_step_simple.core.environment import Environment

Literal = Expression | int | bool


def lift(value: Literal) -> Expression:
    if isinstance(value, Expression):
        return value
    # bool before int
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Number(value)
    raise TypeError(f"Cannot build an expression from {value!r}")


def number(value: int) -> Number:
    return Number(value)


def boolean(value: bool) -> Boolean:
    return Boolean(value)


def variable(name: str) -> Variable:
    return Variable(name)


def add(left: Literal, right: Literal) -> Add:
    return Add(lift(left), lift(right))


def multiply(left: Literal, right: Literal) -> Multiply:
    return Multiply(lift(left), lift(right))


def less_than(left: Literal, right: Literal) -> LessThan:
    return LessThan(lift(left), lift(right))


def assign(name: str, value: Literal) -> Assign:
    return Assign(name, lift(value))


def do_nothing() -> DoNothing:
    return DoNothing()


def sequence(*statements: Expression) -> Expression:
    """Chain statements left to right, nesting to the right.

    No statements gives do-nothing, a single statement is returned as is.
    """
    if not statements:
        return DoNothing()
    *init, last = statements
    return fold(lambda rest, stmt: Sequence(stmt, rest), reversed(init), last)


def if_else(condition: Literal, consequence: Expression, alternative: Expression | None = None) -> IfElse:
    return IfElse(lift(condition), consequence, DoNothing() if alternative is None else alternative)


def while_(condition: Literal, body: Expression) -> While:
    return While(lift(condition), body)


def environment(bindings: Mapping[str, Literal] | None = None, **kwargs: Literal) -> Environment:
    """Build an environment, lifting plain Python values."""
    merged = {**(bindings or {}), **kwargs}
    return Environment.of({name: lift(value) for name, value in merged.items()})
