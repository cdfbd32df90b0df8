"""One-step reduction rules, one match arm per expression form."""

from __future__ import annotations

from collections.abc import Callable

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
from small_step_simple.core.errors import ContractViolation, TypeMismatch

Binary = Add | Multiply | LessThan


def _add(left: Expression, right: Expression) -> Expression:
    return Number(left.scalar_value() + right.scalar_value())


def _multiply(left: Expression, right: Expression) -> Expression:
    return Number(left.scalar_value() * right.scalar_value())


def _less_than(left: Expression, right: Expression) -> Expression:
    # Booleans compare through their 1/0 scalar, so false < true.
    return Boolean(left.scalar_value() < right.scalar_value())


_OPERATORS: dict[type, Callable[[Expression, Expression], Expression]] = {
    Add: _add,
    Multiply: _multiply,
    LessThan: _less_than,
}


def _reduce_binary(node: Binary, environment: Environment) -> tuple[Expression, Environment]:
    """Reduce the left operand, then the right, then apply the operator."""
    kind = type(node)
    if node.left.is_reducible():
        left, _ = reduce(node.left, environment)
        return kind(left, node.right), environment
    if node.right.is_reducible():
        right, _ = reduce(node.right, environment)
        return kind(node.left, right), environment
    return _OPERATORS[kind](node.left, node.right), environment


def reduce(expression: Expression, environment: Environment) -> tuple[Expression, Environment]:
    """Rewrite expression by one small step.

    Returns the next expression together with the environment to use from
    then on. Only assignment produces a different environment; every other
    form hands back the one it was given.

    Raises:
        UnboundVariable: a variable is looked up that the environment lacks
        TypeMismatch: an operand or condition has the wrong kind of value
        ContractViolation: expression is already terminal
    """
    match expression:
        case Add() | Multiply() | LessThan():
            return _reduce_binary(expression, environment)

        case Variable(name):
            return environment.lookup(name), environment

        case Assign(name, value):
            if value.is_reducible():
                value, environment = reduce(value, environment)
                return Assign(name, value), environment
            return DoNothing(), environment.bind(name, value)

        case Sequence(DoNothing(), second):
            return second, environment

        case Sequence(first, second):
            if not first.is_reducible():
                raise TypeMismatch("a statement", first)
            first, environment = reduce(first, environment)
            return Sequence(first, second), environment

        case IfElse(condition, consequence, alternative):
            if condition.is_reducible():
                condition, environment = reduce(condition, environment)
                return IfElse(condition, consequence, alternative), environment
            match condition:
                case Boolean(True):
                    return consequence, environment
                case Boolean(False):
                    return alternative, environment
                case _:
                    raise TypeMismatch("a boolean condition", condition)

        case While(condition, body):
            unrolled = IfElse(condition, Sequence(body, expression), DoNothing())
            return unrolled, environment

        case Number() | Boolean() | DoNothing():
            raise ContractViolation(f"Cannot reduce terminal expression {expression!r}")

        case _:
            raise ContractViolation(f"Unknown expression type: {type(expression).__name__}")
