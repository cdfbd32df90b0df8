"""Tests for the expression model."""

import pytest

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
from small_step_simple.core.errors import TypeMismatch


@pytest.mark.parametrize("terminal", [Number(3), Boolean(True), Boolean(False), DoNothing()])
def test_terminals_are_not_reducible(terminal):
    assert terminal.is_reducible() is False


@pytest.mark.parametrize(
    "expression",
    [
        Variable("x"),
        Add(Number(1), Number(2)),
        Multiply(Number(1), Number(2)),
        LessThan(Number(1), Number(2)),
        Assign("x", Number(1)),
        Sequence(DoNothing(), DoNothing()),
        IfElse(Boolean(True), DoNothing(), DoNothing()),
        While(Boolean(False), DoNothing()),
    ],
)
def test_non_terminals_are_reducible(expression):
    assert expression.is_reducible() is True


def test_scalar_value_of_number_and_boolean():
    assert Number(-7).scalar_value() == -7
    assert Boolean(True).scalar_value() == 1
    assert Boolean(False).scalar_value() == 0


@pytest.mark.parametrize("expression", [DoNothing(), Variable("x"), Add(Number(1), Number(2))])
def test_scalar_value_rejects_non_values(expression):
    with pytest.raises(TypeMismatch) as exc_info:
        expression.scalar_value()
    assert exc_info.value.actual == expression


def test_rendering():
    """Each form renders in its usual infix or statement notation."""
    assert str(Add(Multiply(Number(1), Number(2)), Multiply(Number(3), Number(4)))) == "1 * 2 + 3 * 4"
    assert str(LessThan(Variable("x"), Number(3))) == "x < 3"
    assert str(Boolean(True)) == "true"
    assert str(Boolean(False)) == "false"
    assert str(Assign("x", Add(Variable("x"), Number(1)))) == "x = x + 1"
    assert str(Sequence(Assign("x", Number(1)), DoNothing())) == "x = 1; do-nothing"
    assert str(IfElse(Variable("c"), Assign("x", Number(1)), DoNothing())) == "if (c) { x = 1 } else { do-nothing }"
    assert str(While(LessThan(Variable("x"), Number(3)), DoNothing())) == "while (x < 3) { do-nothing }"


def test_repr_wraps_rendering():
    assert repr(Number(3)) == "«3»"
    assert repr(Add(Number(3), Number(4))) == "«3 + 4»"


def test_structural_equality():
    assert Add(Number(1), Variable("x")) == Add(Number(1), Variable("x"))
    assert Add(Number(1), Variable("x")) != Multiply(Number(1), Variable("x"))
    assert DoNothing() == DoNothing()
    assert Number(1) != Boolean(True)
    assert hash(While(Boolean(True), DoNothing())) == hash(While(Boolean(True), DoNothing()))


def test_base_expression_renders_class_name():
    assert str(Expression()) == "Expression"
    assert repr(Expression()) == "«Expression»"
