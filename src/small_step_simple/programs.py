"""Catalogue of example SIMPLE programs."""

from __future__ import annotations

from dataclasses import dataclass, field

from small_step_simple.builders import (
    add,
    assign,
    environment,
    if_else,
    less_than,
    multiply,
    sequence,
    variable,
    while_,
)
from small_step_simple.core.ast import Expression
from small_step_simple.core.environment import Environment


@dataclass(frozen=True)
class Program:
    """A named program together with the environment it starts in."""

    name: str
    description: str
    expression: Expression
    environment: Environment = field(default_factory=Environment.empty)


PROGRAMS: dict[str, Program] = {
    program.name: program
    for program in (
        Program(
            "arithmetic",
            "Nested sums and products: 1 * 2 + 3 * 4",
            add(multiply(1, 2), multiply(3, 4)),
        ),
        Program(
            "algebraic",
            "Multiply a sum: (3 + 4) * 2",
            multiply(add(3, 4), 2),
        ),
        Program(
            "comparison",
            "Compare a variable against a literal",
            less_than(variable("x"), 5),
            environment(x=3),
        ),
        Program(
            "assignment",
            "Assign two variables and add them up into res",
            sequence(
                assign("x", 3),
                assign("res", add(add(38, variable("x")), variable("y"))),
            ),
            environment(y=1),
        ),
        Program(
            "conditional",
            "Pick a branch on a variable",
            if_else(variable("x"), assign("y", 1), assign("y", 2)),
            environment(x=True),
        ),
        Program(
            "counter",
            "Count x up to 3",
            while_(less_than(variable("x"), 3), assign("x", add(variable("x"), 1))),
            environment(x=0),
        ),
        Program(
            "factorial",
            "Compute n! into res with a loop",
            sequence(
                assign("res", 1),
                while_(
                    less_than(0, variable("n")),
                    sequence(
                        assign("res", multiply(variable("res"), variable("n"))),
                        assign("n", add(variable("n"), -1)),
                    ),
                ),
            ),
            environment(n=5),
        ),
    )
}


def get_program(name: str) -> Program:
    if name not in PROGRAMS:
        known = ", ".join(sorted(PROGRAMS))
        raise KeyError(f"Unknown program {name!r}; known programs: {known}")
    return PROGRAMS[name]
