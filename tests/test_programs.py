import pytest

from small_step_simple.core.ast import Boolean, DoNothing, Number
from small_step_simple.eval.machine import Machine, run_bounded
from small_step_simple.programs import PROGRAMS, get_program


@pytest.mark.parametrize(
    ("name", "expression", "bindings"),
    [
        ("arithmetic", Number(14), {}),
        ("algebraic", Number(14), {}),
        ("comparison", Boolean(True), {"x": Number(3)}),
        ("assignment", DoNothing(), {"x": Number(3), "y": Number(1), "res": Number(42)}),
        ("conditional", DoNothing(), {"x": Boolean(True), "y": Number(1)}),
        ("counter", DoNothing(), {"x": Number(3)}),
        ("factorial", DoNothing(), {"n": Number(0), "res": Number(120)}),
    ],
)
def test_programs_halt_with_expected_state(name, expression, bindings):
    program = get_program(name)
    machine = Machine(program.expression, program.environment)
    run_bounded(machine, 500)

    assert machine.expression == expression
    assert machine.current_environment() == bindings


def test_catalogue_names_match_keys():
    assert all(name == program.name for name, program in PROGRAMS.items())


def test_unknown_program():
    with pytest.raises(KeyError, match="known programs"):
        get_program("nope")
