import pytest

from small_step_simple.core.ast import Add, Boolean, DoNothing, Number
from small_step_simple.core.environment import Environment
from small_step_simple.core.errors import TypeMismatch, UnboundVariable


def test_bind_returns_new_environment():
    empty = Environment.empty()
    bound = empty.bind("x", Number(1))

    assert len(empty) == 0
    assert bound.lookup("x") == Number(1)
    assert "x" in bound
    assert "x" not in empty


def test_rebinding_keeps_earlier_environment_intact():
    first = Environment.of({"x": Number(1)})
    second = first.bind("x", Number(2))

    assert first["x"] == Number(1)
    assert second["x"] == Number(2)


def test_lookup_missing_name():
    with pytest.raises(UnboundVariable):
        Environment.empty().lookup("nope")


@pytest.mark.parametrize("value", [DoNothing(), Add(Number(1), Number(2)), 3])
def test_only_terminal_values_can_be_bound(value):
    with pytest.raises(TypeMismatch):
        Environment.of({"x": value})
    with pytest.raises(TypeMismatch):
        Environment.empty().bind("x", value)


def test_to_dict_is_a_copy():
    env = Environment.of({"x": Number(1), "flag": Boolean(True)})
    copy = env.to_dict()
    copy["x"] = Number(99)

    assert env["x"] == Number(1)
    assert sorted(env) == ["flag", "x"]


def test_of_returns_existing_environment_unchanged():
    env = Environment.of({"x": Number(1)})
    assert Environment.of(env) is env


def test_str():
    assert str(Environment.of({"x": Number(3), "ok": Boolean(False)})) == "{x: 3, ok: false}"


def test_bindings_cannot_be_changed_in_place():
    env = Environment.of({"x": Number(1)})

    with pytest.raises(TypeError):
        env.bindings["x"] = DoNothing()

    assert env["x"] == Number(1)


def test_source_mapping_is_copied():
    source = {"x": Number(1)}
    env = Environment.of(source)
    source["x"] = Number(2)
    source["y"] = Number(3)

    assert env == {"x": Number(1)}


def test_direct_construction_checks_values():
    with pytest.raises(TypeMismatch):
        Environment({"x": DoNothing()})
