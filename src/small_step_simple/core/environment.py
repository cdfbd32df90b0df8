"""Variable environment threaded through reduction."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from small_step_simple.core.ast import Boolean, Expression, Number, Value
from small_step_simple.core.errors import TypeMismatch, UnboundVariable


def _check_value(name: str, value: Expression) -> Value:
    if not isinstance(value, (Number, Boolean)):
        raise TypeMismatch(f"a number or boolean for {name!r}", value)
    return value


@dataclass(frozen=True, eq=False)
class Environment(Mapping[str, Value]):
    """Immutable mapping from variable names to terminal values.

    Binding a name produces a new environment; earlier environments are never
    changed, so a reference to the environment of step N keeps seeing step N.
    """

    bindings: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked = {name: _check_value(name, value) for name, value in self.bindings.items()}
        object.__setattr__(self, "bindings", MappingProxyType(checked))

    @staticmethod
    def empty() -> Environment:
        """Create an empty environment."""
        return Environment()

    @staticmethod
    def of(bindings: Mapping[str, Expression]) -> Environment:
        """Build an environment from a mapping, checking every value is terminal."""
        if isinstance(bindings, Environment):
            return bindings
        return Environment(bindings)

    def lookup(self, name: str) -> Value:
        if name not in self.bindings:
            raise UnboundVariable(name)
        return self.bindings[name]

    def bind(self, name: str, value: Expression) -> Environment:
        """Return a copy with name bound to value (last write wins)."""
        return Environment({**self.bindings, name: value})

    def to_dict(self) -> dict[str, Value]:
        return dict(self.bindings)

    def __getitem__(self, name: str) -> Value:
        return self.bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __str__(self) -> str:
        inner = ", ".join(f"{name}: {value}" for name, value in self.bindings.items())
        return f"{{{inner}}}"
