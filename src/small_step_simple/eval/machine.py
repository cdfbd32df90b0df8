"""Abstract machine driving small-step reduction to a fixed point."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from loguru import logger

from small_step_simple.core.ast import Expression, Value
from small_step_simple.core.environment import Environment
from small_step_simple.core.errors import ContractViolation, StepLimitExceeded
from small_step_simple.eval.rules import reduce

TraceCallback = Callable[[Expression, Environment], None]


class Machine:
    """Holds one program state and reduces it step by step."""

    def __init__(
        self,
        expression: Expression,
        environment: Environment | Mapping[str, Expression] | None = None,
        *,
        trace: TraceCallback | None = None,
    ) -> None:
        self._expression = expression
        self._environment = Environment.empty() if environment is None else Environment.of(environment)
        self._trace = trace
        self._steps = 0

    @classmethod
    def with_empty_environment(cls, expression: Expression, *, trace: TraceCallback | None = None) -> Machine:
        return cls(expression, Environment.empty(), trace=trace)

    @property
    def expression(self) -> Expression:
        return self._expression

    @property
    def steps(self) -> int:
        """Number of steps completed successfully."""
        return self._steps

    def is_reducible(self) -> bool:
        return self._expression.is_reducible()

    def current_environment(self) -> dict[str, Value]:
        """Copy of the current bindings; changing it does not affect the machine."""
        return self._environment.to_dict()

    def step(self) -> None:
        """Apply one reduction.

        State is only replaced once the reduction has succeeded, so an error
        leaves the machine exactly as it was before the call.
        """
        if not self._expression.is_reducible():
            raise ContractViolation(f"Machine has halted at {self._expression!r}")
        expression, environment = reduce(self._expression, self._environment)
        self._expression = expression
        self._environment = environment
        self._steps += 1

    def run(self) -> None:
        """Step until the expression is irreducible.

        There is no step budget: a loop whose condition never becomes false
        runs forever. Use run_bounded() to cap the number of steps.
        """
        logger.debug("machine.run.start expression={}", self._expression)
        while self._expression.is_reducible():
            self.emit()
            self.step()
        self.emit()
        logger.debug("machine.run.halt steps={} environment={}", self._steps, self._environment)

    def emit(self) -> None:
        """Report the current state to the logger and the trace callback."""
        logger.trace("machine.step step={} expression={} environment={}", self._steps, self._expression, self._environment)
        if self._trace is not None:
            self._trace(self._expression, self._environment)


def run_bounded(machine: Machine, max_steps: int) -> None:
    """Drive machine with step() until it halts or max_steps have been taken.

    Raises:
        StepLimitExceeded: the program is still reducible after max_steps
    """
    if max_steps < 1:
        raise ValueError("max_steps must be at least 1")
    taken = 0
    while machine.is_reducible():
        if taken >= max_steps:
            logger.debug("machine.limit steps={} expression={}", taken, machine.expression)
            raise StepLimitExceeded(max_steps, machine.expression)
        machine.emit()
        machine.step()
        taken += 1
    machine.emit()
