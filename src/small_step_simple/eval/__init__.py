"""Reduction rules and the abstract machine."""

from small_step_simple.eval.machine import Machine, TraceCallback, run_bounded
from small_step_simple.eval.rules import reduce

__all__ = [
    "Machine",
    "TraceCallback",
    "reduce",
    "run_bounded",
]
