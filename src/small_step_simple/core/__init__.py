"""SIMPLE expression model, environment and errors."""

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
    Value,
    Variable,
    While,
)
from small_step_simple.core.environment import Environment
from small_step_simple.core.errors import (
    ContractViolation,
    SimpleError,
    StepLimitExceeded,
    TypeMismatch,
    UnboundVariable,
)

__all__ = [
    "Add",
    "Assign",
    "Boolean",
    "ContractViolation",
    "DoNothing",
    "Environment",
    "Expression",
    "IfElse",
    "LessThan",
    "Multiply",
    "Number",
    "Sequence",
    "SimpleError",
    "StepLimitExceeded",
    "TypeMismatch",
    "UnboundVariable",
    "Value",
    "Variable",
    "While",
]
