"""Pocket calculator: pure key-by-key state transitions for a four-function calculator."""
from pocket_calculator.common.models import (
    DEFAULT_STATE,
    AddDecimalPoint,
    AppendDigit,
    CalculatorAction,
    CalculatorState,
    ChooseOperation,
    Clear,
    Compute,
    DeleteLastDigit,
    parse_action,
)
from pocket_calculator.common.operations import Operation, evaluate
from pocket_calculator.engine.reducer import compute, transition
from pocket_calculator.engine.session import CalculatorSession, Display, action_for_key

__all__ = [
    "DEFAULT_STATE",
    "AddDecimalPoint",
    "AppendDigit",
    "CalculatorAction",
    "CalculatorSession",
    "CalculatorState",
    "ChooseOperation",
    "Clear",
    "Compute",
    "DeleteLastDigit",
    "Display",
    "Operation",
    "action_for_key",
    "compute",
    "evaluate",
    "parse_action",
    "transition",
]

__version__ = "0.1.0"
