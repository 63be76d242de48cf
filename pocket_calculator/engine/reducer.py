"""Pure state transitions of the calculator."""
from typing import Optional, assert_never

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
)
from pocket_calculator.common.numbers import format_number, parse_operand
from pocket_calculator.common.operations import evaluate


def compute(state: CalculatorState) -> CalculatorState:
    """
    Run the pending computation of ``state``.

    The previous operand is the left-hand side and the current operand the
    right-hand side. Missing or unreadable operands, or no pending operation,
    leave the state as it is.

    :param CalculatorState state: State holding both operands

    :return: State showing the result, or ``state`` itself when nothing can be computed
    :rtype: CalculatorState
    """
    prev: Optional[float] = parse_operand(state.previous_operand)
    current: Optional[float] = parse_operand(state.current_operand)
    if prev is None or current is None or state.operation is None:
        return state

    return state.model_copy(
        update={
            "current_operand": format_number(evaluate(state.operation, prev, current)),
            "previous_operand": "",
            "operation": None,
        }
    )


def transition(state: CalculatorState, action: CalculatorAction) -> CalculatorState:
    """
    Compute the state following ``action``.

    Never raises: degenerate input (deleting from an empty operand, a second
    decimal point, computing without operands) is a no-op, and division by
    zero shows ``Infinity`` or ``NaN``.

    :param CalculatorState state: Current snapshot
    :param CalculatorAction action: Keypad action to apply

    :return: New snapshot
    :rtype: CalculatorState
    """
    match action:
        case AppendDigit(digit=digit):
            return state.model_copy(update={"current_operand": state.current_operand + str(digit)})

        case DeleteLastDigit():
            return state.model_copy(update={"current_operand": state.current_operand[:-1]})

        case AddDecimalPoint():
            if "." in state.current_operand:
                return state
            return state.model_copy(update={"current_operand": state.current_operand + "."})

        case ChooseOperation(operation=operation):
            # A pending operation is folded first, so "5 + 3 +" carries 8 forward
            interim = compute(state) if state.operation is not None else state
            return interim.model_copy(
                update={
                    "previous_operand": interim.current_operand,
                    "current_operand": "",
                    "operation": operation,
                }
            )

        case Compute():
            return compute(state)

        case Clear():
            return DEFAULT_STATE

        case _:
            assert_never(action)
