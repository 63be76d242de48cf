"""Test compute and transition."""
import pytest

from pocket_calculator.common.models import (
    DEFAULT_STATE,
    AddDecimalPoint,
    AppendDigit,
    CalculatorState,
    ChooseOperation,
    Clear,
    Compute,
    DeleteLastDigit,
)
from pocket_calculator.common.operations import Operation
from pocket_calculator.engine.reducer import compute, transition


@pytest.mark.parametrize("state", [
    DEFAULT_STATE,
    CalculatorState(current_operand="12.5"),
    CalculatorState(previous_operand="5", current_operand="3", operation=Operation.ADD),
    CalculatorState(previous_operand="", current_operand="", operation=Operation.DIVIDE),
])
def test_clear_returns_default_state(state: CalculatorState) -> None:
    """Clear always resets to the default state."""
    assert transition(state, Clear()) == DEFAULT_STATE


def test_append_digits_concatenates() -> None:
    """Digits are appended as text, left to right."""
    state = DEFAULT_STATE
    for digit in (1, 2, 3):
        state = transition(state, AppendDigit(digit=digit))
    assert state.current_operand == "123"


def test_append_digit_keeps_leading_zeros() -> None:
    """Appending text keeps leading zeros."""
    state = transition(CalculatorState(current_operand="0"), AppendDigit(digit=0))
    assert state.current_operand == "00"


def test_add_decimal_point_is_idempotent() -> None:
    """A second decimal point is ignored."""
    state = CalculatorState(current_operand="12")
    once = transition(state, AddDecimalPoint())
    twice = transition(once, AddDecimalPoint())
    assert once.current_operand == "12."
    assert twice == once


def test_add_decimal_point_after_digits() -> None:
    """A decimal point is refused anywhere after the first one."""
    state = transition(CalculatorState(current_operand="1.5"), AddDecimalPoint())
    assert state.current_operand == "1.5"


def test_delete_last_digit() -> None:
    """DeleteLastDigit drops the last character."""
    state = transition(CalculatorState(current_operand="12."), DeleteLastDigit())
    assert state.current_operand == "12"


def test_delete_last_digit_on_empty() -> None:
    """Deleting from an empty operand leaves it empty."""
    assert transition(DEFAULT_STATE, DeleteLastDigit()) == DEFAULT_STATE


def test_delete_does_not_touch_pending_operation() -> None:
    """Only the current operand is edited."""
    state = CalculatorState(previous_operand="5", current_operand="3", operation=Operation.ADD)
    new_state = transition(state, DeleteLastDigit())
    assert new_state == CalculatorState(previous_operand="5", current_operand="", operation=Operation.ADD)


def test_compute_divide() -> None:
    """6 ÷ 3 shows 2 and clears the pending operation."""
    state = CalculatorState(previous_operand="6", current_operand="3", operation=Operation.DIVIDE)
    assert compute(state) == CalculatorState(current_operand="2", previous_operand="", operation=None)
    assert transition(state, Compute()) == compute(state)


@pytest.mark.parametrize("operation,expected", [
    (Operation.ADD, "14"),
    (Operation.SUBTRACT, "6"),
    (Operation.MULTIPLY, "40"),
    (Operation.DIVIDE, "2.5"),
])
def test_compute_operand_order(operation: Operation, expected: str) -> None:
    """The previous operand is the left-hand side."""
    state = CalculatorState(previous_operand="10", current_operand="4", operation=operation)
    assert transition(state, Compute()).current_operand == expected


@pytest.mark.parametrize("state", [
    CalculatorState(previous_operand="", current_operand="3", operation=Operation.ADD),
    CalculatorState(previous_operand="5", current_operand="", operation=Operation.ADD),
    CalculatorState(previous_operand="5", current_operand="3", operation=None),
    CalculatorState(previous_operand="5", current_operand=".", operation=Operation.ADD),
    CalculatorState(previous_operand="NaN", current_operand="3", operation=Operation.ADD),
    DEFAULT_STATE,
])
def test_compute_without_operands_is_identity(state: CalculatorState) -> None:
    """Compute returns the state unchanged when it cannot run."""
    assert compute(state) is state
    assert transition(state, Compute()) == state


@pytest.mark.parametrize("previous,current,expected", [
    ("5", "0", "Infinity"),
    ("-5", "0", "-Infinity"),
    ("0", "0", "NaN"),
])
def test_compute_divide_by_zero(previous: str, current: str, expected: str) -> None:
    """Division by zero is displayed instead of failing."""
    state = CalculatorState(previous_operand=previous, current_operand=current, operation=Operation.DIVIDE)
    assert transition(state, Compute()).current_operand == expected


def test_compute_with_partial_operands() -> None:
    """Trailing decimal points and leading zeros are read as numbers."""
    state = CalculatorState(previous_operand="007", current_operand="3.", operation=Operation.MULTIPLY)
    assert transition(state, Compute()).current_operand == "21"


def test_choose_operation_moves_current_operand() -> None:
    """Choosing an operation captures the current operand."""
    state = CalculatorState(current_operand="5")
    new_state = transition(state, ChooseOperation(operation=Operation.ADD))
    assert new_state == CalculatorState(previous_operand="5", current_operand="", operation=Operation.ADD)


def test_choose_operation_chains() -> None:
    """5 + 3 - folds the addition before starting the subtraction."""
    state = CalculatorState(current_operand="5")
    state = transition(state, ChooseOperation(operation=Operation.ADD))
    assert state == CalculatorState(previous_operand="5", current_operand="", operation=Operation.ADD)
    state = transition(state, AppendDigit(digit=3))
    assert state == CalculatorState(previous_operand="5", current_operand="3", operation=Operation.ADD)
    state = transition(state, ChooseOperation(operation=Operation.SUBTRACT))
    assert state == CalculatorState(previous_operand="8", current_operand="", operation=Operation.SUBTRACT)


def test_choose_operation_twice_without_operand() -> None:
    """A second operator without a second operand replaces the pending one with an empty operand."""
    state = CalculatorState(previous_operand="5", current_operand="", operation=Operation.ADD)
    new_state = transition(state, ChooseOperation(operation=Operation.MULTIPLY))
    assert new_state == CalculatorState(previous_operand="", current_operand="", operation=Operation.MULTIPLY)


def test_choose_operation_on_empty_input() -> None:
    """An operator on an empty display is accepted with an empty previous operand."""
    new_state = transition(DEFAULT_STATE, ChooseOperation(operation=Operation.ADD))
    assert new_state == CalculatorState(previous_operand="", current_operand="", operation=Operation.ADD)


def test_transition_does_not_mutate_input(pending_addition: CalculatorState) -> None:
    """Every transition returns a new snapshot and leaves the old one intact."""
    before = pending_addition.model_copy()
    for action in (AppendDigit(digit=1), DeleteLastDigit(), AddDecimalPoint(),
                   ChooseOperation(operation=Operation.DIVIDE), Compute(), Clear()):
        transition(pending_addition, action)
    assert pending_addition == before


def test_result_can_be_extended() -> None:
    """Digits typed after a result are appended to it."""
    state = CalculatorState(previous_operand="2", current_operand="2", operation=Operation.ADD)
    state = transition(state, Compute())
    state = transition(state, AppendDigit(digit=5))
    assert state.current_operand == "45"
