"""Calculator session holding the current state and driving it from keypad presses."""
from typing import NamedTuple

from pocket_calculator.common.logger import logger
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
from pocket_calculator.common.operations import Operation
from pocket_calculator.engine.reducer import transition


# Keypad labels other than digits, with the ASCII aliases accepted on tapes
KEYPAD: dict[str, CalculatorAction] = {
    ".": AddDecimalPoint(),
    "+": ChooseOperation(operation=Operation.ADD),
    "-": ChooseOperation(operation=Operation.SUBTRACT),
    "−": ChooseOperation(operation=Operation.SUBTRACT),
    "×": ChooseOperation(operation=Operation.MULTIPLY),
    "*": ChooseOperation(operation=Operation.MULTIPLY),
    "÷": ChooseOperation(operation=Operation.DIVIDE),
    "/": ChooseOperation(operation=Operation.DIVIDE),
    "DEL": DeleteLastDigit(),
    "=": Compute(),
    "AC": Clear(),
}


def action_for_key(label: str) -> CalculatorAction:
    """
    Map a keypad label to the action it emits.

    :param str label: Key label, e.g. ``"7"``, ``"÷"`` or ``"AC"``

    :return: Action for the key
    :rtype: CalculatorAction
    :raises ValueError: If the label is not on the keypad
    """
    if len(label) == 1 and label in "0123456789":
        return AppendDigit(digit=int(label))
    try:
        return KEYPAD[label]
    except KeyError:
        raise ValueError(f"Unknown key: {label!r}") from None


class Display(NamedTuple):
    """The two display lines."""

    previous: str
    current: str


class CalculatorSession:
    """
    One calculator session.

    Holds the current snapshot, replaces it on every action and renders the
    display lines from it. Actions against one session must be dispatched one
    at a time.

    Example:
        >>> session = CalculatorSession()
        >>> for key in "5 + 3 =".split():
        ...     _ = session.press(key)
        >>> session.display.current
        '8'
    """

    def __init__(self) -> None:
        self._state: CalculatorState = DEFAULT_STATE

    @property
    def state(self) -> CalculatorState:
        """Current snapshot."""
        return self._state

    @property
    def display(self) -> Display:
        """Previous operand with the pending glyph, and the current operand."""
        previous = self._state.previous_operand
        if self._state.operation is not None:
            previous = f"{previous} {self._state.operation.value}"
        return Display(previous=previous, current=self._state.current_operand)

    def dispatch(self, action: CalculatorAction) -> CalculatorState:
        """Apply ``action`` and keep the resulting snapshot."""
        self._state = transition(self._state, action)
        logger.debug(f"🧮 {action.kind} -> {self._state!r}")
        return self._state

    def press(self, label: str) -> CalculatorState:
        """
        Press one key.

        :param str label: Key label

        :return: Snapshot after the key press
        :rtype: CalculatorState
        :raises ValueError: If the label is not on the keypad (state is left unchanged)
        """
        return self.dispatch(action_for_key(label))

    def reset(self) -> CalculatorState:
        """Clear all input."""
        return self.dispatch(Clear())

    def __repr__(self) -> str:
        return f"CalculatorSession(state={self._state!r})"
