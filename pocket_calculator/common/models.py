"""Pydantic models for calculator state snapshots and keypad actions."""
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from pocket_calculator.common.operations import Operation


class CalculatorState(BaseModel):
    """
    One immutable snapshot of the calculator display.

    Operands are kept as text so partial input (leading zeros, a trailing
    decimal point) survives until a computation actually runs.
    """

    # Snapshots are replaced, never mutated
    model_config = ConfigDict(frozen=True)

    current_operand: str = Field(default="", description="Operand being typed, or the last result")
    previous_operand: str = Field(default="", description="Operand captured when an operation was chosen")
    operation: Optional[Operation] = Field(default=None, description="Pending binary operation")


DEFAULT_STATE = CalculatorState()


class _Action(BaseModel):
    """Base class for keypad actions."""

    model_config = ConfigDict(frozen=True)


class AppendDigit(_Action):
    """Append one digit to the current operand."""

    kind: Literal["append_digit"] = "append_digit"
    digit: int = Field(..., ge=0, le=9, description="Digit pressed on the keypad")


class DeleteLastDigit(_Action):
    """Remove the last character of the current operand."""

    kind: Literal["delete_last_digit"] = "delete_last_digit"


class AddDecimalPoint(_Action):
    """Append a decimal point unless the current operand already has one."""

    kind: Literal["add_decimal_point"] = "add_decimal_point"


class ChooseOperation(_Action):
    """Select the pending operation, folding in any computation already pending."""

    kind: Literal["choose_operation"] = "choose_operation"
    operation: Operation = Field(..., description="Operation selected on the keypad")


class Compute(_Action):
    """Run the pending computation."""

    kind: Literal["compute"] = "compute"


class Clear(_Action):
    """Reset the calculator to its default state."""

    kind: Literal["clear"] = "clear"


CalculatorAction = Annotated[
    Union[AppendDigit, DeleteLastDigit, AddDecimalPoint, ChooseOperation, Compute, Clear],
    Field(discriminator="kind"),
]

_ACTION_ADAPTER: TypeAdapter[CalculatorAction] = TypeAdapter(CalculatorAction)


def parse_action(data: dict[str, Any]) -> CalculatorAction:
    """
    Validate a mapping such as ``{"kind": "append_digit", "digit": 7}`` into an action.

    :param dict data: Raw action payload

    :return: The matching action model
    :rtype: CalculatorAction
    :raises pydantic.ValidationError: If the kind is unknown or the payload is invalid
    """
    return _ACTION_ADAPTER.validate_python(data)
