"""Binary operations offered by the keypad and their evaluation."""
from collections.abc import Callable
from enum import Enum
import math
import operator


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class Operation(str, Enum):
    """Pending binary operation. The value is the glyph shown on the display."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def __str__(self) -> str:
        return self.value


def _true_divide(a: float, b: float) -> float:
    """
    Divide like IEEE-754 does instead of raising ZeroDivisionError.

    :param float a: Dividend
    :param float b: Divisor

    :return: ``a / b``, or a signed infinity / NaN when ``b`` is zero
    :rtype: float
    """
    if b != 0:
        return a / b
    if math.isnan(a) or a == 0:
        return math.nan
    # Zero keeps its sign: 5 / -0.0 is -inf
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


# Mapping of operations to their implementation
OPERATORS: dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _true_divide,
}


def evaluate(operation: Operation, a: float, b: float) -> float:
    """
    Apply ``operation`` to two operands.

    ``a`` is the operand entered first (left-hand side) and ``b`` the one
    entered second, so ``evaluate(Operation.SUBTRACT, 10, 4) == 6``.

    :param Operation operation: Operation to apply
    :param float a: Left-hand operand
    :param float b: Right-hand operand

    :return: Result, possibly infinite or NaN
    :rtype: float
    """
    return float(OPERATORS[operation](a, b))
