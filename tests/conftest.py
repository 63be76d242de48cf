"""Pytest configuration and shared fixtures."""
import os

from hypothesis import Verbosity, settings
import pytest

from pocket_calculator.common.models import CalculatorState
from pocket_calculator.common.operations import Operation
from pocket_calculator.engine.session import CalculatorSession

settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def session() -> CalculatorSession:
    """Provide a fresh calculator session."""
    return CalculatorSession()


@pytest.fixture
def pending_addition() -> CalculatorState:
    """State after typing ``5 + 3``."""
    return CalculatorState(previous_operand="5", current_operand="3", operation=Operation.ADD)
