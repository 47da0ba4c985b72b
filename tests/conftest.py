import pytest

from paren.evaluation.evaluator import make_state
from paren.interpreter import Interpreter


@pytest.fixture
def state():
    """Fresh State with the built-ins loaded."""
    return make_state()


@pytest.fixture
def interp():
    return Interpreter()
