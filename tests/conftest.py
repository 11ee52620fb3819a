import pytest

from lispi.builtin.env_builtin import register
from lispi.interpreter import Interpreter
from lispi.types.environment import Environment


@pytest.fixture
def interp():
    """A fresh interpreter with its own global environment."""
    return Interpreter()


@pytest.fixture
def env():
    """A global environment prepopulated with the builtin table."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def feeder():
    """Build an input() stand-in that replays lines, then signals EOF."""
    def make(lines):
        it = iter(lines)

        def input_fn(prompt):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        return input_fn
    return make
