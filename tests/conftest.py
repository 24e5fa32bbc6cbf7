import pytest

from lispy.builtins import standard_env
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import parse


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return standard_env()


@pytest.fixture
def run(env):
    """Parse a single expression and evaluate it against the `env` fixture."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
