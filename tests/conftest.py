import pytest

from chipmunk import config
from chipmunk.interpreter import Interpreter, make_root_environment, reserve_host_stack
from chipmunk.io_handler import BufferedIO


@pytest.fixture
def io():
    """Captures everything `log` writes."""
    return BufferedIO()


@pytest.fixture
def env(io):
    """Return a fresh root environment for each test."""
    return make_root_environment(io)


@pytest.fixture
def interp(io):
    return Interpreter(io)


@pytest.fixture(scope="session", autouse=True)
def host_stack():
    """Raise the recursion limit once, before any property test records it."""
    reserve_host_stack(config.get_max_depth())

