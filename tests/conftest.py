import pytest

from symbolic_core import reset_config, symbol


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration"""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def x():
    return symbol("x")


@pytest.fixture
def y():
    return symbol("y")


@pytest.fixture
def z():
    return symbol("z")
