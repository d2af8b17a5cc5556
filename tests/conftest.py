import pytest

from thinfilm import config


@pytest.fixture
def set_test_precision():
    """Run the test with the default configuration and restore it afterwards."""
    config.reset()
    yield config
    config.reset()
