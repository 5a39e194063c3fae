import pytest

from unixstamp import get_round, set_round


@pytest.fixture(autouse=True)
def restore_default_rounding():
    """Leave the shared default clock as each test found it."""
    previous = get_round()
    yield
    set_round(previous)
