import logging

import pytest

from glamdm.banner import BannerGrid
from glamdm.config import Config
from glamdm.state import initial_state


class FakeBuilder:
    """Stands in for pyfiglet: one line, ``font:text``, and a call log."""

    def __init__(self):
        self.calls = []

    def __call__(self, text, font):
        self.calls.append((text, font))
        line = f"{font}:{text}"
        return BannerGrid((line,), len(line))


@pytest.fixture
def builder():
    return FakeBuilder()


@pytest.fixture
def state(builder):
    return initial_state(Config(), builder=builder)


@pytest.fixture(autouse=True)
def reset_glamdm_logger():
    yield
    root = logging.getLogger("glamdm")
    for h in list(root.handlers):
        root.removeHandler(h)
    root.propagate = True
    root.setLevel(logging.NOTSET)
