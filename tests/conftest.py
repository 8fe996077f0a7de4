import logging
import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    # main() reconfigures the root logger; keep each test's handlers its own
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
