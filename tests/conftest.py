import logging
from typing import Generator

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Restores the root logger after tests that call setup_logging."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
