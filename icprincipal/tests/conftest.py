import logging

import pytest

from icprincipal.logging_config import HANDLER_NAME


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """Drop handlers installed by setup_logging (CLI runs install one per invoke)."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)
