import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_dumpsplit_logger():
    """The CLI installs a stderr handler; drop it so later tests don't write to a closed stream."""
    yield
    logger = logging.getLogger("dumpsplit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_dump(tmp_path):
    """Write *text* to ``tmp_path/name`` and return the path."""

    def _write(text, name="dump.sql"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
