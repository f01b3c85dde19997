import io
import logging

import pytest

from rollcore.logging_config import resolve_level, setup_logging


def test_repeated_setup_does_not_duplicate_records():
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    logger = setup_logging("info", stream=stream)
    assert len(logger.handlers) == 1

    logging.getLogger("rollcore.physics").info("hello")
    assert stream.getvalue().count("hello") == 1


def test_file_handler_receives_records(tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logging("WARNING", log_file=str(log_file), stream=io.StringIO())
    logging.getLogger("rollcore.engine").warning("viewport gone")
    for handler in logger.handlers:
        handler.flush()
    assert "[rollcore.engine] viewport gone" in log_file.read_text(encoding="utf-8")


def test_level_names_resolve():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")
