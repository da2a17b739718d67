import io
import logging
import sys

import pytest

from pngchunk import log


def test_setup_logging():
    stream = io.StringIO()
    logger = log.setup_logging("warn", stream)
    assert logger.level == logging.WARNING

    logging.getLogger("pngchunk.png").info("hidden")
    logging.getLogger("pngchunk.png").warning("shown")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "warning: shown" in output
    assert output.startswith("[")


def test_setup_logging_replaces_handler():
    log.setup_logging("info", io.StringIO())
    log.setup_logging("debug", io.StringIO())
    handlers = [
        h
        for h in logging.getLogger("pngchunk").handlers
        if isinstance(h, log.PngChunkLogHandler)
    ]
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_setup_logging_invalid():
    with pytest.raises(ValueError, match="Invalid log level"):
        log.setup_logging("loud")


def test_formatter():
    f = log.PngChunkFormatter()
    record = logging.LogRecord("pngchunk", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    assert f.format(record).endswith("] hello world")
    record = logging.LogRecord("pngchunk", logging.ERROR, __file__, 1, "broken", (), None)
    assert f.format(record).endswith("] error: broken")
    try:
        raise ValueError("oops")
    except ValueError:
        record = logging.LogRecord(
            "pngchunk", logging.INFO, __file__, 1, "failed", (), sys.exc_info()
        )
    assert "ValueError: oops" in f.format(record)
