from __future__ import annotations

import logging
import struct

import pytest

from pngchunk.test import tutils


@pytest.fixture()
def secret_record() -> bytes:
    """The RuSt chunk holding the secret message, with a known checksum."""
    return (
        struct.pack("!I", 42)
        + b"RuSt"
        + tutils.MESSAGE
        + struct.pack("!I", tutils.MESSAGE_CRC)
    )


@pytest.fixture()
def tiny_png() -> bytes:
    return tutils.ttiny()


@pytest.fixture(autouse=True)
def reset_logging():
    """setup_logging() configures the package logger globally, undo it after each test."""
    logger = logging.getLogger("pngchunk")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
