"""Whole-file byte I/O, mapped onto the tool's read/write errors."""

import logging

from .errors import FileReadError, FileWriteError

logger = logging.getLogger(__name__)


def read_bytes(file_name: str) -> bytes:
    try:
        with open(file_name, "rb") as f:
            data = f.read()
    except OSError as exc:
        logger.debug("read of %s failed: %s", file_name, exc)
        raise FileReadError(file_name) from exc
    logger.debug("read %d bytes from %s", len(data), file_name)
    return data


def write_bytes(file_name: str, data: bytes) -> None:
    """Create or truncate *file_name* and write *data* to it."""
    try:
        with open(file_name, "wb") as f:
            f.write(data)
    except OSError as exc:
        logger.debug("write of %s failed: %s", file_name, exc)
        raise FileWriteError(file_name) from exc
    logger.debug("wrote %d bytes to %s", len(data), file_name)
