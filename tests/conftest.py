import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

KEY = b"\x01" * 32


@pytest.fixture
def key():
    return KEY


@pytest.fixture
def plain_file(tmp_path):
    path = tmp_path / "note.txt"
    path.write_bytes(b"hello world")
    return str(path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    # main() reconfigures the root logger with force=True
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
