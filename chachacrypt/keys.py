"""
Key material
============
A key is exactly 32 raw bytes, taken either from a literal string given on
the command line or from the full contents of a key file. Nothing is
derived, padded, truncated or hashed: the wrong length is an error.

Literal strings map one character to one byte (the low 8 bits of the code
point). Only characters up to U+00FF survive that mapping unchanged, so
keys containing anything wider should be supplied through a key file.

Key bytes live in a ``SecretKey`` buffer that is overwritten with zeros
when it leaves its ``with`` block. Python cannot reach copies made by the
interpreter or the crypto backend, so this is best effort.
"""

import logging
from typing import Optional

from .errors import KeyLengthError
from .fileio import read_bytes

logger = logging.getLogger(__name__)

KEY_SIZE = 32   # 256-bit ChaCha20 key


class SecretKey(bytearray):
    """Mutable key buffer that zeroes itself on ``wipe()`` or context exit."""

    def __repr__(self) -> str:
        return f"SecretKey(<{len(self)} bytes>)"

    __str__ = __repr__

    def wipe(self) -> None:
        self[:] = bytes(len(self))

    def __enter__(self) -> "SecretKey":
        return self

    def __exit__(self, *exc_info) -> None:
        self.wipe()


def resolve_key(literal: Optional[str] = None,
                key_file: Optional[str] = None) -> SecretKey:
    """
    Build the key from exactly one of *literal* or *key_file*.
    Raises FileReadError if the key file cannot be read and
    KeyLengthError if the material is not KEY_SIZE bytes long.
    """
    if (literal is None) == (key_file is None):
        raise ValueError("Exactly one of literal or key_file must be given.")

    if literal is not None:
        key = SecretKey(ord(c) & 0xFF for c in literal)
        source = "literal"
    else:
        raw = read_bytes(key_file)
        key = SecretKey(raw)
        source = key_file

    if len(key) != KEY_SIZE:
        actual = len(key)
        key.wipe()
        raise KeyLengthError(actual, KEY_SIZE)

    logger.debug("resolved %d-byte key from %s", len(key), source)
    return key
