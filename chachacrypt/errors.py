"""
Errors
======
Every failure the tool can report. Each one is terminal: nothing is
retried, and the CLI prints ``ERROR: <message>`` for any of them.
"""


class FileCryptError(Exception):
    """Base class for all reportable failures."""


class FileReadError(FileCryptError):

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Could not read file {file_name}")


class FileWriteError(FileCryptError):

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Could not write file {file_name}")


class KeyLengthError(FileCryptError, ValueError):
    """Key material is not exactly the cipher's key size."""

    def __init__(self, actual: int, expected: int):
        self.actual   = actual
        self.expected = expected
        super().__init__(
            f"Key length is invalid (Actual: {actual} Expected: {expected})"
        )


class EncryptionError(FileCryptError):

    def __init__(self):
        super().__init__("Could not encrypt data")


class DecryptionError(FileCryptError):
    """Wrong key, tampered data, or a blob too short to hold nonce + tag."""

    def __init__(self):
        super().__init__("Could not decrypt data")
