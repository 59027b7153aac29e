"""
chachacrypt
===========
Encrypt or decrypt a single file with ChaCha20-Poly1305 under a raw
256-bit key.

Modules:
    keys      — SecretKey buffer and key resolution (literal or key file)
    cipher    — ChaCha20-Poly1305 over nonce(12) || ciphertext || tag(16)
    pipeline  — file in, file out: <path> <-> <path>.crypt
    cli       — argparse front end, SUCCESS / ERROR reporting

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors   import (FileCryptError, FileReadError, FileWriteError,
                       KeyLengthError, EncryptionError, DecryptionError)
from .keys     import SecretKey, resolve_key
from .cipher   import ChaChaCipher
from .pipeline import CRYPT_SUFFIX, crypt_path, encrypt_file, decrypt_file

__all__ = [
    "FileCryptError",
    "FileReadError",
    "FileWriteError",
    "KeyLengthError",
    "EncryptionError",
    "DecryptionError",
    "SecretKey",
    "resolve_key",
    "ChaChaCipher",
    "CRYPT_SUFFIX",
    "crypt_path",
    "encrypt_file",
    "decrypt_file",
]
