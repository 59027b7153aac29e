"""
File pipeline
=============
One file in, one file out.

    encrypt:  <path>        -> nonce || ciphertext || tag  -> <path>.crypt
    decrypt:  <path>.crypt  -> verified plaintext           -> <path>

Files are read whole into memory; there is no streaming. Decryption only
writes once authentication has succeeded, so a wrong key or a tampered
file never leaves partial output behind.
"""

import logging
import os

from .cipher import ChaChaCipher, NonceSource
from .fileio import read_bytes, write_bytes

logger = logging.getLogger(__name__)

CRYPT_SUFFIX = ".crypt"


def crypt_path(path: str) -> str:
    return f"{path}{CRYPT_SUFFIX}"


def encrypt_file(input_path: str, key,
                 nonce_source: NonceSource = os.urandom) -> str:
    """Seal *input_path* into ``<input_path>.crypt``. Returns the output path."""
    cipher    = ChaChaCipher(key, nonce_source)
    plaintext = read_bytes(input_path)
    blob      = cipher.encrypt(plaintext)
    out_path  = crypt_path(input_path)
    write_bytes(out_path, blob)
    logger.info("encrypted %s -> %s (%d -> %d bytes)",
                input_path, out_path, len(plaintext), len(blob))
    return out_path


def decrypt_file(input_path: str, key) -> str:
    """
    Open ``<input_path>.crypt`` and write the plaintext to *input_path*,
    overwriting whatever is there. Returns *input_path*.
    """
    cipher    = ChaChaCipher(key)
    src_path  = crypt_path(input_path)
    blob      = read_bytes(src_path)
    plaintext = cipher.decrypt(blob)
    write_bytes(input_path, plaintext)
    logger.info("decrypted %s -> %s (%d -> %d bytes)",
                src_path, input_path, len(blob), len(plaintext))
    return input_path
