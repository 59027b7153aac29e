"""
ChaCha20-Poly1305 blob cipher
=============================
ChaCha20 stream cipher + Poly1305 authentication tag, IETF variant
(RFC 8439).

Key:   256-bit (32 bytes)
Nonce:  96-bit (12 bytes) — drawn fresh from the nonce source per message
Tag:   128-bit (16 bytes) — Poly1305 authentication

Blob format: nonce(12) || ciphertext || tag(16)

No header, version or magic bytes. A 96-bit random nonce must never repeat
under one key; freshness rests entirely on the nonce source, which is
``os.urandom`` unless a caller injects another (tests do, to pin nonces).

Dependencies: cryptography >= 41.0
"""

import logging
import os
from typing import Callable

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from .errors import DecryptionError, EncryptionError, KeyLengthError
from .keys import KEY_SIZE

logger = logging.getLogger(__name__)

NonceSource = Callable[[int], bytes]


class ChaChaCipher:
    """ChaCha20-Poly1305 authenticated encryption over nonce-prefixed blobs."""

    KEY_SIZE   = KEY_SIZE
    NONCE_SIZE = 12
    TAG_SIZE   = 16
    OVERHEAD   = NONCE_SIZE + TAG_SIZE

    def __init__(self, key, nonce_source: NonceSource = os.urandom):
        """
        *key* is any 32-byte bytes-like object, a SecretKey included.
        *nonce_source* is called with NONCE_SIZE and returns that many bytes.
        """
        if len(key) != self.KEY_SIZE:
            raise KeyLengthError(len(key), self.KEY_SIZE)
        self._cipher       = ChaCha20Poly1305(key)
        self._nonce_source = nonce_source

    @staticmethod
    def generate_key() -> bytes:
        return ChaCha20Poly1305.generate_key()

    def _new_nonce(self) -> bytes:
        nonce = self._nonce_source(self.NONCE_SIZE)
        if len(nonce) != self.NONCE_SIZE:
            logger.debug("nonce source returned %d bytes, expected %d",
                         len(nonce), self.NONCE_SIZE)
            raise EncryptionError()
        return nonce

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Encrypt and authenticate plaintext.
        Returns: nonce(12) || ciphertext || tag(16)
        """
        nonce = self._new_nonce()
        try:
            ct = self._cipher.encrypt(nonce, plaintext, None)
        except (ValueError, OverflowError) as exc:
            logger.debug("seal rejected %d-byte plaintext: %s", len(plaintext), exc)
            raise EncryptionError() from exc
        return nonce + ct

    def decrypt(self, blob: bytes) -> bytes:
        """
        Verify and decrypt. Raises DecryptionError on tamper, wrong key or
        a blob too short to hold a nonce and a tag.
        """
        if len(blob) < self.OVERHEAD:
            logger.debug("blob of %d bytes is shorter than nonce + tag", len(blob))
            raise DecryptionError()
        nonce = blob[:self.NONCE_SIZE]
        ct    = blob[self.NONCE_SIZE:]
        try:
            return self._cipher.decrypt(nonce, ct, None)
        except InvalidTag as exc:
            logger.debug("authentication failed for %d-byte blob", len(blob))
            raise DecryptionError() from exc
