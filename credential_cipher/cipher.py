"""
AES-256-GCM sealing and opening.

The tag is kept separate from the ciphertext so both can be stored
as individual envelope fields.
"""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import AuthenticationError


class AuthenticatedCipher:
    """Seals and opens byte strings with AES-256-GCM."""

    KEY_LEN = 32  # 256 bits
    NONCE_LEN = 16  # 128 bits, kept for compatibility with existing envelopes
    TAG_LEN = 16

    @classmethod
    def new_nonce(cls) -> bytes:
        """Generate a fresh random nonce."""
        return os.urandom(cls.NONCE_LEN)

    @classmethod
    def _check_sizes(cls, key: bytes, nonce: bytes) -> None:
        if len(key) != cls.KEY_LEN:
            raise ValueError(f"AES-256 key must be {cls.KEY_LEN} bytes")
        if len(nonce) != cls.NONCE_LEN:
            raise ValueError(f"Nonce must be {cls.NONCE_LEN} bytes")

    @classmethod
    def seal(cls, key: bytes, nonce: bytes, plaintext: bytes) -> tuple[bytes, bytes]:
        """
        Encrypt and authenticate plaintext.

        Args:
            key: 32-byte derived key
            nonce: 16-byte nonce, never reused with the same key
            plaintext: Bytes to encrypt

        Returns:
            Tuple of (ciphertext, tag)
        """
        cls._check_sizes(key, nonce)

        aesgcm = AESGCM(key)
        sealed = aesgcm.encrypt(nonce, plaintext, None)

        # AESGCM appends the tag to the ciphertext
        return sealed[:-cls.TAG_LEN], sealed[-cls.TAG_LEN:]

    @classmethod
    def open(cls, key: bytes, nonce: bytes, tag: bytes, ciphertext: bytes) -> bytes:
        """
        Verify and decrypt a sealed value.

        Args:
            key: 32-byte derived key
            nonce: The nonce used when sealing
            tag: 16-byte authentication tag
            ciphertext: The encrypted bytes

        Returns:
            The plaintext bytes

        Raises:
            AuthenticationError: If the tag does not verify
        """
        cls._check_sizes(key, nonce)
        if len(tag) != cls.TAG_LEN:
            raise ValueError(f"Tag must be {cls.TAG_LEN} bytes")

        aesgcm = AESGCM(key)
        try:
            return aesgcm.decrypt(nonce, ciphertext + tag, None)
        except InvalidTag:
            raise AuthenticationError(
                "Decryption failed. The encryption key may be incorrect or the data was altered."
            ) from None
