"""
Passphrase derivation using PBKDF2-HMAC-SHA512.

The long-term encryption key is stretched with a per-envelope salt into
a 256-bit AES key. Derived keys are never stored.
"""

import os
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .errors import ConfigurationError


class PassphraseDeriver:
    """Derives encryption keys from the configured passphrase."""

    # Envelopes do not record the iteration count; changing it orphans stored data
    ITERATIONS = 100_000
    KEY_LEN = 32  # 256 bits for AES-256
    SALT_LEN = 64  # 512 bits
    MIN_PASSPHRASE_LEN = 32

    @classmethod
    def validate(cls, passphrase: Optional[str]) -> str:
        """
        Check that a passphrase is usable for key derivation.

        Args:
            passphrase: The configured passphrase, or None if unset

        Returns:
            The passphrase, unchanged

        Raises:
            ConfigurationError: If the passphrase is missing or too short
        """
        if not passphrase:
            raise ConfigurationError("Encryption key is not set")
        if not isinstance(passphrase, str):
            raise ConfigurationError("Encryption key must be a string")
        if len(passphrase) < cls.MIN_PASSPHRASE_LEN:
            raise ConfigurationError(
                f"Encryption key must be at least {cls.MIN_PASSPHRASE_LEN} characters"
            )
        return passphrase

    @classmethod
    def derive_key(cls, passphrase: str, salt: bytes | None = None) -> tuple[bytes, bytes]:
        """
        Derive a 256-bit key from a passphrase using PBKDF2-HMAC-SHA512.

        Args:
            passphrase: The long-term secret
            salt: Optional salt bytes. If None, generates a random salt.

        Returns:
            Tuple of (derived_key, salt)
        """
        if salt is None:
            salt = os.urandom(cls.SALT_LEN)

        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA512(),
            length=cls.KEY_LEN,
            salt=salt,
            iterations=cls.ITERATIONS,
        )
        derived_key = kdf.derive(passphrase.encode("utf-8"))

        return derived_key, salt
