"""
Encrypts third-party OAuth credentials before they are persisted.

Pipeline on encrypt:
    plaintext -> derive key (fresh salt) -> AES-256-GCM seal -> envelope string

and the reverse on decrypt. The passphrase is fetched from the provider
on every call so a rotated value is picked up without a restart.
"""

import base64
import logging
import secrets
import time
from typing import Any, Callable, Optional

from .cipher import AuthenticatedCipher
from .envelope import EnvelopeCodec
from .errors import AuthenticationError, ConfigurationError, FormatError, PlaintextError
from .fingerprint import fingerprint
from .passphrase import PassphraseDeriver

logger = logging.getLogger(__name__)

PassphraseProvider = Callable[[], Optional[str]]


class CredentialCipher:
    """Encrypts and decrypts credentials with a passphrase-derived key."""

    GENERATED_KEY_BYTES = 32
    SELF_TEST_PREFIX = "encryption_test_"

    def __init__(self, passphrase_provider: PassphraseProvider):
        """
        Initialize the cipher.

        Args:
            passphrase_provider: Callable returning the current passphrase (or None)
        """
        self._passphrase_provider = passphrase_provider

    def _passphrase(self) -> str:
        try:
            value = self._passphrase_provider()
        except Exception as e:
            raise ConfigurationError(
                f"Encryption key provider failed: {type(e).__name__}"
            ) from None
        return PassphraseDeriver.validate(value)

    @staticmethod
    def _encode_plaintext(plaintext: str) -> bytes:
        if not isinstance(plaintext, str):
            raise PlaintextError("Plaintext must be a string")
        try:
            return plaintext.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates have no UTF-8 form
            raise PlaintextError("Plaintext is not valid Unicode text") from None

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a string for storage.

        Args:
            plaintext: The credential to protect (may be empty)

        Returns:
            Envelope string in the format salt:nonce:tag:ciphertext

        Raises:
            ConfigurationError: If the encryption key is missing or too short
            PlaintextError: If plaintext is not a string or cannot be encoded as UTF-8
        """
        data = self._encode_plaintext(plaintext)
        passphrase = self._passphrase()

        key, salt = PassphraseDeriver.derive_key(passphrase)
        nonce = AuthenticatedCipher.new_nonce()
        ciphertext, tag = AuthenticatedCipher.seal(key, nonce, data)

        return EnvelopeCodec.encode(salt, nonce, tag, ciphertext)

    def decrypt(self, envelope: str) -> str:
        """
        Decrypt an envelope produced by encrypt().

        Args:
            envelope: The stored envelope string

        Returns:
            The original plaintext

        Raises:
            ConfigurationError: If the encryption key is missing or too short
            FormatError: If the envelope is malformed
            AuthenticationError: If the key is wrong or the envelope was altered
        """
        passphrase = self._passphrase()
        parsed = EnvelopeCodec.decode(envelope)

        key, _ = PassphraseDeriver.derive_key(passphrase, parsed.salt)
        try:
            plaintext = AuthenticatedCipher.open(key, parsed.nonce, parsed.tag, parsed.ciphertext)
        except AuthenticationError:
            logger.warning("Credential envelope failed integrity verification")
            raise

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            raise FormatError("Decrypted value is not UTF-8 text") from None

    @staticmethod
    def generate_key() -> str:
        """Generate a random base64 secret suitable for the encryption key setting."""
        raw = secrets.token_bytes(CredentialCipher.GENERATED_KEY_BYTES)
        return base64.b64encode(raw).decode("ascii")

    @staticmethod
    def hash(value: str) -> str:
        """One-way SHA-256 hex digest, for comparison only."""
        return fingerprint(value)

    def has_valid_key(self) -> bool:
        """Check the configured passphrase without running the cipher."""
        try:
            self._passphrase()
        except ConfigurationError:
            return False
        return True

    def verify_setup(self) -> bool:
        """
        Run a full encrypt/decrypt round trip under the current configuration.

        Never raises.

        Returns:
            True if the round trip reproduced the test payload
        """
        try:
            if not self.has_valid_key():
                logger.warning("Encryption setup check failed: encryption key missing or too short")
                return False

            payload = f"{self.SELF_TEST_PREFIX}{time.time_ns() // 1_000_000}"
            result = self.decrypt(self.encrypt(payload))
        except Exception as e:
            logger.error(f"Encryption setup check failed: {type(e).__name__}")
            return False

        return result == payload

    def status(self) -> dict[str, Any]:
        """Report whether encryption is usable, for health checks."""
        key_ok = self.has_valid_key()
        self_test = self.verify_setup() if key_ok else False

        return {
            "configured": key_ok and self_test,
            "checks": {
                "encryption_key": key_ok,
                "self_test": self_test,
            },
        }
