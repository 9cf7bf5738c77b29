"""
Error types raised by the credential cipher.

None of these ever carry key material or plaintext in their message.
"""


class CredentialCipherError(Exception):
    """Base class for all credential cipher failures."""


class ConfigurationError(CredentialCipherError):
    """The encryption key is missing or too short. Fatal at startup."""


class FormatError(CredentialCipherError):
    """The stored value is not a well-formed envelope."""


class AuthenticationError(CredentialCipherError):
    """The envelope failed integrity verification (wrong key or tampered bytes)."""


class TokenSealingError(CredentialCipherError):
    """OAuth tokens could not be encrypted for storage."""


class PlaintextError(CredentialCipherError):
    """The value to encrypt is not a string representable as UTF-8."""
