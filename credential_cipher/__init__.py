"""
Credential-at-rest protection for third-party OAuth tokens.

Handles:
- Key derivation (PBKDF2-HMAC-SHA512)
- Authenticated encryption (AES-256-GCM)
- Envelope encoding (salt:nonce:tag:ciphertext, hex)
- Setup self-test and one-way fingerprints
"""

from .credential_cipher import CredentialCipher
from .cipher import AuthenticatedCipher
from .envelope import Envelope, EnvelopeCodec
from .errors import (
    AuthenticationError,
    ConfigurationError,
    CredentialCipherError,
    FormatError,
    PlaintextError,
    TokenSealingError,
)
from .fingerprint import fingerprint, fingerprints_match
from .passphrase import PassphraseDeriver
from .tokens import SealedTokens, TokenPair, open_tokens, seal_tokens

__all__ = [
    "CredentialCipher",
    "AuthenticatedCipher",
    "Envelope",
    "EnvelopeCodec",
    "PassphraseDeriver",
    "CredentialCipherError",
    "ConfigurationError",
    "FormatError",
    "PlaintextError",
    "AuthenticationError",
    "TokenSealingError",
    "fingerprint",
    "fingerprints_match",
    "TokenPair",
    "SealedTokens",
    "seal_tokens",
    "open_tokens",
]
