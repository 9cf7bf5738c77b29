"""
Sealing OAuth token pairs for the connection tables.

Both tokens of a connection are encrypted together; the refresh token is
optional since some providers only issue it on first consent.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .credential_cipher import CredentialCipher
from .errors import ConfigurationError, TokenSealingError


@dataclass
class TokenPair:
    """Plaintext OAuth tokens, held in memory only."""
    access_token: str
    refresh_token: Optional[str] = None


@dataclass
class SealedTokens:
    """Encrypted OAuth tokens as stored in the database."""
    access_token: str
    refresh_token: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to column values."""
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SealedTokens":
        """Reconstruct from column values."""
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
        )


def seal_tokens(cipher: CredentialCipher, tokens: TokenPair) -> SealedTokens:
    """
    Encrypt a token pair before storage.

    Args:
        cipher: The configured credential cipher
        tokens: Plaintext tokens from the OAuth exchange

    Returns:
        SealedTokens ready to persist

    Raises:
        TokenSealingError: If the encryption key is not configured
    """
    try:
        access = cipher.encrypt(tokens.access_token)
        refresh = cipher.encrypt(tokens.refresh_token) if tokens.refresh_token else None
    except ConfigurationError as e:
        raise TokenSealingError(
            "Failed to encrypt OAuth tokens. Please check the encryption key configuration."
        ) from e

    return SealedTokens(access_token=access, refresh_token=refresh)


def open_tokens(cipher: CredentialCipher, sealed: SealedTokens) -> TokenPair:
    """
    Decrypt a stored token pair.

    FormatError and AuthenticationError propagate so the caller can
    force the user to reconnect.
    """
    access = cipher.decrypt(sealed.access_token)
    refresh = cipher.decrypt(sealed.refresh_token) if sealed.refresh_token else None
    return TokenPair(access_token=access, refresh_token=refresh)
