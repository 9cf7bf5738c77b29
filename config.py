"""
Configuration for the credential encryption service.
"""

import os
from dataclasses import dataclass
from typing import Optional

# Application version - update this for each release
VERSION = "1.0.0"


@dataclass
class Config:
    """Application configuration."""

    # Server settings
    HOST: str = os.getenv("CREDENTIAL_CIPHER_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("CREDENTIAL_CIPHER_PORT", "3001"))

    # Environment variable holding the long-term encryption key
    ENCRYPTION_KEY_ENV: str = "HUBSPOT_ENCRYPTION_KEY"

    @property
    def encryption_key(self) -> Optional[str]:
        """Current encryption key, re-read on every access so rotation needs no restart."""
        return os.getenv(self.ENCRYPTION_KEY_ENV)

    @property
    def has_encryption_key(self) -> bool:
        """Check if the encryption key variable is set at all."""
        return bool(self.encryption_key)


# Global config instance
config = Config()
