"""
Generate an encryption key for OAuth token storage.

Usage:
    python keygen.py           # Print key with setup instructions
    python keygen.py --quiet   # Print the key only
"""

import sys

from config import config
from credential_cipher import CredentialCipher


def main(argv: list[str] | None = None) -> int:
    """Print a fresh key and the environment line to add."""
    args = sys.argv[1:] if argv is None else argv
    key = CredentialCipher.generate_key()

    if "--quiet" in args:
        print(key)
        return 0

    print("\nCredential Encryption Key Generator\n")
    print("-" * 50)
    print("\nGenerated Encryption Key:\n")
    print(f"   {key}\n")
    print("-" * 50)
    print("\nAdd this to your .env file:\n")
    print(f"   {config.ENCRYPTION_KEY_ENV}={key}\n")
    print("-" * 50)
    print("\nKeep this key secret and never commit it to git!")
    print("Envelopes encrypted under an old key need that key to decrypt.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
