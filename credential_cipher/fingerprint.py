"""
One-way fingerprints for comparing secrets without storing them.
"""

import hashlib
import hmac


def fingerprint(value: str) -> str:
    """Return the SHA-256 hex digest of a string."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def fingerprints_match(value: str, stored_digest: str) -> bool:
    """Check a value against a previously stored fingerprint in constant time."""
    return hmac.compare_digest(
        fingerprint(value).encode("ascii"),
        stored_digest.lower().encode("utf-8"),
    )
