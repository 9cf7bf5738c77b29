"""
Envelope serialization for encrypted credentials.

An envelope is stored as a single text column:

    salt:nonce:tag:ciphertext

with every field hex encoded. Only the ciphertext segment may be empty
(for an empty plaintext). Decoding validates the shape completely
before any key derivation happens.
"""

import binascii
from dataclasses import dataclass

from .cipher import AuthenticatedCipher
from .errors import FormatError
from .passphrase import PassphraseDeriver


@dataclass(frozen=True)
class Envelope:
    """One encrypted value and everything needed to open it, except the key."""
    salt: bytes
    nonce: bytes
    tag: bytes
    ciphertext: bytes

    def to_string(self) -> str:
        """Serialize to the stored column format."""
        return EnvelopeCodec.encode(self.salt, self.nonce, self.tag, self.ciphertext)

    @classmethod
    def from_string(cls, text: str) -> "Envelope":
        """Parse the stored column format."""
        return EnvelopeCodec.decode(text)


class EnvelopeCodec:
    """Encodes and decodes envelope strings."""

    DELIMITER = ":"
    SEGMENT_COUNT = 4

    # Expected decoded length per field; ciphertext length varies
    FIELD_LENGTHS = {
        "salt": PassphraseDeriver.SALT_LEN,
        "nonce": AuthenticatedCipher.NONCE_LEN,
        "tag": AuthenticatedCipher.TAG_LEN,
    }

    @classmethod
    def encode(cls, salt: bytes, nonce: bytes, tag: bytes, ciphertext: bytes) -> str:
        """
        Hex-encode each field and join them.

        Args:
            salt: KDF salt
            nonce: Cipher nonce
            tag: Authentication tag
            ciphertext: Encrypted bytes

        Returns:
            The envelope string
        """
        return cls.DELIMITER.join(
            field.hex() for field in (salt, nonce, tag, ciphertext)
        )

    @classmethod
    def decode(cls, text: str) -> Envelope:
        """
        Parse and validate an envelope string.

        Args:
            text: The stored envelope

        Returns:
            The decoded Envelope

        Raises:
            FormatError: If the string is not a well-formed envelope
        """
        if not isinstance(text, str):
            raise FormatError("Envelope must be a string")

        segments = text.split(cls.DELIMITER)
        if len(segments) != cls.SEGMENT_COUNT:
            raise FormatError(
                f"Invalid envelope format: expected {cls.SEGMENT_COUNT} segments, got {len(segments)}"
            )

        names = ("salt", "nonce", "tag", "ciphertext")
        fields = {}
        for name, segment in zip(names, segments):
            # An empty plaintext seals to an empty ciphertext segment
            if not segment and name != "ciphertext":
                raise FormatError(f"Invalid envelope format: empty {name} segment")
            try:
                # unhexlify rejects odd lengths, whitespace and non-hex characters
                fields[name] = binascii.unhexlify(segment)
            except ValueError:
                raise FormatError(f"Invalid envelope format: {name} is not valid hex") from None

        for name, expected in cls.FIELD_LENGTHS.items():
            if len(fields[name]) != expected:
                raise FormatError(
                    f"Invalid envelope format: {name} must be {expected} bytes"
                )

        return Envelope(**fields)
