"""Envelope codec parsing and validation."""

import os

import pytest

from credential_cipher import Envelope, EnvelopeCodec, FormatError


def _fields(ciphertext: bytes = b"\x01\x02\x03"):
    return os.urandom(64), os.urandom(16), os.urandom(16), ciphertext


def test_encode_joins_hex_fields():
    salt, nonce, tag, ciphertext = _fields(b"\xde\xad\xbe\xef")
    text = EnvelopeCodec.encode(salt, nonce, tag, ciphertext)

    assert text == f"{salt.hex()}:{nonce.hex()}:{tag.hex()}:deadbeef"


def test_decode_returns_envelope():
    salt, nonce, tag, ciphertext = _fields()
    decoded = EnvelopeCodec.decode(EnvelopeCodec.encode(salt, nonce, tag, ciphertext))

    assert decoded == Envelope(salt=salt, nonce=nonce, tag=tag, ciphertext=ciphertext)


def test_envelope_string_helpers():
    envelope = Envelope(*_fields())
    assert Envelope.from_string(envelope.to_string()) == envelope


def test_uppercase_hex_is_accepted():
    salt, nonce, tag, ciphertext = _fields()
    text = EnvelopeCodec.encode(salt, nonce, tag, ciphertext).upper()

    assert EnvelopeCodec.decode(text).salt == salt


@pytest.mark.parametrize("segment, bad", [
    (0, "abc"),          # odd length
    (1, "zz" * 16),      # not hex
    (2, "ab cd" * 6),    # whitespace
    (3, "0x1234"),       # prefix
    (3, "abéc"),    # non-ascii
])
def test_invalid_hex_is_rejected(segment, bad):
    parts = EnvelopeCodec.encode(*_fields()).split(":")
    parts[segment] = bad

    with pytest.raises(FormatError):
        EnvelopeCodec.decode(":".join(parts))


@pytest.mark.parametrize("segment, length", [(0, 32), (1, 12), (2, 8)])
def test_wrong_field_length_is_rejected(segment, length):
    parts = EnvelopeCodec.encode(*_fields()).split(":")
    parts[segment] = os.urandom(length).hex()

    with pytest.raises(FormatError):
        EnvelopeCodec.decode(":".join(parts))


def test_empty_ciphertext_segment_is_accepted():
    salt, nonce, tag, _ = _fields()
    decoded = EnvelopeCodec.decode(f"{salt.hex()}:{nonce.hex()}:{tag.hex()}:")

    assert decoded.ciphertext == b""


@pytest.mark.parametrize("segment", [0, 1, 2])
def test_empty_header_segment_is_rejected(segment):
    parts = EnvelopeCodec.encode(*_fields()).split(":")
    parts[segment] = ""

    with pytest.raises(FormatError, match="empty"):
        EnvelopeCodec.decode(":".join(parts))


@pytest.mark.parametrize("value", [None, 123, b"aa:bb:cc:dd"])
def test_non_string_input_is_rejected(value):
    with pytest.raises(FormatError):
        EnvelopeCodec.decode(value)


def test_format_error_message_names_segment_count():
    with pytest.raises(FormatError, match="expected 4 segments, got 2"):
        EnvelopeCodec.decode("aa:bb")
